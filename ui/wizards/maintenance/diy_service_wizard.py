# -*- coding: utf-8 -*-
"""
DIY Service Wizard - Log maintenance the owner did themselves.

Steps: basic_info -> services -> photos (only when requested, skippable)
-> review.
"""

from datetime import date
from typing import Any, Dict, Optional

from services.exceptions import WizardConfigurationError
from services.validation_service import ValidationService
from services.wizard.step_validator import StepValidator
from ui.wizards.framework.wizard_context import WizardConfig
from ui.wizards.framework.wizard_step import WizardData, WizardStepDefinition
from .steps import BasicInfoStep, PhotosStep, ReviewStep, ServicesStep

DIY_SERVICE_TITLE = "Log DIY Service"
DIY_SERVICE_SUBTITLE = "Record maintenance you performed yourself"


def diy_persist_key(vehicle_id: str) -> str:
    return f"diy-service-{vehicle_id}"


def wants_photos(data: WizardData) -> bool:
    """The photos step is shown only after the user asked for it."""
    return (data.get("basic_info") or {}).get("add_photos") is True


def default_diy_data(vehicle_id: str) -> Dict[str, Dict[str, Any]]:
    return {
        "basic_info": {
            "vehicle_id": vehicle_id,
            "date": date.today(),
            "mileage": "",
            "add_photos": False,
        },
        "services": {
            "selected_services": [],
            "notes": "",
        },
        "photos": {
            "photos": [],
        },
        "review": {
            "total_cost": "0.00",
        },
    }


def merge_initial_data(defaults: Dict[str, Dict[str, Any]],
                       initial_data: Optional[Dict[str, Dict[str, Any]]]) -> Dict[str, Dict[str, Any]]:
    """Overlay caller-supplied step slices onto the defaults (shallow per step)."""
    merged = {step_id: dict(values) for step_id, values in defaults.items()}
    for step_id, values in (initial_data or {}).items():
        merged[step_id] = {**merged.get(step_id, {}), **(values or {})}
    return merged


def build_diy_service_config(vehicle_id: str,
                             initial_data: Optional[Dict[str, Dict[str, Any]]] = None,
                             validation_service: Optional[ValidationService] = None) -> WizardConfig:
    """
    Build the DIY service wizard configuration.

    Args:
        vehicle_id: Vehicle the entry belongs to
        initial_data: Step slices to prefill (e.g. when continuing an entry)
        validation_service: Service used by the step validators

    Returns:
        WizardConfig with persist key ``diy-service-<vehicle_id>``

    Raises:
        WizardConfigurationError: without a vehicle id or with unknown step ids
    """
    if not vehicle_id:
        raise WizardConfigurationError("A vehicle id is required", context="diy_service")

    steps = [
        WizardStepDefinition(
            id="basic_info",
            title="Basic Info",
            subtitle="When was the service done and at what mileage?",
            renderer=BasicInfoStep.renderer(),
            validate=StepValidator.for_schema("diy.basic_info", validation_service),
        ),
        WizardStepDefinition(
            id="services",
            title="Services",
            subtitle="Which services did you perform?",
            renderer=ServicesStep.renderer(),
            validate=StepValidator.for_schema("diy.services", validation_service),
        ),
        WizardStepDefinition(
            id="photos",
            title="Photos",
            subtitle="Add photos of the work (optional)",
            renderer=PhotosStep.renderer(),
            validate=StepValidator.for_schema("diy.photos", validation_service),
            can_skip=True,
            should_show=wants_photos,
        ),
        WizardStepDefinition(
            id="review",
            title="Review",
            subtitle="Check everything before saving",
            renderer=ReviewStep.renderer(),
        ),
    ]

    return WizardConfig(
        steps=steps,
        initial_data=merge_initial_data(default_diy_data(vehicle_id), initial_data),
        title=DIY_SERVICE_TITLE,
        subtitle=DIY_SERVICE_SUBTITLE,
        allow_cancel=True,
        persist_key=diy_persist_key(vehicle_id),
    )
