# -*- coding: utf-8 -*-
"""
Shop Service Wizard - Log maintenance done by a repair shop.

Steps: basic_info (with cost and shop) -> services -> photos (skippable)
-> notes.
"""

from datetime import date
from typing import Any, Dict, Optional

from services.exceptions import WizardConfigurationError
from services.validation_service import ValidationService
from services.wizard.step_validator import StepValidator
from ui.wizards.framework.wizard_context import WizardConfig
from ui.wizards.framework.wizard_step import WizardStepDefinition
from .diy_service_wizard import merge_initial_data
from .steps import NotesStep, PhotosStep, ServicesStep, ShopBasicInfoStep

SHOP_SERVICE_TITLE = "Log Shop Service"
SHOP_SERVICE_SUBTITLE = "Record maintenance performed at a repair shop"


def shop_persist_key(vehicle_id: str) -> str:
    return f"shop-service-{vehicle_id}"


def default_shop_data(vehicle_id: str) -> Dict[str, Dict[str, Any]]:
    return {
        "basic_info": {
            "vehicle_id": vehicle_id,
            "date": date.today(),
            "mileage": "",
            "total_cost": "",
            "shop_name": "",
            "shop_address": "",
            "shop_phone": "",
            "shop_email": "",
        },
        "services": {
            "selected_services": [],
            "notes": "",
        },
        "photos": {
            "photos": [],
            "receipt_photos": [],
        },
        "notes": {
            "additional_notes": "",
            "warranty": "",
        },
    }


def build_shop_service_config(vehicle_id: str,
                              initial_data: Optional[Dict[str, Dict[str, Any]]] = None,
                              validation_service: Optional[ValidationService] = None) -> WizardConfig:
    """
    Build the Shop service wizard configuration.

    Raises:
        WizardConfigurationError: without a vehicle id or with unknown step ids
    """
    if not vehicle_id:
        raise WizardConfigurationError("A vehicle id is required", context="shop_service")

    steps = [
        WizardStepDefinition(
            id="basic_info",
            title="Basic Info",
            subtitle="When, at what mileage, where and for how much?",
            renderer=ShopBasicInfoStep.renderer(),
            validate=StepValidator.for_schema("shop.basic_info", validation_service),
        ),
        WizardStepDefinition(
            id="services",
            title="Services",
            subtitle="Which services did the shop perform?",
            renderer=ServicesStep.renderer(),
            validate=StepValidator.for_schema("shop.services", validation_service),
        ),
        WizardStepDefinition(
            id="photos",
            title="Photos",
            subtitle="Photos of the work and receipts (optional)",
            renderer=PhotosStep.renderer(include_receipts=True),
            validate=StepValidator.for_schema("shop.photos", validation_service),
            can_skip=True,
        ),
        WizardStepDefinition(
            id="notes",
            title="Notes",
            subtitle="Anything else worth remembering",
            renderer=NotesStep.renderer(),
            validate=StepValidator.for_schema("shop.notes", validation_service),
        ),
    ]

    return WizardConfig(
        steps=steps,
        initial_data=merge_initial_data(default_shop_data(vehicle_id), initial_data),
        title=SHOP_SERVICE_TITLE,
        subtitle=SHOP_SERVICE_SUBTITLE,
        allow_cancel=True,
        persist_key=shop_persist_key(vehicle_id),
    )
