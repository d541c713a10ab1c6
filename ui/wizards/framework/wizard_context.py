# -*- coding: utf-8 -*-
"""
Wizard Context - Configuration and runtime state records for a wizard run.

WizardConfig is the immutable input to a run. WizardState is the runtime
record; it is a frozen value and transitions produce new instances (see
wizard_state.py). Only StepNavigator holds the live state of a run.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List, Optional

from .wizard_step import WizardData, WizardStepDefinition
from services.exceptions import WizardConfigurationError


@dataclass(frozen=True)
class WizardConfig:
    """
    Immutable input to a wizard run.

    Raises:
        WizardConfigurationError: no steps, a step without id, duplicate ids,
            or initial data keyed by an unknown step id
    """
    steps: List[WizardStepDefinition]
    initial_data: WizardData = field(default_factory=dict)
    title: str = ""
    subtitle: str = ""
    allow_cancel: bool = True
    persist_key: Optional[str] = None

    def __post_init__(self):
        if not self.steps:
            raise WizardConfigurationError("A wizard needs at least one step")

        seen = set()
        for position, step in enumerate(self.steps):
            if not isinstance(step, WizardStepDefinition):
                raise WizardConfigurationError(
                    f"Step at position {position} is not a WizardStepDefinition"
                )
            if not step.id or not isinstance(step.id, str):
                raise WizardConfigurationError(f"Step at position {position} has no id")
            if step.id in seen:
                raise WizardConfigurationError("Duplicate step id", step_id=step.id)
            seen.add(step.id)

        unknown = set(self.initial_data or {}) - seen
        if unknown:
            raise WizardConfigurationError(
                f"Initial data references unknown steps: {', '.join(sorted(unknown))}"
            )

    @property
    def step_ids(self) -> List[str]:
        return [step.id for step in self.steps]

    def get_step(self, step_id: str) -> Optional[WizardStepDefinition]:
        """Look up a declared step by id."""
        for step in self.steps:
            if step.id == step_id:
                return step
        return None


def _id_set(snapshot: Dict[str, Any], key: str) -> FrozenSet[str]:
    ids = snapshot.get(key) or []
    if not isinstance(ids, list) or not all(isinstance(step_id, str) for step_id in ids):
        raise WizardConfigurationError(f"Wizard snapshot '{key}' must be a list of step ids")
    return frozenset(ids)


@dataclass(frozen=True)
class WizardState:
    """
    Runtime record of a wizard run.

    Attributes:
        current_step_id: Id of the active step (resolved against visible steps)
        data: Step id -> step payload (opaque to the wizard)
        completed_step_ids: Steps the user has successfully advanced past
        errors: Step id -> stored error messages from the last attempt
        validation_attempted: Steps the user has tried to leave at least once
    """
    current_step_id: str
    data: WizardData = field(default_factory=dict)
    completed_step_ids: FrozenSet[str] = frozenset()
    errors: Dict[str, List[str]] = field(default_factory=dict)
    validation_attempted: FrozenSet[str] = frozenset()

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize state to a plain dictionary (for draft snapshots).
        """
        return {
            "current_step_id": self.current_step_id,
            "data": self.data,
            "completed_step_ids": sorted(self.completed_step_ids),
            "errors": {step_id: list(messages) for step_id, messages in self.errors.items()},
            "validation_attempted": sorted(self.validation_attempted),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'WizardState':
        """
        Restore state from a dictionary produced by to_dict().

        Raises:
            WizardConfigurationError: if the snapshot does not have the shape
                to_dict() produces
        """
        if not isinstance(data, dict):
            raise WizardConfigurationError("Wizard snapshot must be a mapping")

        current_step_id = data.get("current_step_id", "")
        if not isinstance(current_step_id, str):
            raise WizardConfigurationError("Wizard snapshot has a non-text current step")

        step_data = data.get("data") or {}
        if not isinstance(step_data, dict):
            raise WizardConfigurationError("Wizard snapshot data must be a mapping")
        for step_id, payload in step_data.items():
            if payload is not None and not isinstance(payload, dict):
                raise WizardConfigurationError("Step data must be a mapping", step_id=step_id)

        errors = data.get("errors") or {}
        if not isinstance(errors, dict):
            raise WizardConfigurationError("Wizard snapshot errors must be a mapping")
        for step_id, messages in errors.items():
            if not isinstance(messages, list):
                raise WizardConfigurationError("Step errors must be a list", step_id=step_id)

        return cls(
            current_step_id=current_step_id,
            data=dict(step_data),
            completed_step_ids=_id_set(data, "completed_step_ids"),
            errors={step_id: list(messages) for step_id, messages in errors.items()},
            validation_attempted=_id_set(data, "validation_attempted"),
        )

    def check_against(self, config: WizardConfig):
        """
        Verify that every id in this state is declared by the config.

        Raises:
            WizardConfigurationError: if the state references unknown steps
        """
        known = set(config.step_ids)
        referenced = (
            set(self.data) | set(self.errors) | set(self.completed_step_ids)
            | set(self.validation_attempted)
        )
        if self.current_step_id:
            referenced.add(self.current_step_id)
        unknown = referenced - known
        if unknown:
            raise WizardConfigurationError(
                f"Wizard state references unknown steps: {', '.join(sorted(unknown))}"
            )
