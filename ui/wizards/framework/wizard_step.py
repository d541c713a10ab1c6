# -*- coding: utf-8 -*-
"""
Wizard Step - Contract every wizard step satisfies.

A step is a static definition: an id used as the key into wizard data and
error maps, display titles, an optional validator, visibility and skip
predicates, and a renderer that builds the step widget from StepProps.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional

from PyQt5.QtWidgets import QWidget

StepData = Dict[str, Any]
WizardData = Dict[str, StepData]

# (step_data, all_wizard_data) -> error messages; None or [] means valid
StepValidatorFn = Callable[[StepData, WizardData], Optional[List[str]]]
ShouldShowFn = Callable[[WizardData], bool]


@dataclass
class StepProps:
    """
    Props handed to a step renderer.

    ``errors`` only ever holds attempted-mode errors: it stays empty until
    the user has tried to leave the step at least once.
    """
    data: StepData
    on_data_change: Callable[[StepData], None]
    errors: List[str]
    on_next: Callable[[], None]
    on_back: Callable[[], None]
    on_skip: Callable[[], None]
    can_go_next: bool
    can_go_back: bool
    can_skip: bool
    all_wizard_data: Mapping[str, StepData]


StepRenderer = Callable[[StepProps], QWidget]


@dataclass
class WizardStepDefinition:
    """
    Static, author-supplied definition of one wizard step.

    Attributes:
        id: Unique key, stable for the wizard's lifetime
        title: Display title
        subtitle: Optional display subtitle
        renderer: Factory building the step widget from StepProps
        validate: Optional validator; absent means always valid
        can_skip: Whether the user may skip this step without validation
        should_show: Optional predicate over all wizard data; steps failing
            it are left out of the visible sequence entirely
    """
    id: str
    title: str = ""
    subtitle: str = ""
    renderer: Optional[StepRenderer] = None
    validate: Optional[StepValidatorFn] = None
    can_skip: bool = False
    should_show: Optional[ShouldShowFn] = None

    def is_visible(self, data: WizardData) -> bool:
        """Check the visibility predicate against all wizard data."""
        return self.should_show is None or bool(self.should_show(data))

    def run_validation(self, data: WizardData) -> List[str]:
        """
        Run this step's validator against its own slice and all data.

        Returns:
            List of error messages (empty when valid or no validator)
        """
        if self.validate is None:
            return []
        step_data = data.get(self.id) or {}
        return list(self.validate(step_data, data) or [])
