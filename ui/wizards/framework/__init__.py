# -*- coding: utf-8 -*-
"""
Wizard Framework - Declarative multi-step forms.

A wizard is a WizardConfig of WizardStepDefinitions. The state of a run is
a WizardState value changed only through the pure functions in
wizard_state; StepNavigator owns the live state and WizardContainer
renders it.
"""

from .wizard_step import StepProps, WizardStepDefinition
from .wizard_context import WizardConfig, WizardState
from .step_navigator import StepNavigator
from .base_step import BaseStep
from .wizard_container import WizardContainer

__all__ = [
    'StepProps',
    'WizardStepDefinition',
    'WizardConfig',
    'WizardState',
    'StepNavigator',
    'BaseStep',
    'WizardContainer'
]
