# -*- coding: utf-8 -*-
"""
Wizard State - Pure transition functions over WizardState.

Every function takes the WizardConfig and a WizardState and either derives
a value or returns a new WizardState; inputs are never mutated. There is no
Qt here, so the whole engine can be exercised without rendering anything.

Errors exist in two modes:
- real-time: recomputed from current data on demand (realtime_errors,
  can_go_next), never stored and never shown as text;
- attempted: the stored ``errors[step_id]``, shown only once the step id is
  in ``validation_attempted`` (displayed_errors).
"""

import copy
from dataclasses import replace
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .wizard_context import WizardConfig, WizardState
from .wizard_step import StepData, WizardStepDefinition
from services.exceptions import WizardConfigurationError


# =============================================================================
# Construction
# =============================================================================

def create_initial_state(config: WizardConfig) -> WizardState:
    """
    Create a fresh state from the config's initial data.

    Raises:
        WizardConfigurationError: if no step is visible for the initial data
    """
    data = copy.deepcopy(dict(config.initial_data or {}))
    steps = visible_steps(config, data)
    if not steps:
        raise WizardConfigurationError("No step is visible for the initial data")
    return WizardState(current_step_id=steps[0].id, data=data)


def reset(config: WizardConfig, state: Optional[WizardState] = None) -> WizardState:
    """Back to the first visible step with initial data; sets and errors cleared."""
    return create_initial_state(config)


# =============================================================================
# Derived values
# =============================================================================

def visible_steps(config: WizardConfig, data: Mapping[str, Any]) -> List[WizardStepDefinition]:
    """Declared steps filtered by should_show; declared order is preserved."""
    return [step for step in config.steps if step.is_visible(data)]


def _resolve(config: WizardConfig, state: WizardState
             ) -> Tuple[List[WizardStepDefinition], Optional[WizardStepDefinition], int]:
    steps = visible_steps(config, state.data)
    for index, step in enumerate(steps):
        if step.id == state.current_step_id:
            return steps, step, index
    # Current step was hidden by a data change: fall back to the first one
    if steps:
        return steps, steps[0], 0
    return steps, None, -1


def current_step(config: WizardConfig, state: WizardState) -> Optional[WizardStepDefinition]:
    return _resolve(config, state)[1]


def step_index(config: WizardConfig, state: WizardState) -> int:
    return _resolve(config, state)[2]


def is_last_step(config: WizardConfig, state: WizardState) -> bool:
    steps, step, index = _resolve(config, state)
    return step is not None and index == len(steps) - 1


def can_go_back(config: WizardConfig, state: WizardState) -> bool:
    return step_index(config, state) > 0


def can_skip(config: WizardConfig, state: WizardState) -> bool:
    step = current_step(config, state)
    return step is not None and step.can_skip is True


def realtime_errors(config: WizardConfig, state: WizardState) -> List[str]:
    """Current step's errors computed from current data; never stored."""
    step = current_step(config, state)
    if step is None:
        return []
    return step.run_validation(state.data)


def can_go_next(config: WizardConfig, state: WizardState) -> bool:
    """Real-time validity of the current step (no validator means valid)."""
    if current_step(config, state) is None:
        return False
    return not realtime_errors(config, state)


def has_attempted_validation(config: WizardConfig, state: WizardState,
                             step_id: Optional[str] = None) -> bool:
    if step_id is None:
        step = current_step(config, state)
        step_id = step.id if step else None
    return step_id in state.validation_attempted


def displayed_errors(config: WizardConfig, state: WizardState,
                     step_id: Optional[str] = None) -> List[str]:
    """Stored errors for a step, only once validation has been attempted on it."""
    if step_id is None:
        step = current_step(config, state)
        if step is None:
            return []
        step_id = step.id
    if step_id not in state.validation_attempted:
        return []
    return list(state.errors.get(step_id, []))


def navigable_step_ids(config: WizardConfig, state: WizardState) -> List[str]:
    """Visible step ids that go_to_step would accept from the current state."""
    return [
        step.id for step in visible_steps(config, state.data)
        if _can_jump_to(config, state, step.id)
    ]


def _can_jump_to(config: WizardConfig, state: WizardState, target_id: str) -> bool:
    steps, step, index = _resolve(config, state)
    if step is None or target_id == step.id:
        return False
    target_index = next((i for i, s in enumerate(steps) if s.id == target_id), -1)
    if target_index < 0:
        return False
    if target_id in state.completed_step_ids:
        return True
    if target_index == index + 1 and can_go_next(config, state):
        return True
    return target_index < index


# =============================================================================
# Transitions
# =============================================================================

def update_step_data(config: WizardConfig, state: WizardState,
                     partial: Mapping[str, Any]) -> WizardState:
    """
    Shallow-merge ``partial`` into the current step's data.

    Stored errors are left untouched: they persist until the next attempt
    to advance, so editing an unrelated field cannot hide them.
    """
    if not isinstance(partial, Mapping):
        raise TypeError(f"Step data update must be a mapping, got {type(partial).__name__}")

    step = current_step(config, state)
    if step is None:
        return state

    merged: StepData = {**(state.data.get(step.id) or {}), **partial}
    return replace(state, data={**state.data, step.id: merged})


def update_all_data(config: WizardConfig, state: WizardState,
                    data: Mapping[str, StepData]) -> WizardState:
    """Replace whole step slices at once (e.g. when restoring a draft)."""
    unknown = set(data) - set(config.step_ids)
    if unknown:
        raise WizardConfigurationError(
            f"Data references unknown steps: {', '.join(sorted(unknown))}"
        )
    return replace(state, data={**state.data, **data})


def go_next(config: WizardConfig, state: WizardState) -> WizardState:
    """
    Validate the current step and advance when it passes.

    The step is always recorded as attempted and its errors (possibly
    empty) are stored. On failure the position does not change. On the
    last visible step a successful attempt stays put.
    """
    steps, step, index = _resolve(config, state)
    if step is None:
        return state

    errors = step.run_validation(state.data)
    state = replace(
        state,
        current_step_id=step.id,
        validation_attempted=state.validation_attempted | {step.id},
        errors={**state.errors, step.id: errors},
    )
    if errors or index + 1 >= len(steps):
        return state

    return replace(
        state,
        current_step_id=steps[index + 1].id,
        completed_step_ids=state.completed_step_ids | {step.id},
    )


def go_back(config: WizardConfig, state: WizardState) -> WizardState:
    """
    Move to the previous visible step.

    Both the step being left and the step returned to are removed from the
    completed set. The step returned to counts as completed again only
    after it passes validation on the next go_next, so edits made there
    are always checked before the user moves on.
    """
    steps, step, index = _resolve(config, state)
    if step is None or index <= 0:
        return state

    target = steps[index - 1]
    return replace(
        state,
        current_step_id=target.id,
        completed_step_ids=state.completed_step_ids - {step.id, target.id},
    )


def skip_step(config: WizardConfig, state: WizardState) -> WizardState:
    """Advance without validation; only for steps marked can_skip."""
    steps, step, index = _resolve(config, state)
    if step is None or not step.can_skip or index + 1 >= len(steps):
        return state

    return replace(
        state,
        current_step_id=steps[index + 1].id,
        completed_step_ids=state.completed_step_ids | {step.id},
    )


def go_to_step(config: WizardConfig, state: WizardState, target_id: str) -> WizardState:
    """
    Jump to a visible step.

    Allowed for completed steps, the immediate next step when the current
    one is valid, and any earlier step. Anything else is ignored.
    """
    if not _can_jump_to(config, state, target_id):
        return state
    return replace(state, current_step_id=target_id)


def complete(config: WizardConfig, state: WizardState) -> Tuple[WizardState, bool]:
    """
    Validate every visible step before finishing.

    Every validated step's errors are stored. Pressing Save counts as an
    attempt on every validated step, not only the current one, so each is
    marked attempted and problems on steps the user jumped past show up when the
    user reaches them. On success every visible step is marked completed.

    Returns:
        (new_state, success)
    """
    steps = visible_steps(config, state.data)
    results: Dict[str, List[str]] = {
        step.id: step.run_validation(state.data)
        for step in steps if step.validate is not None
    }

    state = replace(
        state,
        errors={**state.errors, **results},
        validation_attempted=state.validation_attempted | set(results),
    )
    if any(results.values()):
        return state, False

    return replace(state, completed_step_ids=frozenset(step.id for step in steps)), True


def failed_step_ids(config: WizardConfig, state: WizardState) -> List[str]:
    """Visible steps whose stored errors are non-empty, in visible order."""
    return [
        step.id for step in visible_steps(config, state.data)
        if state.errors.get(step.id)
    ]
