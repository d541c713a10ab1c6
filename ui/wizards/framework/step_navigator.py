# -*- coding: utf-8 -*-
"""
Step Navigator - Owns the live state of one wizard run.

Handles:
- Step progression (next/back/skip/jump) through the pure transitions
- Attempted-mode validation before leaving a step
- Progress tracking over the visible step sequence
- Snapshots for draft autosave
"""

import copy
from typing import Any, Dict, List, Mapping, Optional

from PyQt5.QtCore import QObject, pyqtSignal

from . import wizard_state as transitions
from .wizard_context import WizardConfig, WizardState
from .wizard_step import StepData, WizardStepDefinition
from utils.logger import get_logger

logger = get_logger(__name__)


class StepNavigator(QObject):
    """
    Manages navigation between wizard steps.

    Responsibilities:
    - Hold the single WizardState of a run
    - Apply transitions and emit signals for UI updates
    - Expose derived values (visible steps, real-time validity, errors)

    Guard violations (going back from the first step, jumping to a step
    that is not reachable) are ignored and reported by a False return.
    """

    # Signals
    state_changed = pyqtSignal(object)  # WizardState
    step_changed = pyqtSignal(str, str)  # old_step_id, new_step_id
    validation_failed = pyqtSignal(str, list)  # step_id, errors
    snapshot_ready = pyqtSignal(object)  # WizardState.to_dict()
    wizard_completed = pyqtSignal(object)  # data dict keyed by step id

    def __init__(self, config: WizardConfig, state: Optional[WizardState] = None,
                 parent: Optional[QObject] = None):
        """
        Initialize the navigator.

        Args:
            config: Wizard configuration
            state: Previously snapshotted state to resume from (optional)
            parent: Qt parent object

        Raises:
            WizardConfigurationError: if the config or the given state is inconsistent
        """
        super().__init__(parent)
        self.config = config

        if state is not None:
            state.check_against(config)
            self._state = state
            logger.info(f"Resuming wizard at step '{state.current_step_id}'")
        else:
            self._state = transitions.create_initial_state(config)

    # =========================================================================
    # Derived values
    # =========================================================================

    @property
    def state(self) -> WizardState:
        return self._state

    @property
    def data(self) -> Dict[str, StepData]:
        return self._state.data

    def get_current_step(self) -> Optional[WizardStepDefinition]:
        """Get the current step definition."""
        return transitions.current_step(self.config, self._state)

    def get_visible_steps(self) -> List[WizardStepDefinition]:
        return transitions.visible_steps(self.config, self._state.data)

    def get_step_index(self) -> int:
        return transitions.step_index(self.config, self._state)

    def get_step_count(self) -> int:
        """Get number of visible steps."""
        return len(self.get_visible_steps())

    def can_go_next(self) -> bool:
        return transitions.can_go_next(self.config, self._state)

    def can_go_back(self) -> bool:
        return transitions.can_go_back(self.config, self._state)

    def can_skip(self) -> bool:
        return transitions.can_skip(self.config, self._state)

    def is_last_step(self) -> bool:
        return transitions.is_last_step(self.config, self._state)

    def get_displayed_errors(self, step_id: Optional[str] = None) -> List[str]:
        """Errors to show for a step (empty until the user attempted to leave it)."""
        return transitions.displayed_errors(self.config, self._state, step_id)

    def get_realtime_errors(self) -> List[str]:
        return transitions.realtime_errors(self.config, self._state)

    def has_attempted_validation(self, step_id: Optional[str] = None) -> bool:
        return transitions.has_attempted_validation(self.config, self._state, step_id)

    def get_navigable_step_ids(self) -> List[str]:
        return transitions.navigable_step_ids(self.config, self._state)

    def get_progress_percentage(self) -> float:
        """
        Get current progress as percentage.

        Returns:
            Progress percentage (0.0 to 100.0)
        """
        count = self.get_step_count()
        if count == 0:
            return 0.0
        if count == 1:
            return 100.0
        return (self.get_step_index() / (count - 1)) * 100.0

    def snapshot(self) -> Dict[str, Any]:
        """Serializable copy of the current state."""
        return copy.deepcopy(self._state.to_dict())

    # =========================================================================
    # Operations
    # =========================================================================

    def update_step_data(self, partial: Mapping[str, Any]):
        """Merge a partial update into the current step's data."""
        self._apply(transitions.update_step_data(self.config, self._state, partial))

    def update_all_data(self, data: Mapping[str, StepData]):
        self._apply(transitions.update_all_data(self.config, self._state, data))

    def next_step(self) -> bool:
        """
        Validate the current step and move forward.

        Returns:
            True if navigation was successful
        """
        step = self.get_current_step()
        if step is None:
            return False

        new_state = transitions.go_next(self.config, self._state)
        errors = new_state.errors.get(step.id, [])
        self._apply(new_state)

        if errors:
            logger.warning(f"Step '{step.id}' validation failed: {errors}")
            self.validation_failed.emit(step.id, list(errors))
            return False

        if new_state.current_step_id == step.id:
            logger.debug(f"Cannot go next: '{step.id}' is the last step")
            return False

        logger.info(f"Navigating: '{step.id}' -> '{new_state.current_step_id}'")
        self.snapshot_ready.emit(self.snapshot())
        return True

    def previous_step(self) -> bool:
        """Navigate to the previous visible step."""
        if not self.can_go_back():
            logger.debug(f"Cannot go back: already at first step ({self._state.current_step_id})")
            return False

        old_id = self._state.current_step_id
        self._apply(transitions.go_back(self.config, self._state))
        logger.info(f"Navigating back: '{old_id}' -> '{self._state.current_step_id}'")
        return True

    def skip_step(self) -> bool:
        """Skip the current step without validation."""
        old_id = self._state.current_step_id
        new_state = transitions.skip_step(self.config, self._state)
        if new_state is self._state:
            logger.debug(f"Cannot skip step '{old_id}'")
            return False

        self._apply(new_state)
        logger.info(f"Skipped step '{old_id}' -> '{new_state.current_step_id}'")
        self.snapshot_ready.emit(self.snapshot())
        return True

    def goto_step(self, step_id: str) -> bool:
        """
        Jump to a specific step.

        Args:
            step_id: Target step id

        Returns:
            True if navigation was successful
        """
        new_state = transitions.go_to_step(self.config, self._state, step_id)
        if new_state is self._state:
            logger.debug(f"Ignoring jump to '{step_id}' from '{self._state.current_step_id}'")
            return False

        self._apply(new_state)
        logger.info(f"Jumped to step '{step_id}'")
        return True

    def complete(self) -> bool:
        """
        Validate every visible step and finish the run.

        Returns:
            True if every visible step is valid; wizard_completed has been emitted
        """
        new_state, ok = transitions.complete(self.config, self._state)
        self._apply(new_state)

        if not ok:
            failed = transitions.failed_step_ids(self.config, new_state)
            logger.warning(f"Wizard completion blocked by steps: {failed}")
            for step_id in failed:
                self.validation_failed.emit(step_id, list(new_state.errors[step_id]))
            return False

        logger.info(f"Wizard '{self.config.title}' completed")
        self.wizard_completed.emit(copy.deepcopy(new_state.data))
        return True

    def reset(self):
        """Reset navigator to the first step with initial data."""
        self._apply(transitions.reset(self.config, self._state))

    # =========================================================================
    # Internal
    # =========================================================================

    def _apply(self, new_state: WizardState):
        if new_state is self._state:
            return

        old_step = self.get_current_step()
        self._state = new_state
        new_step = self.get_current_step()

        old_id = old_step.id if old_step else ""
        new_id = new_step.id if new_step else ""
        if old_id != new_id:
            self.step_changed.emit(old_id, new_id)

        self.state_changed.emit(new_state)
