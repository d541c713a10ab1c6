# -*- coding: utf-8 -*-
"""
Wizard Container - Drives one wizard run from a WizardConfig.

Provides unified wizard UI with:
- Header with title, step buttons and progress over the visible steps
- Inline error panel (attempted-mode errors only)
- Step slot rendered by the active step's renderer
- Navigation buttons (Cancel, Back, Skip, Next/Save)
- Draft autosave after each successful Next/Skip

The container performs no persistence of the finished entry itself; it hands
the accumulated data to ``on_complete``.
"""

from types import MappingProxyType
from typing import Any, Callable, Dict, Optional

from PyQt5.QtCore import pyqtSignal
from PyQt5.QtWidgets import QFrame, QLabel, QScrollArea, QVBoxLayout, QWidget

from app.config import Config
from .error_boundary import ErrorBoundary
from .step_navigator import StepNavigator
from .wizard_context import WizardConfig, WizardState
from .wizard_step import StepProps
from ui.components.wizard_footer import WizardFooter
from ui.components.wizard_header import WizardHeader
from ui.error_handler import ErrorHandler
from utils.logger import get_logger

logger = get_logger(__name__)

CANCEL_CONFIRM_MESSAGE = "Discard this service entry? Anything you entered will be lost."


class WizardContainer(QWidget):
    """
    Controller widget for a wizard run.

    Signals:
        wizard_completed(dict): data keyed by step id, after a successful Save
        wizard_cancelled(): after a confirmed Cancel
        draft_saved(str): persist key, after each successful autosave
    """

    # Signals
    wizard_completed = pyqtSignal(object)
    wizard_cancelled = pyqtSignal()
    draft_saved = pyqtSignal(str)

    def __init__(
        self,
        config: WizardConfig,
        on_complete: Optional[Callable[[Dict[str, Any]], None]] = None,
        on_cancel: Optional[Callable[[], None]] = None,
        draft_repository=None,
        confirm_cancel: Optional[Callable[[], bool]] = None,
        initial_state: Optional[WizardState] = None,
        parent: Optional[QWidget] = None
    ):
        """
        Initialize the wizard.

        Args:
            config: Wizard configuration
            on_complete: Called with a copy of the wizard data after Save
            on_cancel: Called after the user confirmed Cancel
            draft_repository: Store for autosaved snapshots (needs config.persist_key)
            confirm_cancel: Yes/no prompt; defaults to a message box
            initial_state: Previously snapshotted state to resume from
            parent: Parent widget

        Raises:
            WizardConfigurationError: if the config or initial state is inconsistent
        """
        super().__init__(parent)
        self.config = config
        self.on_complete = on_complete
        self.on_cancel = on_cancel
        self.draft_repository = draft_repository
        self.confirm_cancel = confirm_cancel or self._confirm_cancel
        self.current_step_widget: Optional[QWidget] = None

        self.navigator = StepNavigator(config, initial_state, parent=self)
        self.autosave_boundary = ErrorBoundary("draft autosave", parent=self)

        self.navigator.state_changed.connect(self._on_state_changed)
        self.navigator.step_changed.connect(self._on_step_changed)
        self.navigator.snapshot_ready.connect(self._on_snapshot_ready)
        self.navigator.wizard_completed.connect(self._on_wizard_completed)
        self.autosave_boundary.error_occurred.connect(self._on_autosave_error)

        self._setup_ui()
        self._render_step()
        self._refresh()

    # =========================================================================
    # UI Setup
    # =========================================================================

    def _setup_ui(self):
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        self.header = WizardHeader(self.config.title, self.config.subtitle)
        self.header.step_requested.connect(self.navigator.goto_step)
        main_layout.addWidget(self.header)

        self.error_label = QLabel("")
        self.error_label.setObjectName("wizardErrors")
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet(f"""
            QLabel#wizardErrors {{
                color: {Config.ERROR_COLOR};
                background-color: #f8d7da;
                border: 1px solid #f5c2c7;
                border-radius: 4px;
                padding: 8px 12px;
                margin: 12px 20px 0 20px;
            }}
        """)
        self.error_label.setVisible(False)
        main_layout.addWidget(self.error_label)

        self.notice_label = QLabel("")
        self.notice_label.setStyleSheet(f"color: {Config.SECONDARY_COLOR}; margin: 4px 20px;")
        self.notice_label.setVisible(False)
        main_layout.addWidget(self.notice_label)

        # Step slot
        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setFrameShape(QFrame.NoFrame)
        self.step_slot = QWidget()
        self.step_layout = QVBoxLayout(self.step_slot)
        self.step_layout.setContentsMargins(20, 16, 20, 16)
        self.scroll_area.setWidget(self.step_slot)
        main_layout.addWidget(self.scroll_area, 1)

        self.footer = WizardFooter(show_cancel=self.config.allow_cancel)
        self.footer.cancel_clicked.connect(self._handle_cancel)
        self.footer.back_clicked.connect(self._handle_back)
        self.footer.skip_clicked.connect(self._handle_skip)
        self.footer.next_clicked.connect(self._handle_next)
        main_layout.addWidget(self.footer)

    # =========================================================================
    # Rendering
    # =========================================================================

    def build_props(self) -> StepProps:
        """Props for the active step, derived from the current state."""
        step = self.navigator.get_current_step()
        data = self.navigator.data
        return StepProps(
            data=dict(data.get(step.id) or {}) if step else {},
            on_data_change=self.navigator.update_step_data,
            errors=self.navigator.get_displayed_errors(),
            on_next=self._handle_next,
            on_back=self._handle_back,
            on_skip=self._handle_skip,
            can_go_next=self.navigator.can_go_next(),
            can_go_back=self.navigator.can_go_back(),
            can_skip=self.navigator.can_skip(),
            all_wizard_data=MappingProxyType(data),
        )

    def _render_step(self):
        """Replace the step slot content with the active step's widget."""
        if self.current_step_widget is not None:
            self.step_layout.removeWidget(self.current_step_widget)
            self.current_step_widget.deleteLater()
            self.current_step_widget = None

        step = self.navigator.get_current_step()
        if step is None:
            return

        if step.renderer is not None:
            widget = step.renderer(self.build_props())
        else:
            widget = QWidget()
        widget.setObjectName(f"step_{step.id}")
        self.step_layout.addWidget(widget)
        self.current_step_widget = widget
        logger.debug(f"Rendered step '{step.id}'")

    def _refresh(self):
        """Sync header, footer and error panel with the current state."""
        navigator = self.navigator
        step = navigator.get_current_step()
        visible = navigator.get_visible_steps()

        self.header.set_steps(
            [(s.id, s.title) for s in visible],
            current_id=step.id if step else "",
            navigable_ids=navigator.get_navigable_step_ids(),
        )
        self.header.set_progress(
            navigator.get_step_index() + 1, len(visible), navigator.get_progress_percentage()
        )
        if step is not None:
            self.header.set_current_step(step.title, step.subtitle)

        errors = navigator.get_displayed_errors()
        self.error_label.setText("\n".join(f"• {error}" for error in errors))
        self.error_label.setVisible(bool(errors))

        self.footer.set_back_enabled(navigator.can_go_back())
        self.footer.set_skip_visible(navigator.can_skip())
        self.footer.set_next_enabled(navigator.can_go_next())
        self.footer.set_last_step(navigator.is_last_step())

        # Steps that keep their widget across edits receive fresh props
        update_props = getattr(self.current_step_widget, "update_props", None)
        if callable(update_props):
            update_props(self.build_props())

    # =========================================================================
    # Navigation Handlers
    # =========================================================================

    def _handle_back(self):
        self.navigator.previous_step()

    def _handle_skip(self):
        self.navigator.skip_step()

    def _handle_next(self):
        """Next on intermediate steps, Save on the last visible step."""
        if self.navigator.is_last_step():
            self._handle_save()
        else:
            self.navigator.next_step()

    def _handle_save(self):
        if self.navigator.complete():
            return

        # Show the first step with problems so its errors are visible
        current = self.navigator.state.current_step_id
        for step in self.navigator.get_visible_steps():
            if self.navigator.state.errors.get(step.id):
                if step.id != current:
                    self.navigator.goto_step(step.id)
                break

    def _handle_cancel(self):
        """Confirm, then hand control back through on_cancel."""
        if not self.config.allow_cancel:
            return

        if not self.confirm_cancel():
            logger.debug("Cancel not confirmed")
            return

        logger.info(f"Wizard '{self.config.title}' cancelled")
        self._discard_draft()
        if self.on_cancel:
            self.on_cancel()
        self.wizard_cancelled.emit()

    def _confirm_cancel(self) -> bool:
        return ErrorHandler.confirm(self, CANCEL_CONFIRM_MESSAGE, "Cancel")

    # =========================================================================
    # Event Handlers
    # =========================================================================

    def _on_state_changed(self, state: WizardState):
        self._refresh()

    def _on_step_changed(self, old_step_id: str, new_step_id: str):
        # state_changed follows and refreshes the chrome
        self._render_step()

    def _on_wizard_completed(self, data: Dict[str, Any]):
        self._discard_draft()
        if self.on_complete:
            self.on_complete(data)
        self.wizard_completed.emit(data)

    def _on_snapshot_ready(self, snapshot: Dict[str, Any]):
        """Autosave; failures are logged and never affect navigation."""
        key = self.config.persist_key
        if not key or self.draft_repository is None or not Config.AUTOSAVE_ENABLED:
            return

        path = self.autosave_boundary.run(
            self.draft_repository.save, key, snapshot, operation_name="saving draft"
        )
        if path is not None:
            self.notice_label.setVisible(False)
            self.draft_saved.emit(key)

    def _on_autosave_error(self, operation: str, message: str):
        self.notice_label.setText(f"Problem while {operation}. Your entries are kept in this window.")
        self.notice_label.setVisible(True)

    def _discard_draft(self):
        key = self.config.persist_key
        if key and self.draft_repository is not None:
            self.autosave_boundary.run(
                self.draft_repository.delete, key, operation_name="discarding draft"
            )
