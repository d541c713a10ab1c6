# -*- coding: utf-8 -*-
"""
Base Step - Base widget for wizard steps rendered from StepProps.

A step widget is built once per visit to its step. It fills its inputs
from ``props.data`` and only then connects their change signals, so that
populating never echoes back as a data change. Edits are reported through
``props.on_data_change``; the widget never touches wizard state directly.
"""

from abc import ABCMeta, abstractmethod
from typing import Any, Dict, Optional

from PyQt5.QtCore import pyqtSignal
from PyQt5.QtWidgets import QLabel, QVBoxLayout, QWidget

from app.config import Config
from .wizard_step import StepProps, StepRenderer


# Combine PyQt5 metaclass with ABC metaclass
class ABCQWidgetMeta(type(QWidget), ABCMeta):
    """Metaclass that combines PyQt5's metaclass with ABC."""
    pass


class BaseStep(QWidget, metaclass=ABCQWidgetMeta):
    """
    Abstract base class for wizard step widgets.

    Subclasses must implement setup_ui() and usually populate_data() and
    connect_signals().
    """

    # Signals
    step_data_changed = pyqtSignal(object)  # partial step data dict

    def __init__(self, props: StepProps, parent: Optional[QWidget] = None):
        """
        Initialize the step.

        Args:
            props: Render contract for the active step
            parent: Parent widget
        """
        super().__init__(parent)
        self.props = props

        self.main_layout = QVBoxLayout(self)
        self.main_layout.setContentsMargins(0, 0, 0, 0)
        self.main_layout.setSpacing(12)

        self.setup_ui()
        self.populate_data(props.data)
        self.connect_signals()
        self.on_props_updated(props)

    @classmethod
    def renderer(cls, **kwargs) -> StepRenderer:
        """Renderer for a WizardStepDefinition that builds this widget."""
        def render(props: StepProps) -> 'BaseStep':
            return cls(props, **kwargs)

        render.__name__ = f"render_{cls.__name__}"
        return render

    # =========================================================================
    # Abstract Methods - Must be implemented by subclasses
    # =========================================================================

    @abstractmethod
    def setup_ui(self):
        """Create all widgets and layouts."""
        pass

    # =========================================================================
    # Optional Methods - Can be overridden by subclasses
    # =========================================================================

    def populate_data(self, data: Dict[str, Any]):
        """Fill the inputs from the step's data slice."""
        pass

    def connect_signals(self):
        """Connect input change signals (called after populate_data)."""
        pass

    def on_props_updated(self, props: StepProps):
        """React to fresh props (errors, flags) without rebuilding inputs."""
        pass

    def update_props(self, props: StepProps):
        """Called by the wizard after every state change while this step is shown."""
        self.props = props
        self.on_props_updated(props)

    # =========================================================================
    # Helper Methods
    # =========================================================================

    def save_to_context(self, key: str, value: Any):
        """Report one field change."""
        self.save_fields({key: value})

    def save_fields(self, partial: Dict[str, Any]):
        """Report several field changes at once."""
        self.props.on_data_change(partial)
        self.step_data_changed.emit(dict(partial))

    def get_from_context(self, key: str, default: Any = None) -> Any:
        """Value of a field in this step's current data."""
        return self.props.data.get(key, default)

    def request_next(self):
        """Same as pressing Next (used for Enter in line edits)."""
        self.props.on_next()

    def create_section_label(self, text: str) -> QLabel:
        label = QLabel(text)
        label.setStyleSheet(f"color: {Config.SECONDARY_COLOR}; font-weight: 600;")
        return label
