# -*- coding: utf-8 -*-
"""
Wizard Footer Component - Navigation bar for multi-step forms.

Cancel sits on the left; Back, Skip and Next/Save on the right. The footer
only emits signals; the owning wizard decides what each one does and keeps
the enabled/visible state in sync.
"""

from PyQt5.QtCore import pyqtSignal
from PyQt5.QtWidgets import QHBoxLayout, QWidget

from app.config import Config
from ui.components.action_button import ActionButton


class WizardFooter(QWidget):
    """
    Wizard footer with Cancel, Back, Skip and Next buttons.

    Signals:
        cancel_clicked: Emitted when Cancel button is clicked
        back_clicked: Emitted when Back button is clicked
        skip_clicked: Emitted when Skip button is clicked
        next_clicked: Emitted when Next (or Save) button is clicked

    Usage:
        footer = WizardFooter(show_cancel=config.allow_cancel)
        footer.next_clicked.connect(self._handle_next)
    """

    NEXT_TEXT = "Next"
    SAVE_TEXT = "Save"

    # Signals
    cancel_clicked = pyqtSignal()
    back_clicked = pyqtSignal()
    skip_clicked = pyqtSignal()
    next_clicked = pyqtSignal()

    def __init__(self, show_cancel: bool = True, parent=None):
        """
        Initialize wizard footer.

        Args:
            show_cancel: Whether the Cancel button is shown at all
            parent: Parent widget
        """
        super().__init__(parent)
        self.show_cancel = show_cancel
        self._setup_ui()

    def _setup_ui(self):
        self.setObjectName("wizardFooter")
        self.setStyleSheet(f"""
            QWidget#wizardFooter {{
                background-color: {Config.BACKGROUND_COLOR};
                border-top: 1px solid {Config.BORDER_COLOR};
            }}
        """)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(12)

        self.btn_cancel = ActionButton("Cancel", variant="outline")
        self.btn_cancel.clicked.connect(self.cancel_clicked.emit)
        self.btn_cancel.setVisible(self.show_cancel)
        layout.addWidget(self.btn_cancel)

        layout.addStretch()

        self.btn_back = ActionButton("Back", variant="secondary")
        self.btn_back.clicked.connect(self.back_clicked.emit)
        layout.addWidget(self.btn_back)

        self.btn_skip = ActionButton("Skip", variant="secondary")
        self.btn_skip.clicked.connect(self.skip_clicked.emit)
        self.btn_skip.setVisible(False)
        layout.addWidget(self.btn_skip)

        self.btn_next = ActionButton(self.NEXT_TEXT, variant="primary")
        self.btn_next.clicked.connect(self.next_clicked.emit)
        layout.addWidget(self.btn_next)

    def set_next_enabled(self, enabled: bool):
        """Enable/disable next button."""
        self.btn_next.setEnabled(enabled)

    def set_back_enabled(self, enabled: bool):
        self.btn_back.setEnabled(enabled)

    def set_skip_visible(self, visible: bool):
        self.btn_skip.setVisible(visible)

    def set_last_step(self, is_last: bool):
        """Switch the primary button between Next and Save."""
        self.btn_next.setText(self.SAVE_TEXT if is_last else self.NEXT_TEXT)
