# -*- coding: utf-8 -*-
"""
Wizard Header Component - Title, current step and progress for wizards.

Progress is expressed over the visible step sequence only, so hiding an
optional step shortens the "Step N of M" count.
"""

from typing import Iterable, List, Tuple

from PyQt5.QtCore import pyqtSignal
from PyQt5.QtWidgets import QHBoxLayout, QLabel, QProgressBar, QPushButton, QVBoxLayout, QWidget

from app.config import Config
from ui.font_utils import FontManager, create_font


class WizardHeader(QWidget):
    """
    Wizard header with title, step indicator and progress bar.

    Signals:
        step_requested(str): a step button was clicked (step id)

    Usage:
        header = WizardHeader(title="Log DIY Service", subtitle="Record work you did yourself")
        header.set_steps([("basic_info", "Basic Info"), ("services", "Services")])
    """

    step_requested = pyqtSignal(str)

    def __init__(self, title: str, subtitle: str = "", parent=None):
        """
        Initialize wizard header.

        Args:
            title: Main title text
            subtitle: Optional subtitle text
            parent: Parent widget
        """
        super().__init__(parent)
        self.title_text = title
        self.subtitle_text = subtitle
        self._step_buttons: List[QPushButton] = []
        self._setup_ui()

    def _setup_ui(self):
        self.setObjectName("wizardHeader")
        self.setStyleSheet(f"""
            QWidget#wizardHeader {{
                background-color: {Config.BACKGROUND_COLOR};
                border-bottom: 1px solid {Config.BORDER_COLOR};
            }}
        """)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(8)

        self.title_label = QLabel(self.title_text)
        self.title_label.setFont(create_font(size=FontManager.SIZE_TITLE,
                                             weight=FontManager.WEIGHT_SEMIBOLD))
        layout.addWidget(self.title_label)

        self.subtitle_label = QLabel(self.subtitle_text)
        self.subtitle_label.setStyleSheet(f"color: {Config.SECONDARY_COLOR};")
        self.subtitle_label.setVisible(bool(self.subtitle_text))
        layout.addWidget(self.subtitle_label)

        # Step buttons (one per visible step)
        self.steps_layout = QHBoxLayout()
        self.steps_layout.setSpacing(6)
        layout.addLayout(self.steps_layout)

        progress_layout = QHBoxLayout()
        progress_layout.setSpacing(8)

        self.progress_label = QLabel("")
        progress_layout.addWidget(self.progress_label)

        self.progress_bar = QProgressBar()
        self.progress_bar.setMaximum(100)
        self.progress_bar.setTextVisible(False)
        self.progress_bar.setFixedHeight(6)
        self.progress_bar.setStyleSheet(f"""
            QProgressBar {{
                border: none;
                background-color: #e9ecef;
                border-radius: 3px;
            }}
            QProgressBar::chunk {{
                background-color: {Config.PRIMARY_COLOR};
                border-radius: 3px;
            }}
        """)
        progress_layout.addWidget(self.progress_bar, 1)
        layout.addLayout(progress_layout)

        self.step_title_label = QLabel("")
        self.step_title_label.setFont(create_font(size=FontManager.SIZE_SUBHEADING,
                                                  weight=FontManager.WEIGHT_MEDIUM))
        layout.addWidget(self.step_title_label)

        self.step_subtitle_label = QLabel("")
        self.step_subtitle_label.setStyleSheet(f"color: {Config.SECONDARY_COLOR};")
        self.step_subtitle_label.setWordWrap(True)
        layout.addWidget(self.step_subtitle_label)

    def set_title(self, title: str):
        """Update title text."""
        self.title_text = title
        self.title_label.setText(title)

    def set_steps(self, steps: Iterable[Tuple[str, str]], current_id: str = "",
                  navigable_ids: Iterable[str] = ()):
        """
        Rebuild the step buttons.

        Args:
            steps: (step_id, title) pairs for the visible steps
            current_id: Id of the active step (shown checked)
            navigable_ids: Ids the user may jump to (others are disabled)

        The active step is shown in bold.
        """
        for button in self._step_buttons:
            self.steps_layout.removeWidget(button)
            button.deleteLater()
        self._step_buttons = []

        navigable = set(navigable_ids)
        for position, (step_id, title) in enumerate(steps, start=1):
            button = QPushButton(f"{position}. {title}")
            button.setObjectName(f"step_{step_id}")
            button.setFlat(True)
            if step_id == current_id:
                button.setFont(create_font(weight=FontManager.WEIGHT_BOLD))
            button.setEnabled(step_id == current_id or step_id in navigable)
            button.clicked.connect(lambda _checked=False, sid=step_id: self._on_step_clicked(sid))
            self.steps_layout.addWidget(button)
            self._step_buttons.append(button)

    def set_progress(self, current: int, total: int, percentage: float):
        """Update "Step N of M" and the progress bar."""
        self.progress_label.setText(f"Step {current} of {total}")
        self.progress_bar.setValue(int(percentage))

    def set_current_step(self, title: str, subtitle: str = ""):
        self.step_title_label.setText(title)
        self.step_subtitle_label.setText(subtitle)
        self.step_subtitle_label.setVisible(bool(subtitle))

    def step_buttons(self) -> List[QPushButton]:
        return list(self._step_buttons)

    def _on_step_clicked(self, step_id: str):
        self.step_requested.emit(step_id)
