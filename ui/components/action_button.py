# -*- coding: utf-8 -*-
"""
Action Button Component - Footer and form button with consistent styling.

Variants:
- primary: main action (Next, Save)
- secondary: supporting action (Back, Skip)
- outline: dismissive action (Cancel)
"""

from PyQt5.QtWidgets import QPushButton

from app.config import Config

_VARIANT_COLORS = {
    # background, hover, text, border
    "primary": (Config.PRIMARY_COLOR, "#0b5ed7", "white", Config.PRIMARY_COLOR),
    "secondary": (Config.SECONDARY_COLOR, "#5c636a", "white", Config.SECONDARY_COLOR),
    "outline": ("transparent", "#e9ecef", Config.SECONDARY_COLOR, Config.BORDER_COLOR),
}


class ActionButton(QPushButton):
    """
    Button with fixed size and a colour variant.

    Usage:
        btn = ActionButton("Next", variant="primary")
        btn = ActionButton("Cancel", variant="outline", width=100)
    """

    def __init__(self, text: str, variant: str = "primary",
                 width: int = 110, height: int = 40, parent=None):
        """
        Initialize action button.

        Args:
            text: Button text
            variant: "primary", "secondary" or "outline"
            width: Button width in pixels
            height: Button height in pixels
            parent: Parent widget

        Raises:
            ValueError: for an unknown variant
        """
        super().__init__(text, parent)
        if variant not in _VARIANT_COLORS:
            raise ValueError(
                f"Invalid variant: {variant}. Must be one of {', '.join(_VARIANT_COLORS)}"
            )
        self.variant = variant
        self.setFixedSize(width, height)
        self._apply_style()

    def _apply_style(self):
        background, hover, text, border = _VARIANT_COLORS[self.variant]
        self.setStyleSheet(f"""
            QPushButton {{
                background-color: {background};
                color: {text};
                border: 1px solid {border};
                padding: 8px 12px;
                border-radius: 4px;
            }}
            QPushButton:hover {{
                background-color: {hover};
            }}
            QPushButton:disabled {{
                background-color: #adb5bd;
                border-color: #adb5bd;
                color: #f8f9fa;
            }}
        """)
