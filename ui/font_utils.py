# -*- coding: utf-8 -*-
"""
Font Utilities - Font configuration for the wizard UI.

Widgets take fonts from here instead of setting font rules in style sheets.

Usage:
    from ui.font_utils import create_font, FontManager

    title_font = create_font(size=FontManager.SIZE_TITLE, weight=FontManager.WEIGHT_SEMIBOLD)
    label.setFont(title_font)
"""

from typing import List, Optional

from PyQt5.QtGui import QFont
from PyQt5.QtWidgets import QApplication


class FontManager:
    """Font family, sizes and weights used across the application."""

    PRIMARY_FONT_FAMILY = "Segoe UI"
    FALLBACK_FONT_FAMILY = "Helvetica"

    # Sizes (in points)
    SIZE_SMALL = 9
    SIZE_BODY = 10
    SIZE_SUBHEADING = 12
    SIZE_TITLE = 16

    # Qt5 weight scale (0-99)
    WEIGHT_REGULAR = QFont.Normal
    WEIGHT_MEDIUM = QFont.Medium
    WEIGHT_SEMIBOLD = QFont.DemiBold
    WEIGHT_BOLD = QFont.Bold

    @staticmethod
    def create_font(
        size: int = SIZE_BODY,
        weight: int = WEIGHT_REGULAR,
        families: Optional[List[str]] = None
    ) -> QFont:
        """
        Create a QFont.

        Args:
            size: Font size in points
            weight: Qt5 font weight
            families: Family list in order of preference

        Returns:
            Configured QFont instance
        """
        font = QFont()
        font.setFamilies(families or [FontManager.PRIMARY_FONT_FAMILY,
                                      FontManager.FALLBACK_FONT_FAMILY])
        font.setPointSize(size)
        font.setWeight(weight)
        return font

    @staticmethod
    def set_application_default():
        """Set the default font for the whole application (call once at startup)."""
        QApplication.setFont(FontManager.create_font())


def create_font(
    size: int = FontManager.SIZE_BODY,
    weight: int = FontManager.WEIGHT_REGULAR,
    families: Optional[List[str]] = None
) -> QFont:
    """Convenience wrapper for FontManager.create_font()."""
    return FontManager.create_font(size, weight, families)
