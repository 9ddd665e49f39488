"""
Semantic Color System - typescale
=================================

Maps palette entries to the purposes text rendering cares about.
"""
from PySide6.QtGui import QColor

from .palettes import ColorPalette

DEFAULT_TEXT_COLOR = "text_primary"


class SemanticColors:
    """Named text colors built on ColorPalette.SKY."""

    @staticmethod
    def get_colors() -> dict:
        """Semantic name → hex string."""
        palette = ColorPalette.SKY

        return {
            # ========== Text ==========
            "text_primary": palette["sky_gray"],
            "text_secondary": palette["sky_gray_tint_02"],
            "text_tertiary": palette["sky_gray_tint_04"],
            "text_disabled": palette["sky_gray_tint_05"],
            "text_inverse": palette["white"],
            "text_link": palette["sky_blue"],
            "text_success": palette["monteverde"],
            "text_warning": palette["kolkata"],
            "text_error": palette["panjin"],

            # ========== Backgrounds ==========
            "bg_main": palette["white"],
            "bg_secondary": palette["sky_gray_tint_07"],
        }

    @staticmethod
    def qcolor(name: str) -> QColor:
        """Fresh QColor for a semantic name; KeyError if unknown."""
        return QColor(SemanticColors.get_colors()[name])

    @staticmethod
    def text_color() -> QColor:
        """Default foreground color for styled text."""
        return SemanticColors.qcolor(DEFAULT_TEXT_COLOR)
