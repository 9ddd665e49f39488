"""
typescale Themes Module
=======================

Design tokens used by the typography facade: the text style table and the
color palette behind the default text color.

Quick Start:
    >>> from typescale.themes import StyleRegistry, TextStyle
    >>> StyleRegistry.lookup(TextStyle.TEXT_BASE).line_height
    24.0
"""

from .palettes import ColorPalette
from .semantic_colors import SemanticColors
from .typography import (
    FontWeight,
    StyleDefinition,
    StyleRegistry,
    TextStyle,
    Typography,
)

__all__ = [
    "ColorPalette",
    "SemanticColors",
    "FontWeight",
    "StyleDefinition",
    "StyleRegistry",
    "TextStyle",
    "Typography",
]
