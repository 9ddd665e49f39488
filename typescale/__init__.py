"""
typescale
=========
Typography facade of the design system: named text styles resolved into
fonts, colors and paragraph attributes for Qt text rendering.

Quick Start:
    >>> from typescale import Font, TextStyle
    >>> styled = Font.make_attributed_string(TextStyle.TEXT_BASE, "Hello")
    >>> len(styled)
    5
"""

from .exceptions import (
    ConfigurationError,
    FaceResolutionError,
    FontError,
    InvalidStyleError,
    StyleError,
    TypescaleError,
)
from .font import (
    Font,
    make_attributed_string,
    make_attributes,
    make_font,
    set_font_definition,
)
from .fonts import FontDefinition, FontResolver, SystemFontResolver
from .text import AttributeKey, AttributeSet, ParagraphStyle, StyledText
from .themes import FontWeight, StyleDefinition, StyleRegistry, TextStyle
from .version import VERSION

__all__ = [
    "Font",
    "make_attributes",
    "make_attributed_string",
    "make_font",
    "set_font_definition",
    "FontDefinition",
    "FontResolver",
    "SystemFontResolver",
    "AttributeKey",
    "AttributeSet",
    "ParagraphStyle",
    "StyledText",
    "FontWeight",
    "StyleDefinition",
    "StyleRegistry",
    "TextStyle",
    "TypescaleError",
    "StyleError",
    "InvalidStyleError",
    "FontError",
    "FaceResolutionError",
    "ConfigurationError",
]

__version__ = VERSION
