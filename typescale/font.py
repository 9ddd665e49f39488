"""
font.py — typescale
===================
Entry point of the typography stack: attributes, attributed strings and
fonts for each TextStyle.

Usage:
    from typescale import Font, TextStyle

    attrs = Font.make_attributes(TextStyle.TEXT_BASE)
    title = Font.make_attributed_string(TextStyle.TEXT_XL_HEAVY, "Flights", text_color="#0770E3")
    font = Font.make_font(TextStyle.TEXT_SM)

Prefer the design-system widgets for rendering text; these helpers exist for
custom rich text.
"""
from __future__ import annotations

from typing import FrozenSet, Mapping, Optional

from PySide6.QtGui import QFont

from typescale.core.config import Config
from typescale.core.font_manager import FontManager
from typescale.exceptions import FaceResolutionError
from typescale.fonts import FontResolver, ensure_resolver
from typescale.text.attributes import (
    DEFAULT_PROTECTED_ATTRIBUTES,
    AttributeKey,
    AttributeSet,
    ParagraphStyle,
    normalize_key,
    to_qcolor,
)
from typescale.text.styled_text import StyledText
from typescale.themes.semantic_colors import SemanticColors
from typescale.themes.typography import StyleDefinition, StyleRegistry, TextStyle


def _resolve_font(definition: StyleDefinition, resolver: FontResolver) -> QFont:
    font = resolver.resolve_face(definition.face_role, definition.weight, definition.point_size)
    if not isinstance(font, QFont):
        raise FaceResolutionError(
            definition.face_role, definition.weight, definition.point_size,
            detail=f"{type(resolver).__name__} returned {type(font).__name__}",
        )
    return font


class Font:
    """Static facade mapping text styles to rendering attributes."""

    @staticmethod
    def protected_attributes() -> FrozenSet[str]:
        """Default deny-list plus TYPESCALE_PROTECTED_ATTRIBUTES."""
        extra = Config.get_instance().get_list("TYPESCALE_PROTECTED_ATTRIBUTES")
        return DEFAULT_PROTECTED_ATTRIBUTES | {normalize_key(key) for key in extra}

    @staticmethod
    def make_attributes(
        style: TextStyle,
        font_manager: Optional[FontResolver] = None,
        custom_attributes: Optional[Mapping] = None,
    ) -> AttributeSet:
        """
        Attributes describing a text style.

        Args:
            style: The desired style.
            font_manager: Resolver to use instead of the shared FontManager.
            custom_attributes: Extra attributes to include. Entries that would
                break the type rendering (font, paragraph style and anything in
                protected_attributes()) are ignored.

        Raises:
            InvalidStyleError: style is not a TextStyle.
            FaceResolutionError: the resolver could not produce a font.
            TypeError: font_manager has no resolve_face().
        """
        definition = StyleRegistry.lookup(style)
        if font_manager is None:
            resolver = FontManager.get_instance()
        else:
            resolver = ensure_resolver(font_manager, "font_manager")

        attributes = AttributeSet({
            AttributeKey.FONT: _resolve_font(definition, resolver),
            AttributeKey.FOREGROUND_COLOR: SemanticColors.text_color(),
            AttributeKey.PARAGRAPH_STYLE: ParagraphStyle.fixed(definition.line_height),
            AttributeKey.KERNING: definition.letter_spacing,
        })
        if custom_attributes:
            attributes = attributes.merged(custom_attributes, Font.protected_attributes())
        return attributes

    @staticmethod
    def make_attributed_string(style: TextStyle, content: str, text_color=None) -> StyledText:
        """
        Styled text for content, in the default text color unless text_color is given.

        text_color accepts a QColor, a Qt.GlobalColor or a color string.
        """
        attributes = Font.make_attributes(style)
        if text_color is not None:
            attributes = attributes.replacing(AttributeKey.FOREGROUND_COLOR, to_qcolor(text_color))
        return StyledText(content, attributes)

    @staticmethod
    def set_font_definition(definition: Optional[FontResolver]) -> None:
        """Set the faces used globally; None restores the system fonts."""
        FontManager.get_instance().set_font_definition(definition)

    @staticmethod
    def make_font(style: TextStyle) -> QFont:
        """QFont for a text style, from the shared FontManager."""
        return _resolve_font(StyleRegistry.lookup(style), FontManager.get_instance())


make_attributes = Font.make_attributes
make_attributed_string = Font.make_attributed_string
set_font_definition = Font.set_font_definition
make_font = Font.make_font
