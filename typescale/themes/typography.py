"""
Typography Scale System
=======================

The closed set of text styles and the fixed table describing each one.

Usage:
    >>> from typescale.themes.typography import StyleRegistry, TextStyle
    >>> StyleRegistry.lookup(TextStyle.TEXT_LG_EMPHASIZED).point_size
    20.0
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, IntEnum, unique
from types import MappingProxyType
from typing import Mapping, Tuple

from typescale.exceptions import InvalidStyleError


class FontWeight(Enum):
    REGULAR = "regular"
    EMPHASIZED = "emphasized"
    HEAVY = "heavy"


@unique
class TextStyle(IntEnum):
    """
    Named typographic roles.

    Values are persisted by consumers: never renumber, only append.
    """

    TEXT_BASE = 0
    TEXT_BASE_EMPHASIZED = 1
    TEXT_LG = 2
    TEXT_LG_EMPHASIZED = 3
    TEXT_SM = 4
    TEXT_SM_EMPHASIZED = 5
    TEXT_XL = 6
    TEXT_XL_EMPHASIZED = 7
    TEXT_XS = 8
    TEXT_XS_EMPHASIZED = 9
    TEXT_XL_HEAVY = 10
    TEXT_CAPS = 11
    TEXT_CAPS_EMPHASIZED = 12
    TEXT_XXL = 13
    TEXT_XXL_EMPHASIZED = 14
    TEXT_XXL_HEAVY = 15
    TEXT_XXXL = 16
    TEXT_XXXL_EMPHASIZED = 17
    TEXT_XXXL_HEAVY = 18

    @classmethod
    def from_name(cls, name: str) -> "TextStyle":
        """
        Parse a style name.

        Accepts "text_lg_emphasized", "TEXT_LG_EMPHASIZED" and the camel-case
        "textLgEmphasized" used by the mobile tokens.
        """
        if not isinstance(name, str):
            raise InvalidStyleError(name)
        key = re.sub(r"(?<=[a-z0-9])(?=[A-Z])", "_", name.strip()).upper()
        try:
            return cls[key]
        except KeyError:
            raise InvalidStyleError(name) from None

    @property
    def scale_name(self) -> str:
        """Size step of the style, e.g. "lg" for TEXT_LG_EMPHASIZED."""
        return self.name.split("_")[1].lower()

    @property
    def weight(self) -> FontWeight:
        if self.name.endswith("_HEAVY"):
            return FontWeight.HEAVY
        if self.name.endswith("_EMPHASIZED"):
            return FontWeight.EMPHASIZED
        return FontWeight.REGULAR


@dataclass(frozen=True)
class StyleDefinition:
    """Canonical font attributes of one TextStyle."""

    face_role: str
    point_size: float
    weight: FontWeight
    line_height: float
    letter_spacing: float


class Typography:
    """
    Size scale shared by all styles.

    Each step is (point size, line height, letter spacing).
    """

    FACE_TEXT = "text"
    FACE_CAPS = "caps"

    SCALE = {
        "caps": (10.0, 12.0, 0.5),
        "xs": (12.0, 16.0, 0.0),
        "sm": (14.0, 20.0, 0.0),
        "base": (16.0, 24.0, 0.0),
        "lg": (20.0, 28.0, 0.0),
        "xl": (24.0, 32.0, 0.0),
        "xxl": (30.0, 36.0, -0.3),
        "xxxl": (36.0, 44.0, -0.5),
    }

    @staticmethod
    def scale() -> dict:
        """Step name → point size."""
        return {name: step[0] for name, step in Typography.SCALE.items()}

    @staticmethod
    def definition_for(style: TextStyle) -> StyleDefinition:
        size, line_height, letter_spacing = Typography.SCALE[style.scale_name]
        face_role = Typography.FACE_CAPS if style.scale_name == "caps" else Typography.FACE_TEXT
        return StyleDefinition(
            face_role=face_role,
            point_size=size,
            weight=style.weight,
            line_height=line_height,
            letter_spacing=letter_spacing,
        )


# Built once at import; never mutated afterwards.
_DEFINITIONS: Mapping[TextStyle, StyleDefinition] = MappingProxyType(
    {style: Typography.definition_for(style) for style in TextStyle}
)


class StyleRegistry:
    """Fixed mapping from TextStyle to StyleDefinition."""

    @staticmethod
    def lookup(style) -> StyleDefinition:
        """
        Return the definition of a style.

        Args:
            style: A TextStyle or its integer value.

        Raises:
            InvalidStyleError: If the value is not a declared style.
        """
        if isinstance(style, bool) or not isinstance(style, int):
            raise InvalidStyleError(style)
        try:
            return _DEFINITIONS[TextStyle(style)]
        except ValueError:
            raise InvalidStyleError(style) from None

    @staticmethod
    def styles() -> Tuple[TextStyle, ...]:
        return tuple(TextStyle)

    @staticmethod
    def definitions() -> Mapping[TextStyle, StyleDefinition]:
        return _DEFINITIONS


__all__ = [
    "FontWeight",
    "TextStyle",
    "StyleDefinition",
    "Typography",
    "StyleRegistry",
]
