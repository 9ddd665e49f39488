"""
fonts.py — typescale
====================
Face resolution: turn (face role, weight, point size) into a QFont.

Two resolvers ship with the library:

  • FontDefinition      ← custom family names per weight (brand fonts)
  • SystemFontResolver  ← toolkit default family, used when nothing is installed

Anything with a matching resolve_face() method can be passed wherever a
resolver is expected.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol, runtime_checkable

from PySide6.QtGui import QFont, QFontDatabase

from typescale.exceptions import ConfigurationError, FaceResolutionError
from typescale.themes.typography import FontWeight, Typography

logger = logging.getLogger(__name__)

QT_WEIGHTS = {
    FontWeight.REGULAR: QFont.Weight.Normal,
    FontWeight.EMPHASIZED: QFont.Weight.DemiBold,
    FontWeight.HEAVY: QFont.Weight.Black,
}


@runtime_checkable
class FontResolver(Protocol):
    def resolve_face(self, face_role: str, weight: FontWeight, point_size: float) -> QFont:
        ...


def build_font(family: Optional[str], face_role: str, weight: FontWeight, point_size: float) -> QFont:
    """QFont with size, weight and role-specific capitalization applied."""
    font = QFont(family) if family else QFont()
    font.setPointSizeF(float(point_size))
    font.setWeight(QT_WEIGHTS[weight])
    if face_role == Typography.FACE_CAPS:
        font.setCapitalization(QFont.Capitalization.AllUppercase)
    return font


@dataclass(frozen=True)
class FontDefinition:
    """
    Family names to use for each weight.

    heavy_face is optional; heavy styles then use semibold_face.
    With strict=True the family must be known to QFontDatabase, which needs
    a running QGuiApplication.
    """

    regular_face: str
    semibold_face: str
    heavy_face: Optional[str] = None
    strict: bool = False

    def __post_init__(self):
        if not self.regular_face or not self.semibold_face:
            raise ConfigurationError(
                "FontDefinition needs both regular_face and semibold_face",
                code="FONT_DEFINITION_INCOMPLETE",
            )

    def face_for(self, weight: FontWeight) -> str:
        if weight is FontWeight.REGULAR:
            return self.regular_face
        if weight is FontWeight.HEAVY and self.heavy_face:
            return self.heavy_face
        return self.semibold_face

    def resolve_face(self, face_role: str, weight: FontWeight, point_size: float) -> QFont:
        family = self.face_for(weight)
        if self.strict and not QFontDatabase.hasFamily(family):
            raise FaceResolutionError(
                face_role, weight, point_size,
                detail=f"family '{family}' is not installed",
            )
        return build_font(family, face_role, weight, point_size)

    @classmethod
    def from_config(cls, config) -> Optional["FontDefinition"]:
        """
        Build a definition from TYPESCALE_FONT_* settings.

        Returns None when no regular face is configured.
        """
        regular = config.get("TYPESCALE_FONT_REGULAR")
        if not regular:
            return None
        semibold = config.get("TYPESCALE_FONT_SEMIBOLD") or regular
        heavy = config.get("TYPESCALE_FONT_HEAVY") or None
        definition = cls(regular_face=regular, semibold_face=semibold, heavy_face=heavy)
        logger.info(f"Font definition from config: {regular} / {semibold} / {heavy or semibold}")
        return definition


class SystemFontResolver:
    """Built-in fallback: the toolkit's default family at the requested weight."""

    def resolve_face(self, face_role: str, weight: FontWeight, point_size: float) -> QFont:
        if weight not in QT_WEIGHTS:
            raise FaceResolutionError(face_role, weight, point_size)
        return build_font(None, face_role, weight, point_size)

    def __eq__(self, other):
        return isinstance(other, SystemFontResolver)

    def __hash__(self):
        return hash(SystemFontResolver)

    def __repr__(self):
        return "SystemFontResolver()"


def ensure_resolver(candidate, name: str = "font resolver"):
    """Return candidate unchanged, or raise TypeError if it cannot resolve faces."""
    if not callable(getattr(candidate, "resolve_face", None)):
        raise TypeError(
            f"{name} must provide resolve_face(face_role, weight, point_size), "
            f"got {type(candidate).__name__}"
        )
    return candidate


__all__ = [
    "FontResolver",
    "FontDefinition",
    "SystemFontResolver",
    "build_font",
    "ensure_resolver",
    "QT_WEIGHTS",
]
