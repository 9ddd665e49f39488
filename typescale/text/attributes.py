"""
Attribute sets applied over a run of text.

An AttributeSet is an immutable mapping keyed by attribute name. Keys are
normalised to plain strings, so AttributeKey.FONT and "font" address the
same entry. Qt value types are copied on the way in and on the way out,
which keeps every set a snapshot of the moment it was built. Color entries
are stored as QColor whatever form they arrive in, so a bad color fails
when the set is built.
"""
from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, FrozenSet, Iterable, Iterator, Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QBrush, QColor, QFont, QTextCharFormat

logger = logging.getLogger(__name__)


class AttributeKey(str, Enum):
    FONT = "font"
    FOREGROUND_COLOR = "foreground_color"
    PARAGRAPH_STYLE = "paragraph_style"
    KERNING = "kerning"
    BACKGROUND_COLOR = "background_color"
    STRIKETHROUGH = "strikethrough"
    UNDERLINE = "underline"
    LINK = "link"


# Keys callers may not override: the font and the line spacing are what
# make a style that style.
DEFAULT_PROTECTED_ATTRIBUTES: FrozenSet[str] = frozenset({
    AttributeKey.FONT.value,
    AttributeKey.PARAGRAPH_STYLE.value,
})


@dataclass(frozen=True)
class ParagraphStyle:
    minimum_line_height: float
    maximum_line_height: float

    @classmethod
    def fixed(cls, line_height: float) -> "ParagraphStyle":
        return cls(float(line_height), float(line_height))


def normalize_key(key) -> str:
    """
    Plain-string form of an attribute key.

    "foreground_color", "FOREGROUND_COLOR" and "foregroundColor" all name
    AttributeKey.FOREGROUND_COLOR; unknown keys are kept as given.
    """
    if isinstance(key, AttributeKey):
        return key.value
    if isinstance(key, str):
        name = key.strip()
        member = re.sub(r"(?<=[a-z0-9])(?=[A-Z])", "_", name).upper()
        try:
            return AttributeKey[member].value
        except KeyError:
            return name
    raise TypeError(f"Attribute keys must be strings, got {type(key).__name__}")


def to_qcolor(value) -> QColor:
    """
    Coerce a color value into a fresh QColor.

    Accepts QColor, Qt.GlobalColor and any string QColor understands
    ("#111236", "red", "#80FF0000").
    """
    if isinstance(value, QColor):
        color = QColor(value)
    elif isinstance(value, (str, Qt.GlobalColor)):
        color = QColor(value)
    else:
        raise TypeError(f"Unsupported color value: {value!r}")
    if not color.isValid():
        raise ValueError(f"Invalid color: {value!r}")
    return color


COLOR_KEYS: FrozenSet[str] = frozenset({
    AttributeKey.FOREGROUND_COLOR.value,
    AttributeKey.BACKGROUND_COLOR.value,
})


def _store(key: str, value):
    if key in COLOR_KEYS:
        return to_qcolor(value)
    return _detach(value)


def _detach(value):
    if isinstance(value, QFont):
        return QFont(value)
    if isinstance(value, QColor):
        return QColor(value)
    return value


class AttributeSet(Mapping):
    """Immutable attribute-name → value mapping."""

    __slots__ = ("_data",)

    def __init__(self, data: Optional[Mapping] = None, **kwargs: Any):
        items: Dict[str, Any] = {}
        for source in (data or {}, kwargs):
            for key, value in source.items():
                name = normalize_key(key)
                items[name] = _store(name, value)
        self._data = items

    def __getitem__(self, key) -> Any:
        return _detach(self._data[normalize_key(key)])

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key) -> bool:
        try:
            return normalize_key(key) in self._data
        except TypeError:
            return False

    def __repr__(self) -> str:
        return f"AttributeSet({self._data!r})"

    # --------------------------------------------------
    # Accessors
    # --------------------------------------------------
    @property
    def font(self) -> Optional[QFont]:
        return self.get(AttributeKey.FONT)

    @property
    def foreground_color(self) -> Optional[QColor]:
        return self.get(AttributeKey.FOREGROUND_COLOR)

    @property
    def paragraph_style(self) -> Optional[ParagraphStyle]:
        return self.get(AttributeKey.PARAGRAPH_STYLE)

    @property
    def kerning(self) -> float:
        return self.get(AttributeKey.KERNING, 0.0)

    # --------------------------------------------------
    # Derivation
    # --------------------------------------------------
    def replacing(self, key, value) -> "AttributeSet":
        """Copy with one entry set, protected or not."""
        data = dict(self._data)
        data[normalize_key(key)] = value
        return AttributeSet(data)

    def merged(self, overrides: Optional[Mapping], protected: Iterable[str] = DEFAULT_PROTECTED_ATTRIBUTES) -> "AttributeSet":
        """
        Copy with overrides applied.

        Keys listed in `protected` are dropped from the overrides, never
        applied.
        """
        if not overrides:
            return AttributeSet(self._data)

        blocked = {normalize_key(key) for key in protected}
        data = dict(self._data)
        for key, value in overrides.items():
            name = normalize_key(key)
            if name in blocked:
                logger.debug(f"Ignoring protected attribute override '{name}'")
                continue
            data[name] = value
        return AttributeSet(data)

    # --------------------------------------------------
    # Qt bridge
    # --------------------------------------------------
    def to_char_format(self) -> QTextCharFormat:
        """QTextCharFormat carrying the entries Qt text documents understand."""
        fmt = QTextCharFormat()
        data = self._data

        if AttributeKey.FONT.value in data:
            fmt.setFont(QFont(data[AttributeKey.FONT.value]))
        if AttributeKey.FOREGROUND_COLOR.value in data:
            fmt.setForeground(QBrush(data[AttributeKey.FOREGROUND_COLOR.value]))
        if AttributeKey.BACKGROUND_COLOR.value in data:
            fmt.setBackground(QBrush(data[AttributeKey.BACKGROUND_COLOR.value]))
        if AttributeKey.KERNING.value in data:
            fmt.setFontLetterSpacingType(QFont.SpacingType.AbsoluteSpacing)
            fmt.setFontLetterSpacing(float(data[AttributeKey.KERNING.value]))
        if AttributeKey.STRIKETHROUGH.value in data:
            fmt.setFontStrikeOut(bool(data[AttributeKey.STRIKETHROUGH.value]))
        if AttributeKey.UNDERLINE.value in data:
            fmt.setFontUnderline(bool(data[AttributeKey.UNDERLINE.value]))
        if data.get(AttributeKey.LINK.value):
            fmt.setAnchor(True)
            fmt.setAnchorHref(str(data[AttributeKey.LINK.value]))
        return fmt


__all__ = [
    "AttributeKey",
    "AttributeSet",
    "ParagraphStyle",
    "DEFAULT_PROTECTED_ATTRIBUTES",
    "normalize_key",
    "to_qcolor",
]
