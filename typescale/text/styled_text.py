"""Literal text paired with one attribute set covering all of it."""
from __future__ import annotations

import html
from dataclasses import dataclass
from typing import List, Tuple

from PySide6.QtGui import QFont

from .attributes import AttributeKey, AttributeSet


@dataclass(frozen=True)
class StyledText:
    content: str
    attributes: AttributeSet

    # AttributeSet is unhashable (it holds QFont/QColor values)
    __hash__ = None

    def __post_init__(self):
        if not isinstance(self.content, str):
            raise TypeError(f"content must be str, got {type(self.content).__name__}")
        if not isinstance(self.attributes, AttributeSet):
            object.__setattr__(self, "attributes", AttributeSet(self.attributes))

    def __len__(self) -> int:
        return len(self.content)

    def __str__(self) -> str:
        return self.content

    def attributes_at(self, index: int) -> AttributeSet:
        """Attributes in effect at a character offset."""
        if not 0 <= index < len(self.content):
            raise IndexError(f"offset {index} outside text of length {len(self.content)}")
        return self.attributes

    def runs(self) -> List[Tuple[int, int, AttributeSet]]:
        """(start, end, attributes) runs; a single run spanning the content."""
        return [(0, len(self.content), self.attributes)]

    def to_html(self) -> str:
        """Rich-text span usable by QLabel and QTextDocument."""
        declarations = []
        font = self.attributes.font
        if font is not None:
            if font.family():
                declarations.append(f"font-family: '{font.family()}'")
            declarations.append(f"font-size: {font.pointSizeF():g}pt")
            weight = font.weight()
            declarations.append(f"font-weight: {int(getattr(weight, 'value', weight))}")
            if font.capitalization() == QFont.Capitalization.AllUppercase:
                declarations.append("text-transform: uppercase")

        paragraph = self.attributes.paragraph_style
        if paragraph is not None:
            declarations.append(f"line-height: {paragraph.minimum_line_height:g}pt")

        kerning = self.attributes.kerning
        if kerning:
            declarations.append(f"letter-spacing: {kerning:g}pt")

        color = self.attributes.foreground_color
        if color is not None:
            declarations.append(f"color: {color.name()}")

        decorations = []
        if self.attributes.get(AttributeKey.UNDERLINE):
            decorations.append("underline")
        if self.attributes.get(AttributeKey.STRIKETHROUGH):
            decorations.append("line-through")
        if decorations:
            declarations.append(f"text-decoration: {' '.join(decorations)}")

        style = "; ".join(declarations)
        return f'<span style="{html.escape(style)}">{html.escape(self.content)}</span>'
