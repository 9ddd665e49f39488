# -*- coding: utf-8 -*-
"""
tests/test_styled_text.py
=========================
Tests for StyledText: full-range attributes and HTML export.
"""
import dataclasses

import pytest
from PySide6.QtGui import QColor

from typescale import AttributeKey, AttributeSet, Font, StyledText, TextStyle


class TestStyledText:

    def test_plain_mapping_is_wrapped(self):
        styled = StyledText("abc", {"kerning": 0.0})
        assert isinstance(styled.attributes, AttributeSet)

    def test_content_must_be_str(self):
        with pytest.raises(TypeError):
            StyledText(b"abc", AttributeSet())

    def test_frozen(self):
        styled = StyledText("abc", AttributeSet())
        with pytest.raises(dataclasses.FrozenInstanceError):
            styled.content = "xyz"

    @pytest.mark.parametrize("offset", [-1, 3, 10])
    def test_offset_out_of_range(self, offset):
        with pytest.raises(IndexError):
            StyledText("abc", AttributeSet()).attributes_at(offset)

    def test_str(self):
        assert str(StyledText("abc", AttributeSet())) == "abc"

    def test_unhashable(self):
        styled = Font.make_attributed_string(TextStyle.TEXT_BASE, "x")
        with pytest.raises(TypeError):
            hash(styled)
        with pytest.raises(TypeError):
            {styled}

    def test_equal_by_value(self):
        first = Font.make_attributed_string(TextStyle.TEXT_BASE, "x")
        assert first == Font.make_attributed_string(TextStyle.TEXT_BASE, "x")


class TestToHtml:

    def test_escapes_content(self):
        styled = Font.make_attributed_string(TextStyle.TEXT_BASE, "<b>Tom & Jerry</b>")
        markup = styled.to_html()
        assert "&lt;b&gt;Tom &amp; Jerry&lt;/b&gt;" in markup
        assert markup.startswith("<span style=")

    def test_style_declarations(self):
        styled = Font.make_attributed_string(TextStyle.TEXT_XL_EMPHASIZED, "Hi", QColor("#0770E3"))
        markup = styled.to_html()
        assert "font-size: 24pt" in markup
        assert "font-weight: 600" in markup
        assert "line-height: 32pt" in markup
        assert "color: #0770e3" in markup

    def test_caps_uppercase_and_spacing(self):
        markup = Font.make_attributed_string(TextStyle.TEXT_CAPS, "sale").to_html()
        assert "text-transform: uppercase" in markup
        assert "letter-spacing: 0.5pt" in markup

    def test_decorations(self):
        attrs = Font.make_attributes(
            TextStyle.TEXT_SM,
            custom_attributes={AttributeKey.STRIKETHROUGH: True, AttributeKey.UNDERLINE: True},
        )
        markup = StyledText("£120", attrs).to_html()
        assert "text-decoration: underline line-through" in markup
