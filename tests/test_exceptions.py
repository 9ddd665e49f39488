# -*- coding: utf-8 -*-
"""
tests/test_exceptions.py
========================
Tests for the typescale hierarchical exception system.
"""
import pytest

from typescale.exceptions import (
    ConfigurationError,
    FaceResolutionError,
    FontError,
    InvalidStyleError,
    StyleError,
    TypescaleError,
)
from typescale.themes.typography import FontWeight


# ── inheritance hierarchy ─────────────────────────────────────────────────────

class TestInheritance:

    def test_all_inherit_from_typescale_error(self):
        for err_cls in (StyleError, InvalidStyleError, FontError, FaceResolutionError, ConfigurationError):
            assert issubclass(err_cls, TypescaleError), f"{err_cls} must inherit TypescaleError"

    def test_chains(self):
        assert issubclass(InvalidStyleError, StyleError)
        assert issubclass(FaceResolutionError, FontError)

    def test_catch_with_base(self):
        with pytest.raises(TypescaleError):
            raise InvalidStyleError(99)


# ── TypescaleError attributes ─────────────────────────────────────────────────

class TestTypescaleError:

    def test_message_and_code(self):
        e = TypescaleError("msg", code="ERR_001")
        assert e.message == "msg"
        assert e.code == "ERR_001"
        assert str(e) == "msg"

    def test_str_with_detail(self):
        e = TypescaleError("main message", detail="detail info")
        assert str(e) == "main message | detail info"


# ── specific errors ───────────────────────────────────────────────────────────

class TestInvalidStyleError:

    def test_value_in_message(self):
        e = InvalidStyleError(42)
        assert e.value == 42
        assert "42" in str(e)
        assert e.code == "STYLE_INVALID"

    def test_custom_message(self):
        e = InvalidStyleError("x", message="bad style name")
        assert str(e) == "bad style name"


class TestFaceResolutionError:

    def test_fields(self):
        e = FaceResolutionError("caps", FontWeight.HEAVY, 10.0)
        assert e.face_role == "caps"
        assert e.weight is FontWeight.HEAVY
        assert e.point_size == 10.0
        assert e.code == "FACE_UNRESOLVED"
        assert "caps" in str(e)
        assert "heavy" in str(e)

    def test_plain_weight(self):
        assert "bold" in str(FaceResolutionError("text", "bold", 12))
