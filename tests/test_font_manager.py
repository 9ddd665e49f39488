# -*- coding: utf-8 -*-
"""
tests/test_font_manager.py
==========================
Tests for the process-wide FontManager: lifecycle, signal, config seeding
and concurrent access.
"""
import threading

import pytest
from PySide6.QtGui import QFont

from typescale.core.font_manager import FontManager, SYSTEM_RESOLVER, get_font_manager
from typescale.fonts import FontDefinition, SystemFontResolver
from typescale.themes.typography import FontWeight


class TestLifecycle:

    def test_lazy_creation(self):
        assert FontManager.has_instance() is False
        mgr = get_font_manager()
        assert FontManager.has_instance() is True
        assert FontManager.get_instance() is mgr

    def test_starts_without_definition(self):
        mgr = FontManager.get_instance()
        assert mgr.font_definition is None
        assert mgr.active_resolver() is SYSTEM_RESOLVER

    def test_set_and_clear(self, make_resolver):
        mgr = FontManager.get_instance()
        resolver = make_resolver()
        mgr.set_font_definition(resolver)
        assert mgr.font_definition is resolver
        assert mgr.active_resolver() is resolver

        mgr.set_font_definition(None)
        assert mgr.font_definition is None
        assert isinstance(mgr.active_resolver(), SystemFontResolver)

    def test_invalid_definition_keeps_previous(self, make_resolver):
        mgr = FontManager.get_instance()
        resolver = make_resolver()
        mgr.set_font_definition(resolver)
        with pytest.raises(TypeError):
            mgr.set_font_definition(object())
        assert mgr.font_definition is resolver


class TestSignal:

    def test_emitted_once_per_call(self, make_resolver):
        mgr = FontManager.get_instance()
        received = []
        mgr.font_definition_changed.connect(received.append)

        resolver = make_resolver()
        mgr.set_font_definition(resolver)
        mgr.set_font_definition(None)

        assert received == [resolver, None]


class TestConvenienceFonts:

    def test_weights(self):
        mgr = FontManager.get_instance()
        assert mgr.regular_font(12).weight() == QFont.Weight.Normal
        assert mgr.semibold_font(12).weight() == QFont.Weight.DemiBold
        assert mgr.heavy_font(12).weight() == QFont.Weight.Black
        assert mgr.heavy_font(12).pointSizeF() == 12.0

    def test_delegates_to_definition(self, make_resolver):
        mgr = FontManager.get_instance()
        resolver = make_resolver()
        mgr.set_font_definition(resolver)
        mgr.semibold_font(14)
        assert resolver.calls == [("text", FontWeight.EMPHASIZED, 14)]


class TestConfigSeeding:

    def test_definition_from_environment(self, monkeypatch):
        monkeypatch.setenv("TYPESCALE_FONT_REGULAR", "Brand Sans")
        monkeypatch.setenv("TYPESCALE_FONT_SEMIBOLD", "Brand Sans Semibold")
        mgr = FontManager.get_instance()
        assert mgr.font_definition == FontDefinition("Brand Sans", "Brand Sans Semibold")
        assert mgr.resolve_face("text", FontWeight.HEAVY, 30).family() == "Brand Sans Semibold"

    def test_semibold_defaults_to_regular(self, monkeypatch):
        monkeypatch.setenv("TYPESCALE_FONT_REGULAR", "Only Face")
        mgr = FontManager.get_instance()
        assert mgr.font_definition.semibold_face == "Only Face"


class TestConcurrency:

    def test_readers_see_whole_resolvers(self):
        mgr = FontManager.get_instance()
        first = FontDefinition("Face A", "Face A")
        second = FontDefinition("Face B", "Face B")
        mgr.set_font_definition(first)

        errors = []
        families = set()
        start = threading.Barrier(5)

        def writer():
            start.wait()
            for i in range(200):
                mgr.set_font_definition(second if i % 2 == 0 else first)

        def reader():
            start.wait()
            try:
                for _ in range(200):
                    font = mgr.resolve_face("text", FontWeight.REGULAR, 16.0)
                    families.add(font.family())
                    assert font.pointSizeF() == 16.0
            except Exception as exc:  # collected and re-raised in the main thread
                errors.append(exc)

        threads = [threading.Thread(target=writer)] + [threading.Thread(target=reader) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []
        assert families <= {"Face A", "Face B"}
