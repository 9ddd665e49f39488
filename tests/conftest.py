"""
tests/conftest.py
=================
Shared pytest fixtures — offscreen Qt, fresh singletons, clean environment.
"""
import os
import sys

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtGui import QFont, QGuiApplication

from typescale.core.config import Config
from typescale.core.font_manager import FontManager


# ─── Qt application (session-scoped) ─────────────────────────────────────────

@pytest.fixture(scope="session", autouse=True)
def app():
    return QGuiApplication.instance() or QGuiApplication(sys.argv)


# ─── Per-test isolation ──────────────────────────────────────────────────────

@pytest.fixture(autouse=True)
def clean_state(monkeypatch, tmp_path):
    """No TYPESCALE_* variables, no stray config files, fresh singletons."""
    for key in list(os.environ):
        if key.startswith("TYPESCALE_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    FontManager.clear_instance()
    Config.clear_instance()
    yield
    FontManager.clear_instance()
    Config.clear_instance()


# ─── Resolver doubles ────────────────────────────────────────────────────────

class RecordingResolver:
    """Resolver that remembers every request and answers with one family."""

    def __init__(self, family="Recorder Sans"):
        self.family = family
        self.calls = []

    def resolve_face(self, face_role, weight, point_size):
        self.calls.append((face_role, weight, point_size))
        font = QFont(self.family)
        font.setPointSizeF(float(point_size))
        return font

    def __repr__(self):
        return f"RecordingResolver({self.family!r})"


@pytest.fixture
def make_resolver():
    def _f(family="Recorder Sans"):
        return RecordingResolver(family)
    return _f
