"""
Font Manager - typescale
========================

• Process-wide default font resolver (Singleton)
• Lazily created on first use, replaceable at any time, never destroyed
• One lock guards the installed reference; resolution runs outside it
"""

import logging
import threading
from typing import Optional

from PySide6.QtCore import QObject, Signal
from PySide6.QtGui import QFont

from typescale.core.config import Config
from typescale.core.singleton import QObjectSingletonMixin
from typescale.fonts import FontDefinition, FontResolver, SystemFontResolver, ensure_resolver
from typescale.themes.typography import FontWeight, Typography

logger = logging.getLogger(__name__)

SYSTEM_RESOLVER = SystemFontResolver()


class FontManager(QObject, QObjectSingletonMixin):
    """Centralized font resolution (Singleton)."""

    font_definition_changed = Signal(object)   # emitted after a swap, carries the new definition or None

    def __init__(self) -> None:
        super().__init__()
        self._lock = threading.RLock()
        self._definition: Optional[FontResolver] = FontDefinition.from_config(Config.get_instance())

    # --------------------------------------------------
    # Definition
    # --------------------------------------------------
    @property
    def font_definition(self) -> Optional[FontResolver]:
        with self._lock:
            return self._definition

    def set_font_definition(self, definition: Optional[FontResolver]) -> None:
        if definition is not None:
            ensure_resolver(definition, "font definition")

        with self._lock:
            self._definition = definition

        if definition is None:
            logger.info("Font definition cleared, using system fonts")
        else:
            logger.info(f"Font definition installed: {definition!r}")
        self.font_definition_changed.emit(definition)

    def active_resolver(self) -> FontResolver:
        """Installed definition, or the system resolver when none is set."""
        with self._lock:
            definition = self._definition
        return definition if definition is not None else SYSTEM_RESOLVER

    # --------------------------------------------------
    # Resolution
    # --------------------------------------------------
    def resolve_face(self, face_role: str, weight: FontWeight, point_size: float) -> QFont:
        return self.active_resolver().resolve_face(face_role, weight, point_size)

    def regular_font(self, point_size: float) -> QFont:
        return self.resolve_face(Typography.FACE_TEXT, FontWeight.REGULAR, point_size)

    def semibold_font(self, point_size: float) -> QFont:
        return self.resolve_face(Typography.FACE_TEXT, FontWeight.EMPHASIZED, point_size)

    def heavy_font(self, point_size: float) -> QFont:
        return self.resolve_face(Typography.FACE_TEXT, FontWeight.HEAVY, point_size)


# --------------------------------------------------
# Convenience functions
# --------------------------------------------------
def get_font_manager() -> FontManager:
    return FontManager.get_instance()
