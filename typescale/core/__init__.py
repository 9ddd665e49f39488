# typescale/core/__init__.py
"""
typescale Core Module
=====================

Process-wide state and ambient services.

Public API:
    - Configuration: Config
    - Fonts: FontManager
    - Logging: LoggingConfig
    - Utilities: SingletonMeta, QObjectSingletonMixin
"""

from .config import Config
from .font_manager import FontManager
from .logging_config import LoggingConfig
from .singleton import SingletonMeta, QObjectSingletonMixin

__all__ = [
    "Config",
    "FontManager",
    "LoggingConfig",
    "SingletonMeta",
    "QObjectSingletonMixin",
]
