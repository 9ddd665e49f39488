"""
singleton.py — typescale
========================
Process-wide instances of the library: the FontManager (a QObject) and the
Config reader (a plain class).

  ① QObjectSingletonMixin  ← FontManager.get_instance()
  ② SingletonMeta          ← Config() / Config.get_instance()

Both store their instance in one registry guarded by one lock, so an
instance is created at most once even under concurrent first use.
clear_instance() exists for test isolation only.
"""
from __future__ import annotations

import threading
import logging
from typing import Any, Callable, Dict

logger = logging.getLogger(__name__)

_instances: Dict[type, Any] = {}
_lock = threading.RLock()


def _get_or_create(cls: type, factory: Callable[[], Any]) -> Any:
    instance = _instances.get(cls)
    if instance is None:
        with _lock:
            instance = _instances.get(cls)
            if instance is None:
                instance = factory()
                _instances[cls] = instance
                logger.debug(f"[Singleton] Created: {cls.__name__}")
    return instance


def _discard(cls: type) -> None:
    with _lock:
        if _instances.pop(cls, None) is not None:
            logger.debug(f"[Singleton] Cleared: {cls.__name__}")


# ─── ① QObject classes ───────────────────────────────────────────────────────

class QObjectSingletonMixin:
    """
    get_instance() for QObject subclasses.

    QObject already has a shiboken metaclass, so the Qt side uses a mixin
    instead of SingletonMeta.
    """

    @classmethod
    def get_instance(cls):
        return _get_or_create(cls, cls)

    @classmethod
    def has_instance(cls) -> bool:
        return cls in _instances

    @classmethod
    def clear_instance(cls) -> None:
        _discard(cls)


# ─── ② plain classes ─────────────────────────────────────────────────────────

class SingletonMeta(type):
    """Metaclass making Class() return one shared instance."""

    def __call__(cls, *args, **kwargs):
        return _get_or_create(cls, lambda: super(SingletonMeta, cls).__call__(*args, **kwargs))

    def get_instance(cls, *args, **kwargs):
        return cls(*args, **kwargs)

    def clear_instance(cls) -> None:
        _discard(cls)


__all__ = ["QObjectSingletonMixin", "SingletonMeta"]
