"""
exceptions.py
=============
typescale — Hierarchical Exception System

All library exceptions inherit from TypescaleError so callers
can catch the full hierarchy with a single except clause when needed.

Structure
---------
TypescaleError
├── StyleError
│   └── InvalidStyleError
├── FontError
│   └── FaceResolutionError
└── ConfigurationError
"""


# ─── Root ────────────────────────────────────────────────────────────────────

class TypescaleError(Exception):
    """Base exception for all typescale errors."""

    def __init__(self, message: str = "", *, code: str = "", detail: str = ""):
        super().__init__(message)
        self.message = message
        self.code = code          # machine-readable code e.g. "STYLE_INVALID"
        self.detail = detail      # extra context for logging

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message} | {self.detail}"
        return self.message


# ─── Styles ──────────────────────────────────────────────────────────────────

class StyleError(TypescaleError):
    """Raised when a text style cannot be used."""


class InvalidStyleError(StyleError):
    """Raised when a value is not one of the declared text styles."""

    def __init__(self, value=None, **kwargs):
        message = kwargs.pop("message", f"Unknown text style: {value!r}")
        kwargs.setdefault("code", "STYLE_INVALID")
        super().__init__(message, **kwargs)
        self.value = value


# ─── Fonts ───────────────────────────────────────────────────────────────────

class FontError(TypescaleError):
    """Base for errors raised while producing font handles."""


class FaceResolutionError(FontError):
    """Raised when a resolver cannot produce a font for (role, weight, size)."""

    def __init__(self, face_role: str = "", weight=None, point_size=None, **kwargs):
        weight_name = getattr(weight, "value", weight)
        message = kwargs.pop(
            "message",
            f"Cannot resolve face for role='{face_role}' "
            f"weight='{weight_name}' size={point_size}",
        )
        kwargs.setdefault("code", "FACE_UNRESOLVED")
        super().__init__(message, **kwargs)
        self.face_role = face_role
        self.weight = weight
        self.point_size = point_size


# ─── Configuration ───────────────────────────────────────────────────────────

class ConfigurationError(TypescaleError):
    """Raised when the library configuration is invalid or incomplete."""


__all__ = [
    "TypescaleError",
    "StyleError",
    "InvalidStyleError",
    "FontError",
    "FaceResolutionError",
    "ConfigurationError",
]
