from .attributes import (
    AttributeKey,
    AttributeSet,
    DEFAULT_PROTECTED_ATTRIBUTES,
    ParagraphStyle,
    normalize_key,
    to_qcolor,
)
from .styled_text import StyledText

__all__ = [
    "AttributeKey",
    "AttributeSet",
    "DEFAULT_PROTECTED_ATTRIBUTES",
    "ParagraphStyle",
    "StyledText",
    "normalize_key",
    "to_qcolor",
]
