"""
Core utilities for NETIM contact normalization
"""

from .text_utils import (
    strip_accents,
    canonicalize_punctuation,
    fold,
    special_character,
)
from .phone_utils import (
    format_phone_number,
    is_valid_phone,
)

__all__ = [
    "strip_accents",
    "canonicalize_punctuation",
    "fold",
    "special_character",
    "format_phone_number",
    "is_valid_phone",
]
