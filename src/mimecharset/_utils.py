"""Internal shared utilities for mimecharset."""

from __future__ import annotations

import string

# Only A-Z are folded; every other code point is left untouched.
_ASCII_LOWER_TABLE = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def ascii_lower(value: str) -> str:
    """Return *value* with ASCII letters lowercased and nothing else changed."""
    return value.translate(_ASCII_LOWER_TABLE)


def eq_ignore_ascii_case(a: str, b: str) -> bool:
    """Compare *a* and *b* ignoring the case of ASCII letters only."""
    return len(a) == len(b) and ascii_lower(a) == ascii_lower(b)
