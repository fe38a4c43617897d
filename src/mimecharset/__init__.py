"""Charset names for Media Types and HTTP header values.

Names from the IANA Character Sets registry parse to
:class:`RegisteredCharset` members; any other name parses to an
:class:`Unregistered` value that keeps its original spelling.
"""

from __future__ import annotations

from mimecharset.charset import Charset, Unregistered, charset_sort_key
from mimecharset.enums import RegisteredCharset
from mimecharset.errors import CharsetError, InvalidCharsetError
from mimecharset.registry import (
    REGISTRY,
    equals,
    format_charset,
    is_registered,
    parse,
)

__version__ = "1.0.0"
__all__ = [
    "REGISTRY",
    "Charset",
    "CharsetError",
    "InvalidCharsetError",
    "RegisteredCharset",
    "Unregistered",
    "charset_sort_key",
    "equals",
    "format_charset",
    "is_registered",
    "parse",
]
