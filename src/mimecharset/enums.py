"""Enumerations for mimecharset."""

from __future__ import annotations

import enum
import functools


@functools.total_ordering
class RegisteredCharset(enum.Enum):
    """Charsets from the IANA Character Sets registry recognised by name.

    Members are declared in sort order.  Their canonical string form lives in
    :data:`mimecharset.registry.REGISTRY`; the member itself is the identity.
    """

    US_ASCII = enum.auto()
    ISO_8859_1 = enum.auto()
    ISO_8859_2 = enum.auto()
    ISO_8859_3 = enum.auto()
    ISO_8859_4 = enum.auto()
    ISO_8859_5 = enum.auto()
    ISO_8859_6 = enum.auto()
    ISO_8859_7 = enum.auto()
    ISO_8859_8 = enum.auto()
    ISO_8859_9 = enum.auto()
    ISO_8859_10 = enum.auto()
    SHIFT_JIS = enum.auto()
    EUC_JP = enum.auto()
    ISO_2022_KR = enum.auto()
    EUC_KR = enum.auto()
    ISO_2022_JP = enum.auto()
    ISO_2022_JP_2 = enum.auto()
    ISO_8859_6_E = enum.auto()
    ISO_8859_6_I = enum.auto()
    ISO_8859_8_E = enum.auto()
    ISO_8859_8_I = enum.auto()
    GB2312 = enum.auto()
    BIG5 = enum.auto()
    KOI8_R = enum.auto()

    @property
    def canonical_name(self) -> str:
        """The registry name of this charset, e.g. ``"US-ASCII"``."""
        # Deferred: the registry module imports this one.
        from mimecharset.registry import format_charset

        return format_charset(self)

    def __str__(self) -> str:
        return self.canonical_name

    def __lt__(self, other: object) -> bool:
        from mimecharset.charset import charset_sort_key, is_charset

        if not is_charset(other):
            return NotImplemented
        return charset_sort_key(self) < charset_sort_key(other)
