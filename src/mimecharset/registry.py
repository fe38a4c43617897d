"""Registry of well-known charset names and the parse/format operations.

The table is built once at import and never mutated, so every function in
this module is safe to call from any thread.
"""

from __future__ import annotations

import logging
from types import MappingProxyType

from mimecharset._utils import ascii_lower
from mimecharset.charset import Charset, Unregistered
from mimecharset.enums import RegisteredCharset

logger = logging.getLogger(__name__)

#: One ``(member, canonical name)`` pair per registered charset, in
#: declaration order.  Names follow the IANA Character Sets registry.
REGISTRY: tuple[tuple[RegisteredCharset, str], ...] = (
    (RegisteredCharset.US_ASCII, "US-ASCII"),
    (RegisteredCharset.ISO_8859_1, "ISO-8859-1"),
    (RegisteredCharset.ISO_8859_2, "ISO-8859-2"),
    (RegisteredCharset.ISO_8859_3, "ISO-8859-3"),
    (RegisteredCharset.ISO_8859_4, "ISO-8859-4"),
    (RegisteredCharset.ISO_8859_5, "ISO-8859-5"),
    (RegisteredCharset.ISO_8859_6, "ISO-8859-6"),
    (RegisteredCharset.ISO_8859_7, "ISO-8859-7"),
    (RegisteredCharset.ISO_8859_8, "ISO-8859-8"),
    (RegisteredCharset.ISO_8859_9, "ISO-8859-9"),
    (RegisteredCharset.ISO_8859_10, "ISO-8859-10"),
    (RegisteredCharset.SHIFT_JIS, "Shift-JIS"),
    (RegisteredCharset.EUC_JP, "EUC-JP"),
    (RegisteredCharset.ISO_2022_KR, "ISO-2022-KR"),
    (RegisteredCharset.EUC_KR, "EUC-KR"),
    (RegisteredCharset.ISO_2022_JP, "ISO-2022-JP"),
    (RegisteredCharset.ISO_2022_JP_2, "ISO-2022-JP-2"),
    (RegisteredCharset.ISO_8859_6_E, "ISO-8859-6-E"),
    (RegisteredCharset.ISO_8859_6_I, "ISO-8859-6-I"),
    (RegisteredCharset.ISO_8859_8_E, "ISO-8859-8-E"),
    (RegisteredCharset.ISO_8859_8_I, "ISO-8859-8-I"),
    (RegisteredCharset.GB2312, "GB2312"),
    (RegisteredCharset.BIG5, "Big5"),
    (RegisteredCharset.KOI8_R, "KOI8-R"),
)

# Pre-built lookups.  Reversed so the first table entry wins on a duplicate.
_CANONICAL_NAMES: MappingProxyType[RegisteredCharset, str] = MappingProxyType(
    dict(REGISTRY)
)
_BY_FOLDED_NAME: MappingProxyType[str, RegisteredCharset] = MappingProxyType(
    {ascii_lower(name): member for member, name in reversed(REGISTRY)}
)


def parse(value: str) -> Charset:
    """Parse a charset name.

    Registered names match ignoring ASCII case and yield the registry
    member.  Anything else yields :class:`~mimecharset.Unregistered` holding
    *value* exactly as given.

    :param value: The charset name, e.g. from a ``charset=`` parameter.
    :returns: A :class:`~mimecharset.RegisteredCharset` member or an
        :class:`~mimecharset.Unregistered` value.
    :raises InvalidCharsetError: Reserved for names that do not denote a
        usable charset.  No name is rejected at present.
    """
    if not isinstance(value, str):
        msg = f"charset name must be str, not {type(value).__name__}"
        raise TypeError(msg)
    member = _BY_FOLDED_NAME.get(ascii_lower(value))
    if member is not None:
        return member
    logger.debug("%r is not a registered charset name", value)
    return Unregistered(value)


def format_charset(charset: Charset) -> str:
    """Return the string form of *charset*.

    Registered members render as their canonical registry name; unregistered
    values render as the name they carry, unchanged.
    """
    if isinstance(charset, Unregistered):
        return charset.name
    if not isinstance(charset, RegisteredCharset):
        msg = f"expected a charset, not {type(charset).__name__}"
        raise TypeError(msg)
    return _CANONICAL_NAMES[charset]


def equals(a: Charset, b: Charset) -> bool:
    """Return whether *a* and *b* denote the same charset.

    Equivalent to ``a == b``.  Values are not re-parsed, so
    ``Unregistered("US-ASCII")`` does not equal ``RegisteredCharset.US_ASCII``.
    """
    return a == b


def is_registered(charset: Charset) -> bool:
    """Return whether *charset* is a member of the registry table."""
    return isinstance(charset, RegisteredCharset)
