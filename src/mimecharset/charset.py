"""Charset value types.

A charset is either a member of :class:`~mimecharset.RegisteredCharset` or an
:class:`Unregistered` value wrapping an arbitrary name.  The two shapes are
independent types; the :data:`Charset` alias joins them.

Equality is structural on the shape:

- two registered members are equal only if they are the same member,
- two unregistered values are equal if their names match ignoring ASCII case,
- a registered member never equals an unregistered value, even one whose
  name spells the member's canonical name.

Ordering follows declaration order for registered members, with every
unregistered value sorted after them by ASCII-lowercased name.
"""

from __future__ import annotations

import dataclasses
import functools

from mimecharset._utils import ascii_lower, eq_ignore_ascii_case
from mimecharset.enums import RegisteredCharset

_REGISTERED_RANK = 0
_UNREGISTERED_RANK = 1


@functools.total_ordering
@dataclasses.dataclass(frozen=True, slots=True, eq=False)
class Unregistered:
    """A charset name that is not in the registry table.

    The name is kept exactly as given; only comparisons ignore ASCII case.
    """

    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            msg = f"charset name must be str, not {type(self.name).__name__}"
            raise TypeError(msg)

    def __str__(self) -> str:
        return self.name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Unregistered):
            return NotImplemented
        return eq_ignore_ascii_case(self.name, other.name)

    def __hash__(self) -> int:
        return hash(ascii_lower(self.name))

    def __lt__(self, other: object) -> bool:
        if not is_charset(other):
            return NotImplemented
        return charset_sort_key(self) < charset_sort_key(other)


Charset = RegisteredCharset | Unregistered


def is_charset(value: object) -> bool:
    """Return whether *value* is a registered member or an unregistered value."""
    return isinstance(value, (RegisteredCharset, Unregistered))


def charset_sort_key(charset: Charset) -> tuple[int, int, str]:
    """Return a key that orders charsets consistently with ``==``.

    :param charset: A registered member or an :class:`Unregistered` value.
    :returns: ``(rank, position, folded_name)``; registered members rank
        first by declaration position, unregistered values after them by
        ASCII-lowercased name.
    """
    if isinstance(charset, RegisteredCharset):
        return (_REGISTERED_RANK, charset.value, "")
    if isinstance(charset, Unregistered):
        return (_UNREGISTERED_RANK, 0, ascii_lower(charset.name))
    msg = f"expected a charset, not {type(charset).__name__}"
    raise TypeError(msg)
