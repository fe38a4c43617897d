# tests/test_charset.py
from __future__ import annotations

import dataclasses
import types

import pytest

from mimecharset.charset import Charset, Unregistered, charset_sort_key, is_charset
from mimecharset.enums import RegisteredCharset


def test_shapes_are_unrelated_types():
    assert not issubclass(Unregistered, RegisteredCharset)
    assert not isinstance(RegisteredCharset.US_ASCII, Unregistered)


def test_str_of_unregistered_is_verbatim():
    assert str(Unregistered("ABCD")) == "ABCD"


def test_unregistered_is_frozen():
    charset = Unregistered("x-custom")
    with pytest.raises(dataclasses.FrozenInstanceError):
        charset.name = "other"  # type: ignore[misc]


def test_unregistered_requires_str():
    with pytest.raises(TypeError, match="must be str"):
        Unregistered(42)  # type: ignore[arg-type]


def test_unregistered_equality_ignores_ascii_case():
    assert Unregistered("foobar") == Unregistered("FOOBAR")
    assert Unregistered("foobar") != Unregistered("foobar2")


def test_unregistered_equality_does_not_fold_non_ascii():
    assert Unregistered("é") != Unregistered("É")
    assert Unregistered("é") == Unregistered("é")


def test_unregistered_never_equals_registered():
    assert Unregistered("US-ASCII") != RegisteredCharset.US_ASCII
    assert RegisteredCharset.US_ASCII != Unregistered("US-ASCII")


def test_unregistered_not_equal_to_plain_str():
    assert Unregistered("abcd") != "abcd"


def test_hash_consistent_with_equality():
    assert hash(Unregistered("abcd")) == hash(Unregistered("ABCD"))
    keys = {Unregistered("abcd"): 1, RegisteredCharset.US_ASCII: 2}
    assert keys[Unregistered("ABCD")] == 1
    assert Unregistered("US-ASCII") not in keys


def test_unregistered_sorts_after_registered():
    assert RegisteredCharset.KOI8_R < Unregistered("A")
    assert Unregistered("A") > RegisteredCharset.KOI8_R
    assert Unregistered("A") >= RegisteredCharset.US_ASCII
    assert RegisteredCharset.US_ASCII <= Unregistered("A")


def test_unregistered_order_ignores_ascii_case():
    assert Unregistered("abc") < Unregistered("ABD")
    assert Unregistered("abc") <= Unregistered("ABC")
    assert not Unregistered("abc") < Unregistered("ABC")
    assert not Unregistered("ABC") < Unregistered("abc")


def test_sorted_mixed_collection():
    values = [
        Unregistered("x-b"),
        RegisteredCharset.KOI8_R,
        Unregistered("X-A"),
        RegisteredCharset.US_ASCII,
    ]
    assert sorted(values) == [
        RegisteredCharset.US_ASCII,
        RegisteredCharset.KOI8_R,
        Unregistered("X-A"),
        Unregistered("x-b"),
    ]


def test_ordering_against_other_types_raises():
    with pytest.raises(TypeError):
        RegisteredCharset.US_ASCII < "US-ASCII"  # noqa: B015
    with pytest.raises(TypeError):
        Unregistered("a") < 1  # noqa: B015


def test_charset_sort_key():
    assert charset_sort_key(RegisteredCharset.US_ASCII) == (0, 1, "")
    assert charset_sort_key(Unregistered("X-Custom")) == (1, 0, "x-custom")
    with pytest.raises(TypeError, match="expected a charset"):
        charset_sort_key("US-ASCII")  # type: ignore[arg-type]


def test_charset_alias_is_pep604_union():
    assert isinstance(Charset, types.UnionType)
    assert Charset.__args__ == (RegisteredCharset, Unregistered)


def test_is_charset():
    assert is_charset(RegisteredCharset.EUC_KR)
    assert is_charset(Unregistered("x"))
    assert not is_charset("EUC-KR")


def test_unregistered_ties_are_neither_greater_nor_less():
    a, b = Unregistered("x-Tie"), Unregistered("X-TIE")
    assert a <= b and a >= b
    assert not a > b and not b > a


def test_derived_comparisons_against_other_types_raise():
    with pytest.raises(TypeError):
        Unregistered("a") <= "a"  # noqa: B015
    with pytest.raises(TypeError):
        Unregistered("a") >= 1  # noqa: B015
