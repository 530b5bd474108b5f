"""Tests for the JSON list column codec."""

from __future__ import annotations

from portfolio_site.data.types import decode_string_list, encode_string_list


def test_encode_preserves_order_and_unicode() -> None:
    raw = encode_string_list(["Built APIs", "Shipped “fast”"])

    assert raw.startswith("[")
    assert decode_string_list(raw) == ["Built APIs", "Shipped “fast”"]


def test_encode_none_is_empty_array() -> None:
    assert encode_string_list(None) == "[]"


def test_decode_tolerates_missing_and_malformed_values() -> None:
    assert decode_string_list(None) == []
    assert decode_string_list("") == []
    assert decode_string_list("not json") == []
    assert decode_string_list('{"a": 1}') == []


def test_decode_stringifies_items() -> None:
    assert decode_string_list("[1, \"two\"]") == ["1", "two"]
