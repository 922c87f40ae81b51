"""Tests for the query string decoder."""

from __future__ import annotations

import pytest

from uriparser import decode_query, encode_query


class TestDecodeQuery:
    """Key/value aggregation and array markers."""

    def test_single_pair_is_scalar(self) -> None:
        assert decode_query("x=1") == ({"x": "1"}, {})

    def test_repeated_key_becomes_list(self) -> None:
        query, suffix = decode_query("a=1&a=2&a=3")
        assert query == {"a": ["1", "2", "3"]}
        assert suffix == {}

    def test_literal_brackets_single_value_is_list(self) -> None:
        query, suffix = decode_query("a[]=1")
        assert query == {"a": ["1"]}
        assert suffix == {"a": "[]"}

    def test_encoded_brackets(self) -> None:
        query, suffix = decode_query("a%5B%5D=1&a%5B%5D=2")
        assert query == {"a": ["1", "2"]}
        assert suffix == {"a": "%5B%5D"}

    def test_lowercase_encoded_brackets_are_not_a_marker(self) -> None:
        query, suffix = decode_query("a%5b%5d=1")
        assert query == {"a%5b%5d": "1"}
        assert suffix == {}

    def test_marker_alone_is_a_plain_key(self) -> None:
        query, suffix = decode_query("[]=1&%5B%5D=2")
        assert query == {"[]": "1", "%5B%5D": "2"}
        assert suffix == {}

    def test_bracketed_and_plain_occurrences_merge(self) -> None:
        query, suffix = decode_query("a=1&a[]=2")
        assert query == {"a": ["1", "2"]}
        assert suffix == {"a": "[]"}

    def test_last_marker_form_wins(self) -> None:
        query, suffix = decode_query("a[]=1&a%5B%5D=2")
        assert query == {"a": ["1", "2"]}
        assert suffix == {"a": "%5B%5D"}

    def test_empty_key_token_dropped(self) -> None:
        assert decode_query("=x&b=y") == ({"b": "y"}, {})

    def test_only_empty_keys_is_empty_result(self) -> None:
        assert decode_query("=x&=y") == ({}, {})

    def test_key_without_equals(self) -> None:
        assert decode_query("k") == ({"k": ""}, {})

    def test_value_keeps_later_equals(self) -> None:
        assert decode_query("a=b=c") == ({"a": "b=c"}, {})

    def test_empty_value(self) -> None:
        assert decode_query("a=&b") == ({"a": "", "b": ""}, {})

    @pytest.mark.parametrize("qs", ["a=1&", "a=1&&", "&a=1", "&&a=1&&"])
    def test_stray_separators_add_nothing(self, qs: str) -> None:
        assert decode_query(qs) == ({"a": "1"}, {})

    def test_empty_string(self) -> None:
        assert decode_query("") == ({}, {})

    def test_first_seen_order(self) -> None:
        query, _ = decode_query("b=1&a=2&b=3&c=4")
        assert list(query) == ["b", "a", "c"]
        assert query["b"] == ["1", "3"]

    def test_nothing_is_percent_decoded(self) -> None:
        query, _ = decode_query("q=a%20b+c")
        assert query == {"q": "a%20b+c"}

    def test_each_call_returns_fresh_maps(self) -> None:
        first, _ = decode_query("a=1&a=2")
        first["a"].append("3")
        second, _ = decode_query("a=1&a=2")
        assert second == {"a": ["1", "2"]}


class TestEncodeQuery:
    """Canonical re-encoding."""

    def test_expands_lists_and_markers(self) -> None:
        query = {"a": ["1", "2"], "b": "x"}
        assert encode_query(query, {"a": "[]"}) == "a[]=1&a[]=2&b=x"

    def test_without_suffix(self) -> None:
        assert encode_query({"a": ["1", "2"]}) == "a=1&a=2"

    @pytest.mark.parametrize(
        "qs",
        [
            "a=1&a=2&a=3",
            "a[]=1",
            "a%5B%5D=1&a%5B%5D=2&b=c",
            "=x&b=y&k",
            "z=1&y[]=2&z=3&y%5B%5D=4",
        ],
    )
    def test_decode_encode_decode_is_stable(self, qs: str) -> None:
        query, suffix = decode_query(qs)
        assert decode_query(encode_query(query, suffix)) == (query, suffix)


def test_dropped_empty_key_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level("DEBUG", logger="uriparser.query"):
        assert decode_query("=x&b=y") == ({"b": "y"}, {})
    assert "dropping query field without a key: '=x'" in caplog.text
