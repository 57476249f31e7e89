"""Unit tests for notification event query parameter parsing."""

from __future__ import annotations

import pytest

from src.application.services.event_query_params import (
    extract_raw_filters,
    first_value_params,
    parse_identifier_set,
    parse_pagination,
    parse_query_params,
    parse_sort,
    split_list_value,
)
from src.domain.errors.event_query import InvalidArgumentError
from src.domain.models.event_query import DEFAULT_MAX_ITEMS, Pagination, SortOrder, SortSpec


class TestSplitListValue:
    def test_splits_and_trims(self) -> None:
        assert split_list_value("a, b ,c") == ["a", "b", "c"]

    def test_drops_empty_tokens(self) -> None:
        assert split_list_value(",a,,") == ["a"]
        assert split_list_value("") == []


class TestFirstValueParams:
    def test_first_occurrence_wins(self) -> None:
        params = first_value_params(
            [("event_source.severity", "high"), ("event_source.severity", "info")]
        )
        assert params == {"event_source.severity": "high"}

    def test_distinct_keys_kept(self) -> None:
        assert first_value_params([("a", "1"), ("b", "2")]) == {"a": "1", "b": "2"}


class TestParseIdentifierSet:
    def test_empty_when_absent(self) -> None:
        assert parse_identifier_set({}) == frozenset()

    def test_event_id_only(self) -> None:
        assert parse_identifier_set({"event_id": "e1"}) == frozenset({"e1"})

    def test_event_id_list_only(self) -> None:
        assert parse_identifier_set({"event_id_list": "a,b,c"}) == frozenset({"a", "b", "c"})

    def test_union_removes_duplicates(self) -> None:
        identifiers = parse_identifier_set({"event_id": "a", "event_id_list": "a,b,b"})
        assert identifiers == frozenset({"a", "b"})

    def test_empty_values_ignored(self) -> None:
        assert parse_identifier_set({"event_id": "", "event_id_list": ","}) == frozenset()


class TestParsePagination:
    def test_defaults(self) -> None:
        assert parse_pagination({}) == Pagination(0, DEFAULT_MAX_ITEMS)

    def test_numeric_values(self) -> None:
        assert parse_pagination({"from_index": "5", "max_items": "10"}) == Pagination(5, 10)

    @pytest.mark.parametrize("bad", ["abc", "1.5", "", "ten"])
    def test_non_numeric_falls_back(self, bad: str) -> None:
        pagination = parse_pagination({"from_index": bad, "max_items": bad})
        assert pagination == Pagination(0, DEFAULT_MAX_ITEMS)

    def test_custom_default_max_items(self) -> None:
        assert parse_pagination({"max_items": "x"}, default_max_items=25).max_items == 25

    def test_negative_values_pass_through(self) -> None:
        pagination = parse_pagination({"from_index": "-5", "max_items": "-1"})
        assert pagination == Pagination(-5, -1)

    @pytest.mark.parametrize("loose", ["1_0", " 7 ", "7\n", "\u0663", "--1", "1e3"])
    def test_only_plain_ascii_integers_accepted(self, loose: str) -> None:
        pagination = parse_pagination({"from_index": loose, "max_items": loose})
        assert pagination == Pagination(0, DEFAULT_MAX_ITEMS)

    def test_explicit_plus_sign(self) -> None:
        assert parse_pagination({"from_index": "+3"}).from_index == 3


class TestParseSort:
    def test_absent_yields_none(self) -> None:
        assert parse_sort({}) is None

    @pytest.mark.parametrize(
        ("token", "expected"),
        [("asc", SortOrder.ASC), ("desc", SortOrder.DESC), ("Asc", SortOrder.ASC)],
    )
    def test_valid_order(self, token: str, expected: SortOrder) -> None:
        sort_spec = parse_sort({"sort_field": "created_time_ms", "sort_order": token})
        assert sort_spec == SortSpec("created_time_ms", expected)

    def test_order_without_field(self) -> None:
        assert parse_sort({"sort_order": "desc"}) == SortSpec(None, SortOrder.DESC)

    def test_field_without_order(self) -> None:
        assert parse_sort({"sort_field": "event_source.severity"}) == SortSpec(
            "event_source.severity", None
        )

    @pytest.mark.parametrize("bad", ["bogus", "ascending", "up"])
    def test_invalid_order_fails(self, bad: str) -> None:
        with pytest.raises(InvalidArgumentError, match="sort_order"):
            parse_sort({"sort_order": bad})

    def test_empty_order_treated_as_absent(self) -> None:
        assert parse_sort({"sort_order": ""}) is None


class TestExtractRawFilters:
    def test_keeps_only_registered_keys(self) -> None:
        raw = extract_raw_filters(
            {
                "event_source.severity": "high",
                "event_source.bogus": "x",
                "from_index": "3",
                "event_id": "e1",
                "query": "foo",
                "text_query": "bar",
                "created_time_ms": "1..2",
            }
        )
        assert raw == {
            "event_source.severity": "high",
            "query": "foo",
            "text_query": "bar",
            "created_time_ms": "1..2",
        }

    def test_empty(self) -> None:
        assert extract_raw_filters({}) == {}


class TestParseQueryParams:
    def test_combines_all_parsers(self) -> None:
        parsed = parse_query_params(
            {
                "event_source.severity": "high,info",
                "from_index": "5",
                "max_items": "10",
                "sort_order": "asc",
            }
        )
        assert parsed.identifier_set == frozenset()
        assert parsed.pagination == Pagination(5, 10)
        assert parsed.sort_spec == SortSpec(None, SortOrder.ASC)
        assert parsed.raw_filters == {"event_source.severity": "high,info"}

    def test_invalid_sort_propagates(self) -> None:
        with pytest.raises(InvalidArgumentError):
            parse_query_params({"sort_order": "sideways"})
