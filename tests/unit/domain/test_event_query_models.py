"""Unit tests for notification event query value objects."""

from __future__ import annotations

import pytest

from src.domain.models.event_query import (
    DEFAULT_MAX_ITEMS,
    ComposedFilter,
    KeywordMatcher,
    MatcherGroup,
    Pagination,
    QueryDescriptor,
    RangeMatcher,
    SortOrder,
    SortSpec,
    TextMatcher,
    build_query_descriptor,
)
from tests.helpers import make_event_e1, make_event_e2, make_event_e3


class TestSortOrder:
    """Tests for SortOrder token parsing."""

    @pytest.mark.parametrize(
        ("token", "expected"),
        [("asc", SortOrder.ASC), ("desc", SortOrder.DESC), ("DESC", SortOrder.DESC)],
    )
    def test_from_token(self, token: str, expected: SortOrder) -> None:
        assert SortOrder.from_token(token) is expected

    def test_unknown_token_raises(self) -> None:
        with pytest.raises(ValueError, match="bogus"):
            SortOrder.from_token("bogus")


class TestPagination:
    def test_defaults(self) -> None:
        pagination = Pagination()
        assert pagination.from_index == 0
        assert pagination.max_items == DEFAULT_MAX_ITEMS == 1000

    def test_negative_values_are_kept(self) -> None:
        pagination = Pagination(from_index=-3, max_items=-1)
        assert (pagination.from_index, pagination.max_items) == (-3, -1)


class TestKeywordMatcher:
    def test_exact_membership(self) -> None:
        matcher = KeywordMatcher("event_source.severity", frozenset({"high", "info"}))
        assert matcher.matches(make_event_e1())
        assert matcher.matches(make_event_e2())
        assert not matcher.matches(make_event_e3())

    def test_case_sensitive(self) -> None:
        matcher = KeywordMatcher("event_source.severity", frozenset({"HIGH"}))
        assert not matcher.matches(make_event_e1())

    def test_no_partial_match(self) -> None:
        matcher = KeywordMatcher("status_list.config_id", frozenset({"cfg"}))
        assert not matcher.matches(make_event_e1())

    def test_multi_valued_field_matches_any_entry(self) -> None:
        matcher = KeywordMatcher("status_list.config_type", frozenset({"chime"}))
        assert matcher.matches(make_event_e3())

    def test_empty_set_matches_nothing(self) -> None:
        matcher = KeywordMatcher("event_source.severity", frozenset())
        assert not matcher.matches(make_event_e1())


class TestTextMatcher:
    def test_substring_case_insensitive(self) -> None:
        matcher = TextMatcher("event_source.title", ("cpu",))
        assert matcher.matches(make_event_e1())
        assert not matcher.matches(make_event_e2())

    def test_contains_any_term(self) -> None:
        matcher = TextMatcher("event_source.title", ("disk", "webhook"))
        assert not matcher.matches(make_event_e1())
        assert matcher.matches(make_event_e2())
        assert matcher.matches(make_event_e3())

    def test_nested_recipient_field(self) -> None:
        matcher = TextMatcher("status_list.email_recipient_status.recipient", ("bob@",))
        assert matcher.matches(make_event_e2())
        assert not matcher.matches(make_event_e1())

    def test_no_terms_matches_nothing(self) -> None:
        assert not TextMatcher("event_source.title", ()).matches(make_event_e1())


class TestRangeMatcher:
    def test_closed_interval_is_inclusive(self) -> None:
        matcher = RangeMatcher("created_time_ms", lower=1_000, upper=2_000)
        assert matcher.matches(make_event_e1())
        assert matcher.matches(make_event_e2())
        assert not matcher.matches(make_event_e3())

    def test_open_lower_bound(self) -> None:
        matcher = RangeMatcher("last_updated_time_ms", upper=3_500)
        assert matcher.matches(make_event_e2())
        assert not matcher.matches(make_event_e1())

    def test_open_upper_bound(self) -> None:
        matcher = RangeMatcher("last_updated_time_ms", lower=4_500)
        assert matcher.matches(make_event_e1())
        assert not matcher.matches(make_event_e3())

    def test_unbounded_matches_everything(self) -> None:
        matcher = RangeMatcher("created_time_ms")
        assert all(
            matcher.matches(event)
            for event in (make_event_e1(), make_event_e2(), make_event_e3())
        )

    def test_invalid_matches_nothing(self) -> None:
        matcher = RangeMatcher("created_time_ms", valid=False)
        assert not matcher.matches(make_event_e1())


class TestMatcherGroup:
    def test_or_over_members(self) -> None:
        group = MatcherGroup(
            "query",
            (
                KeywordMatcher("event_source.severity", frozenset({"critical"})),
                TextMatcher("event_source.title", ("disk",)),
            ),
        )
        assert not group.matches(make_event_e1())
        assert group.matches(make_event_e2())
        assert group.matches(make_event_e3())
        assert group.member_fields == ("event_source.severity", "event_source.title")

    def test_empty_group_matches_nothing(self) -> None:
        assert not MatcherGroup("query", ()).matches(make_event_e1())


class TestComposedFilter:
    def test_empty(self) -> None:
        composed = ComposedFilter.empty()
        assert composed.is_empty
        assert len(composed) == 0
        assert composed.matches(make_event_e1())

    def test_entries_combine_with_and(self) -> None:
        composed = ComposedFilter(
            {
                "event_source.severity": KeywordMatcher(
                    "event_source.severity", frozenset({"high", "info"})
                ),
                "created_time_ms": RangeMatcher("created_time_ms", lower=1_500),
            }
        )
        assert not composed.matches(make_event_e1())
        assert composed.matches(make_event_e2())
        assert composed.field_names() == frozenset(
            {"event_source.severity", "created_time_ms"}
        )

    def test_is_read_only(self) -> None:
        source = {"created_time_ms": RangeMatcher("created_time_ms")}
        composed = ComposedFilter(source)
        source["other"] = RangeMatcher("other")
        assert "other" not in composed
        with pytest.raises(TypeError):
            composed.matchers["x"] = RangeMatcher("x")  # type: ignore[index]


class TestBuildQueryDescriptor:
    """Tests for identifier precedence in descriptor assembly."""

    @pytest.fixture
    def composed(self) -> ComposedFilter:
        return ComposedFilter(
            {"event_source.title": TextMatcher("event_source.title", ("ignored",))}
        )

    def test_identifiers_discard_filters(self, composed: ComposedFilter) -> None:
        descriptor = build_query_descriptor(
            frozenset({"a", "b"}), Pagination(), None, composed
        )
        assert descriptor.identifier_set == frozenset({"a", "b"})
        assert descriptor.composed_filter.is_empty
        assert descriptor.is_identifier_lookup

    def test_single_identifier_also_discards_filters(
        self, composed: ComposedFilter
    ) -> None:
        descriptor = build_query_descriptor(
            frozenset({"e1"}), Pagination(), None, composed
        )
        assert descriptor.composed_filter.is_empty

    def test_no_identifiers_keeps_filters(self, composed: ComposedFilter) -> None:
        sort_spec = SortSpec("created_time_ms", SortOrder.DESC)
        descriptor = build_query_descriptor(
            frozenset(), Pagination(5, 10), sort_spec, composed
        )
        assert descriptor.composed_filter is composed
        assert descriptor.pagination == Pagination(5, 10)
        assert descriptor.sort_spec == sort_spec
        assert not descriptor.is_identifier_lookup

    def test_default_descriptor(self) -> None:
        descriptor = QueryDescriptor()
        assert descriptor.identifier_set == frozenset()
        assert descriptor.pagination == Pagination()
        assert descriptor.sort_spec is None
        assert descriptor.composed_filter.is_empty
