"""Unit tests for the notification event field registry."""

from __future__ import annotations

import pytest

from src.domain.models.field_registry import (
    CREATED_TIME_TAG,
    EVENT_FIELD_REGISTRY,
    LAST_UPDATED_TIME_TAG,
    QUERY_TAG,
    TEXT_QUERY_TAG,
    FieldDescriptor,
    FieldKind,
    FieldRegistry,
)

KEYWORD_FIELDS = {
    "event_source.reference_id",
    "event_source.severity",
    "status_list.config_id",
    "status_list.config_type",
    "status_list.delivery_status.status_code",
    "status_list.email_recipient_status.delivery_status.status_code",
}

TEXT_FIELDS = {
    "event_source.tags",
    "event_source.title",
    "status_list.config_name",
    "status_list.delivery_status.status_text",
    "status_list.email_recipient_status.recipient",
    "status_list.email_recipient_status.delivery_status.status_text",
}

RANGE_FIELDS = {"last_updated_time_ms", "created_time_ms"}


class TestEventFieldRegistry:
    """Tests for the process-wide registry contents."""

    @pytest.mark.parametrize("name", sorted(KEYWORD_FIELDS))
    def test_keyword_fields(self, name: str) -> None:
        assert EVENT_FIELD_REGISTRY.kind_of(name) is FieldKind.KEYWORD

    @pytest.mark.parametrize("name", sorted(TEXT_FIELDS))
    def test_text_fields(self, name: str) -> None:
        assert EVENT_FIELD_REGISTRY.kind_of(name) is FieldKind.TEXT

    @pytest.mark.parametrize("name", sorted(RANGE_FIELDS))
    def test_range_fields(self, name: str) -> None:
        assert EVENT_FIELD_REGISTRY.kind_of(name) is FieldKind.RANGE

    def test_registry_has_exactly_the_documented_fields(self) -> None:
        names = {descriptor.name for descriptor in EVENT_FIELD_REGISTRY}
        assert names == KEYWORD_FIELDS | TEXT_FIELDS | RANGE_FIELDS
        assert len(EVENT_FIELD_REGISTRY) == 14

    def test_unknown_field_has_no_kind(self) -> None:
        assert EVENT_FIELD_REGISTRY.kind_of("event_source.unknown") is None

    def test_macros_are_not_fields(self) -> None:
        assert QUERY_TAG not in EVENT_FIELD_REGISTRY
        assert EVENT_FIELD_REGISTRY.kind_of(TEXT_QUERY_TAG) is None

    def test_query_group_is_keyword_and_text(self) -> None:
        names = {d.name for d in EVENT_FIELD_REGISTRY.query_fields()}
        assert names == KEYWORD_FIELDS | TEXT_FIELDS

    def test_text_query_group_is_text_only(self) -> None:
        names = {d.name for d in EVENT_FIELD_REGISTRY.text_query_fields()}
        assert names == TEXT_FIELDS

    def test_macro_fields_dispatch(self) -> None:
        assert EVENT_FIELD_REGISTRY.macro_fields(QUERY_TAG) == (
            EVENT_FIELD_REGISTRY.query_fields()
        )
        assert EVENT_FIELD_REGISTRY.macro_fields(TEXT_QUERY_TAG) == (
            EVENT_FIELD_REGISTRY.text_query_fields()
        )
        with pytest.raises(KeyError):
            EVENT_FIELD_REGISTRY.macro_fields("everything")

    def test_filter_params_include_macros(self) -> None:
        params = EVENT_FIELD_REGISTRY.filter_params()
        assert {QUERY_TAG, TEXT_QUERY_TAG} <= params
        assert LAST_UPDATED_TIME_TAG in params
        assert "sort_field" not in params
        assert EVENT_FIELD_REGISTRY.is_filter_param(QUERY_TAG)
        assert not EVENT_FIELD_REGISTRY.is_filter_param("from_index")

    def test_fields_of_kind_keeps_declaration_order(self) -> None:
        ranges = EVENT_FIELD_REGISTRY.fields_of_kind(FieldKind.RANGE)
        assert [d.name for d in ranges] == [LAST_UPDATED_TIME_TAG, CREATED_TIME_TAG]


class TestFieldRegistryConstruction:
    """Tests for building custom registries."""

    def test_duplicate_field_rejected(self) -> None:
        with pytest.raises(ValueError, match="duplicate"):
            FieldRegistry(
                [
                    FieldDescriptor("a", FieldKind.TEXT),
                    FieldDescriptor("a", FieldKind.KEYWORD),
                ]
            )

    def test_macro_name_reserved(self) -> None:
        with pytest.raises(ValueError, match="reserved"):
            FieldRegistry([FieldDescriptor(QUERY_TAG, FieldKind.TEXT)])

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValueError):
            FieldDescriptor("", FieldKind.TEXT)

    def test_descriptor_group_membership(self) -> None:
        keyword = FieldDescriptor("k", FieldKind.KEYWORD)
        text = FieldDescriptor("t", FieldKind.TEXT)
        ranged = FieldDescriptor("r", FieldKind.RANGE)
        assert keyword.in_query_group and not keyword.in_text_query_group
        assert text.in_query_group and text.in_text_query_group
        assert not ranged.in_query_group and not ranged.in_text_query_group
