"""Field registry for notification event filtering.

This module is the single source of truth for which notification event
fields can be addressed from request query parameters, and how each one
is matched:

- keyword: exact match against a set of comma separated tokens
- text: case-insensitive "contains any of" over comma separated terms
- range: closed numeric interval written as ``from..to``

It also declares membership of the two convenience searches:

- ``query`` spans every keyword and text field
- ``text_query`` spans only the text fields

Usage:
    from src.domain.models.field_registry import EVENT_FIELD_REGISTRY

    kind = EVENT_FIELD_REGISTRY.kind_of("event_source.severity")
    if kind is FieldKind.KEYWORD:
        ...
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Final


class FieldKind(str, Enum):
    """How a registered field is matched against a filter value."""

    KEYWORD = "keyword"
    """Exact membership in a set of tokens."""

    TEXT = "text"
    """Case-insensitive substring match against any term."""

    RANGE = "range"
    """Closed numeric interval with optionally open bounds."""


# Range fields
LAST_UPDATED_TIME_TAG: Final[str] = "last_updated_time_ms"
CREATED_TIME_TAG: Final[str] = "created_time_ms"

# Event source fields
EVENT_SOURCE_REFERENCE_ID_TAG: Final[str] = "event_source.reference_id"
EVENT_SOURCE_SEVERITY_TAG: Final[str] = "event_source.severity"
EVENT_SOURCE_TAGS_TAG: Final[str] = "event_source.tags"
EVENT_SOURCE_TITLE_TAG: Final[str] = "event_source.title"

# Per channel status fields
STATUS_LIST_CONFIG_ID_TAG: Final[str] = "status_list.config_id"
STATUS_LIST_CONFIG_TYPE_TAG: Final[str] = "status_list.config_type"
STATUS_LIST_CONFIG_NAME_TAG: Final[str] = "status_list.config_name"
STATUS_LIST_STATUS_CODE_TAG: Final[str] = "status_list.delivery_status.status_code"
STATUS_LIST_STATUS_TEXT_TAG: Final[str] = "status_list.delivery_status.status_text"
STATUS_LIST_RECIPIENT_TAG: Final[str] = "status_list.email_recipient_status.recipient"
STATUS_LIST_RECIPIENT_STATUS_CODE_TAG: Final[str] = (
    "status_list.email_recipient_status.delivery_status.status_code"
)
STATUS_LIST_RECIPIENT_STATUS_TEXT_TAG: Final[str] = (
    "status_list.email_recipient_status.delivery_status.status_text"
)

# Macro pseudo-fields
QUERY_TAG: Final[str] = "query"
TEXT_QUERY_TAG: Final[str] = "text_query"
MACRO_TAGS: Final[frozenset[str]] = frozenset({QUERY_TAG, TEXT_QUERY_TAG})


@dataclass(frozen=True)
class FieldDescriptor:
    """An addressable field and its filter kind.

    Attributes:
        name: Dotted field name as used in query parameters.
        kind: How filter values for this field are matched.
    """

    name: str
    kind: FieldKind

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("field name is required")

    @property
    def in_query_group(self) -> bool:
        """Whether the ``query`` macro searches this field."""
        return self.kind in (FieldKind.KEYWORD, FieldKind.TEXT)

    @property
    def in_text_query_group(self) -> bool:
        """Whether the ``text_query`` macro searches this field."""
        return self.kind is FieldKind.TEXT


class FieldRegistry:
    """Immutable catalog of filterable notification event fields.

    Built once at import time and shared read-only across requests.
    Field declaration order is preserved so macro expansion is
    deterministic.
    """

    def __init__(self, descriptors: Iterable[FieldDescriptor]) -> None:
        fields: dict[str, FieldDescriptor] = {}
        for descriptor in descriptors:
            if descriptor.name in MACRO_TAGS:
                raise ValueError(f"{descriptor.name} is reserved for macro searches")
            if descriptor.name in fields:
                raise ValueError(f"duplicate field {descriptor.name}")
            fields[descriptor.name] = descriptor
        self._fields = MappingProxyType(fields)

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def __iter__(self) -> Iterator[FieldDescriptor]:
        return iter(self._fields.values())

    def __len__(self) -> int:
        return len(self._fields)

    def kind_of(self, name: str) -> FieldKind | None:
        """Get the filter kind for a field name.

        Args:
            name: Dotted field name.

        Returns:
            The field's kind, or None if the field is not registered.
        """
        descriptor = self._fields.get(name)
        return descriptor.kind if descriptor is not None else None

    def fields_of_kind(self, kind: FieldKind) -> tuple[FieldDescriptor, ...]:
        """Get all fields of a given kind in declaration order."""
        return tuple(d for d in self._fields.values() if d.kind is kind)

    def query_fields(self) -> tuple[FieldDescriptor, ...]:
        """Fields searched by the ``query`` macro (keyword and text)."""
        return tuple(d for d in self._fields.values() if d.in_query_group)

    def text_query_fields(self) -> tuple[FieldDescriptor, ...]:
        """Fields searched by the ``text_query`` macro (text only)."""
        return tuple(d for d in self._fields.values() if d.in_text_query_group)

    def macro_fields(self, macro: str) -> tuple[FieldDescriptor, ...]:
        """Get the member fields of a macro pseudo-field.

        Raises:
            KeyError: If macro is not a known macro key.
        """
        if macro == QUERY_TAG:
            return self.query_fields()
        if macro == TEXT_QUERY_TAG:
            return self.text_query_fields()
        raise KeyError(macro)

    def is_filter_param(self, name: str) -> bool:
        """Whether a query parameter key addresses a filter."""
        return name in self._fields or name in MACRO_TAGS

    def filter_params(self) -> frozenset[str]:
        """All query parameter keys that address a filter."""
        return frozenset(self._fields) | MACRO_TAGS


EVENT_FIELD_REGISTRY: Final[FieldRegistry] = FieldRegistry(
    (
        FieldDescriptor(EVENT_SOURCE_REFERENCE_ID_TAG, FieldKind.KEYWORD),
        FieldDescriptor(EVENT_SOURCE_SEVERITY_TAG, FieldKind.KEYWORD),
        FieldDescriptor(EVENT_SOURCE_TAGS_TAG, FieldKind.TEXT),
        FieldDescriptor(EVENT_SOURCE_TITLE_TAG, FieldKind.TEXT),
        FieldDescriptor(STATUS_LIST_CONFIG_ID_TAG, FieldKind.KEYWORD),
        FieldDescriptor(STATUS_LIST_CONFIG_TYPE_TAG, FieldKind.KEYWORD),
        FieldDescriptor(STATUS_LIST_CONFIG_NAME_TAG, FieldKind.TEXT),
        FieldDescriptor(STATUS_LIST_STATUS_CODE_TAG, FieldKind.KEYWORD),
        FieldDescriptor(STATUS_LIST_STATUS_TEXT_TAG, FieldKind.TEXT),
        FieldDescriptor(STATUS_LIST_RECIPIENT_TAG, FieldKind.TEXT),
        FieldDescriptor(STATUS_LIST_RECIPIENT_STATUS_CODE_TAG, FieldKind.KEYWORD),
        FieldDescriptor(STATUS_LIST_RECIPIENT_STATUS_TEXT_TAG, FieldKind.TEXT),
        FieldDescriptor(LAST_UPDATED_TIME_TAG, FieldKind.RANGE),
        FieldDescriptor(CREATED_TIME_TAG, FieldKind.RANGE),
    )
)
