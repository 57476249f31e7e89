"""Typed query description for notification event lookups.

These value objects are what a request turns into once its query
parameters have been parsed and its filters composed. The finished
QueryDescriptor is the only thing handed to the query execution engine.

Matcher semantics (a record matches when ANY of its resolved field
values matches):
- KeywordMatcher: exact, case-sensitive membership in a token set
- TextMatcher: case-insensitive substring match against any term
- RangeMatcher: closed interval, either bound may be open
- MatcherGroup: OR over its members (macro expansion)

Every matcher built from a value with no usable tokens matches nothing.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Final, Union

from src.domain.models.notification_event import NotificationEvent

# Default page size when max_items is missing or malformed
DEFAULT_MAX_ITEMS: Final[int] = 1000

IdentifierSet = frozenset[str]


@dataclass(frozen=True)
class Pagination:
    """Pagination window.

    Values are not validated here. Negative numbers pass through and
    the execution engine decides how to treat them.

    Attributes:
        from_index: Offset of the first record to return.
        max_items: Maximum number of records to return.
    """

    from_index: int = 0
    max_items: int = DEFAULT_MAX_ITEMS


class SortOrder(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def from_token(cls, token: str) -> SortOrder:
        """Parse a direction token, ignoring case.

        Raises:
            ValueError: If token is not "asc" or "desc".
        """
        try:
            return cls(token.lower())
        except ValueError:
            raise ValueError(f"Unknown sort order '{token}'") from None


@dataclass(frozen=True)
class SortSpec:
    """Requested ordering.

    Attributes:
        field: Field to sort by, or None for the engine's default field.
        order: Direction, or None for the engine's default direction.
    """

    field: str | None = None
    order: SortOrder | None = None


@dataclass(frozen=True)
class KeywordMatcher:
    """Exact match against a set of tokens."""

    field: str
    values: frozenset[str]

    def matches(self, event: NotificationEvent) -> bool:
        return any(str(value) in self.values for value in event.field_values(self.field))


@dataclass(frozen=True)
class TextMatcher:
    """Case-insensitive "contains any of" match against free-text terms."""

    field: str
    terms: tuple[str, ...]

    def matches(self, event: NotificationEvent) -> bool:
        lowered = [term.lower() for term in self.terms]
        for value in event.field_values(self.field):
            text = str(value).lower()
            if any(term in text for term in lowered):
                return True
        return False


@dataclass(frozen=True)
class RangeMatcher:
    """Closed numeric interval; None means unbounded on that side.

    Attributes:
        field: Numeric field name.
        lower: Inclusive lower bound, or None.
        upper: Inclusive upper bound, or None.
        valid: False when the source value was malformed; matches nothing.
    """

    field: str
    lower: int | None = None
    upper: int | None = None
    valid: bool = True

    def matches(self, event: NotificationEvent) -> bool:
        if not self.valid:
            return False
        for value in event.field_values(self.field):
            if not isinstance(value, (int, float)):
                continue
            if self.lower is not None and value < self.lower:
                continue
            if self.upper is not None and value > self.upper:
                continue
            return True
        return False


FieldMatcher = Union[KeywordMatcher, TextMatcher, RangeMatcher]


@dataclass(frozen=True)
class MatcherGroup:
    """OR-group produced by expanding a macro pseudo-field.

    Attributes:
        field: The macro name ("query" or "text_query").
        members: One field-scoped matcher per member field.
    """

    field: str
    members: tuple[FieldMatcher, ...]

    def matches(self, event: NotificationEvent) -> bool:
        return any(member.matches(event) for member in self.members)

    @property
    def member_fields(self) -> tuple[str, ...]:
        return tuple(member.field for member in self.members)


Matcher = Union[KeywordMatcher, TextMatcher, RangeMatcher, MatcherGroup]


@dataclass(frozen=True)
class ComposedFilter:
    """Field name to matcher mapping; all entries combine with AND."""

    matchers: Mapping[str, Matcher] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "matchers", MappingProxyType(dict(self.matchers)))

    @classmethod
    def empty(cls) -> ComposedFilter:
        return cls()

    def __len__(self) -> int:
        return len(self.matchers)

    def __iter__(self) -> Iterator[str]:
        return iter(self.matchers)

    def __contains__(self, name: object) -> bool:
        return name in self.matchers

    def __getitem__(self, name: str) -> Matcher:
        return self.matchers[name]

    @property
    def is_empty(self) -> bool:
        return not self.matchers

    def field_names(self) -> frozenset[str]:
        """Names addressed by this filter (macro keys included)."""
        return frozenset(self.matchers)

    def matches(self, event: NotificationEvent) -> bool:
        return all(matcher.matches(event) for matcher in self.matchers.values())


@dataclass(frozen=True)
class QueryDescriptor:
    """Immutable contract handed to the query execution engine.

    Attributes:
        identifier_set: Event ids to fetch; empty for a filtered listing.
        pagination: Offset and page size.
        sort_spec: Requested ordering, or None for engine default.
        composed_filter: Filters; always empty when identifier_set is not.
    """

    identifier_set: IdentifierSet = frozenset()
    pagination: Pagination = field(default_factory=Pagination)
    sort_spec: SortSpec | None = None
    composed_filter: ComposedFilter = field(default_factory=ComposedFilter)

    @property
    def is_identifier_lookup(self) -> bool:
        return bool(self.identifier_set)


def build_query_descriptor(
    identifier_set: IdentifierSet,
    pagination: Pagination,
    sort_spec: SortSpec | None,
    composed_filter: ComposedFilter,
) -> QueryDescriptor:
    """Assemble a QueryDescriptor.

    A non-empty identifier set takes precedence over filtering: the
    composed filter is discarded, not merged, even when only a single
    event_id was supplied.

    Args:
        identifier_set: Parsed identifiers.
        pagination: Parsed pagination window.
        sort_spec: Parsed sort, or None.
        composed_filter: Composed filters.

    Returns:
        The finished descriptor.
    """
    if identifier_set:
        composed_filter = ComposedFilter.empty()
    return QueryDescriptor(
        identifier_set=frozenset(identifier_set),
        pagination=pagination,
        sort_spec=sort_spec,
        composed_filter=composed_filter,
    )
