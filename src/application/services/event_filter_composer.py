"""Filter composition for notification event queries.

Converts the raw filter subset of a request into a ComposedFilter: one
typed matcher per addressed field, chosen by the field's registered kind.

Macro pseudo-fields expand at composition time:
- query: OR over every keyword and text field
- text_query: OR over every text field
Each member of the expansion applies the macro value with its own
field's matcher semantics.

Known limitation: a comma is always a token separator, so keyword and
text values containing a literal comma cannot be expressed.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Final

from src.application.services.event_query_params import split_list_value
from src.domain.models.event_query import (
    ComposedFilter,
    FieldMatcher,
    KeywordMatcher,
    Matcher,
    MatcherGroup,
    RangeMatcher,
    TextMatcher,
)
from src.domain.models.field_registry import (
    EVENT_FIELD_REGISTRY,
    MACRO_TAGS,
    FieldKind,
    FieldRegistry,
)

RANGE_SEPARATOR: Final[str] = ".."


def keyword_matcher(field: str, value: str) -> KeywordMatcher:
    """Exact match against the comma separated tokens of value."""
    return KeywordMatcher(field=field, values=frozenset(split_list_value(value)))


def text_matcher(field: str, value: str) -> TextMatcher:
    """Contains-any match against the comma separated terms of value."""
    return TextMatcher(field=field, terms=tuple(split_list_value(value)))


def _parse_bound(bound: str) -> int | None:
    bound = bound.strip()
    if not bound:
        return None
    return int(bound)


def range_matcher(field: str, value: str) -> RangeMatcher:
    """Closed interval written as ``from..to``; either side may be empty.

    A value without the separator, with more than one separator, or
    with a non-integer bound yields a matcher that matches nothing.
    """
    parts = value.split(RANGE_SEPARATOR)
    if len(parts) != 2:
        return RangeMatcher(field=field, valid=False)
    try:
        lower = _parse_bound(parts[0])
        upper = _parse_bound(parts[1])
    except ValueError:
        return RangeMatcher(field=field, valid=False)
    return RangeMatcher(field=field, lower=lower, upper=upper)


_MATCHER_BUILDERS: Final[Mapping[FieldKind, Callable[[str, str], FieldMatcher]]] = {
    FieldKind.KEYWORD: keyword_matcher,
    FieldKind.TEXT: text_matcher,
    FieldKind.RANGE: range_matcher,
}


def build_matcher(
    field: str,
    value: str,
    registry: FieldRegistry = EVENT_FIELD_REGISTRY,
) -> FieldMatcher:
    """Build the matcher for a registered field.

    Raises:
        KeyError: If field is not registered.
    """
    kind = registry.kind_of(field)
    if kind is None:
        raise KeyError(field)
    return _MATCHER_BUILDERS[kind](field, value)


def expand_macro(
    macro: str,
    value: str,
    registry: FieldRegistry = EVENT_FIELD_REGISTRY,
) -> MatcherGroup:
    """Expand a macro pseudo-field into an OR-group of field matchers.

    Args:
        macro: "query" or "text_query".
        value: The macro's raw value, applied to every member field.
        registry: Registry supplying the group membership.

    Returns:
        MatcherGroup with one member per group field, in registry order.
    """
    members = tuple(
        _MATCHER_BUILDERS[descriptor.kind](descriptor.name, value)
        for descriptor in registry.macro_fields(macro)
    )
    return MatcherGroup(field=macro, members=members)


def compose_filters(
    raw_filters: Mapping[str, str],
    registry: FieldRegistry = EVENT_FIELD_REGISTRY,
) -> ComposedFilter:
    """Compose raw filter values into typed matchers.

    Keys that are neither registered fields nor macros are skipped, so
    the result addresses exactly the recognized keys of the input.

    Args:
        raw_filters: Field name to raw string value.
        registry: Field registry to resolve kinds against.

    Returns:
        ComposedFilter keyed by field (or macro) name.
    """
    matchers: dict[str, Matcher] = {}
    for name, value in raw_filters.items():
        if name in MACRO_TAGS:
            matchers[name] = expand_macro(name, value, registry)
        elif name in registry:
            matchers[name] = build_matcher(name, value, registry)
    return ComposedFilter(matchers)
