"""Query parameter parsing for notification event requests.

Turns the untyped key/value parameters of a "get notification events"
request into typed primitives:

- identifier set (event_id + event_id_list)
- pagination window (from_index, max_items)
- optional sort specification (sort_field, sort_order)
- raw filter subset (only keys known to the field registry)

Parsing policy:
- Malformed pagination numbers (anything but an optional sign followed
  by ASCII digits) fall back silently to their defaults.
- Negative pagination numbers pass through unchanged.
- An unknown sort_order token fails the request with InvalidArgumentError.
- Unrecognized parameter keys are dropped without error.
- Repeated keys: the first occurrence wins (see first_value_params).

Nothing here performs I/O.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Final

from src.domain.errors.event_query import InvalidArgumentError
from src.domain.models.event_query import (
    DEFAULT_MAX_ITEMS,
    IdentifierSet,
    Pagination,
    SortOrder,
    SortSpec,
)
from src.domain.models.field_registry import EVENT_FIELD_REGISTRY, FieldRegistry

EVENT_ID_TAG: Final[str] = "event_id"
EVENT_ID_LIST_TAG: Final[str] = "event_id_list"
FROM_INDEX_TAG: Final[str] = "from_index"
MAX_ITEMS_TAG: Final[str] = "max_items"
SORT_FIELD_TAG: Final[str] = "sort_field"
SORT_ORDER_TAG: Final[str] = "sort_order"

LIST_SEPARATOR: Final[str] = ","

# Optional sign, then ASCII digits only
_INTEGER_RE: Final = re.compile(r"[-+]?[0-9]+")


@dataclass(frozen=True)
class ParsedQueryParams:
    """Typed primitives parsed from one request.

    Attributes:
        identifier_set: Union of event_id and event_id_list.
        pagination: Offset and page size.
        sort_spec: Requested ordering, or None.
        raw_filters: Registry-known filter keys and their raw values.
    """

    identifier_set: IdentifierSet = frozenset()
    pagination: Pagination = field(default_factory=Pagination)
    sort_spec: SortSpec | None = None
    raw_filters: Mapping[str, str] = field(default_factory=dict)


def split_list_value(value: str) -> list[str]:
    """Split a comma separated value into trimmed, non-empty tokens."""
    return [token.strip() for token in value.split(LIST_SEPARATOR) if token.strip()]


def first_value_params(items: Iterable[tuple[str, str]]) -> dict[str, str]:
    """Collapse repeated parameter keys, keeping the first value.

    Args:
        items: Key/value pairs in the order the transport received them.

    Returns:
        Mapping with one value per key.
    """
    params: dict[str, str] = {}
    for key, value in items:
        params.setdefault(key, value)
    return params


def parse_identifier_set(params: Mapping[str, str]) -> IdentifierSet:
    """Read event_id and event_id_list and union them.

    An empty event_id is ignored rather than added as an empty
    identifier, so "event_id=" alone does not switch the request to an
    identifier lookup. Blank event_id_list tokens are dropped the same way.

    Args:
        params: Request parameters.

    Returns:
        Set of identifiers; empty if neither key carries a value.
    """
    identifiers: set[str] = set()
    event_id = params.get(EVENT_ID_TAG)
    if event_id:
        identifiers.add(event_id)
    event_id_list = params.get(EVENT_ID_LIST_TAG)
    if event_id_list is not None:
        identifiers.update(split_list_value(event_id_list))
    return frozenset(identifiers)


def _int_or_default(value: str | None, default: int) -> int:
    if value is None or _INTEGER_RE.fullmatch(value) is None:
        return default
    return int(value)


def parse_pagination(
    params: Mapping[str, str],
    default_max_items: int = DEFAULT_MAX_ITEMS,
) -> Pagination:
    """Read from_index and max_items.

    Missing or non-numeric values fall back to 0 and default_max_items.
    Negative values are returned as given.
    """
    return Pagination(
        from_index=_int_or_default(params.get(FROM_INDEX_TAG), 0),
        max_items=_int_or_default(params.get(MAX_ITEMS_TAG), default_max_items),
    )


def parse_sort(params: Mapping[str, str]) -> SortSpec | None:
    """Read sort_field and sort_order.

    Args:
        params: Request parameters.

    Returns:
        SortSpec, or None when neither key carries a value.

    Raises:
        InvalidArgumentError: If sort_order is not "asc" or "desc".
    """
    sort_field = params.get(SORT_FIELD_TAG) or None
    sort_order_token = params.get(SORT_ORDER_TAG) or None

    sort_order: SortOrder | None = None
    if sort_order_token is not None:
        try:
            sort_order = SortOrder.from_token(sort_order_token)
        except ValueError as exc:
            raise InvalidArgumentError(
                f"{exc}; {SORT_ORDER_TAG} must be one of 'asc', 'desc'"
            ) from exc

    if sort_field is None and sort_order is None:
        return None
    return SortSpec(field=sort_field, order=sort_order)


def extract_raw_filters(
    params: Mapping[str, str],
    registry: FieldRegistry = EVENT_FIELD_REGISTRY,
) -> dict[str, str]:
    """Keep only the parameters that address a registered filter.

    Macro keys (query, text_query) are kept; unknown keys are dropped.
    """
    return {key: value for key, value in params.items() if registry.is_filter_param(key)}


def parse_query_params(
    params: Mapping[str, str],
    default_max_items: int = DEFAULT_MAX_ITEMS,
    registry: FieldRegistry = EVENT_FIELD_REGISTRY,
) -> ParsedQueryParams:
    """Run every parser over one request's parameters.

    Raises:
        InvalidArgumentError: If sort_order is malformed.
    """
    return ParsedQueryParams(
        identifier_set=parse_identifier_set(params),
        pagination=parse_pagination(params, default_max_items),
        sort_spec=parse_sort(params),
        raw_filters=extract_raw_filters(params, registry),
    )
