"""In-memory notification event query engine.

Implements NotificationEventQueryProtocol over records held in memory,
using the matcher semantics defined on the composed filter. Used for
development wiring and for unit and integration tests.

Engine behavior:
- identifier lookups return the stored records with those ids
- filtered listings keep records matching every matcher (AND)
- default ordering is last_updated_time_ms ascending
- a sort spec without an order sorts ascending
- records with no value for the sort field go last; a sort field that is
  neither a registered field nor event_id gives every record no value
- a negative from_index is treated as 0; max_items <= 0 returns no records

WARNING: This stub is NOT for production use.
"""

from __future__ import annotations

from collections.abc import Iterable

from src.application.ports.notification_event_query import (
    NotificationEventQueryProtocol,
    NotificationEventQueryResult,
)
from src.domain.models.event_query import (
    Pagination,
    QueryDescriptor,
    SortOrder,
    SortSpec,
)
from src.domain.models.field_registry import (
    EVENT_FIELD_REGISTRY,
    LAST_UPDATED_TIME_TAG,
    FieldRegistry,
)
from src.domain.models.notification_event import NotificationEvent

DEFAULT_SORT_FIELD = LAST_UPDATED_TIME_TAG
EVENT_ID_FIELD = "event_id"


class NotificationEventQueryStub(NotificationEventQueryProtocol):
    """In-memory stub for NotificationEventQueryProtocol.

    Example:
        stub = NotificationEventQueryStub()
        stub.add_event(event)
        result = await stub.execute(descriptor)
        stub.set_failure(TimeoutError("store unavailable"))  # next calls fail
        stub.clear()  # Reset for next test
    """

    def __init__(
        self,
        events: Iterable[NotificationEvent] = (),
        registry: FieldRegistry = EVENT_FIELD_REGISTRY,
    ) -> None:
        """Initialize the stub, optionally pre-loaded with records."""
        self._registry = registry
        self._events: dict[str, NotificationEvent] = {}
        self._failure: Exception | None = None
        self.executed: list[QueryDescriptor] = []
        self.add_events(events)

    def add_event(self, event: NotificationEvent) -> None:
        """Store a record, replacing any record with the same id."""
        self._events[event.event_id] = event

    def add_events(self, events: Iterable[NotificationEvent]) -> None:
        for event in events:
            self.add_event(event)

    def set_failure(self, failure: Exception | None) -> None:
        """Make every following execute() raise failure (None to reset)."""
        self._failure = failure

    def clear(self) -> None:
        """Clear records, failure injection and call history."""
        self._events.clear()
        self._failure = None
        self.executed.clear()

    def count(self) -> int:
        return len(self._events)

    async def execute(self, descriptor: QueryDescriptor) -> NotificationEventQueryResult:
        """Execute a query descriptor against the stored records.

        Raises:
            Exception: Whatever was injected with set_failure().
        """
        self.executed.append(descriptor)
        if self._failure is not None:
            raise self._failure

        if descriptor.is_identifier_lookup:
            matched = [
                event
                for event in self._events.values()
                if event.event_id in descriptor.identifier_set
            ]
        else:
            matched = [
                event
                for event in self._events.values()
                if descriptor.composed_filter.matches(event)
            ]

        ordered = self._sort(matched, descriptor.sort_spec)
        return NotificationEventQueryResult(
            events=tuple(self._page(ordered, descriptor.pagination)),
            total_hits=len(ordered),
            start_index=max(descriptor.pagination.from_index, 0),
        )

    def _sort_key(self, event: NotificationEvent, sort_field: str) -> str | int | None:
        if sort_field != EVENT_ID_FIELD and sort_field not in self._registry:
            return None
        for value in event.field_values(sort_field):
            if isinstance(value, (str, int)) and not isinstance(value, bool):
                return value
        return None

    def _sort(
        self, events: list[NotificationEvent], sort_spec: SortSpec | None
    ) -> list[NotificationEvent]:
        sort_field = (sort_spec.field if sort_spec else None) or DEFAULT_SORT_FIELD
        descending = sort_spec is not None and sort_spec.order is SortOrder.DESC

        keyed: list[tuple[str | int, NotificationEvent]] = []
        missing: list[NotificationEvent] = []
        for event in events:
            key = self._sort_key(event, sort_field)
            if key is None:
                missing.append(event)
            else:
                keyed.append((key, event))

        keyed.sort(key=lambda pair: pair[0], reverse=descending)
        return [event for _, event in keyed] + missing

    @staticmethod
    def _page(
        events: list[NotificationEvent], pagination: Pagination
    ) -> list[NotificationEvent]:
        if pagination.max_items <= 0:
            return []
        start = max(pagination.from_index, 0)
        return events[start : start + pagination.max_items]
