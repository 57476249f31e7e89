"""Query execution port for notification events.

This port is the narrow boundary between the request translation layer
and whatever engine actually stores and searches notification events.
The application hands over a finished QueryDescriptor and receives an
ordered page of records plus the total number of matches.

Contract:
- identifier lookups return the records found for those ids; missing
  ids are simply absent from the result
- filtered listings AND together every matcher in the composed filter
- results are returned in the engine's order and are not re-sorted
- failures (timeout, transport, store unavailable) raise
  EventQueryExecutionError; no partial results
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from src.domain.models.event_query import QueryDescriptor
from src.domain.models.notification_event import NotificationEvent


@dataclass(frozen=True)
class NotificationEventQueryResult:
    """One page of notification events returned by the engine.

    Attributes:
        events: Records in engine order.
        total_hits: Number of records matching the query, before paging.
        start_index: Offset of the first returned record.
    """

    events: tuple[NotificationEvent, ...]
    total_hits: int
    start_index: int = 0

    def __post_init__(self) -> None:
        if self.total_hits < 0:
            raise ValueError(f"total_hits must be non-negative, got {self.total_hits}")


class NotificationEventQueryProtocol(Protocol):
    """Protocol for executing notification event queries.

    Implementations must not mutate the descriptor. Cancellation and
    timeout policy belong to the implementation.
    """

    async def execute(self, descriptor: QueryDescriptor) -> NotificationEventQueryResult:
        """Execute a query.

        Args:
            descriptor: Identifier set, pagination, sort and filters.

        Returns:
            The matching page of records and the total hit count.

        Raises:
            EventQueryExecutionError: If the engine fails.
        """
        ...
