"""Bootstrap wiring for notification event dependencies."""

from __future__ import annotations

from src.application.ports.notification_event_query import (
    NotificationEventQueryProtocol,
)
from src.application.services.notification_event_query_service import (
    NotificationEventQueryService,
)
from src.config.events_config import EventsApiConfig
from src.infrastructure.stubs.notification_event_query_stub import (
    NotificationEventQueryStub,
)

_query_engine: NotificationEventQueryProtocol | None = None


def get_query_engine() -> NotificationEventQueryProtocol:
    """Get the shared query execution engine, created on first use."""
    global _query_engine
    if _query_engine is None:
        _query_engine = NotificationEventQueryStub()
    return _query_engine


def build_notification_event_query_service(
    config: EventsApiConfig,
    engine: NotificationEventQueryProtocol | None = None,
) -> NotificationEventQueryService:
    """Build the query service for the given configuration.

    Args:
        config: API configuration (paging defaults).
        engine: Engine to execute queries with; defaults to get_query_engine().
    """
    return NotificationEventQueryService(
        engine=engine if engine is not None else get_query_engine(),
        default_max_items=config.default_max_items,
    )
