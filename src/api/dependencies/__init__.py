"""API dependencies for dependency injection."""

from src.api.dependencies.notification_event import (
    get_notification_event_query_service,
    set_notification_event_query_service,
)

__all__: list[str] = [
    "get_notification_event_query_service",
    "set_notification_event_query_service",
]
