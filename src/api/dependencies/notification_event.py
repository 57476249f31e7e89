"""Notification event dependencies.

FastAPI dependency injection for the notification event query service.
"""

from src.application.services.notification_event_query_service import (
    NotificationEventQueryService,
)

# Singleton instance (initialized at startup)
_notification_event_query_service: NotificationEventQueryService | None = None


def get_notification_event_query_service() -> NotificationEventQueryService:
    """Get the notification event query service singleton.

    Returns:
        NotificationEventQueryService singleton instance.

    Raises:
        RuntimeError: If service not initialized (startup error).
    """
    if _notification_event_query_service is None:
        raise RuntimeError(
            "NotificationEventQueryService not initialized. "
            "Call set_notification_event_query_service() during startup."
        )
    return _notification_event_query_service


def set_notification_event_query_service(
    service: NotificationEventQueryService | None,
) -> None:
    """Set the notification event query service singleton.

    Called during application startup to inject the service.
    Also used in tests to inject services backed by stub engines;
    pass None to reset.
    """
    global _notification_event_query_service
    _notification_event_query_service = service


__all__ = [
    "get_notification_event_query_service",
    "set_notification_event_query_service",
]
