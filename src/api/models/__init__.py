"""
API models (Pydantic DTOs) for the notification events API.
"""

from src.api.models.notification_event import (
    NotificationEventErrorResponse,
    NotificationEventResponse,
    NotificationEventsListResponse,
)

__all__: list[str] = [
    "NotificationEventErrorResponse",
    "NotificationEventResponse",
    "NotificationEventsListResponse",
]
