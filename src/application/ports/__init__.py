"""Application ports - Abstract interfaces for infrastructure adapters.

Available ports:
- NotificationEventQueryProtocol: Executes notification event query descriptors
"""

from src.application.ports.notification_event_query import (
    NotificationEventQueryProtocol,
    NotificationEventQueryResult,
)

__all__: list[str] = [
    "NotificationEventQueryProtocol",
    "NotificationEventQueryResult",
]
