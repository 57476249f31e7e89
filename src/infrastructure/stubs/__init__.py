"""Infrastructure stubs for development and testing.

Available stubs:
- NotificationEventQueryStub: In-memory query execution engine
"""

from src.infrastructure.stubs.notification_event_query_stub import (
    NotificationEventQueryStub,
)

__all__: list[str] = ["NotificationEventQueryStub"]
