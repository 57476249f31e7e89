"""Domain errors for the notification events API.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from NotificationsError.
"""

from src.domain.errors.event_query import (
    EventNotFoundError,
    EventQueryExecutionError,
    InvalidArgumentError,
)

__all__: list[str] = [
    "EventNotFoundError",
    "EventQueryExecutionError",
    "InvalidArgumentError",
]
