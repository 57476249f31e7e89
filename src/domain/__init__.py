"""
Domain layer - Pure business logic for the notification events API.

This layer contains:
- Notification event record models
- Query value objects (pagination, sort, matchers, query descriptor)
- The field registry
- Domain exceptions

CRITICAL: This layer must NOT import from application, infrastructure, or api.
"""

from src.domain.exceptions import NotificationsError

__all__: list[str] = ["NotificationsError"]
