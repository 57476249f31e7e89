"""Application services - Use case orchestration.

Available services:
- event_query_params: Request parameter parsing
- event_filter_composer: Typed filter composition and macro expansion
- NotificationEventQueryService: Parse, compose, build and execute queries
"""

from src.application.services.event_filter_composer import compose_filters
from src.application.services.event_query_params import parse_query_params
from src.application.services.notification_event_query_service import (
    NotificationEventQueryService,
)

__all__: list[str] = [
    "NotificationEventQueryService",
    "compose_filters",
    "parse_query_params",
]
