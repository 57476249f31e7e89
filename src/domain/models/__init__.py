"""Domain models for the notification events API.

Contains value objects and domain models that represent
core business concepts. These models are immutable and
contain no infrastructure dependencies.
"""

from src.domain.models.event_query import (
    ComposedFilter,
    Pagination,
    QueryDescriptor,
    SortOrder,
    SortSpec,
    build_query_descriptor,
)
from src.domain.models.field_registry import (
    EVENT_FIELD_REGISTRY,
    FieldDescriptor,
    FieldKind,
    FieldRegistry,
)
from src.domain.models.notification_event import NotificationEvent

__all__: list[str] = [
    "EVENT_FIELD_REGISTRY",
    "ComposedFilter",
    "FieldDescriptor",
    "FieldKind",
    "FieldRegistry",
    "NotificationEvent",
    "Pagination",
    "QueryDescriptor",
    "SortOrder",
    "SortSpec",
    "build_query_descriptor",
]
