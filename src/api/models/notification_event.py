"""Notification event API response models.

Pydantic models for the notification events read endpoints. Both the
listing route and the single-id route answer with the same envelope,
NotificationEventsListResponse.
"""

from typing import Literal

from pydantic import BaseModel, Field


class DeliveryStatusResponse(BaseModel):
    """Delivery outcome reported by a channel or recipient."""

    status_code: str = Field(..., examples=["200", "503"])
    status_text: str = Field(..., examples=["Success", "Service Unavailable"])


class EmailRecipientStatusResponse(BaseModel):
    """Delivery outcome for one email recipient."""

    recipient: str = Field(..., examples=["ops@example.com"])
    delivery_status: DeliveryStatusResponse


class EventStatusResponse(BaseModel):
    """Delivery status of the event through one channel."""

    config_id: str = Field(..., description="Channel configuration identifier")
    config_type: str = Field(..., examples=["slack", "chime", "webhook", "email"])
    config_name: str = Field(..., description="Human readable channel name")
    delivery_status: DeliveryStatusResponse | None = None
    email_recipient_status: list[EmailRecipientStatusResponse] = Field(
        default_factory=list,
        description="Per recipient outcomes (email channels only)",
    )


class EventSourceResponse(BaseModel):
    """Origin of the notification."""

    title: str
    reference_id: str
    severity: str = Field(..., examples=["info", "high", "critical"])
    tags: list[str] = Field(default_factory=list)


class NotificationEventResponse(BaseModel):
    """A single notification event.

    Attributes:
        event_id: Unique event identifier.
        created_time_ms: Creation time (epoch milliseconds).
        last_updated_time_ms: Last update time (epoch milliseconds).
        event: The event source.
        status_list: Per channel delivery statuses.
    """

    event_id: str = Field(..., description="Unique event identifier")
    created_time_ms: int = Field(..., description="Creation time, epoch ms")
    last_updated_time_ms: int = Field(..., description="Last update time, epoch ms")
    event: EventSourceResponse
    status_list: list[EventStatusResponse] = Field(default_factory=list)


class NotificationEventsListResponse(BaseModel):
    """Response envelope for every notification event lookup.

    Attributes:
        start_index: Offset the page starts at.
        total_hits: Number of matching events before paging.
        total_hit_relation: "eq" when total_hits is exact.
        events: The page of events, in engine order.
    """

    start_index: int = Field(default=0, description="Offset the page starts at")
    total_hits: int = Field(..., ge=0, description="Matching events before paging")
    total_hit_relation: Literal["eq", "gte"] = "eq"
    events: list[NotificationEventResponse] = Field(default_factory=list)


class NotificationEventErrorResponse(BaseModel):
    """RFC 7807 style error body for notification event routes."""

    type: str = Field(..., description="Machine readable error kind (URI)")
    title: str
    status: int
    detail: str = Field(..., description="Human readable reason")
    instance: str
