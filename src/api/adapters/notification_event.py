"""Notification event response shaping.

Converts records returned by the query execution engine into the API
response envelope. Record order is preserved exactly as the engine
returned it; nothing here re-sorts or filters.
"""

from collections.abc import Sequence

from src.api.models.notification_event import (
    DeliveryStatusResponse,
    EmailRecipientStatusResponse,
    EventSourceResponse,
    EventStatusResponse,
    NotificationEventResponse,
    NotificationEventsListResponse,
)
from src.domain.models.notification_event import (
    DeliveryStatus,
    EventStatus,
    NotificationEvent,
)


def _delivery_status(status: DeliveryStatus) -> DeliveryStatusResponse:
    return DeliveryStatusResponse(
        status_code=status.status_code,
        status_text=status.status_text,
    )


def _event_status(status: EventStatus) -> EventStatusResponse:
    return EventStatusResponse(
        config_id=status.config_id,
        config_type=status.config_type,
        config_name=status.config_name,
        delivery_status=(
            _delivery_status(status.delivery_status)
            if status.delivery_status is not None
            else None
        ),
        email_recipient_status=[
            EmailRecipientStatusResponse(
                recipient=recipient.recipient,
                delivery_status=_delivery_status(recipient.delivery_status),
            )
            for recipient in status.email_recipient_status
        ],
    )


class NotificationEventShaper:
    """Builds NotificationEventsListResponse envelopes from records."""

    @staticmethod
    def to_response(event: NotificationEvent) -> NotificationEventResponse:
        """Convert one record to its API representation."""
        source = event.event_source
        return NotificationEventResponse(
            event_id=event.event_id,
            created_time_ms=event.created_time_ms,
            last_updated_time_ms=event.last_updated_time_ms,
            event=EventSourceResponse(
                title=source.title,
                reference_id=source.reference_id,
                severity=source.severity,
                tags=list(source.tags),
            ),
            status_list=[_event_status(status) for status in event.status_list],
        )

    @classmethod
    def shape_list(
        cls,
        events: Sequence[NotificationEvent],
        total_hits: int,
        start_index: int = 0,
    ) -> NotificationEventsListResponse:
        """Wrap a page of records from a listing or id-list query.

        Args:
            events: Records in engine order.
            total_hits: Matching records before paging.
            start_index: Offset the page starts at.

        Returns:
            Envelope holding the records in the same order.
        """
        return NotificationEventsListResponse(
            start_index=start_index,
            total_hits=total_hits,
            total_hit_relation="eq",
            events=[cls.to_response(event) for event in events],
        )

    @classmethod
    def shape_single(
        cls, events: Sequence[NotificationEvent]
    ) -> NotificationEventsListResponse:
        """Wrap the result of a single-id lookup in the listing envelope.

        The envelope shape is the same whether zero, one or several
        records came back.
        """
        return cls.shape_list(events, total_hits=len(events))
