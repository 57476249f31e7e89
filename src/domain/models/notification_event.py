"""Notification event record models.

A notification event is an audit record of one attempt to deliver a
notification through one or more channels, together with the outcome
reported by each channel. Records are owned by the event store; this
package only reads them.

Record shape:
    NotificationEvent
      ├─ event_id, created_time_ms, last_updated_time_ms
      ├─ event_source (reference_id, severity, tags, title)
      └─ status_list[]
           ├─ config_id, config_type, config_name
           ├─ delivery_status (status_code, status_text)
           └─ email_recipient_status[]
                ├─ recipient
                └─ delivery_status (status_code, status_text)
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class DeliveryStatus:
    """Delivery outcome reported by a channel or recipient."""

    status_code: str
    status_text: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DeliveryStatus:
        return cls(
            status_code=str(data.get("status_code", "")),
            status_text=str(data.get("status_text", "")),
        )

    def to_dict(self) -> dict[str, str]:
        return {"status_code": self.status_code, "status_text": self.status_text}


@dataclass(frozen=True)
class EmailRecipientStatus:
    """Delivery outcome for a single email recipient."""

    recipient: str
    delivery_status: DeliveryStatus

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> EmailRecipientStatus:
        return cls(
            recipient=str(data.get("recipient", "")),
            delivery_status=DeliveryStatus.from_dict(data.get("delivery_status", {})),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "recipient": self.recipient,
            "delivery_status": self.delivery_status.to_dict(),
        }


@dataclass(frozen=True)
class EventStatus:
    """Delivery status of an event through one configured channel.

    Attributes:
        config_id: Identifier of the channel configuration.
        config_type: Channel type (e.g. "slack", "chime", "webhook", "email").
        config_name: Human readable channel name.
        delivery_status: Overall outcome for this channel, if reported.
        email_recipient_status: Per recipient outcomes (email channels only).
    """

    config_id: str
    config_type: str
    config_name: str
    delivery_status: DeliveryStatus | None = None
    email_recipient_status: tuple[EmailRecipientStatus, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> EventStatus:
        delivery_status = data.get("delivery_status")
        return cls(
            config_id=str(data.get("config_id", "")),
            config_type=str(data.get("config_type", "")),
            config_name=str(data.get("config_name", "")),
            delivery_status=(
                DeliveryStatus.from_dict(delivery_status)
                if delivery_status is not None
                else None
            ),
            email_recipient_status=tuple(
                EmailRecipientStatus.from_dict(item)
                for item in data.get("email_recipient_status", ())
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "config_id": self.config_id,
            "config_type": self.config_type,
            "config_name": self.config_name,
            "delivery_status": (
                self.delivery_status.to_dict() if self.delivery_status else None
            ),
            "email_recipient_status": [
                item.to_dict() for item in self.email_recipient_status
            ],
        }


@dataclass(frozen=True)
class EventSource:
    """Where an event came from (alerting monitor, report, etc.)."""

    title: str
    reference_id: str
    severity: str = "info"
    tags: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> EventSource:
        return cls(
            title=str(data.get("title", "")),
            reference_id=str(data.get("reference_id", "")),
            severity=str(data.get("severity", "info")),
            tags=tuple(str(tag) for tag in data.get("tags", ())),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "reference_id": self.reference_id,
            "severity": self.severity,
            "tags": list(self.tags),
        }


@dataclass(frozen=True)
class NotificationEvent:
    """A notification event record as returned by the event store.

    Attributes:
        event_id: Stable unique identifier.
        created_time_ms: Creation time in epoch milliseconds.
        last_updated_time_ms: Last update time in epoch milliseconds.
        event_source: Origin of the notification.
        status_list: Per channel delivery statuses, in store order.
    """

    event_id: str
    created_time_ms: int
    last_updated_time_ms: int
    event_source: EventSource
    status_list: tuple[EventStatus, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.event_id:
            raise ValueError("event_id is required")

    def field_values(self, path: str) -> tuple[Any, ...]:
        """Resolve a dotted field path to all of its values.

        List levels are flattened, so ``status_list.config_type`` yields
        one value per status entry. Missing segments yield nothing.

        Args:
            path: Dotted field name, e.g. "status_list.delivery_status.status_code".

        Returns:
            Tuple of leaf values in record order (may be empty).
        """
        current: list[Any] = [self]
        for segment in path.split("."):
            resolved: list[Any] = []
            for item in current:
                value = getattr(item, segment, None)
                if value is None:
                    continue
                if isinstance(value, (tuple, list)):
                    resolved.extend(v for v in value if v is not None)
                else:
                    resolved.append(value)
            current = resolved
        return tuple(current)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> NotificationEvent:
        """Build a record from its stored dictionary form."""
        return cls(
            event_id=str(data["event_id"]),
            created_time_ms=int(data.get("created_time_ms", 0)),
            last_updated_time_ms=int(data.get("last_updated_time_ms", 0)),
            event_source=EventSource.from_dict(data.get("event_source", {})),
            status_list=tuple(
                EventStatus.from_dict(item) for item in data.get("status_list", ())
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "event_id": self.event_id,
            "created_time_ms": self.created_time_ms,
            "last_updated_time_ms": self.last_updated_time_ms,
            "event_source": self.event_source.to_dict(),
            "status_list": [status.to_dict() for status in self.status_list],
        }
