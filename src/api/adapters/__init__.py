"""API adapters for transforming between domain and API models."""

from src.api.adapters.notification_event import NotificationEventShaper

__all__: list[str] = ["NotificationEventShaper"]
