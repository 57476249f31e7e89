"""Notification events API configuration.

This module defines configuration for the notification events read API
with environment variable overrides for deployment tuning.

Environment Variables:
- NOTIFICATIONS_DEFAULT_MAX_ITEMS: Page size when max_items is missing
  or malformed (default: 1000)
- NOTIFICATIONS_BASE_URI: Base path the events routes are mounted under
  (default: /_plugins/_notifications)
- ENVIRONMENT: "production" for JSON logs, anything else for console
  logs (default: production)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from src.domain.models.event_query import DEFAULT_MAX_ITEMS

DEFAULT_BASE_URI = "/_plugins/_notifications"


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class EventsApiConfig:
    """Configuration for the notification events read API.

    Attributes:
        default_max_items: Page size used when max_items is absent or
                          not a number. Default: 1000.
        base_uri: Path prefix for the events routes. Must start with "/"
                 and must not end with one.
        environment: Deployment environment, drives log rendering.
    """

    default_max_items: int = DEFAULT_MAX_ITEMS
    base_uri: str = DEFAULT_BASE_URI
    environment: str = "production"

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.default_max_items < 1:
            raise ValueError(
                f"default_max_items must be positive, got {self.default_max_items}"
            )
        if not self.base_uri.startswith("/"):
            raise ValueError(f"base_uri must start with '/', got {self.base_uri!r}")
        if len(self.base_uri) > 1 and self.base_uri.endswith("/"):
            raise ValueError(f"base_uri must not end with '/', got {self.base_uri!r}")

    @property
    def events_path(self) -> str:
        """Path of the events collection route."""
        return f"{self.base_uri.rstrip('/')}/events"

    @classmethod
    def from_environment(cls) -> "EventsApiConfig":
        """Create config from environment variables with defaults.

        Returns:
            EventsApiConfig with values from environment or defaults.
        """
        return cls(
            default_max_items=_get_int_env(
                "NOTIFICATIONS_DEFAULT_MAX_ITEMS", DEFAULT_MAX_ITEMS
            ),
            base_uri=os.environ.get("NOTIFICATIONS_BASE_URI", DEFAULT_BASE_URI),
            environment=os.environ.get("ENVIRONMENT", "production"),
        )


# Default production config
DEFAULT_EVENTS_API_CONFIG = EventsApiConfig()

# Testing config with a small page size and development logging
TEST_EVENTS_API_CONFIG = EventsApiConfig(
    default_max_items=50,
    environment="development",
)
