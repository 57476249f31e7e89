"""Configuration module for the notification events API.

Available Configurations:
- EventsApiConfig: Paging defaults, route base path and log environment
"""

from src.config.events_config import (
    DEFAULT_EVENTS_API_CONFIG,
    TEST_EVENTS_API_CONFIG,
    EventsApiConfig,
)

__all__ = [
    "EventsApiConfig",
    "DEFAULT_EVENTS_API_CONFIG",
    "TEST_EVENTS_API_CONFIG",
]
