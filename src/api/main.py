"""FastAPI application entry point for the notification events API."""

from __future__ import annotations

from fastapi import FastAPI

from src import __version__
from src.api.dependencies.notification_event import (
    set_notification_event_query_service,
)
from src.api.middleware.logging_middleware import LoggingMiddleware
from src.api.routes.notification_event import create_notification_event_router
from src.application.ports.notification_event_query import (
    NotificationEventQueryProtocol,
)
from src.bootstrap.notification_events import build_notification_event_query_service
from src.config.events_config import EventsApiConfig
from src.infrastructure.observability import configure_structlog


def create_app(
    config: EventsApiConfig | None = None,
    engine: NotificationEventQueryProtocol | None = None,
) -> FastAPI:
    """Create the FastAPI application.

    Args:
        config: API configuration; defaults to EventsApiConfig.from_environment().
        engine: Query execution engine; defaults to the bootstrap engine.

    Returns:
        Configured FastAPI application.
    """
    config = config or EventsApiConfig.from_environment()
    configure_structlog(config.environment)

    set_notification_event_query_service(
        build_notification_event_query_service(config, engine)
    )

    application = FastAPI(
        title="Notification Events API",
        description="Read API over notification delivery audit events",
        version=__version__,
    )
    application.add_middleware(LoggingMiddleware)
    application.include_router(create_notification_event_router(config.base_uri))
    return application


app = create_app()
