"""
Integration test configuration.

Provides the fully wired application (config, logging, middleware,
routes, service) backed by the in-memory query engine.

Usage:
    @pytest.mark.integration
    def test_example(app_client: TestClient) -> None:
        ...
"""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from src.api.dependencies.notification_event import (
    set_notification_event_query_service,
)
from src.api.main import create_app
from src.config.events_config import TEST_EVENTS_API_CONFIG
from src.infrastructure.stubs.notification_event_query_stub import (
    NotificationEventQueryStub,
)


@pytest.fixture
def app_client(
    query_engine: NotificationEventQueryStub,
) -> Generator[TestClient, None, None]:
    """Test client for an app created with the test configuration."""
    app = create_app(TEST_EVENTS_API_CONFIG, engine=query_engine)
    with TestClient(app) as client:
        yield client
    set_notification_event_query_service(None)
