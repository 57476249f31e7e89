"""
Pytest configuration and shared fixtures for the notification events API tests.

Testing Standards:
- Async tests use pytest.mark.asyncio (auto mode enabled in pyproject.toml)
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/
"""

import pytest

from src.domain.models.notification_event import NotificationEvent
from src.infrastructure.stubs.notification_event_query_stub import (
    NotificationEventQueryStub,
)
from tests.helpers import make_sample_events


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio as the async backend."""
    return "asyncio"


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from src import __version__

    return __version__


@pytest.fixture
def sample_events() -> list[NotificationEvent]:
    """Three sample notification events (e1, e2, e3)."""
    return make_sample_events()


@pytest.fixture
def query_engine(sample_events: list[NotificationEvent]) -> NotificationEventQueryStub:
    """In-memory query engine loaded with the sample events."""
    return NotificationEventQueryStub(sample_events)
