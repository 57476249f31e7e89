"""Test helpers for the notification events API tests.

Helpers:
    make_sample_events: Three sample notification event records

Usage:
    from tests.helpers import make_sample_events
"""

from tests.helpers.notification_events import (
    make_event_e1,
    make_event_e2,
    make_event_e3,
    make_sample_events,
)

__all__ = ["make_event_e1", "make_event_e2", "make_event_e3", "make_sample_events"]
