"""Notification event query errors.

These exceptions are raised while turning a request into a query
descriptor, or while executing that descriptor against the event
store. The API layer translates them into HTTP responses:

- InvalidArgumentError -> 400 (not retried)
- EventNotFoundError -> 404 (dedicated single-id route only)
- EventQueryExecutionError -> 500 (no internal retry)
"""

from src.domain.exceptions import NotificationsError


class InvalidArgumentError(NotificationsError):
    """Raised when a request parameter cannot be parsed or defaulted.

    Usage:
        raise InvalidArgumentError("Unknown sort_order 'bogus'")
    """

    pass


class EventNotFoundError(NotificationsError):
    """Raised when a single-id lookup finds no notification event.

    Only the dedicated ``/events/{event_id}`` route raises this. The
    generic listing route returns an empty envelope instead.
    """

    def __init__(self, event_id: str) -> None:
        self.event_id = event_id
        super().__init__(f"Notification event {event_id} not found")


class EventQueryExecutionError(NotificationsError):
    """Raised when the query execution engine fails.

    Covers timeouts, transport failures and an unavailable store.
    Retry policy belongs to the engine or the caller.
    """

    pass
