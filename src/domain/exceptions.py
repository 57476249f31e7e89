"""Base exception classes for the notification events domain layer."""


class NotificationsError(Exception):
    """Base exception for all domain errors.

    All domain-specific exceptions MUST inherit from this class.
    This enables consistent error handling across the application.

    Subclasses:
    - InvalidArgumentError
    - EventNotFoundError
    - EventQueryExecutionError
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)

    @property
    def reason(self) -> str:
        """Reason string suitable for direct display to API callers."""
        return str(self)
