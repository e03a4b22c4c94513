"""Errors raised by the trip registry and reported by the console."""


class RideSharingError(Exception):
    """Base class for recoverable, operator-facing errors."""


class UserNotFoundError(RideSharingError):
    """Raised when no rider or driver carries the requested id."""

    def __init__(self, user_id: int):
        self.user_id = user_id
        super().__init__("User not found.")


class NoAvailableDriverError(RideSharingError):
    def __init__(self):
        super().__init__("No available drivers at the moment.")


class NoTripsAvailableError(RideSharingError):
    """Raised when no trip is in the status an operation expects."""


class DriverNotAvailableError(RideSharingError):
    """Raised when reserving a driver who is already on a trip."""
