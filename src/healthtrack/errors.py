"""Domain errors raised by the tracking and auth layers.

Each error carries the HTTP status and caller-facing message it is rendered
with; ``healthtrack.main`` installs the handler that turns them into responses.
"""


class TrackerError(Exception):
    status_code = 500
    message = "Server error"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class NotFoundError(TrackerError):
    status_code = 404
    message = "Not found"


class ConflictError(TrackerError):
    """A goal already exists for the requested day."""

    status_code = 400
    message = "Goal already exists for this date"


class UnauthorizedError(TrackerError):
    status_code = 401
    message = "No token, authorization denied"


class AuthError(TrackerError):
    """Rejected registration or login attempt."""

    status_code = 400
    message = "Invalid credentials"
