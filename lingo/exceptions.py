"""Custom exception hierarchy for the lingo application."""


class LingoError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(LingoError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class UnauthenticatedError(LingoError):
    """No user identity is available for the request."""

    def __init__(self, message: str = "Not authenticated") -> None:
        """Initialize with message and 401 status code."""
        super().__init__(message, status_code=401)


class TransientRepositoryError(LingoError):
    """
    Retryable storage failure.

    Nothing was written. The caller may retry the whole operation from a
    fresh read.
    """

    def __init__(self, message: str) -> None:
        """Initialize with message and 503 status code."""
        super().__init__(message, status_code=503)


class TransactionConflictError(TransientRepositoryError):
    """A concurrent request changed the same progress first."""

    def __init__(self, user_id: str | None = None, *, message: str | None = None) -> None:
        """Initialize with user ID or custom message."""
        self.user_id = user_id
        if message:
            super().__init__(message)
        elif user_id is not None:
            super().__init__(f"Progress of user {user_id} was modified concurrently")
        else:
            super().__init__("Progress was modified concurrently")


class RepositoryTimeoutError(TransientRepositoryError):
    """A statement or lock wait exceeded the transaction timeout."""

    def __init__(self, timeout_seconds: float | None = None) -> None:
        """Initialize with the timeout that was exceeded."""
        self.timeout_seconds = timeout_seconds
        if timeout_seconds is not None:
            super().__init__(f"Progress store did not respond within {timeout_seconds}s")
        else:
            super().__init__("Progress store did not respond in time")
