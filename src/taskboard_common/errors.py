"""Domain errors raised by validation and services."""


class AppError(Exception):
    """Base error carrying a user-facing message.

    ``status_code`` is the HTTP status explicitly attached to the failure.
    ``None`` means no status was set, which the API reports as a 500.
    """

    status_code: int | None = None

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(AppError):
    """Malformed, missing or duplicate field."""

    status_code = 400


class NotFoundError(AppError):
    """Referenced entity does not exist."""

    status_code = 404


class NotImplementedAppError(AppError):
    """Endpoint is declared but has no defined behavior yet."""

    status_code = 501
