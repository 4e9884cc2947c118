"""Structured exceptions for GoCD API errors."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

    from gocd_provider.errors.models import ErrorMessage


class APIError(Exception):
    """Base exception for API errors."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: "httpx.Response | None" = None,
        error_message: "ErrorMessage | None" = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response = response
        self.error_message = error_message


class ClientError(APIError):
    """4xx client errors."""

    pass


class BadRequestError(ClientError):
    """400 Bad Request."""

    pass


class UnauthorizedError(ClientError):
    """401 Unauthorized."""

    pass


class ForbiddenError(ClientError):
    """403 Forbidden."""

    pass


class NotFoundError(ClientError):
    """404 Not Found."""

    pass


class ConflictError(ClientError):
    """409 Conflict."""

    pass


class PreconditionFailedError(ClientError):
    """412 Precondition Failed (stale ETag on update)."""

    pass


class ValidationError(ClientError):
    """422 Unprocessable Entity (validation errors)."""

    def __init__(self, message: str, validation_errors: dict[str, list[str]] | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.validation_errors = validation_errors if validation_errors is not None else {}


class ServerError(APIError):
    """5xx server errors."""

    pass
