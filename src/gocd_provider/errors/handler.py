"""Error handling utilities for GoCD API responses."""

import httpx

from gocd_provider.errors.exceptions import (
    APIError,
    BadRequestError,
    ClientError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    PreconditionFailedError,
    ServerError,
    UnauthorizedError,
    ValidationError,
)
from gocd_provider.errors.models import ErrorMessage

EXCEPTION_MAP: dict[int, type[APIError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    412: PreconditionFailedError,
    422: ValidationError,
}


def raise_for_status(response: httpx.Response) -> None:
    """Raise appropriate exception for HTTP error responses.

    Parses the GoCD ``{"message": ...}`` error body if present, otherwise
    uses the response text.

    Args:
        response: HTTP response object

    Raises:
        APIError subclass based on status code
    """
    if response.is_success:
        return

    error_message = ErrorMessage.from_response(response)
    status_code = response.status_code

    # Determine exception class
    if status_code in EXCEPTION_MAP:
        exc_class = EXCEPTION_MAP[status_code]
    elif 400 <= status_code < 500:
        exc_class = ClientError
    elif 500 <= status_code < 600:
        exc_class = ServerError
    else:
        exc_class = APIError

    # Build error message
    if error_message:
        message = f"HTTP {status_code}: {error_message.to_exception_message()}"
    else:
        response_text = response.text[:200]
        message = f"HTTP {status_code}: {response_text}" if response_text else f"HTTP {status_code}"

    if exc_class is ValidationError:
        raise ValidationError(
            message=message,
            validation_errors=error_message.errors if error_message else None,
            status_code=status_code,
            response=response,
            error_message=error_message,
        )

    raise exc_class(
        message=message,
        status_code=status_code,
        response=response,
        error_message=error_message,
    )
