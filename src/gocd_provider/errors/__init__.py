"""Error handling for GoCD API responses."""

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
from gocd_provider.errors.handler import raise_for_status
from gocd_provider.errors.models import ErrorMessage

__all__ = [
    "APIError",
    "BadRequestError",
    "ClientError",
    "ConflictError",
    "ErrorMessage",
    "ForbiddenError",
    "NotFoundError",
    "PreconditionFailedError",
    "ServerError",
    "UnauthorizedError",
    "ValidationError",
    "raise_for_status",
]
