"""Tests for error handling utilities."""

import pytest
from httpx import Response

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


@pytest.mark.unit
def test_raise_for_status_success_response():
    """Test raise_for_status doesn't raise for successful responses."""
    response = Response(status_code=200)

    # Should not raise
    raise_for_status(response)


@pytest.mark.unit
def test_raise_for_status_400_bad_request():
    """Test raise_for_status raises BadRequestError for 400."""
    response = Response(
        status_code=400,
        headers={"content-type": "text/plain"},
        text="Bad request",
    )

    with pytest.raises(BadRequestError) as exc_info:
        raise_for_status(response)

    assert exc_info.value.status_code == 400
    assert exc_info.value.response == response
    assert "400" in str(exc_info.value)


@pytest.mark.unit
@pytest.mark.parametrize(
    ("status_code", "exc_class"),
    [
        (401, UnauthorizedError),
        (403, ForbiddenError),
        (404, NotFoundError),
        (409, ConflictError),
        (412, PreconditionFailedError),
        (418, ClientError),
        (500, ServerError),
        (503, ServerError),
    ],
)
def test_raise_for_status_maps_status_codes(status_code, exc_class):
    response = Response(status_code=status_code, text="Error")

    with pytest.raises(exc_class) as exc_info:
        raise_for_status(response)

    assert exc_info.value.status_code == status_code
    assert isinstance(exc_info.value, APIError)


@pytest.mark.unit
def test_raise_for_status_uses_gocd_message():
    """Test raise_for_status builds the message from the GoCD error body."""
    response = Response(
        status_code=401,
        json={"message": "You are not authorized to access this resource!"},
    )

    with pytest.raises(UnauthorizedError) as exc_info:
        raise_for_status(response)

    assert "You are not authorized to access this resource!" in str(exc_info.value)
    assert exc_info.value.error_message is not None


@pytest.mark.unit
def test_raise_for_status_422_collects_validation_errors():
    """Test raise_for_status extracts per-field errors for 422."""
    response = Response(
        status_code=422,
        json={
            "message": "Validations failed for pipeline 'build'. Error(s): [Validation failed.].",
            "data": {
                "name": "build",
                "errors": {"materials": ["A pipeline must have at least one material"]},
            },
        },
    )

    with pytest.raises(ValidationError) as exc_info:
        raise_for_status(response)

    assert exc_info.value.validation_errors == {"materials": ["A pipeline must have at least one material"]}
    assert "materials: A pipeline must have at least one material" in str(exc_info.value)


@pytest.mark.unit
def test_raise_for_status_422_without_body():
    response = Response(status_code=422)

    with pytest.raises(ValidationError) as exc_info:
        raise_for_status(response)

    assert exc_info.value.validation_errors == {}
    assert str(exc_info.value) == "HTTP 422"


@pytest.mark.unit
def test_raise_for_status_truncates_long_text():
    response = Response(status_code=500, text="x" * 500)

    with pytest.raises(ServerError) as exc_info:
        raise_for_status(response)

    assert len(str(exc_info.value)) == len("HTTP 500: ") + 200
