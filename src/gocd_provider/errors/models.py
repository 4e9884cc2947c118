"""GoCD error response models."""

from dataclasses import dataclass
from typing import Any

import httpx


@dataclass
class ErrorMessage:
    """Error body returned by the GoCD API.

    GoCD answers failed calls with ``{"message": "..."}``; validation failures
    also echo the submitted entity under ``data`` with per-field messages in
    ``data.errors``.
    """

    message: str
    data: dict[str, Any] | None = None

    @property
    def errors(self) -> dict[str, list[str]]:
        """Per-field validation messages, empty when the server sent none."""
        if not self.data:
            return {}
        errors = self.data.get("errors")
        return errors if isinstance(errors, dict) else {}

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ErrorMessage | None":
        """Parse a GoCD error body from an HTTP response.

        Args:
            response: HTTP response object

        Returns:
            ErrorMessage object or None if the body is not a GoCD error
        """
        try:
            data = response.json()
        except (ValueError, TypeError, AttributeError):
            # JSON decode errors, type errors, or missing .json() method
            return None

        if not isinstance(data, dict) or not isinstance(data.get("message"), str):
            return None

        entity = data.get("data")
        return cls(message=data["message"], data=entity if isinstance(entity, dict) else None)

    def to_exception_message(self) -> str:
        """Convert the error body to an exception message."""
        lines = [self.message]

        for field, messages in self.errors.items():
            for message in messages:
                lines.append(f"  - {field}: {message}")

        return "\n".join(lines)
