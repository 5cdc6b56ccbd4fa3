"""
Error taxonomy for the maps tools.

Every tool failure is a ``ToolError`` carrying the HTTP status and the JSON
key (``error`` or ``message``) the response body uses.
"""

from typing import Any


class ToolError(Exception):
    """Base exception for all tool failures."""

    status_code = 500
    key = "error"

    def __init__(self, message: str, key: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        if key is not None:
            self.key = key

    def to_payload(self) -> dict[str, Any]:
        return {self.key: self.message}


class ValidationError(ToolError):
    """Raised when a required request field is missing."""

    status_code = 400


class NotFoundError(ToolError):
    """Raised when the provider returned zero results."""

    status_code = 404


class InternalError(ToolError):
    """Raised for any other failure. The message never carries internal detail."""

    status_code = 500
