"""Custom exception types for integration and API layers."""
from __future__ import annotations


class AppError(Exception):
    """Base app exception."""


class IntegrationError(AppError):
    """External integration call failure."""


class N8NAPIError(IntegrationError):
    """A call to the n8n REST API failed.

    ``status_code`` holds the upstream HTTP status, or ``None`` when the request
    never produced a response (DNS, refused connection, timeout).
    """

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message or "n8n request failed"
        self.status_code = status_code
        super().__init__(self.message)


class RequestBodyError(AppError):
    """Inbound request body declared as JSON could not be parsed."""
