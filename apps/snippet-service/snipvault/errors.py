"""Domain errors raised by the snippet service and surfaced to API callers."""
from __future__ import annotations

from typing import Any, Dict

from fastapi import HTTPException, status


class SnippetServiceError(Exception):
    """Base class; carries the HTTP status and the caller-facing message."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def payload(self) -> Dict[str, Any]:
        return {"detail": self.message}

    def to_http_exception(self) -> HTTPException:
        """Convert the domain error into a FastAPI HTTPException."""
        return HTTPException(status_code=self.status_code, detail=self.message)


class Unauthorized(SnippetServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Authentication required"


class Forbidden(SnippetServiceError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden"


class NotFound(SnippetServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Snippet not found"


class ValidationError(SnippetServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class InternalError(SnippetServiceError):
    pass


_BY_STATUS = {
    cls.status_code: cls
    for cls in (Unauthorized, Forbidden, NotFound, ValidationError, InternalError)
}


def error_for_status(status_code: int, message: str | None = None) -> SnippetServiceError:
    """Return the taxonomy error for an HTTP status; unknown codes map to InternalError."""
    if status_code == 422:
        return ValidationError(message)
    cls = _BY_STATUS.get(status_code, InternalError)
    return cls(message)
