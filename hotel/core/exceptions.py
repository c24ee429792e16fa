"""Custom exception hierarchy for the hotel API."""

from __future__ import annotations

from typing import Optional

from fastapi import status


class ApplicationError(Exception):
    """Base application error with HTTP semantics.

    ``message`` is the short error tag returned to clients as ``error``;
    ``details`` carries the underlying collaborator message, when there is one.
    """

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, *, status_code: int | None = None, details: Optional[str] = None) -> None:
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code
        self.message = message
        self.details = details

    def to_content(self) -> dict:
        content = {"error": self.message}
        if self.details is not None:
            content["details"] = self.details
        return content


class BadRequestError(ApplicationError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ApplicationError):
    status_code = status.HTTP_404_NOT_FOUND


class PersistenceError(ApplicationError):
    """Raised when a database operation fails."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    @classmethod
    def from_exception(cls, message: str, exc: Exception) -> "PersistenceError":
        return cls(message, details=str(exc))


class DatabaseUnavailableError(ApplicationError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
