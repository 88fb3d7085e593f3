"""Custom exception hierarchy for the contact form service."""

from __future__ import annotations

from fastapi import status


class ApplicationError(Exception):
    """Base application error with HTTP semantics."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    code: str = "application_error"

    def __init__(self, message: str, *, status_code: int | None = None, code: str | None = None) -> None:
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code
        if code is not None:
            self.code = code
        self.message = message


class ValidationError(ApplicationError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "validation_error"


class NotFoundError(ApplicationError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "not_found"


class PersistenceError(ApplicationError):
    """Raised when the database rejects or fails a statement.

    The message is safe to return to callers; driver detail travels as the
    exception cause and is only logged.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "persistence_error"


class DatabaseConnectionError(Exception):
    """Raised when the database cannot be reached at startup."""
