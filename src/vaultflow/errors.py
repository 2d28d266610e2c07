"""Domain-specific exceptions shared by services and the HTTP layer."""

from __future__ import annotations


class VaultFlowError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code = 500


class ValidationError(VaultFlowError, ValueError):
    """Raised when request data is missing or malformed."""

    status_code = 400

    def __init__(self, message: str, *, fields: dict[str, list[str]] | None = None) -> None:
        super().__init__(message)
        self.fields = fields or {}


class AuthenticationError(VaultFlowError):
    """Raised when credentials or bearer tokens are rejected."""

    status_code = 401

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code


class NotFoundError(VaultFlowError, LookupError):
    """Raised when a record cannot be located for the current user."""

    status_code = 404


class ConflictError(VaultFlowError):
    """Raised when another request changed the record first."""

    status_code = 409


class PersistenceError(VaultFlowError, IOError):
    """Raised when the store fails mid-operation; partial writes are not undone."""

    status_code = 500
