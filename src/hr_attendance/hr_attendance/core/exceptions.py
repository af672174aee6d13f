from __future__ import annotations


class DomainError(Exception):
    """Base exception for business rule violations."""

    status_code = 400


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""

    status_code = 401


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""

    status_code = 403


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""

    status_code = 404


class ConflictError(DomainError):
    """Raised when an action was already performed (duplicate check-in, ...)."""

    status_code = 409


class ShiftNotFoundError(DomainError):
    """Raised when no shift matches the moment of a check-in or check-out."""

    status_code = 422


class OutOfRangeError(DomainError):
    """Raised when the reported location lies outside the branch radius."""

    status_code = 422

    def __init__(self, message: str, *, distance: float | None = None):
        super().__init__(message)
        self.distance = distance
