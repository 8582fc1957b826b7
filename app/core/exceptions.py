"""
Typed application errors.

Gateways and helpers raise these; the exception handlers registered in
main.py turn each one into its HTTP status and a safe message.
"""

from fastapi import status


class AppError(Exception):
    """Base application error carrying an HTTP status and a client-safe message."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class BadRequestError(AppError):
    """Raised for malformed input or a field that may not be changed."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Bad request"


class DuplicateError(BadRequestError):
    """Raised when a create or apply would violate a uniqueness rule."""
    default_message = "Duplicate record"


class EmptyUpdateError(BadRequestError):
    """Raised when a partial update carries no fields."""
    default_message = "No data"


class UnauthorizedError(AppError):
    """Raised for a missing/invalid token or a failed authorization check."""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"


AuthorizationError = UnauthorizedError


class NotFoundError(AppError):
    """Raised when no row matches the requested key."""
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"
