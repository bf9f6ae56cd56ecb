"""
Domain errors raised by the service layer.

Each error carries the HTTP status it maps to.  ``create_app``
registers a handler that renders any ``UsersApiError`` as
``{"error": message}`` with that status, so endpoints never build
error responses themselves.
"""

from fastapi import status


class UsersApiError(Exception):
    """Base class for errors that are reported to API clients."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(UsersApiError):
    """Required input is missing or malformed."""

    status_code = status.HTTP_400_BAD_REQUEST


class InvalidId(UsersApiError):
    """A user id parameter is not a positive integer."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = "Invalid user ID") -> None:
        super().__init__(message)


class NotFound(UsersApiError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, user_id: int) -> None:
        super().__init__(f"User with id {user_id} not found")
        self.user_id = user_id


class Conflict(UsersApiError):
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, message: str = "A user with this email already exists") -> None:
        super().__init__(message)
