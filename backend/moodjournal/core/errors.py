"""
Error taxonomy shared by services and route handlers.

Every error carries the HTTP status it maps to and a short client-facing
message. The exception handlers registered in ``main.py`` render them as
``{"message": ...}``.
"""
import enum
from fastapi import status


class AppError(Exception):
    """Base class for errors that surface to the client."""
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(AppError):
    """Missing or malformed request fields."""
    status_code = status.HTTP_400_BAD_REQUEST


class AuthErrorKind(str, enum.Enum):
    """Why a request was refused."""
    MISSING = "missing"
    INVALID = "invalid"
    EXPIRED = "expired"
    FORBIDDEN = "forbidden"


class AuthError(AppError):
    """Missing, invalid or expired credentials."""
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str, kind: AuthErrorKind = AuthErrorKind.INVALID, status_code: int = None):
        super().__init__(message, status_code)
        self.kind = kind


class ForbiddenError(AuthError):
    """Authenticated, but the resource belongs to someone else."""
    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message, kind=AuthErrorKind.FORBIDDEN, status_code=status_code)


class NotFoundError(AppError):
    """The requested entity does not exist."""
    status_code = status.HTTP_404_NOT_FOUND


class UpstreamError(AppError):
    """An external service call failed."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class InternalError(AppError):
    """Unexpected store or hashing failure."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
