"""
Custom exceptions for the travel tracker service.
"""

from typing import Optional, Dict, Any
from enum import Enum


class ErrorCode(str, Enum):
    """Standardized error codes for the application."""

    # Authentication errors
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    EMAIL_ALREADY_REGISTERED = "EMAIL_ALREADY_REGISTERED"

    # Resource errors
    NOT_FOUND = "NOT_FOUND"
    TRIP_NOT_FOUND = "TRIP_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"

    # Data import errors
    LEGACY_IMPORT_FAILED = "LEGACY_IMPORT_FAILED"

    # Generic errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class TravelTrackerException(Exception):
    """Base exception for the travel tracker service."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code


class TripNotFoundError(TravelTrackerException):
    """Raised when a trip does not exist or belongs to another user."""

    def __init__(self, trip_id: int):
        super().__init__(
            message="Trip not found",
            error_code=ErrorCode.TRIP_NOT_FOUND,
            details={"trip_id": trip_id},
            status_code=404
        )


class UserNotFoundError(TravelTrackerException):
    """Raised when a user account cannot be located."""

    def __init__(self, identifier: str):
        super().__init__(
            message=f"User '{identifier}' not found",
            error_code=ErrorCode.USER_NOT_FOUND,
            details={"user": identifier},
            status_code=404
        )


class AuthenticationError(TravelTrackerException):
    """Raised when a request lacks a usable access token."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(
            message=message,
            error_code=ErrorCode.UNAUTHORIZED,
            status_code=401
        )


class InvalidCredentialsError(TravelTrackerException):
    """Raised when email/password or a refresh token do not check out."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(
            message=message,
            error_code=ErrorCode.INVALID_CREDENTIALS,
            status_code=401
        )


class EmailAlreadyRegisteredError(TravelTrackerException):
    """Raised on registration with an email that already has an account."""

    def __init__(self, email: str):
        super().__init__(
            message="Email already registered",
            error_code=ErrorCode.EMAIL_ALREADY_REGISTERED,
            details={"email": email},
            status_code=400
        )


class LegacyImportError(TravelTrackerException):
    """Raised when a legacy SQLite database cannot be imported."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.LEGACY_IMPORT_FAILED,
            details=details,
            status_code=400
        )
