"""
Custom exceptions and error handling for tripbook.

Defines application-specific exceptions with error codes so callers can show
a stable user-facing message while logs keep the internal detail.

Usage:
    from tripbook.errors import NotFoundError, ErrorCode

    raise NotFoundError(f"Trip {trip_id} not found", code=ErrorCode.TRIP_NOT_FOUND)
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for user-facing error messages."""

    # Lookup errors
    TRIP_NOT_FOUND = "TRIP_NOT_FOUND"
    DESTINATION_NOT_FOUND = "DESTINATION_NOT_FOUND"
    ITEM_NOT_FOUND = "ITEM_NOT_FOUND"
    EXPENSE_NOT_FOUND = "EXPENSE_NOT_FOUND"
    DOCUMENT_NOT_FOUND = "DOCUMENT_NOT_FOUND"

    # Storage errors
    STORAGE_UNAVAILABLE = "STORAGE_UNAVAILABLE"
    SAVE_FAILED = "SAVE_FAILED"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    UNSUPPORTED_CURRENCY = "UNSUPPORTED_CURRENCY"

    # System errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


USER_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.TRIP_NOT_FOUND: "This trip no longer exists.",
    ErrorCode.DESTINATION_NOT_FOUND: "This destination no longer exists.",
    ErrorCode.ITEM_NOT_FOUND: "This activity no longer exists.",
    ErrorCode.EXPENSE_NOT_FOUND: "This expense no longer exists.",
    ErrorCode.DOCUMENT_NOT_FOUND: "This document no longer exists.",
    ErrorCode.STORAGE_UNAVAILABLE: "Your trips could not be opened. Please restart the app.",
    ErrorCode.SAVE_FAILED: "Your changes could not be saved. Please try again.",
    ErrorCode.VALIDATION_ERROR: "Some fields are missing or invalid. Please check and try again.",
    ErrorCode.UNSUPPORTED_CURRENCY: "This currency is not supported.",
    ErrorCode.INTERNAL_ERROR: "An unexpected error occurred. Please try again.",
}


class TripbookError(Exception):
    """Base exception for all tripbook errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL_ERROR):
        self.message = message
        self.code = code
        super().__init__(message)

    @property
    def user_message(self) -> str:
        return USER_MESSAGES.get(self.code, USER_MESSAGES[ErrorCode.INTERNAL_ERROR])


class NotFoundError(TripbookError):
    """A trip or one of its records does not exist."""

    pass


class StorageError(TripbookError):
    """The local database could not be opened or a commit failed."""

    pass


class ValidationError(TripbookError):
    """Input was rejected outside of form model validation."""

    pass
