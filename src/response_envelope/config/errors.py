"""Text constants for consistent error handling."""

from enum import StrEnum

__all__ = ["ErrorCode", "ErrorNames"]


class ErrorCode(StrEnum):
    """Error codes for standardized error handling."""

    # General errors
    SERVER_ERROR = "SERVER_ERROR"

    # Envelope errors
    INVALID_STATE = "INVALID_STATE"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"


class ErrorNames(StrEnum):
    """Error names for standardized error handling."""

    INTERNAL_SERVER_ERROR = "Internal server error"

    # State errors
    DATA_NOT_SEQUENCE = "Data is not a list"
    FIELD_LIMIT_NOT_SEQUENCE = "Method limit_field only applicable to list response data"
    NOT_PAGINATED = "Response is not set to paginated"

    # Argument errors
    INVALID_LIMIT = "Limit size can only be a positive number or -1, got {value}"
    INVALID_PAGE = "Page number must be a positive number, got {value}"
    INVALID_BASE_URI = "Base URI must contain {placeholder} to indicate page number location"
    INVALID_INDEX = "Field index must be an integer, got {value}"
