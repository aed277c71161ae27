"""Envelope exceptions."""

from typing import Any

from fastapi import status

from response_envelope.common.app_error import AppError
from response_envelope.config.errors import ErrorCode, ErrorNames

__all__ = [
    "InvalidArgumentError",
    "InvalidBaseURIError",
    "InvalidIndexError",
    "InvalidLimitError",
    "InvalidPageError",
    "InvalidStateError",
    "NotPaginatedError",
    "NotSequenceError",
]


class InvalidStateError(AppError):
    """Exception raised when an operation does not fit the envelope state."""

    error_code = ErrorCode.INVALID_STATE
    message = "Operation not applicable to the current envelope"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class InvalidArgumentError(AppError):
    """Exception raised when an operation receives an invalid argument."""

    error_code = ErrorCode.INVALID_ARGUMENT
    message = "Invalid argument"
    status_code = status.HTTP_400_BAD_REQUEST


class NotSequenceError(InvalidStateError):
    """Exception raised when windowing is requested on non-list data."""

    def __init__(self, message: str = ErrorNames.DATA_NOT_SEQUENCE) -> None:
        """Initialize with the message matching the rejected operation."""
        super().__init__(message)


class NotPaginatedError(InvalidStateError):
    """Exception raised when a page is set on an unpaginated envelope."""

    message = ErrorNames.NOT_PAGINATED


class InvalidLimitError(InvalidArgumentError):
    """Exception raised for a display limit that is neither positive nor -1."""

    def __init__(self, value: Any) -> None:
        """Initialize with the rejected limit."""
        super().__init__(ErrorNames.INVALID_LIMIT.format(value=value))


class InvalidPageError(InvalidArgumentError):
    """Exception raised for a page number below 1."""

    def __init__(self, value: Any) -> None:
        """Initialize with the rejected page number."""
        super().__init__(ErrorNames.INVALID_PAGE.format(value=value))


class InvalidBaseURIError(InvalidArgumentError):
    """Exception raised when a base URI has no page placeholder."""

    def __init__(self, placeholder: str) -> None:
        """Initialize with the placeholder the URI is missing."""
        super().__init__(ErrorNames.INVALID_BASE_URI.format(placeholder=placeholder))


class InvalidIndexError(InvalidArgumentError):
    """Exception raised for a non-integer field index."""

    def __init__(self, value: Any) -> None:
        """Initialize with the rejected index."""
        super().__init__(ErrorNames.INVALID_INDEX.format(value=value))
