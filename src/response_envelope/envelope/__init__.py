"""Envelope module.

Wraps the data of an API response together with success status, item count
and pagination metadata. Windowing (display limit, page, field range) is
recomputed from the full data snapshot on every configuration call.
"""

from .dependencies import WindowParams
from .exceptions import (
    InvalidArgumentError,
    InvalidBaseURIError,
    InvalidIndexError,
    InvalidLimitError,
    InvalidPageError,
    InvalidStateError,
    NotPaginatedError,
    NotSequenceError,
)
from .response import ResponseEnvelope
from .schemas import ErrorInfo, PageLink, PaginationInfo, Results
from .windowing import UNLIMITED, build_page_uri, compute_window, default_results

__all__ = [
    "UNLIMITED",
    "ErrorInfo",
    "InvalidArgumentError",
    "InvalidBaseURIError",
    "InvalidIndexError",
    "InvalidLimitError",
    "InvalidPageError",
    "InvalidStateError",
    "NotPaginatedError",
    "NotSequenceError",
    "PageLink",
    "PaginationInfo",
    "ResponseEnvelope",
    "Results",
    "WindowParams",
    "build_page_uri",
    "compute_window",
    "default_results",
]
