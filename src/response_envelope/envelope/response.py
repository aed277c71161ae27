"""Response envelope wrapping API data with status and window metadata."""

import copy
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any, Self

from loguru import logger

from response_envelope.config import ErrorNames, settings

from .exceptions import (
    InvalidBaseURIError,
    InvalidIndexError,
    InvalidLimitError,
    InvalidPageError,
    NotPaginatedError,
    NotSequenceError,
)
from .schemas import ErrorInfo, PaginationInfo, Results
from .windowing import UNLIMITED, compute_window, default_results

__all__ = ["ResponseEnvelope"]


class ResponseEnvelope:
    """Uniform wrapper around the data of one API response.

    List data can be windowed with ``set_display_limit``, ``set_page`` and
    ``limit_field``. Every call recomputes ``data`` and ``results`` from the
    full data snapshot and returns the envelope, so calls can be chained in
    any order.

    Example:
        >>> envelope = ResponseEnvelope(list(range(1, 11)), paginate=True)
        >>> envelope.set_display_limit(3).set_page(2).data
        [4, 5, 6]
    """

    def __init__(
        self,
        data: Any = None,
        success: bool = True,
        status: int | None = None,
        *,
        updated_time: datetime | str | None = None,
        error: Mapping[str, Any] | None = None,
        paginate: bool = False,
        trace: bool | None = None,
    ) -> None:
        """Wrap the data and initialize default metadata.

        Args:
            data: Payload of the response. Lists and tuples can be windowed.
            success: Whether the request succeeded.
            status: HTTP status code, defaults to ``settings.default_status``.
            updated_time: When the underlying information was last updated.
            error: ``code`` and ``message`` of a failed response. Missing or
                malformed fields fall back to the unknown error.
            paginate: Enable pagination, starting on page 1.
            trace: Log every recomputation at debug level. Defaults to
                ``settings.envelope_trace``.
        """
        self._success = bool(success)
        self._status = settings.default_status if status is None else status
        self._updated_time = _serialize_time(updated_time)
        self._error = None if self._success else _build_error(error)
        self._trace = settings.envelope_trace if trace is None else trace
        self._placeholder = settings.page_placeholder

        self._page = 0
        self._limit = UNLIMITED
        self._base_uri = ""
        self._full_data: list[Any] | None = None

        if _is_sequence(data):
            self._full_data = copy.deepcopy(list(data))
            self._data: Any = copy.deepcopy(self._full_data)
            self._results = default_results(len(data))
        else:
            self._data = copy.deepcopy(data)
            self._results = default_results(0 if data is None else 1)

        if paginate is True:
            self._page = 1
            self._results.pagination = PaginationInfo(
                paginated=True, total_pages=1, page=1
            )

        self._log_event("constructor")

    @classmethod
    def from_options(
        cls,
        data: Any = None,
        success: bool = True,
        status: int | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> Self:
        """Create an envelope from an options mapping.

        Recognized keys are ``updatedTime`` (or ``updated_time``), ``error``,
        ``paginate`` and ``trace``. Anything that is not a mapping is ignored.
        """
        if not isinstance(options, Mapping):
            options = {}
        return cls(
            data,
            success,
            status,
            updated_time=options.get("updatedTime", options.get("updated_time")),
            error=options.get("error"),
            paginate=bool(options.get("paginate", False)),
            trace=options.get("trace"),
        )

    @property
    def success(self) -> bool:
        return self._success

    @property
    def status(self) -> int:
        return self._status

    @property
    def updated_time(self) -> str | None:
        return self._updated_time

    @property
    def error(self) -> ErrorInfo | None:
        return self._error

    @property
    def data(self) -> Any:
        """Currently visible data."""
        return self._data

    @property
    def results(self) -> Results:
        """Metadata of the currently visible data."""
        return self._results

    def set_display_limit(self, limit_size: int = UNLIMITED) -> Self:
        """Set how many items are shown per response, or per page if paginated.

        Args:
            limit_size: Positive number of items, or -1 to remove the limit.

        Returns:
            This envelope.

        Raises:
            NotSequenceError: If the data is not a list.
            InvalidLimitError: If the limit is neither positive nor -1.
        """
        if self._full_data is None:
            raise NotSequenceError
        if not _is_int(limit_size) or limit_size == 0 or (
            limit_size < 0 and limit_size != UNLIMITED
        ):
            raise InvalidLimitError(limit_size)

        self._limit = limit_size
        self._refresh()
        self._log_event("set_display_limit")
        return self

    def set_page(self, page_number: int, base_uri: str = "") -> Self:
        """Move the window to the given page.

        Args:
            page_number: Page to show, starting at 1.
            base_uri: URI template for the previous/next page links. It must
                contain the page placeholder (``??`` by default).

        Returns:
            This envelope.

        Raises:
            NotSequenceError: If the data is not a list.
            NotPaginatedError: If pagination was not enabled on construction.
            InvalidPageError: If the page number is below 1.
            InvalidBaseURIError: If the base URI lacks the placeholder.
        """
        if self._full_data is None:
            raise NotSequenceError
        if not self._page:
            raise NotPaginatedError
        if not _is_int(page_number) or page_number < 1:
            raise InvalidPageError(page_number)
        base_uri = base_uri or ""
        if base_uri and self._placeholder not in base_uri:
            raise InvalidBaseURIError(self._placeholder)

        self._page = page_number
        self._base_uri = base_uri
        self._refresh()
        self._log_event("set_page")
        return self

    def limit_field(self, start_index: int = 0, end_index: int | None = None) -> Self:
        """Permanently narrow the full data to ``[start_index, end_index)``.

        Indices follow slice semantics. Later limit and page calls only see
        the narrowed items.

        Args:
            start_index: First index to keep (inclusive).
            end_index: Index to stop at (exclusive), defaults to the end.

        Returns:
            This envelope.

        Raises:
            NotSequenceError: If the data is not a list.
            InvalidIndexError: If an index is not an integer.
        """
        if self._full_data is None:
            raise NotSequenceError(ErrorNames.FIELD_LIMIT_NOT_SEQUENCE)
        for index in (start_index, end_index):
            if index is not None and not _is_int(index):
                raise InvalidIndexError(index)

        self._full_data = self._full_data[start_index:end_index]
        self._refresh()
        self._log_event("limit_field")
        return self

    def to_dict(self) -> dict[str, Any]:
        """Serialize into the wire shape with camelCase keys.

        Optional keys (``updatedTime``, ``error``, page links and their
        ``uri``) are left out when unset.
        """
        payload: dict[str, Any] = {"success": self._success, "status": self._status}
        if self._updated_time is not None:
            payload["updatedTime"] = self._updated_time
        if self._error is not None:
            payload["error"] = self._error.model_dump()
        payload["data"] = copy.deepcopy(self._data)
        payload["results"] = self._results.to_dict()
        return payload

    def _refresh(self) -> None:
        visible, self._results = compute_window(
            self._full_data or [],
            page=self._page,
            limit=self._limit,
            base_uri=self._base_uri,
            placeholder=self._placeholder,
        )
        self._data = copy.deepcopy(visible)
        self._log_event(None, "Results reset")

    def _log_event(self, method: str | None, action: str = "") -> None:
        if not self._trace:
            return
        event = f"Action - {action}" if action else f"Method - {method}"
        logger.bind(
            page=self._page,
            limit=self._limit,
            count=self._results.count,
            out_of_range=self._results.out_of_range,
        ).debug("Envelope event: {}", event)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(success={self._success}, status={self._status}, "
            f"count={self._results.count}, page={self._page}, limit={self._limit})"
        )


def _is_sequence(value: Any) -> bool:
    return isinstance(value, list | tuple)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _serialize_time(value: datetime | str | None) -> str | None:
    """Render a timestamp as ISO-8601 with milliseconds, UTC as ``Z``."""
    if isinstance(value, str):
        return value
    if not isinstance(value, datetime):
        return None
    if value.tzinfo is not None:
        value = value.astimezone(UTC)
        return value.replace(tzinfo=None).isoformat(timespec="milliseconds") + "Z"
    return value.isoformat(timespec="milliseconds")


def _build_error(error: Any) -> ErrorInfo:
    """Build error details, defaulting whatever is missing or malformed."""
    if not isinstance(error, Mapping):
        error = {}
    code = error.get("code")
    message = error.get("message")
    return ErrorInfo(
        code=code if _is_int(code) else settings.unknown_error_code,
        message=message
        if isinstance(message, str) and message
        else settings.unknown_error_message,
    )
