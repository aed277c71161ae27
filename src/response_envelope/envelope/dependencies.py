"""FastAPI dependency applying window query parameters to an envelope."""

from typing import Annotated
from urllib.parse import urlencode

from fastapi import Query, Request

from response_envelope.config import settings

from .response import ResponseEnvelope

__all__ = ["WindowParams"]


class WindowParams:
    """Query parameters selecting a window of an enveloped list.

    Use as a route dependency and hand the envelope to ``apply``:

        @router.get("/items")
        async def list_items(window: Annotated[WindowParams, Depends()]):
            return envelope_response(window.apply(ResponseEnvelope(items, paginate=True)))
    """

    def __init__(
        self,
        request: Request,
        page: Annotated[
            int | None, Query(ge=1, description="Page number, starts at 1")
        ] = None,
        limit: Annotated[
            int | None, Query(ge=-1, description="Items per page, -1 for unlimited")
        ] = None,
    ) -> None:
        """Capture the query parameters and the request URL."""
        self.page = page
        self.limit = limit
        self._request = request

    @property
    def base_uri(self) -> str:
        """Request URL with the ``page`` query value replaced by the placeholder."""
        params = [
            (key, value)
            for key, value in self._request.query_params.multi_items()
            if key != "page"
        ]
        # Only the page value may hold the raw placeholder, other values stay encoded
        query = urlencode(params)
        page_param = f"page={settings.page_placeholder}"
        query = f"{query}&{page_param}" if query else page_param
        return str(self._request.url.replace(query=query))

    def apply(self, envelope: ResponseEnvelope) -> ResponseEnvelope:
        """Apply the requested limit and page to the envelope.

        Args:
            envelope: Envelope wrapping list data.

        Returns:
            The same envelope, windowed.
        """
        if self.limit is not None:
            envelope.set_display_limit(self.limit)
        if self.page is not None:
            envelope.set_page(self.page, self.base_uri)
        return envelope