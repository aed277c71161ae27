"""Schemas for the serialized response envelope."""

from pydantic import BaseModel, Field

__all__ = ["ErrorInfo", "PageLink", "PaginationInfo", "Results"]


class ErrorInfo(BaseModel):
    """Error details attached to a failed response."""

    code: int = Field(description="Application error code")
    message: str = Field(description="Human-readable error message")


class PaginationInfo(BaseModel):
    """Pagination state of the current window."""

    paginated: bool = False
    total_pages: int = Field(
        default=0, ge=0, serialization_alias="totalPages", description="Number of pages"
    )
    page: int = Field(default=0, ge=0, description="Current page, 0 if not paginated")


class PageLink(BaseModel):
    """Descriptor of the page before or after the current one."""

    page: int = Field(ge=1)
    count: int = Field(ge=0, description="Number of items on that page")
    uri: str | None = None


class Results(BaseModel):
    """Metadata describing the visible data window."""

    count: int = 0
    out_of_range: bool = Field(default=False, serialization_alias="outOfRange")
    display_limit: int = Field(
        default=-1,
        serialization_alias="displayLimit",
        description="Items per window, -1 for unlimited",
    )
    pagination: PaginationInfo = Field(default_factory=PaginationInfo)
    previous_page: PageLink | None = Field(
        default=None, serialization_alias="previousPage"
    )
    next_page: PageLink | None = Field(default=None, serialization_alias="nextPage")

    def to_dict(self) -> dict:
        """Dump with camelCase keys, leaving out page links that do not apply."""
        return self.model_dump(by_alias=True, exclude_none=True)
