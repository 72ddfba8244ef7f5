"""Common types used across all models."""

from typing import Generic, TypeVar

from pydantic import Field

from .base import RegistryBaseModel

T = TypeVar("T")


class PagedLinks(RegistryBaseModel):
    """Navigation links of a paged list.

    ``prev`` and ``next`` are omitted when there is no such page.
    """

    base: str = Field(description="Link to the first page of items")
    next: str | None = Field(default=None, description="Link to the next page of items")
    prev: str | None = Field(default=None, description="Link to the previous page of items")


class PagedResponse(RegistryBaseModel, Generic[T]):
    """Paged list response wrapper."""

    links: PagedLinks = Field(alias="_links")
    page_size: int = Field(alias="pageSize", description="Maximum number of items in this page")
    page_number: int = Field(alias="pageNumber", description="Page number of pageSize items")
    results: list[T]


class ErrorResponse(RegistryBaseModel):
    """Standard error body, returned under ``detail``."""

    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error message")


class DeleteResponse(RegistryBaseModel):
    """Acknowledgement of a delete."""

    id: str = Field(alias="_id")
    message: str = "Success"
