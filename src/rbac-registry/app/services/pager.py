"""Paging of list results and construction of navigation links.

``next`` is offered whenever a page comes back full. It signals that more
items may exist; no total count is taken, so the last full page also carries
a ``next`` link that leads to an empty page.
"""

from __future__ import annotations

from typing import Sequence, TypeVar

from shared.models import PagedLinks, PagedResponse
from shared.observability import get_logger

from .exceptions import PayloadTooLargeError, ValidationError

logger = get_logger(__name__)

T = TypeVar("T")

MAX_PAGE_SIZE = 100

# Largest offset a database OFFSET clause accepts (signed 64-bit)
MAX_OFFSET = 2**63 - 1


def check_page_request(
    page_number: int, page_size: int, max_page_size: int = MAX_PAGE_SIZE
) -> None:
    """Reject page requests before any data is read.

    Raises:
        PayloadTooLargeError: page_size exceeds max_page_size
        ValidationError: page_number or page_size is below 1, or the page
            starts beyond MAX_OFFSET
    """
    if page_size > max_page_size:
        msg = f"Payload too large. Max page size allowed is {max_page_size}"
        logger.warning(msg, page_size=page_size)
        raise PayloadTooLargeError(msg)
    if page_size < 1:
        raise ValidationError("pageSize must be at least 1")
    if page_number < 1:
        raise ValidationError("pageNumber must be at least 1")
    if page_offset(page_number, page_size) > MAX_OFFSET:
        msg = "pageNumber is too large"
        logger.warning(msg, page_number=page_number, page_size=page_size)
        raise ValidationError(msg)


def page_offset(page_number: int, page_size: int) -> int:
    """Number of items to skip to reach the given page."""
    return (page_number - 1) * page_size


def page_link(base_url: str, page_number: int, page_size: int) -> str:
    return f"{base_url}?pageSize={page_size}&pageNumber={page_number}"


def build_links(
    base_url: str, page_number: int, page_size: int, returned: int
) -> PagedLinks:
    """Build navigation links for a page holding ``returned`` items.

    Any query string already present on ``base_url`` is dropped.
    """
    base = base_url.rsplit("?", 1)[0]

    links = PagedLinks(base=base)
    if page_number > 1:
        links.prev = page_link(base, page_number - 1, page_size)
    if returned == page_size:
        links.next = page_link(base, page_number + 1, page_size)
    return links


def build_page(
    page_items: Sequence[T], base_url: str, page_number: int, page_size: int
) -> PagedResponse[T]:
    """Wrap an already-sliced page of items."""
    return PagedResponse(
        links=build_links(base_url, page_number, page_size, len(page_items)),
        page_size=page_size,
        page_number=page_number,
        results=list(page_items),
    )


def paginate(
    items: Sequence[T],
    page_number: int,
    page_size: int,
    base_url: str,
    max_page_size: int = MAX_PAGE_SIZE,
) -> PagedResponse[T]:
    """Slice ``items`` to the requested page and attach navigation links."""
    check_page_request(page_number, page_size, max_page_size)

    offset = page_offset(page_number, page_size)
    return build_page(items[offset : offset + page_size], base_url, page_number, page_size)
