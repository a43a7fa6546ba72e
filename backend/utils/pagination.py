"""Pagination helpers: page/pageSize clamping, navigation links and the paged envelope."""
import math
from collections.abc import Sequence
from typing import Any, Optional
from urllib.parse import urlencode

from fastapi import Request

from schemas.common import Link, PagedResponse

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


def normalize_pagination(page: int, page_size: int) -> tuple[int, int]:
    """Clamp page to >= 1 and fall back to the default size when page_size is outside [1, 100]."""
    valid_page = DEFAULT_PAGE if page < 1 else page
    valid_page_size = DEFAULT_PAGE_SIZE if page_size < 1 or page_size > MAX_PAGE_SIZE else page_size
    return valid_page, valid_page_size


def page_offset(page: int, page_size: int) -> int:
    """SQL OFFSET for a normalized page."""
    return (page - 1) * page_size


def make_link(request: Request, rel: str, path: str, method: str = "GET") -> Link:
    """Absolute link for path on the host the request came in on."""
    return Link(rel=rel, href=f"{request.url.scheme}://{request.url.netloc}{path}", method=method)


def _page_path(base_path: str, page: int, page_size: int, extra_query: Optional[dict[str, Any]]) -> str:
    query = {"page": page, "pageSize": page_size}
    if extra_query:
        query.update({k: v for k, v in extra_query.items() if v is not None and v != ""})
    return f"{base_path}?{urlencode(query)}"


def total_pages(total: int, page_size: int) -> int:
    """Number of pages for total rows (ceiling of the float division)."""
    return math.ceil(total / float(page_size))


def to_paged(
    request: Request,
    items: Sequence[Any],
    page: int,
    page_size: int,
    total: int,
    base_path: str,
    extra_query: Optional[dict[str, Any]] = None,
) -> PagedResponse:
    """
    Wrap one page of items with pagination metadata and self/prev/next links.

    page and page_size must already be normalized, so page_size is never 0.
    extra_query (e.g. a list filter) is carried into every link.
    """
    links = [make_link(request, "self", _page_path(base_path, page, page_size, extra_query))]
    if page > 1:
        links.append(make_link(request, "prev", _page_path(base_path, page - 1, page_size, extra_query)))
    if page < total_pages(total, page_size):
        links.append(make_link(request, "next", _page_path(base_path, page + 1, page_size, extra_query)))
    return PagedResponse(
        items=list(items),
        page=page,
        pageSize=page_size,
        totalCount=total,
        links=links,
    )
