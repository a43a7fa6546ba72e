"""Unit tests: pagination normalizer, link builder and paged envelope."""
from types import SimpleNamespace

import pytest

from utils.pagination import make_link, normalize_pagination, to_paged, total_pages

pytestmark = pytest.mark.unit


def _request(scheme="http", netloc="testserver"):
    """Minimal stand-in for a FastAPI Request (only url.scheme/url.netloc are read)."""
    return SimpleNamespace(url=SimpleNamespace(scheme=scheme, netloc=netloc))


def _rels(envelope):
    return {link.rel: link for link in envelope.links}


@pytest.mark.parametrize(
    "page,page_size,expected",
    [
        (0, 20, (1, 20)),
        (-5, 10, (1, 10)),
        (3, 0, (3, 20)),
        (3, 101, (3, 20)),
        (3, -1, (3, 20)),
        (1, 1, (1, 1)),
        (7, 100, (7, 100)),
    ],
)
def test_normalize_pagination(page, page_size, expected):
    """page < 1 becomes 1; page_size outside [1, 100] becomes 20."""
    assert normalize_pagination(page, page_size) == expected


@pytest.mark.parametrize("page,page_size", [(1, 1), (2, 20), (50, 100), (999, 37)])
def test_normalize_pagination_idempotent_on_valid_input(page, page_size):
    """Already-valid pairs come back unchanged, and normalizing twice changes nothing."""
    once = normalize_pagination(page, page_size)
    assert once == (page, page_size)
    assert normalize_pagination(*once) == once


def test_make_link_absolute_href():
    """make_link prefixes the path with the request's scheme and host."""
    link = make_link(_request("https", "api.example.com:8443"), "self", "/api/zonas/3", "GET")
    assert link.rel == "self"
    assert link.href == "https://api.example.com:8443/api/zonas/3"
    assert link.method == "GET"


def test_total_pages_rounds_up():
    """Total pages is the ceiling of total / page_size."""
    assert total_pages(0, 20) == 0
    assert total_pages(1, 20) == 1
    assert total_pages(20, 20) == 1
    assert total_pages(21, 20) == 2


def test_to_paged_envelope_fields():
    """Envelope carries items, page, pageSize, totalCount and links."""
    env = to_paged(_request(), ["a", "b"], 1, 2, 5, "/api/patios")
    assert env.items == ["a", "b"]
    assert env.page == 1
    assert env.pageSize == 2
    assert env.totalCount == 5


def test_to_paged_first_page_has_self_and_next_only():
    """First of several pages: self and next, no prev."""
    rels = _rels(to_paged(_request(), [], 1, 20, 45, "/api/motos"))
    assert set(rels) == {"self", "next"}
    assert rels["self"].href == "http://testserver/api/motos?page=1&pageSize=20"
    assert rels["next"].href == "http://testserver/api/motos?page=2&pageSize=20"


def test_to_paged_middle_page_has_prev_and_next():
    """Middle page links to page - 1 and page + 1."""
    rels = _rels(to_paged(_request(), [], 2, 20, 45, "/api/motos"))
    assert set(rels) == {"self", "prev", "next"}
    assert rels["prev"].href.endswith("?page=1&pageSize=20")
    assert rels["next"].href.endswith("?page=3&pageSize=20")


def test_to_paged_last_page_has_no_next():
    """Last page: prev but no next."""
    rels = _rels(to_paged(_request(), [], 3, 20, 45, "/api/motos"))
    assert set(rels) == {"self", "prev"}


def test_to_paged_empty_result_only_self():
    """No rows: only the self link."""
    rels = _rels(to_paged(_request(), [], 1, 20, 0, "/api/zonas"))
    assert set(rels) == {"self"}


@pytest.mark.parametrize("total", [0, 1, 19, 20, 21, 39, 40, 41, 100, 101])
@pytest.mark.parametrize("page_size", [1, 7, 20, 100])
@pytest.mark.parametrize("page", [1, 2, 3, 5])
def test_next_link_iff_more_rows_and_prev_iff_not_first(page, page_size, total):
    """next is present iff page * pageSize < totalCount; prev iff page > 1 and points at page - 1."""
    rels = _rels(to_paged(_request(), [], page, page_size, total, "/api/statuses"))
    assert ("next" in rels) == (page * page_size < total)
    assert ("prev" in rels) == (page > 1)
    if page > 1:
        assert rels["prev"].href.endswith(f"?page={page - 1}&pageSize={page_size}")


def test_to_paged_carries_filter_into_links():
    """A list filter is kept on every link; empty filters are dropped."""
    env = to_paged(_request(), [], 2, 10, 30, "/api/motos", extra_query={"placa": "abc"})
    for link in env.links:
        assert "placa=abc" in link.href
    env = to_paged(_request(), [], 1, 10, 30, "/api/motos", extra_query={"placa": None})
    assert all("placa" not in link.href for link in env.links)
