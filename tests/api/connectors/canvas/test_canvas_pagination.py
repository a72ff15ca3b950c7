"""Testes da paginação por cabeçalho Link."""

from __future__ import annotations

from typing import Any

import pytest

from api.connectors.canvas.errors import InvalidAPIRequest
from api.connectors.canvas.http_client import ApiResponse
from api.connectors.canvas.pagination import (
    collect_all,
    first_page_url,
    iter_pages,
    next_page_url,
    same_origin,
)

PAGE_2 = "https://canvas.test/api/v1/courses?page=2&per_page=100"
PAGE_3 = "https://canvas.test/api/v1/courses?page=bookmark:abc&per_page=100"


def _link(next_url: str | None) -> dict[str, str]:
    if next_url is None:
        return {"link": '<https://canvas.test/api/v1/courses?page=1>; rel="first"'}
    return {
        "link": (
            '<https://canvas.test/api/v1/courses?page=1>; rel="current",'
            f'<{next_url}>; rel="next",'
            '<https://canvas.test/api/v1/courses?page=1>; rel="first"'
        )
    }


class StubFetch:
    """Fetch fake: três páginas, as duas primeiras com rel="next"."""

    def __init__(self) -> None:
        self.urls: list[str] = []
        self._pages = {
            "courses?per_page=100": ApiResponse(200, _link(PAGE_2), [1, 2]),
            PAGE_2: ApiResponse(200, _link(PAGE_3), [3, 4]),
            PAGE_3: ApiResponse(200, _link(None), [5]),
        }

    def __call__(self, url: str) -> ApiResponse:
        self.urls.append(url)
        return self._pages[url]


class TestNextPageUrl:
    """Testes de next_page_url."""

    def test_extracts_next_entry(self) -> None:
        assert next_page_url(_link(PAGE_2)["link"]) == PAGE_2

    @pytest.mark.parametrize("header", [None, "", "   "])
    def test_blank_header_ends_pagination(self, header: str | None) -> None:
        assert next_page_url(header) is None

    def test_header_without_next_ends_pagination(self) -> None:
        assert next_page_url(_link(None)["link"]) is None

    def test_malformed_header_is_not_an_error(self) -> None:
        assert next_page_url("garbage, <also>garbage") is None

    def test_next_with_extra_attributes(self) -> None:
        header = f'<{PAGE_2}>; rel="next"; title="p2"'
        assert next_page_url(header) == PAGE_2


class TestFirstPageUrl:
    """Testes do primeiro URL paginado."""

    def test_appends_with_question_mark(self) -> None:
        assert first_page_url("courses", 50) == "courses?per_page=50"

    def test_appends_with_ampersand(self) -> None:
        assert first_page_url("courses?include%5B%5D=term", 50) == (
            "courses?include%5B%5D=term&per_page=50"
        )


class TestIterPages:
    """Testes de iteração e coleta."""

    def test_streams_three_pages_then_stops(self) -> None:
        fetch = StubFetch()
        seen: list[Any] = [page.body for page in iter_pages(fetch, "courses", 100)]

        assert seen == [[1, 2], [3, 4], [5]]
        assert fetch.urls == ["courses?per_page=100", PAGE_2, PAGE_3]

    def test_collect_all_concatenates_in_order(self) -> None:
        assert collect_all(StubFetch(), "courses", 100) == [1, 2, 3, 4, 5]

    def test_collect_all_appends_non_list_page(self) -> None:
        def fetch(url: str) -> ApiResponse:
            return ApiResponse(200, {}, {"count": 3})

        assert collect_all(fetch, "users/self/todo_item_count", 10) == [{"count": 3}]

    def test_same_origin_links_are_followed(self) -> None:
        fetch = StubFetch()
        pages = list(iter_pages(fetch, "courses", 100, "https://canvas.test"))
        assert len(pages) == 3

    def test_foreign_next_link_is_refused(self) -> None:
        fetch = StubFetch()
        fetch._pages["courses?per_page=100"] = ApiResponse(
            200, _link("https://evil.test/api/v1/courses?page=2"), [1, 2]
        )

        pages = iter_pages(fetch, "courses", 100, "https://canvas.test")
        assert next(pages).body == [1, 2]
        with pytest.raises(InvalidAPIRequest, match="evil.test"):
            next(pages)
        assert fetch.urls == ["courses?per_page=100"]


class TestSameOrigin:
    """Testes de same_origin."""

    @pytest.mark.parametrize(
        ("url", "expected"),
        [
            ("https://canvas.test/api/v1/x?page=2", True),
            ("HTTPS://Canvas.test/api/v1/x", True),
            ("http://canvas.test/api/v1/x", False),
            ("https://canvas.test:8443/api/v1/x", False),
            ("https://canvas.test.evil/api/v1/x", False),
            ("courses?page=2", True),
        ],
    )
    def test_compares_scheme_host_and_port(self, url: str, expected: bool) -> None:
        assert same_origin(url, "https://canvas.test") is expected

    def test_without_base_uri_everything_allowed(self) -> None:
        assert same_origin("https://other.test/x", None) is True
