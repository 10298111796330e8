"""Tests for the shared adapter contract and HTTP/HTML helpers."""

from collections.abc import Sequence

import httpx
import pytest

from jobsearch.core.config import HttpConfig, Settings
from jobsearch.core.schemas import ErrorResult, Listing, OkResult, Region
from jobsearch.platforms.base import SourceAdapter, SourceError, dedupe_by_url, primary_keyword
from jobsearch.platforms.html import absolute_url, collapse_ws, strip_tags
from jobsearch.platforms.http import build_client, fetch_json, fetch_text


def _listing(url: str, title: str = "Java") -> Listing:
    return Listing(title=title, url=url, source="stub")


class StubAdapter(SourceAdapter):
    def __init__(self, outcome: list[Listing] | Exception) -> None:
        super().__init__(httpx.AsyncClient(), Settings())
        self.outcome = outcome
        self.keywords: list[str] = []

    @property
    def source_id(self) -> str:
        return "stub"

    @property
    def display_name(self) -> str:
        return "스텁"

    def search_url(self, keyword: str) -> str:
        return f"https://stub.example/?q={keyword}"

    async def _collect(self, keyword: str, regions: Sequence[Region]) -> list[Listing]:
        self.keywords.append(keyword)
        if isinstance(self.outcome, Exception):
            raise self.outcome
        return list(self.outcome)


class TestHelpers:
    def test_primary_keyword(self) -> None:
        assert primary_keyword(["  ", "Spring", "Java"]) == "Spring"
        assert primary_keyword([]) == "Java"

    def test_dedupe_by_url_keeps_first(self) -> None:
        result = dedupe_by_url([_listing("a", "1"), _listing("b"), _listing("a", "2")])
        assert [(j.url, j.title) for j in result] == [("a", "1"), ("b", "Java")]

    @pytest.mark.parametrize(
        ("href", "expected"),
        [
            ("/jobs/1", "https://site.kr/jobs/1"),
            ("jobs/1", "https://site.kr/jobs/1"),
            ("//cdn.site.kr/x", "https://cdn.site.kr/x"),
            ("https://other.kr/y", "https://other.kr/y"),
            ("", ""),
        ],
    )
    def test_absolute_url(self, href: str, expected: str) -> None:
        assert absolute_url(href, "https://site.kr") == expected

    def test_text_cleanup(self) -> None:
        assert collapse_ws("  a \n\t b ") == "a b"

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("<em>Java</em> <b>8</b>", "Java 8"),
            ("<b>Spring</b>Boot", "SpringBoot"),
            ("Node.js", "Node.js"),
            ("C &amp; C++", "C & C++"),
            ("<span class=\"hl\">React</span>", "React"),
        ],
    )
    def test_strip_tags(self, raw: str, expected: str) -> None:
        assert strip_tags(raw) == expected


class TestSearchContract:
    async def test_ok_result(self) -> None:
        adapter = StubAdapter([_listing("a"), _listing("a"), _listing("b")])
        result = await adapter.search(["Kotlin"], [])
        assert isinstance(result, OkResult)
        assert [j.url for j in result.jobs] == ["a", "b"]
        assert result.search_url == "https://stub.example/?q=Kotlin"
        assert adapter.keywords == ["Kotlin"]

    async def test_exception_contained(self) -> None:
        result = await StubAdapter(SourceError("parse failed")).search(["Java"], [])
        assert isinstance(result, ErrorResult)
        assert result.message == "parse failed"
        assert result.search_url == "https://stub.example/?q=Java"

    async def test_blank_exception_message_uses_type(self) -> None:
        result = await StubAdapter(KeyError()).search(["Java"], [])
        assert result.message == "KeyError"

    async def test_empty_is_error(self) -> None:
        result = await StubAdapter([]).search(["Java"], [])
        assert result.status == "error"
        assert result.message == "검색 결과가 없습니다"

    async def test_transport_error_contained(self) -> None:
        result = await StubAdapter(httpx.ConnectError("refused")).search(["Java"], [])
        assert result.message == "refused"


class TestHttp:
    def test_build_client(self) -> None:
        client = build_client(HttpConfig(timeout_ms=2500, user_agent="test-agent"))
        assert client.headers["User-Agent"] == "test-agent"
        assert client.timeout.read == 2.5
        assert client.follow_redirects is True

    async def test_fetch_text_sends_accept(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert "text/html" in request.headers["Accept"]
            return httpx.Response(200, text="<p>ok</p>")

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            assert await fetch_text(client, "https://x.kr", label="X") == "<p>ok</p>"

    async def test_fetch_json_status_error(self) -> None:
        async with httpx.AsyncClient(
            transport=httpx.MockTransport(lambda r: httpx.Response(404)),
        ) as client:
            with pytest.raises(SourceError, match="X returned 404"):
                await fetch_json(client, "https://x.kr", label="X")
