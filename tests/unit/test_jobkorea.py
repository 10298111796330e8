"""Tests for the JobKorea adapter (browser mocked) and its page parser."""

from types import TracebackType
from unittest.mock import AsyncMock, MagicMock
from urllib.parse import parse_qs, urlparse

import httpx

from jobsearch.core.config import Settings
from jobsearch.core.schemas import Region
from jobsearch.platforms.jobkorea.adapter import JobKoreaAdapter
from jobsearch.platforms.jobkorea.parser import parse_listings
from jobsearch.platforms.jobkorea.searcher import build_search_url

PAGE = """
<html><body>
  <article>
    <a href="/Recruit/GI_Read/100?rPageCode=SL">
      <div class="list-item-title">Java 백엔드 개발자 모집</div>
      <span class="corp-name">잡코리아테크</span>
    </a>
    <a href="/Recruit/GI_Read/100?rPageCode=SL">중복 링크 다시 한번</a>
    <a href="/Recruit/GI_Read/200">
      Spring 서버 개발 (경력)
      상세 보기
    </a>
    <a href="javascript:void(0)">/Recruit/ 스크립트 링크</a>
    <a href="/Recruit/GI_Read/300"><strong>짧음</strong></a>
    <a href="/Company/1">회사 소개 페이지입니다</a>
  </article>
</body></html>
"""


class FakeSession:
    """Stands in for BrowserSession; hands out mocked pages."""

    def __init__(self, html: str = PAGE, fail_on: str | None = None) -> None:
        self.html = html
        self.fail_on = fail_on
        self.pages: list[MagicMock] = []
        self.entered = False
        self.exited = False

    @property
    def timeout_ms(self) -> int:
        return 5000

    async def new_page(self) -> MagicMock:
        page = MagicMock()
        page.goto = AsyncMock(side_effect=self._goto)
        page.content = AsyncMock(return_value=self.html)
        page.close = AsyncMock()
        self.pages.append(page)
        return page

    async def _goto(self, url: str, **kwargs: object) -> None:
        if self.fail_on and self.fail_on in parse_qs(urlparse(url).query)["stext"][0]:
            msg = "net::ERR_TIMED_OUT"
            raise RuntimeError(msg)

    async def __aenter__(self) -> "FakeSession":
        self.entered = True
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.exited = True


def _adapter(session: FakeSession) -> JobKoreaAdapter:
    client = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(500)))
    return JobKoreaAdapter(client, Settings(), session_factory=lambda: session)  # type: ignore[arg-type, return-value]


class TestSearcher:
    def test_region_joins_search_text(self) -> None:
        qs = parse_qs(urlparse(build_search_url("Java", "판교")).query)
        assert qs["stext"] == ["Java 판교"]

    def test_keyword_only(self) -> None:
        assert build_search_url("Java").endswith("/Search/?stext=Java")


class TestParser:
    def test_parses_links(self) -> None:
        listings = parse_listings(PAGE, "판교")
        assert [j.url for j in listings] == [
            "https://www.jobkorea.co.kr/Recruit/GI_Read/100?rPageCode=SL",
            "https://www.jobkorea.co.kr/Recruit/GI_Read/200",
        ]
        first, second = listings
        assert first.title == "Java 백엔드 개발자 모집"
        assert first.company == "잡코리아테크"
        assert first.location == "판교"
        assert second.title == "Spring 서버 개발 (경력)"
        assert second.source == "jobkorea"

    def test_capped_per_page(self) -> None:
        links = "".join(
            f'<a href="/Recruit/GI_Read/{i}"><strong>개발자 채용 공고 {i}</strong></a>' for i in range(40)
        )
        assert len(parse_listings(f"<div>{links}</div>")) == 30

    def test_empty_page(self) -> None:
        assert parse_listings("<html></html>") == []


class TestAdapter:
    async def test_one_tab_per_region_term(self) -> None:
        session = FakeSession()
        regions = [
            Region(name="경기도 성남시(판교)", keyword="판교"),
            Region(name="대전"),
            Region(name="판교 사무소", keyword="판교"),
        ]
        result = await _adapter(session).search(["Java"], regions)

        assert session.entered and session.exited
        assert len(session.pages) == 2
        for page in session.pages:
            page.close.assert_awaited_once()
            assert page.goto.await_args.kwargs["wait_until"] == "networkidle"
            assert page.goto.await_args.kwargs["timeout"] == 5000
        assert result.status == "ok"
        # Same postings on both pages collapse by url.
        assert len(result.jobs) == 2
        assert result.display_name == "잡코리아"

    async def test_no_regions_single_query(self) -> None:
        session = FakeSession()
        await _adapter(session).search(["Java"], [])
        assert len(session.pages) == 1
        url = session.pages[0].goto.await_args.args[0]
        assert parse_qs(urlparse(url).query)["stext"] == ["Java"]

    async def test_failed_navigation_still_closes_page(self) -> None:
        session = FakeSession(fail_on="대전")
        result = await _adapter(session).search(["Java"], [Region(name="대전")])
        assert result.status == "error"
        assert result.message == "net::ERR_TIMED_OUT"
        session.pages[0].close.assert_awaited_once()

    async def test_browser_launch_failure(self) -> None:
        def factory() -> FakeSession:
            msg = "Executable doesn't exist"
            raise RuntimeError(msg)

        client = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(500)))
        adapter = JobKoreaAdapter(client, Settings(), session_factory=factory)  # type: ignore[arg-type]
        result = await adapter.search(["Java"], [])
        assert result.status == "error"
        assert result.search_url == build_search_url("Java")
