"""Tests for the Saramin adapter: URL building, parsing, region fan-out."""

from urllib.parse import parse_qs, urlparse

import httpx

from jobsearch.core.config import Settings
from jobsearch.core.schemas import ErrorResult, OkResult, Region
from jobsearch.platforms.saramin.adapter import SaraminAdapter
from jobsearch.platforms.saramin.parser import parse_listings
from jobsearch.platforms.saramin.searcher import build_search_url, region_codes

CARD = """
<div class="item_recruit">
  <div class="area_job">
    <h2 class="job_tit"><a href="/zf_user/jobs/relay/view?rec_idx={idx}">{title}</a></h2>
    <div class="job_date"><span class="date">~ 07/31(목)</span></div>
    <div class="job_condition">
      <span><a>경기 성남시</a> <a>분당구</a></span>
      <span>경력 3년↑</span>
      <span>대졸↑</span>
    </div>
  </div>
  <div class="area_corp"><strong class="corp_name"><a href="/corp">{company}</a></strong></div>
</div>
"""


def _page(*cards: tuple[str, str, str]) -> str:
    body = "".join(CARD.format(idx=i, title=t, company=c) for i, t, c in cards)
    return f"<html><body><div class='content'>{body}</div></body></html>"


def _client(handler) -> httpx.AsyncClient:  # type: ignore[no-untyped-def]
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


# ---------------------------------------------------------------------------
# TestSearcher
# ---------------------------------------------------------------------------


class TestSearcher:
    def test_keyword_only(self) -> None:
        url = build_search_url("Java")
        assert url == "https://www.saramin.co.kr/zf_user/search?searchword=Java"

    def test_region_code_and_encoding(self) -> None:
        url = build_search_url("백엔드 개발", "105000")
        qs = parse_qs(urlparse(url).query)
        assert qs["searchword"] == ["백엔드 개발"]
        assert qs["loc_mcd"] == ["105000"]
        assert "%20" in url

    def test_region_codes_distinct(self) -> None:
        assert region_codes(["102000", None, "102000", "118000", ""]) == ["102000", "118000"]


# ---------------------------------------------------------------------------
# TestParser
# ---------------------------------------------------------------------------


class TestParser:
    def test_parses_cards(self) -> None:
        listings = parse_listings(_page(("1", "Java 백엔드 개발자", "(주)에이")))
        assert len(listings) == 1
        job = listings[0]
        assert job.title == "Java 백엔드 개발자"
        assert job.company == "(주)에이"
        assert job.location == "경기 성남시 분당구"
        assert job.experience_text == "경력 3년↑"
        assert job.deadline == "~ 07/31(목)"
        assert job.url == "https://www.saramin.co.kr/zf_user/jobs/relay/view?rec_idx=1"
        assert job.source == "saramin"

    def test_card_without_title_skipped(self) -> None:
        html = "<div class='item_recruit'><div class='corp_name'>A</div></div>"
        assert parse_listings(html) == []

    def test_missing_optional_fields(self) -> None:
        html = (
            "<div class='item_recruit'><h2 class='job_tit'>"
            "<a href='https://www.saramin.co.kr/x'>제목</a></h2></div>"
        )
        job = parse_listings(html)[0]
        assert job.company == ""
        assert job.location == ""
        assert job.deadline == ""

    def test_no_cards(self) -> None:
        assert parse_listings("<html><body>없음</body></html>") == []


# ---------------------------------------------------------------------------
# TestAdapter
# ---------------------------------------------------------------------------


class TestAdapter:
    async def test_one_request_per_region_code(self) -> None:
        seen: list[str | None] = []

        def handler(request: httpx.Request) -> httpx.Response:
            code = request.url.params.get("loc_mcd")
            seen.append(code)
            return httpx.Response(200, text=_page((code or "x", f"Java 개발 {code}", "A")))

        regions = [
            Region(name="판교", saramin_code="102000"),
            Region(name="경기", saramin_code="102000"),
            Region(name="대전", saramin_code="105000"),
        ]
        async with _client(handler) as client:
            result = await SaraminAdapter(client, Settings()).search(["Java", "Spring"], regions)

        assert sorted(seen) == ["102000", "105000"]
        assert isinstance(result, OkResult)
        assert len(result.jobs) == 2
        assert result.display_name == "사람인"
        assert result.search_url == build_search_url("Java")

    async def test_no_codes_means_unfiltered_query(self) -> None:
        seen: list[str | None] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.url.params.get("loc_mcd"))
            return httpx.Response(200, text=_page(("1", "Java", "A")))

        async with _client(handler) as client:
            result = await SaraminAdapter(client, Settings()).search(["Java"], [Region(name="서울")])
        assert seen == [None]
        assert result.status == "ok"

    async def test_duplicate_urls_across_regions(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text=_page(("1", "Java", "A")))

        regions = [Region(name="a", saramin_code="1"), Region(name="b", saramin_code="2")]
        async with _client(handler) as client:
            result = await SaraminAdapter(client, Settings()).search(["Java"], regions)
        assert len(result.jobs) == 1

    async def test_http_error_becomes_error_result(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503)

        async with _client(handler) as client:
            result = await SaraminAdapter(client, Settings()).search(["Java"], [])
        assert isinstance(result, ErrorResult)
        assert result.message == "Saramin returned 503"
        assert result.search_url.startswith("https://www.saramin.co.kr/")
        assert result.jobs == []

    async def test_partial_region_failure_keeps_successes(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.params.get("loc_mcd") == "1":
                return httpx.Response(500)
            return httpx.Response(200, text=_page(("9", "Java", "A")))

        regions = [Region(name="a", saramin_code="1"), Region(name="b", saramin_code="2")]
        async with _client(handler) as client:
            result = await SaraminAdapter(client, Settings()).search(["Java"], regions)
        assert result.status == "ok"
        assert len(result.jobs) == 1

    async def test_timeout_message(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        async with _client(handler) as client:
            result = await SaraminAdapter(client, Settings()).search(["Java"], [])
        assert result.status == "error"
        assert result.message == "요청 시간이 초과되었습니다"

    async def test_empty_page_is_error_with_link(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html></html>")

        async with _client(handler) as client:
            result = await SaraminAdapter(client, Settings()).search([], [])
        assert result.status == "error"
        assert result.message == "검색 결과가 없습니다"
        assert result.search_url == build_search_url("Java")
