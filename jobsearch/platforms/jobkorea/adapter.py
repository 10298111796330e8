"""JobKorea adapter: renders search pages in a headless browser.

JobKorea serves its result list client-side, so a plain HTTP fetch sees no
listings. One browser is started per search and one tab is opened per
region term.
"""

import logging
from collections.abc import Callable, Sequence

import httpx

from jobsearch.browser.session import BrowserSession
from jobsearch.core.config import Settings
from jobsearch.core.schemas import Listing, Region
from jobsearch.platforms.base import SourceAdapter
from jobsearch.platforms.jobkorea.parser import parse_listings
from jobsearch.platforms.jobkorea.searcher import build_search_url

logger = logging.getLogger(__name__)

SessionFactory = Callable[[], BrowserSession]


class JobKoreaAdapter(SourceAdapter):
    """Requires a browser; ``session_factory`` is injectable for tests."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        settings: Settings,
        session_factory: SessionFactory | None = None,
    ) -> None:
        super().__init__(client, settings)
        self._session_factory = session_factory or self._default_session

    @property
    def source_id(self) -> str:
        return "jobkorea"

    @property
    def display_name(self) -> str:
        return "잡코리아"

    def search_url(self, keyword: str) -> str:
        return build_search_url(keyword)

    async def _collect(self, keyword: str, regions: Sequence[Region]) -> list[Listing]:
        terms = list(dict.fromkeys(r.search_term for r in regions if r.search_term)) or [""]
        async with self._session_factory() as session:
            return await self._run_queries(
                [self._search_region(session, keyword, term) for term in terms],
            )

    async def _search_region(
        self, session: BrowserSession, keyword: str, term: str,
    ) -> list[Listing]:
        url = build_search_url(keyword, term)
        page = await session.new_page()
        try:
            logger.debug("Navigating to %s", url)
            await page.goto(url, wait_until="networkidle", timeout=session.timeout_ms)
            html = await page.content()
        finally:
            await page.close()
        listings = parse_listings(html, term)
        logger.debug("JobKorea '%s': %d listings", term, len(listings))
        return listings

    def _default_session(self) -> BrowserSession:
        return BrowserSession(self._settings.browser, self._settings.http.user_agent)
