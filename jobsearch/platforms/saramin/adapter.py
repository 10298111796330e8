"""Saramin adapter: public search page, one request per region code."""

import logging
from collections.abc import Sequence

from jobsearch.core.schemas import Listing, Region
from jobsearch.platforms.base import SourceAdapter
from jobsearch.platforms.http import fetch_text
from jobsearch.platforms.saramin.parser import parse_listings
from jobsearch.platforms.saramin.searcher import build_search_url, region_codes

logger = logging.getLogger(__name__)


class SaraminAdapter(SourceAdapter):
    """Scrapes saramin.co.kr search results with BeautifulSoup."""

    @property
    def source_id(self) -> str:
        return "saramin"

    @property
    def display_name(self) -> str:
        return "사람인"

    def search_url(self, keyword: str) -> str:
        return build_search_url(keyword)

    async def _collect(self, keyword: str, regions: Sequence[Region]) -> list[Listing]:
        codes = region_codes([r.saramin_code for r in regions])
        if not codes:
            return await self._fetch(keyword, None)
        return await self._run_queries([self._fetch(keyword, code) for code in codes])

    async def _fetch(self, keyword: str, region_code: str | None) -> list[Listing]:
        url = build_search_url(keyword, region_code)
        logger.debug("Fetching %s", url)
        html = await fetch_text(self._client, url, label="Saramin")
        return parse_listings(html)
