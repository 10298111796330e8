"""LinkedIn adapter.

By default LinkedIn is link-only: browsing results needs a login, so the
source contributes a search link and no listings. The ``scrape`` mode uses
the unauthenticated guest endpoint, one request per region location.
"""

import logging
from collections.abc import Sequence

from jobsearch.core.schemas import LinkOnlyResult, Listing, Region, SourceResult
from jobsearch.platforms.base import SourceAdapter, primary_keyword
from jobsearch.platforms.http import fetch_text
from jobsearch.platforms.linkedin.parser import parse_cards
from jobsearch.platforms.linkedin.searcher import (
    COUNTRY_LOCATION,
    build_guest_api_url,
    build_search_url,
)

logger = logging.getLogger(__name__)

LINK_ONLY_MESSAGE = "로그인이 필요한 사이트라 검색 링크만 제공합니다"


class LinkedInAdapter(SourceAdapter):
    @property
    def source_id(self) -> str:
        return "linkedin"

    @property
    def display_name(self) -> str:
        return "LinkedIn"

    @property
    def link_only(self) -> bool:
        return self._settings.sources.linkedin_mode == "link_only"

    def search_url(self, keyword: str) -> str:
        return build_search_url(keyword)

    async def search(self, skills: Sequence[str], regions: Sequence[Region]) -> SourceResult:
        if not self.link_only:
            return await super().search(skills, regions)
        return LinkOnlyResult(
            source=self.source_id,
            display_name=self.display_name,
            message=LINK_ONLY_MESSAGE,
            search_url=self.search_url(primary_keyword(skills)),
        )

    async def _collect(self, keyword: str, regions: Sequence[Region]) -> list[Listing]:
        locations = list(dict.fromkeys(
            r.linkedin_location for r in regions if r.linkedin_location
        )) or [COUNTRY_LOCATION]
        return await self._run_queries([self._fetch(keyword, loc) for loc in locations])

    async def _fetch(self, keyword: str, location: str) -> list[Listing]:
        url = build_guest_api_url(keyword, location)
        logger.debug("Fetching %s", url)
        html = await fetch_text(self._client, url, label="LinkedIn")
        return parse_cards(html, keyword)
