"""Wanted adapter: internal REST API, base query plus one per region."""

from collections.abc import Sequence

from jobsearch.core.schemas import Listing, Region
from jobsearch.platforms.base import SourceAdapter
from jobsearch.platforms.http import fetch_json
from jobsearch.platforms.wanted.parser import parse_jobs
from jobsearch.platforms.wanted.searcher import build_api_url, build_search_url, search_terms


class WantedAdapter(SourceAdapter):
    @property
    def source_id(self) -> str:
        return "wanted"

    @property
    def display_name(self) -> str:
        return "원티드"

    def search_url(self, keyword: str) -> str:
        return build_search_url(keyword)

    async def _collect(self, keyword: str, regions: Sequence[Region]) -> list[Listing]:
        terms = search_terms(keyword, [r.search_term for r in regions])
        return await self._run_queries([self._fetch(term) for term in terms])

    async def _fetch(self, term: str) -> list[Listing]:
        payload = await fetch_json(self._client, build_api_url(term), label="Wanted API")
        return parse_jobs(payload)
