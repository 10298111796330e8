"""Wishket adapter: freelance/outsourcing projects, single keyword query.

Wishket has no region filter; regions are ignored.
"""

from collections.abc import Sequence

from jobsearch.core.schemas import Listing, Region
from jobsearch.platforms.base import SourceAdapter
from jobsearch.platforms.http import fetch_text
from jobsearch.platforms.wishket.parser import parse_projects
from jobsearch.platforms.wishket.searcher import build_search_url


class WishketAdapter(SourceAdapter):
    @property
    def source_id(self) -> str:
        return "wishket"

    @property
    def display_name(self) -> str:
        return "위시캣"

    def search_url(self, keyword: str) -> str:
        return build_search_url(keyword)

    async def _collect(self, keyword: str, regions: Sequence[Region]) -> list[Listing]:
        html = await fetch_text(self._client, build_search_url(keyword), label="Wishket")
        return parse_projects(html)
