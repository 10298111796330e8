"""Orchestrator: fans a search out to every source and assembles the composite.

Data flow:
  1. Resolve effective skills and regions (request → profile → defaults)
  2. Cache lookup (hit → return, no source contacted)
  3. All sources concurrently, all-settle
  4. Relevance filter per source (when a profile is known)
  5. Region-balanced top matches
  6. Cache store
"""

import logging
from collections.abc import Callable, Sequence
from datetime import datetime, timezone

from jobsearch.core.concurrency import Settled, gather_settled
from jobsearch.core.config import Settings
from jobsearch.core.schemas import (
    AggregateResult,
    CandidateProfile,
    ErrorResult,
    OkResult,
    Region,
    SearchRequest,
    SourceResult,
)
from jobsearch.pipeline.cache import SearchCache, make_cache_key
from jobsearch.pipeline.filter import filter_listings
from jobsearch.pipeline.ranking import build_top_matches
from jobsearch.platforms.base import SourceAdapter
from jobsearch.profile.keywords import generate_keywords

logger = logging.getLogger(__name__)

UNKNOWN_ERROR = "Unknown error"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SearchOrchestrator:
    """Runs aggregate searches over a fixed set of source adapters.

    The cache is injected so its lifetime is owned by the caller.
    """

    def __init__(
        self,
        adapters: Sequence[SourceAdapter],
        cache: SearchCache,
        settings: Settings,
        now: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._adapters = list(adapters)
        self._cache = cache
        self._settings = settings
        self._now = now

    def effective_skills(self, request: SearchRequest) -> list[str]:
        if request.skills:
            return list(request.skills)
        if request.profile is not None:
            keywords = generate_keywords(request.profile)
            if keywords:
                return keywords
        return list(self._settings.default_skills)

    def effective_regions(self, request: SearchRequest) -> list[Region]:
        if request.locations:
            return list(request.locations)
        return list(self._settings.default_regions)

    async def search(self, request: SearchRequest) -> AggregateResult:
        """Run (or replay from cache) one aggregate search. Never fails per source."""
        skills = self.effective_skills(request)
        regions = self.effective_regions(request)
        key = make_cache_key(skills, [r.name for r in regions])

        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("Cache hit for skills=%s", skills)
            return cached.model_copy(update={"cached": True})

        logger.info(
            "Searching %d sources: skills=%s, regions=%s",
            len(self._adapters), skills, [r.name for r in regions],
        )
        outcomes = await gather_settled(
            *(adapter.search(skills, regions) for adapter in self._adapters),
        )
        sites = [
            self._settle(adapter, outcome, request.profile)
            for adapter, outcome in zip(self._adapters, outcomes)
        ]

        result = AggregateResult(
            sites=sites,
            top_matches=build_top_matches(sites, self._settings.ranking),
            searched_at=self._now(),
            skills_used=skills,
            locations_used=[r.name for r in regions],
            cached=False,
        )
        self._cache.set(key, result)

        logger.info(
            "Search complete: %s, %d top matches",
            ", ".join(f"{s.source}={s.status}({len(s.jobs)})" for s in sites),
            len(result.top_matches),
        )
        return result

    def _settle(
        self,
        adapter: SourceAdapter,
        outcome: Settled[SourceResult],
        profile: CandidateProfile | None,
    ) -> SourceResult:
        if outcome.error is not None or outcome.value is None:
            logger.error(
                "%s adapter raised past its boundary: %r", adapter.source_id, outcome.error,
            )
            return ErrorResult(
                source=adapter.source_id,
                display_name=adapter.display_name,
                message=str(outcome.error or "").strip() or UNKNOWN_ERROR,
            )

        site = outcome.value
        if not isinstance(site, OkResult) or not site.jobs or profile is None:
            return site

        scoring = self._settings.scoring
        filtered = filter_listings(site.jobs, profile, scoring.limit, scoring)
        logger.info(
            "%s: %d scraped, %d kept after filtering",
            site.source, len(site.jobs), len(filtered),
        )
        return site.model_copy(update={
            "jobs": filtered,
            "total_scraped": len(site.jobs),
            "filtered_count": len(filtered),
        })
