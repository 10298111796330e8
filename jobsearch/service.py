"""Entry point for request handlers: resume in, JSON-ready search result out.

Owns the shared HTTP client, the source adapters, the cache and the
orchestrator for the lifetime of the ``async with`` block.
"""

import logging
from collections.abc import Mapping, Sequence
from types import TracebackType
from typing import Any

import httpx

from jobsearch.core.config import Settings
from jobsearch.core.schemas import CandidateProfile, Region, ResumeDocument, SearchRequest
from jobsearch.pipeline.cache import SearchCache
from jobsearch.pipeline.orchestrator import SearchOrchestrator
from jobsearch.platforms import SourceAdapter, build_adapters
from jobsearch.platforms.http import build_client
from jobsearch.profile.analyzer import analyze

logger = logging.getLogger(__name__)


def parse_skills(raw: str | None) -> list[str]:
    """Split a comma-separated skill override, dropping blanks."""
    if not raw:
        return []
    return [s.strip() for s in raw.split(",") if s.strip()]


def resume_analysis_block(profile: CandidateProfile) -> dict[str, Any]:
    """Summary of the analysis appended to the search response."""
    return {
        "yearsOfExperience": profile.years_of_experience,
        "careerLevel": profile.career_level_display,
        "primaryTech": list(profile.tech_stack.primary),
        "preferredRoles": list(profile.preferred_roles),
        "summary": profile.summary,
    }


class JobSearchService:
    """Async context manager wiring settings → client → adapters → orchestrator.

    Usage::

        async with JobSearchService(settings) as service:
            payload = await service.search_for_resume(resume)
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        cache: SearchCache | None = None,
        adapters: Sequence[SourceAdapter] | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or Settings()
        self._cache = cache or SearchCache(self._settings.cache)
        self._client = client
        self._owns_client = client is None
        self._adapters = list(adapters) if adapters is not None else None
        self._orchestrator: SearchOrchestrator | None = None

    @property
    def cache(self) -> SearchCache:
        return self._cache

    @property
    def orchestrator(self) -> SearchOrchestrator:
        if self._orchestrator is None:
            msg = "JobSearchService not entered; use 'async with'"
            raise RuntimeError(msg)
        return self._orchestrator

    async def __aenter__(self) -> "JobSearchService":
        if self._client is None:
            self._client = build_client(self._settings.http)
        adapters = self._adapters
        if adapters is None:
            adapters = build_adapters(self._settings, self._client)
        self._orchestrator = SearchOrchestrator(adapters, self._cache, self._settings)
        logger.debug("Job search service ready: %s", [a.source_id for a in adapters])
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None
        self._orchestrator = None

    async def search_for_resume(
        self,
        resume: ResumeDocument | Mapping[str, Any] | None,
        *,
        skills: Sequence[str] | str | None = None,
        locations: Sequence[Region] | None = None,
    ) -> dict[str, Any]:
        """Analyze the resume, search every source, append ``resumeAnalysis``.

        ``skills`` overrides the profile-derived keywords; a comma-separated
        string is accepted as well.
        """
        profile = analyze(resume)
        if isinstance(skills, str):
            skills = parse_skills(skills)

        # A profile without technologies would filter out every listing.
        request = SearchRequest(
            skills=list(skills or []),
            locations=list(locations or []),
            profile=profile if profile.tech_stack.technologies() else None,
        )
        result = await self.orchestrator.search(request)
        payload = result.to_json_dict()
        payload["resumeAnalysis"] = resume_analysis_block(profile)
        return payload
