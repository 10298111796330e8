"""Abstract base class for job-source adapters.

Every adapter fails soft: ``search`` never raises. Transport and parse
failures are turned into an ``ErrorResult`` carrying a readable message and,
where derivable, the direct search link.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Iterable, Sequence

import httpx

from jobsearch.core.concurrency import gather_settled
from jobsearch.core.config import Settings
from jobsearch.core.schemas import ErrorResult, Listing, OkResult, Region, SourceResult

logger = logging.getLogger(__name__)

FALLBACK_KEYWORD = "Java"
NO_RESULTS_MESSAGE = "검색 결과가 없습니다"


class SourceError(RuntimeError):
    """A source answered, but not with something we can use."""


def primary_keyword(skills: Sequence[str]) -> str:
    """Adapters search with the first effective skill only."""
    for skill in skills:
        if skill.strip():
            return skill.strip()
    return FALLBACK_KEYWORD


def dedupe_by_url(listings: Iterable[Listing]) -> list[Listing]:
    """Keep the first listing per url, preserving order."""
    seen: set[str] = set()
    result: list[Listing] = []
    for listing in listings:
        if listing.url in seen:
            continue
        seen.add(listing.url)
        result.append(listing)
    return result


class SourceAdapter(ABC):
    """Base class that every job-source adapter must implement."""

    def __init__(self, client: httpx.AsyncClient, settings: Settings) -> None:
        self._client = client
        self._settings = settings

    @property
    @abstractmethod
    def source_id(self) -> str:
        """Unique identifier for this source (e.g. 'saramin')."""

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Human-facing source name."""

    @abstractmethod
    def search_url(self, keyword: str) -> str:
        """Direct search link a person can open in a browser."""

    @abstractmethod
    async def _collect(self, keyword: str, regions: Sequence[Region]) -> list[Listing]:
        """Fetch and normalize listings. May raise; ``search`` contains it."""

    async def search(self, skills: Sequence[str], regions: Sequence[Region]) -> SourceResult:
        """Search this source and return a normalized, deduplicated result."""
        keyword = primary_keyword(skills)
        search_url = self.search_url(keyword)
        try:
            raw = await self._collect(keyword, regions)
        except Exception as e:
            logger.warning("%s search failed: %r", self.source_id, e)
            return self._error(_describe(e), search_url)

        jobs = dedupe_by_url(raw)
        logger.info("%s: %d listings for '%s'", self.source_id, len(jobs), keyword)
        if not jobs:
            return self._error(NO_RESULTS_MESSAGE, search_url)
        return OkResult(
            source=self.source_id,
            display_name=self.display_name,
            jobs=jobs,
            search_url=search_url,
        )

    async def _run_queries(self, queries: Sequence[Awaitable[list[Listing]]]) -> list[Listing]:
        """Run per-region queries concurrently and merge what succeeded.

        Raises the first failure only when every query failed.
        """
        outcomes = await gather_settled(*queries)
        merged: list[Listing] = []
        errors: list[BaseException] = []
        for outcome in outcomes:
            if outcome.error is None:
                merged.extend(outcome.value or [])
            else:
                logger.debug(
                    "%s region query failed: %r", self.source_id, outcome.error,
                )
                errors.append(outcome.error)
        if errors and len(errors) == len(outcomes):
            raise errors[0]
        return merged

    def _error(self, message: str, search_url: str) -> ErrorResult:
        return ErrorResult(
            source=self.source_id,
            display_name=self.display_name,
            message=message,
            search_url=search_url,
        )


def _describe(error: BaseException) -> str:
    """Readable one-line message for an adapter failure."""
    if isinstance(error, httpx.TimeoutException):
        return "요청 시간이 초과되었습니다"
    text = str(error).strip()
    return text or type(error).__name__
