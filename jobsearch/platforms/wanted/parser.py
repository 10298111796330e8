"""Wanted API payload → Listing objects."""

import logging
from typing import Any

from jobsearch.core.schemas import Listing
from jobsearch.platforms.base import SourceError
from jobsearch.platforms.wanted.searcher import build_job_url

logger = logging.getLogger(__name__)

ALWAYS_OPEN = "상시채용"


def extract_jobs(payload: Any) -> list[dict[str, Any]]:
    """Return the raw job entries of an API response."""
    if not isinstance(payload, dict):
        msg = "Wanted API returned an unexpected payload"
        raise SourceError(msg)
    data = payload.get("data") or []
    return [job for job in data if isinstance(job, dict)]


def parse_jobs(payload: Any) -> list[Listing]:
    results: list[Listing] = []
    for job in extract_jobs(payload):
        try:
            listing = map_job(job)
        except Exception:
            logger.debug("Failed to map Wanted job, skipping", exc_info=True)
            continue
        if listing is not None:
            results.append(listing)
    return results


def map_job(job: dict[str, Any]) -> Listing | None:
    job_id = job.get("id")
    title = (job.get("position") or "").strip()
    if job_id is None or not title:
        return None

    address = job.get("address") or {}
    company = job.get("company") or {}
    reward = job.get("reward") or {}
    return Listing(
        title=title,
        company=(company.get("name") or "").strip(),
        location=address.get("full_location") or address.get("location") or "",
        experience_text=format_career_range(job.get("annual_from"), job.get("annual_to")),
        deadline=_format_deadline(job.get("due_time")),
        reward=reward.get("formatted_total") or "",
        url=build_job_url(job_id),
        source="wanted",
    )


def format_career_range(low: int | None, high: int | None) -> str:
    """Render a required-career range as the Korean text the filter understands."""
    if low is None or high is None:
        return ""
    if low == 0:
        return f"신입~{high}년"
    return f"{low}~{high}년"


def _format_deadline(due_time: str | None) -> str:
    if not due_time:
        return ALWAYS_OPEN
    return due_time.split("T")[0]
