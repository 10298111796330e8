"""Jumpit API payload → Listing objects."""

import logging
from typing import Any

from jobsearch.core.schemas import Listing
from jobsearch.platforms.base import SourceError
from jobsearch.platforms.html import strip_tags
from jobsearch.platforms.jumpit.searcher import build_position_url
from jobsearch.platforms.wanted.parser import ALWAYS_OPEN, format_career_range

logger = logging.getLogger(__name__)


def extract_positions(payload: Any) -> list[dict[str, Any]]:
    if not isinstance(payload, dict):
        msg = "Jumpit API returned an unexpected payload"
        raise SourceError(msg)
    result = payload.get("result")
    if not isinstance(result, dict):
        return []
    positions = result.get("positions") or []
    return [pos for pos in positions if isinstance(pos, dict)]


def parse_positions(payload: Any) -> list[Listing]:
    results: list[Listing] = []
    for pos in extract_positions(payload):
        try:
            listing = map_position(pos)
        except Exception:
            logger.debug("Failed to map Jumpit position, skipping", exc_info=True)
            continue
        if listing is not None:
            results.append(listing)
    return results


def map_position(pos: dict[str, Any]) -> Listing | None:
    position_id = pos.get("id")
    title = (pos.get("title") or "").strip()
    if position_id is None or not title:
        return None

    return Listing(
        title=title,
        company=(pos.get("companyName") or "").strip(),
        location=", ".join(pos.get("locations") or []),
        experience_text=format_career_range(pos.get("minCareer"), pos.get("maxCareer")),
        deadline=_format_deadline(pos),
        tech_stacks=[strip_tags(t) for t in pos.get("techStacks") or [] if isinstance(t, str)],
        job_category=pos.get("jobCategory") or "",
        url=build_position_url(position_id),
        source="jumpit",
    )


def _format_deadline(pos: dict[str, Any]) -> str:
    if pos.get("alwaysOpen"):
        return ALWAYS_OPEN
    closed_at = pos.get("closedAt")
    if closed_at:
        return str(closed_at).split("T")[0]
    return ""
