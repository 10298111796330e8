"""JobKorea rendered-page parser: HTML → Listing objects.

The page is rendered by a real browser first; this module only sees the
resulting HTML, so it can be tested without one.
"""

import logging

from bs4 import Tag

from jobsearch.core.schemas import Listing
from jobsearch.platforms.html import absolute_url, attr_of, first_text, make_soup
from jobsearch.platforms.jobkorea.searcher import JOBKOREA_BASE
from jobsearch.platforms.jobkorea.selectors import (
    COMPANY_SELECTORS,
    MAX_FALLBACK_TITLE_LENGTH,
    MAX_LISTINGS_PER_PAGE,
    MIN_TITLE_LENGTH,
    RECRUIT_LINK_SELECTOR,
    TITLE_SELECTORS,
)

logger = logging.getLogger(__name__)


def parse_listings(html: str, region_term: str = "") -> list[Listing]:
    """Extract recruit links from a search page.

    Listings get ``region_term`` as their location because result cards do
    not expose one reliably.
    """
    soup = make_soup(html)
    results: list[Listing] = []
    seen: set[str] = set()
    for link in soup.select(RECRUIT_LINK_SELECTOR):
        try:
            listing = parse_link(link, region_term)
        except Exception:
            logger.debug("Failed to parse JobKorea link, skipping", exc_info=True)
            continue
        if listing is None or listing.url in seen:
            continue
        seen.add(listing.url)
        results.append(listing)
        if len(results) >= MAX_LISTINGS_PER_PAGE:
            break
    return results


def parse_link(link: Tag, region_term: str = "") -> Listing | None:
    href = attr_of(link, "href")
    if not href or "javascript:" in href:
        return None

    title = _parse_title(link)
    if len(title) < MIN_TITLE_LENGTH:
        return None

    return Listing(
        title=title,
        company=first_text(link, COMPANY_SELECTORS),
        location=region_term,
        url=absolute_url(href, JOBKOREA_BASE),
        source="jobkorea",
    )


def _parse_title(link: Tag) -> str:
    """Title element text, else the first line of the link text."""
    title = first_text(link, TITLE_SELECTORS)
    if title:
        return title
    full = link.get_text("\n").strip()
    if 5 < len(full) < MAX_FALLBACK_TITLE_LENGTH:
        return full.split("\n")[0].strip()
    return ""
