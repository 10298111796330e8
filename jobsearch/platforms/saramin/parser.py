"""Saramin result-page parser: HTML → Listing objects.

Missing optional fields become "". Cards without a title or link are skipped.
"""

import logging

from bs4 import Tag

from jobsearch.core.schemas import Listing
from jobsearch.platforms.html import absolute_url, attr_of, find_first, first_text, make_soup, text_of
from jobsearch.platforms.saramin.searcher import SARAMIN_BASE
from jobsearch.platforms.saramin.selectors import (
    CARD_SELECTORS,
    COMPANY_SELECTORS,
    CONDITION_SPANS,
    DEADLINE_SELECTORS,
    TITLE_LINK_SELECTORS,
)

logger = logging.getLogger(__name__)


def parse_listings(html: str) -> list[Listing]:
    """Parse every recruit card on a Saramin search page."""
    soup = make_soup(html)
    cards: list[Tag] = []
    for selector in CARD_SELECTORS:
        cards = soup.select(selector)
        if cards:
            break

    results: list[Listing] = []
    for card in cards:
        try:
            listing = parse_card(card)
        except Exception:
            logger.debug("Failed to parse Saramin card, skipping", exc_info=True)
            continue
        if listing is not None:
            results.append(listing)
    return results


def parse_card(card: Tag) -> Listing | None:
    title_link = find_first(card, TITLE_LINK_SELECTORS)
    title = text_of(title_link)
    url = absolute_url(attr_of(title_link, "href"), SARAMIN_BASE)
    if not title or not url:
        return None

    conditions = [text_of(span) for span in card.select(CONDITION_SPANS)]
    return Listing(
        title=title,
        company=first_text(card, COMPANY_SELECTORS),
        location=conditions[0] if conditions else "",
        experience_text=conditions[1] if len(conditions) > 1 else "",
        deadline=first_text(card, DEADLINE_SELECTORS),
        url=url,
        source="saramin",
    )
