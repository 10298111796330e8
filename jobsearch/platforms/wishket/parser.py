"""Wishket project-list parser: freelance projects → Listing objects.

Projects have no company; budget, duration and work type are kept as extras.
"""

import logging

from bs4 import Tag

from jobsearch.core.schemas import Listing
from jobsearch.platforms.html import absolute_url, attr_of, find_first, first_text, make_soup, text_of
from jobsearch.platforms.wishket.searcher import WISHKET_BASE
from jobsearch.platforms.wishket.selectors import (
    BUDGET_SELECTORS,
    CARD_SELECTORS,
    LINK_SELECTORS,
    LOCATION_SELECTORS,
    SKILL_CHIP_SELECTOR,
    TERM_SELECTORS,
    TITLE_SELECTORS,
    WORK_TYPE_SELECTORS,
)

logger = logging.getLogger(__name__)

PROJECT_COMPANY = "위시캣 프로젝트"


def parse_projects(html: str) -> list[Listing]:
    soup = make_soup(html)
    cards: list[Tag] = []
    for selector in CARD_SELECTORS:
        cards = soup.select(selector)
        if cards:
            break

    results: list[Listing] = []
    for card in cards:
        try:
            listing = parse_project(card)
        except Exception:
            logger.debug("Failed to parse Wishket project, skipping", exc_info=True)
            continue
        if listing is not None:
            results.append(listing)
    return results


def parse_project(card: Tag) -> Listing | None:
    link = find_first(card, LINK_SELECTORS)
    if link is None:
        return None
    title = first_text(link, TITLE_SELECTORS) or text_of(link)
    url = absolute_url(attr_of(link, "href"), WISHKET_BASE)
    if not title or not url:
        return None

    return Listing(
        title=title,
        company=PROJECT_COMPANY,
        location=first_text(card, LOCATION_SELECTORS),
        budget=first_text(card, BUDGET_SELECTORS),
        duration=first_text(card, TERM_SELECTORS),
        work_type=first_text(card, WORK_TYPE_SELECTORS),
        tech_stacks=[text_of(chip) for chip in card.select(SKILL_CHIP_SELECTOR)],
        url=url,
        source="wishket",
    )
