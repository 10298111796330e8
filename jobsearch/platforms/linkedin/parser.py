"""LinkedIn guest-API parser: result cards → Listing objects.

Locations come back in English; known Korean areas are translated so the
regional bucketing can match them.
"""

import logging

from bs4 import Tag

from jobsearch.core.schemas import Listing
from jobsearch.platforms.html import attr_of, find_first, first_text, make_soup
from jobsearch.platforms.linkedin.searcher import clean_job_url
from jobsearch.platforms.linkedin.selectors import (
    CARD_SELECTORS,
    COMPANY_SELECTORS,
    LINK_SELECTORS,
    LOCATION_SELECTORS,
    POSTED_TIME_SELECTORS,
    TITLE_SELECTORS,
)

logger = logging.getLogger(__name__)

LOCATION_MAP: dict[str, str] = {
    "pangyo": "판교",
    "bundang": "분당",
    "seongnam": "성남",
    "gyeonggi": "경기",
    "suwon": "수원",
    "yongin": "용인",
    "hwaseong": "화성",
    "sejong": "세종",
    "cheonan": "천안",
    "daejeon": "대전",
    "cheongju": "청주",
    "seoul": "서울",
    "incheon": "인천",
    "busan": "부산",
    "daegu": "대구",
}


def translate_location(location: str) -> str:
    """Map an English location to the first known Korean area it mentions."""
    if not location:
        return ""
    lower = location.lower()
    for eng, ko in LOCATION_MAP.items():
        if eng in lower:
            return ko
    return location


def parse_cards(html: str, keyword: str) -> list[Listing]:
    soup = make_soup(html)
    cards: list[Tag] = []
    for selector in CARD_SELECTORS:
        cards = soup.select(selector)
        if cards:
            break

    results: list[Listing] = []
    for card in cards:
        try:
            listing = parse_card(card, keyword)
        except Exception:
            logger.debug("Failed to parse LinkedIn card, skipping", exc_info=True)
            continue
        if listing is not None:
            results.append(listing)
    return results


def parse_card(card: Tag, keyword: str) -> Listing | None:
    title = first_text(card, TITLE_SELECTORS)
    href = attr_of(find_first(card, LINK_SELECTORS), "href")
    if not title or not href:
        return None

    return Listing(
        title=title,
        company=first_text(card, COMPANY_SELECTORS),
        location=translate_location(first_text(card, LOCATION_SELECTORS)),
        posted_date=attr_of(find_first(card, POSTED_TIME_SELECTORS), "datetime"),
        tech_stacks=[keyword],
        url=clean_job_url(href),
        source="linkedin",
    )
