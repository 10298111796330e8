"""Relevance filter and scorer for scraped listings.

Pure and deterministic. A listing either passes with a score (0-100) or is
dropped:
  1. Required experience is read from title + experience text.
  2. Under-qualified candidates are excluded; heavily over-qualified ones too,
     unless the posting itself is senior-level.
  3. Skill score = matched technologies / min(tech count, divisor) * 100.
     Below ``min_skill_score`` the listing is excluded.
  4. Contract and freelance/remote postings get flat bonuses.
  5. Senior candidates get a bonus on senior postings.
"""

import logging
import math
import re
from collections.abc import Sequence
from dataclasses import dataclass

from jobsearch.core.config import ScoringConfig
from jobsearch.core.schemas import CandidateProfile, Listing

logger = logging.getLogger(__name__)

ENTRY_KEYWORDS = ("신입", "junior", "entry")
SENIOR_KEYWORDS = ("시니어", "senior")
CONTRACT_KEYWORDS = ("계약직", "계약", "contract", "파견", "외주")
FREELANCE_KEYWORDS = (
    "프리랜서", "프리랜스", "freelance", "freelancer",
    "원격", "재택", "리모트", "remote",
)

# First capture group is the minimum required years.
_EXPERIENCE_PATTERNS: list[re.Pattern[str]] = [
    re.compile(r"(\d+)년\s*이상"),
    re.compile(r"(\d+)년\s*~\s*(\d+)년"),
    re.compile(r"(\d+)\+\s*years?", re.IGNORECASE),
    re.compile(r"(\d+)\s*years?\s*\+", re.IGNORECASE),
]


@dataclass(frozen=True)
class EmploymentType:
    is_contract: bool
    is_freelance: bool
    bonus: float


def listing_text(listing: Listing) -> str:
    """Lower-cased text every rule looks at."""
    return f"{listing.title} {listing.experience_text}".lower()


def is_senior_posting(text: str) -> bool:
    lower = text.lower()
    return any(kw in lower for kw in SENIOR_KEYWORDS)


def extract_required_experience(text: str, senior_default_years: int = 5) -> int | None:
    """Minimum years a posting asks for, or None when it does not say.

    Entry-level wording wins over numbers; senior wording without a number
    means ``senior_default_years``.
    """
    if not text:
        return None
    lower = text.lower()
    if any(kw in lower for kw in ENTRY_KEYWORDS):
        return 0
    for pattern in _EXPERIENCE_PATTERNS:
        match = pattern.search(text)
        if match:
            return int(match.group(1))
    if is_senior_posting(lower):
        return senior_default_years
    return None


def skill_match_score(text: str, technologies: Sequence[str], max_divisor: int = 10) -> float:
    """Share of the candidate's technologies mentioned in ``text``, 0-100."""
    techs = [t for t in technologies if t.strip()]
    if not text or not techs:
        return 0.0
    lower = text.lower()
    matched = sum(1 for tech in techs if tech.lower() in lower)
    return min(100.0, matched / min(len(techs), max_divisor) * 100.0)


def detect_employment_type(text: str, config: ScoringConfig) -> EmploymentType:
    lower = text.lower()
    is_contract = any(kw in lower for kw in CONTRACT_KEYWORDS)
    is_freelance = any(kw in lower for kw in FREELANCE_KEYWORDS)
    bonus = 0.0
    if is_contract:
        bonus += config.contract_bonus
    if is_freelance:
        bonus += config.freelance_bonus
    return EmploymentType(is_contract=is_contract, is_freelance=is_freelance, bonus=bonus)


def score_listing(
    listing: Listing,
    profile: CandidateProfile,
    config: ScoringConfig,
) -> Listing | None:
    """Score one listing against the profile; None means excluded."""
    text = listing_text(listing)
    years = profile.years_of_experience
    senior_posting = is_senior_posting(text)

    required = extract_required_experience(text, config.senior_default_years)
    if required is not None:
        if years < required:
            return None
        if years > required + config.overqualification_gap and not senior_posting:
            return None

    skill_score = skill_match_score(
        text, profile.tech_stack.technologies(), config.max_skill_divisor,
    )
    if skill_score < config.min_skill_score:
        return None

    employment = detect_employment_type(text, config)
    score = skill_score
    if profile.is_senior and senior_posting:
        score += config.senior_bonus
    score += employment.bonus

    return listing.model_copy(update={
        "match_score": _round_half_up(min(100.0, max(0.0, score))),
        "is_contract": employment.is_contract,
        "is_freelance": employment.is_freelance,
    })


def filter_listings(
    listings: Sequence[Listing],
    profile: CandidateProfile,
    limit: int = 20,
    config: ScoringConfig | None = None,
) -> list[Listing]:
    """Score, drop non-matching listings, sort by score desc, keep ``limit``."""
    config = config or ScoringConfig()
    scored = [s for s in (score_listing(item, profile, config) for item in listings) if s is not None]
    scored.sort(key=lambda item: item.match_score or 0, reverse=True)
    excluded = len(listings) - len(scored)
    if excluded:
        logger.debug("Relevance filter: removed %d of %d listings", excluded, len(listings))
    return scored[:max(0, limit)]


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))
