"""Rule-based resume analysis: resume document → CandidateProfile.

Derives experience years from ``YYYY.MM ~ YYYY.MM`` periods, a career level
from the years, a tiered tech stack from how often each technology appears,
and preferred roles from the wording of the most recent entries.
"""

import logging
import re
from collections.abc import Mapping, Sequence
from datetime import date
from typing import Any

from jobsearch.core.schemas import (
    CandidateProfile,
    CareerLevel,
    ExperienceEntry,
    ResumeDocument,
    SkillCategory,
    TechStack,
)

logger = logging.getLogger(__name__)

EMPTY_RESUME_SUMMARY = "이력서 데이터 없음"
DEFAULT_ROLE_LABEL = "개발자"

TIER_SIZE = 5
UNUSED_SKILL_WEIGHT = 0.5
RECENT_ENTRIES = 3

_PERIOD_RE = re.compile(
    r"(\d{4})\.(\d{1,2})\s*~\s*(?:(\d{4})\.(\d{1,2})|(현재|재직\s*중|present|now|current))",
    re.IGNORECASE,
)

# Career level thresholds, highest first: (minimum years, level).
_LEVEL_THRESHOLDS: list[tuple[int, CareerLevel]] = [
    (10, CareerLevel.SENIOR),
    (5, CareerLevel.MID),
    (3, CareerLevel.JUNIOR_MID),
]


def analyze(
    resume: ResumeDocument | Mapping[str, Any] | None,
    *,
    today: date | None = None,
) -> CandidateProfile:
    """Derive a candidate profile from a resume.

    Args:
        resume: Resume model or its raw dict form. None or an empty resume
            yields a zero-valued junior profile.
        today: Resolves open-ended ("present") periods. Defaults to today.
    """
    doc = _coerce(resume)
    if doc is None or doc.is_empty():
        return CandidateProfile(summary=EMPTY_RESUME_SUMMARY)

    years = calculate_years_of_experience(doc.experience, today=today)
    level = determine_career_level(years)
    tech_stack = analyze_tech_stack(doc.experience, doc.skills)
    roles = extract_preferred_roles(doc.experience)
    return CandidateProfile(
        years_of_experience=years,
        career_level=level,
        tech_stack=tech_stack,
        preferred_roles=roles,
        summary=_summary(years, roles, tech_stack),
    )


def period_months(period: str, *, today: date | None = None) -> int:
    """Months covered by a ``YYYY.MM ~ YYYY.MM`` period; 0 if unparsable.

    An open end ("현재", "present", ...) counts up to ``today``. Periods that
    end before they start count as 0.
    """
    match = _PERIOD_RE.search(period or "")
    if match is None:
        if period:
            logger.debug("Unparsable experience period: %r", period)
        return 0

    start_year, start_month, end_year, end_month, present = match.groups()
    if present:
        end = today or date.today()
        end_index = end.year * 12 + end.month
    else:
        end_index = int(end_year) * 12 + int(end_month)
    start_index = int(start_year) * 12 + int(start_month)
    return max(0, end_index - start_index)


def calculate_years_of_experience(
    experience: Sequence[ExperienceEntry],
    *,
    today: date | None = None,
) -> int:
    """Total years across all periods, rounded half up, never negative."""
    months = sum(period_months(exp.period, today=today) for exp in experience)
    return max(0, int(months / 12 + 0.5))


def determine_career_level(years: int) -> CareerLevel:
    for minimum, level in _LEVEL_THRESHOLDS:
        if years >= minimum:
            return level
    return CareerLevel.JUNIOR


def analyze_tech_stack(
    experience: Sequence[ExperienceEntry],
    skills: Sequence[SkillCategory],
) -> TechStack:
    """Tier technologies by occurrence count across experience entries.

    Skill-list items that never appear in experience get a weight lower than
    any real occurrence. Ties keep first-seen order.
    """
    weights: dict[str, float] = {}
    for exp in experience:
        for tech in exp.tech_stack:
            weights[tech] = weights.get(tech, 0) + 1
    for category in skills:
        for item in category.items:
            weights.setdefault(item, UNUSED_SKILL_WEIGHT)

    ranked = [tech for tech, _ in sorted(weights.items(), key=lambda kv: kv[1], reverse=True)]
    return TechStack(
        primary=ranked[:TIER_SIZE],
        secondary=ranked[TIER_SIZE:TIER_SIZE * 2],
        interest=ranked[TIER_SIZE * 2:TIER_SIZE * 3],
    )


def extract_preferred_roles(experience: Sequence[ExperienceEntry]) -> list[str]:
    """Role labels signalled by the most recent entries, deduplicated."""
    roles: list[str] = []
    for exp in experience[:RECENT_ENTRIES]:
        position = exp.position.lower()
        project = exp.project.lower()
        description = exp.description.lower()

        matched: list[str] = []
        if _contains_any(position, ("프리랜서", "차장")):
            matched.append("시니어 개발자")
        if _contains_any(description, ("설계", "아키텍처", "구조")):
            matched.append("아키텍트")
        if _contains_any(description, ("백엔드", "api")):
            matched.append("백엔드 개발자")
        if _contains_any(description, ("풀스택", "full")):
            matched.append("풀스택 개발자")
        if "si" in project or "프로젝트" in description:
            matched.append("프로젝트 개발자")

        for role in matched:
            if role not in roles:
                roles.append(role)
    return roles


def _contains_any(text: str, needles: tuple[str, ...]) -> bool:
    return any(n in text for n in needles)


def _summary(years: int, roles: list[str], tech_stack: TechStack) -> str:
    role = roles[0] if roles else DEFAULT_ROLE_LABEL
    return f"{years}년차 {role} ({', '.join(tech_stack.primary[:3])})"


def _coerce(resume: ResumeDocument | Mapping[str, Any] | None) -> ResumeDocument | None:
    if resume is None:
        return None
    if isinstance(resume, ResumeDocument):
        return resume
    return ResumeDocument.model_validate(dict(resume))
