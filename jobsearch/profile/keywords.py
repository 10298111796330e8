"""Search keywords from a candidate profile."""

from jobsearch.core.schemas import CandidateProfile

TOP_PRIMARY = 3
SENIOR_KEYWORDS = ("시니어", "Senior", "Lead")


def generate_keywords(profile: CandidateProfile) -> list[str]:
    """Ranked search keywords: main technologies, seniority terms, then the top role.

    Duplicates are dropped keeping the first occurrence.
    """
    keywords: list[str] = list(profile.tech_stack.primary[:TOP_PRIMARY])
    if profile.is_senior:
        keywords.extend(SENIOR_KEYWORDS)
    if profile.preferred_roles:
        keywords.append(profile.preferred_roles[0])
    return list(dict.fromkeys(keywords))
