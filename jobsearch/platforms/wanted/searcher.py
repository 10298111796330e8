"""Wanted API and search-page URL builders. Pure functions."""

from urllib.parse import quote, urlencode

WANTED_BASE = "https://www.wanted.co.kr"
API_PATH = "/api/v4/jobs"
DEFAULT_LIMIT = 20

# Developer job-group tag on Wanted.
DEVELOPER_TAG_TYPE_ID = "518"


def build_api_url(query: str, limit: int = DEFAULT_LIMIT, offset: int = 0) -> str:
    params: dict[str, str] = {
        "country": "kr",
        "tag_type_ids": DEVELOPER_TAG_TYPE_ID,
        "job_sort": "job.latest_order",
        "locations": "all",
        "years": "-1",
        "limit": str(limit),
        "offset": str(offset),
        "query": query,
    }
    return f"{WANTED_BASE}{API_PATH}?{urlencode(params, quote_via=quote)}"


def build_search_url(keyword: str) -> str:
    params = {"query": keyword, "tab": "position"}
    return f"{WANTED_BASE}/search?{urlencode(params, quote_via=quote)}"


def build_job_url(job_id: int | str) -> str:
    return f"{WANTED_BASE}/wd/{job_id}"


def search_terms(keyword: str, region_terms: list[str]) -> list[str]:
    """Base keyword first, then one ``"<keyword> <region>"`` query per region."""
    terms = [keyword, *(f"{keyword} {t}" for t in region_terms if t)]
    return list(dict.fromkeys(terms))
