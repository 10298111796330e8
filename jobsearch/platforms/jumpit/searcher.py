"""Jumpit API and search-page URL builders. Pure functions."""

from urllib.parse import quote, urlencode

API_BASE = "https://api.jumpit.co.kr"
SITE_BASE = "https://jumpit.saramin.co.kr"
DEFAULT_LIMIT = 30


def build_api_url(keyword: str, page: int = 1, limit: int = DEFAULT_LIMIT) -> str:
    params: dict[str, str] = {
        "sort": "rsp_rate",
        "keyword": keyword,
        "page": str(page),
        "limit": str(limit),
    }
    return f"{API_BASE}/api/positions?{urlencode(params, quote_via=quote)}"


def build_search_url(keyword: str) -> str:
    return f"{SITE_BASE}/positions?{urlencode({'keyword': keyword}, quote_via=quote)}"


def build_position_url(position_id: int | str) -> str:
    return f"{SITE_BASE}/position/{position_id}"


def search_terms(keyword: str, region_terms: list[str]) -> list[str]:
    """One ``"<keyword> <region>"`` query per region; the bare keyword if none."""
    terms = [f"{keyword} {t}" for t in region_terms if t]
    return list(dict.fromkeys(terms)) or [keyword]
