"""JobKorea search URL builder. Pure functions."""

from urllib.parse import quote, urlencode

JOBKOREA_BASE = "https://www.jobkorea.co.kr"


def build_search_url(keyword: str, region_term: str = "") -> str:
    """JobKorea has no usable region filter, so the region joins the search text."""
    text = f"{keyword} {region_term}".strip()
    return f"{JOBKOREA_BASE}/Search/?{urlencode({'stext': text}, quote_via=quote)}"
