"""Saramin search URL builder. Pure functions."""

from urllib.parse import quote, urlencode

SARAMIN_BASE = "https://www.saramin.co.kr"
SEARCH_PATH = "/zf_user/search"


def build_search_url(keyword: str, region_code: str | None = None) -> str:
    """Build a Saramin keyword search URL, optionally filtered by ``loc_mcd``."""
    params: dict[str, str] = {"searchword": keyword}
    if region_code:
        params["loc_mcd"] = region_code
    return f"{SARAMIN_BASE}{SEARCH_PATH}?{urlencode(params, quote_via=quote)}"


def region_codes(codes: list[str | None]) -> list[str]:
    """Distinct, non-empty region codes in first-seen order."""
    return list(dict.fromkeys(c for c in codes if c))
