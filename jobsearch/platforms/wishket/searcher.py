"""Wishket project-search URL builder."""

from urllib.parse import quote, urlencode

WISHKET_BASE = "https://www.wishket.com"


def build_search_url(keyword: str) -> str:
    return f"{WISHKET_BASE}/project/?{urlencode({'keyword': keyword}, quote_via=quote)}"
