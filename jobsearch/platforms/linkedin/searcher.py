"""LinkedIn URL builders. Pure functions."""

from urllib.parse import quote_plus, urlencode, urlparse, urlunparse

LINKEDIN_BASE = "https://www.linkedin.com"
GUEST_API_PATH = "/jobs-guest/jobs/api/seeMoreJobPostings/search"
COUNTRY_LOCATION = "South Korea"


def build_search_url(keyword: str, location: str = COUNTRY_LOCATION) -> str:
    """Public jobs search link for people (requires a LinkedIn login to browse)."""
    params = {"keywords": keyword, "location": location}
    return f"{LINKEDIN_BASE}/jobs/search/?{urlencode(params, quote_via=quote_plus)}"


def build_guest_api_url(keyword: str, location: str, start: int = 0) -> str:
    """Guest endpoint that returns result cards as an HTML fragment."""
    params = {"keywords": keyword, "location": location, "start": str(start)}
    return f"{LINKEDIN_BASE}{GUEST_API_PATH}?{urlencode(params, quote_via=quote_plus)}"


def clean_job_url(href: str) -> str:
    """Strip tracking query and fragment; prepend domain if relative."""
    if href.startswith("/"):
        href = f"{LINKEDIN_BASE}{href}"
    parsed = urlparse(href)
    return urlunparse((parsed.scheme, parsed.netloc, parsed.path, "", "", ""))
