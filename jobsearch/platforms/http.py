"""Shared HTTP transport for scraping and API adapters (httpx)."""

import logging
from typing import Any

import httpx

from jobsearch.core.config import HttpConfig
from jobsearch.platforms.base import SourceError

logger = logging.getLogger(__name__)

HTML_ACCEPT = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"
JSON_ACCEPT = "application/json"


def build_client(config: HttpConfig) -> httpx.AsyncClient:
    """Create the async client shared by all adapters of one service."""
    return httpx.AsyncClient(
        timeout=config.timeout_seconds,
        headers={"User-Agent": config.user_agent},
        follow_redirects=True,
    )


async def fetch_text(
    client: httpx.AsyncClient,
    url: str,
    *,
    label: str,
    params: dict[str, str] | None = None,
) -> str:
    """GET an HTML page. Non-2xx answers raise SourceError."""
    resp = await client.get(url, params=params, headers={"Accept": HTML_ACCEPT})
    _check_status(resp, label)
    return resp.text


async def fetch_json(
    client: httpx.AsyncClient,
    url: str,
    *,
    label: str,
    params: dict[str, str] | None = None,
) -> Any:
    """GET a JSON document. Non-2xx answers and non-JSON bodies raise SourceError."""
    resp = await client.get(url, params=params, headers={"Accept": JSON_ACCEPT})
    _check_status(resp, label)
    try:
        return resp.json()
    except ValueError as e:
        msg = f"{label} returned invalid JSON"
        raise SourceError(msg) from e


def _check_status(resp: httpx.Response, label: str) -> None:
    if resp.is_success:
        return
    logger.debug("%s answered %d for %s", label, resp.status_code, resp.request.url)
    msg = f"{label} returned {resp.status_code}"
    raise SourceError(msg)
