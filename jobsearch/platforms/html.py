"""BeautifulSoup helpers shared by the HTML-scraping adapters.

Every lookup takes a tuple of fallback selectors and returns "" or None
instead of raising when nothing matches.
"""

import re

from bs4 import BeautifulSoup, Tag

_WS_RE = re.compile(r"\s+")


def make_soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def find_first(parent: Tag, selectors: tuple[str, ...]) -> Tag | None:
    """Return the first element matching any selector in order."""
    for selector in selectors:
        el = parent.select_one(selector)
        if el is not None:
            return el
    return None


def text_of(el: Tag | None) -> str:
    """Whitespace-collapsed text of an element, or ""."""
    if el is None:
        return ""
    return collapse_ws(el.get_text(" "))


def first_text(parent: Tag, selectors: tuple[str, ...]) -> str:
    return text_of(find_first(parent, selectors))


def attr_of(el: Tag | None, name: str) -> str:
    if el is None:
        return ""
    value = el.get(name)
    if isinstance(value, list):
        value = " ".join(value)
    return (value or "").strip()


def collapse_ws(text: str) -> str:
    return _WS_RE.sub(" ", text).strip()


def strip_tags(text: str) -> str:
    """Remove inline markup some APIs leave in plain-text fields."""
    if "<" not in text and "&" not in text:
        return collapse_ws(text)
    return collapse_ws(make_soup(text).get_text())


def absolute_url(href: str, base: str) -> str:
    """Prefix relative hrefs with the site base; leave absolute ones alone."""
    if not href:
        return ""
    if href.startswith(("http://", "https://")):
        return href
    if href.startswith("//"):
        return f"https:{href}"
    if not href.startswith("/"):
        href = f"/{href}"
    return f"{base}{href}"
