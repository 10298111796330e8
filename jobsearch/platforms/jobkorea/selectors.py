"""JobKorea DOM selectors with fallbacks.

JobKorea's markup changes often and class names are hashed, so lookups rely
on link targets and partial class-name matches.
"""

RECRUIT_LINK_SELECTOR = 'a[href*="/Recruit/"]'

TITLE_SELECTORS: tuple[str, ...] = (
    '[class*="tit"]',
    '[class*="Title"]',
    "h2",
    "strong",
)

COMPANY_SELECTORS: tuple[str, ...] = (
    '[class*="corp"]',
    '[class*="Company"]',
)

MAX_LISTINGS_PER_PAGE = 30
MIN_TITLE_LENGTH = 6
MAX_FALLBACK_TITLE_LENGTH = 200
