"""LinkedIn guest-API card selectors with fallbacks."""

CARD_SELECTORS: tuple[str, ...] = (
    "div.base-search-card",
    ".base-card",
)

TITLE_SELECTORS: tuple[str, ...] = (
    ".base-search-card__title",
    "h3",
)

COMPANY_SELECTORS: tuple[str, ...] = (
    ".base-search-card__subtitle a",
    ".base-search-card__subtitle",
    "h4",
)

LOCATION_SELECTORS: tuple[str, ...] = (
    ".job-search-card__location",
)

POSTED_TIME_SELECTORS: tuple[str, ...] = (
    "time.job-search-card__listdate",
    "time.job-search-card__listdate--new",
    "time",
)

LINK_SELECTORS: tuple[str, ...] = (
    "a.base-card__full-link",
    'a[href*="/jobs/view/"]',
)
