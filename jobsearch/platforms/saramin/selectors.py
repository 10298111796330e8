"""Saramin result-page selectors, most specific first."""

CARD_SELECTORS: tuple[str, ...] = (
    "div.item_recruit",
    ".item_recruit",
)

TITLE_LINK_SELECTORS: tuple[str, ...] = (
    ".job_tit a",
    "h2.job_tit a",
)

COMPANY_SELECTORS: tuple[str, ...] = (
    ".corp_name a",
    ".corp_name",
)

# First span is the location, second the required experience.
CONDITION_SPANS = ".job_condition span"

DEADLINE_SELECTORS: tuple[str, ...] = (
    ".job_date .date",
    ".job_date",
)
