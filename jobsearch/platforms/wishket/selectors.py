"""Wishket project-list selectors with fallbacks."""

CARD_SELECTORS: tuple[str, ...] = (
    ".project-info-box",
)

LINK_SELECTORS: tuple[str, ...] = (
    "a.project-link",
    ".project-link",
)

# Title text sits in a <p> inside the project link.
TITLE_SELECTORS: tuple[str, ...] = (
    "p",
)

BUDGET_SELECTORS: tuple[str, ...] = (".budget",)
TERM_SELECTORS: tuple[str, ...] = (".term",)
WORK_TYPE_SELECTORS: tuple[str, ...] = (".project-type-mark",)
LOCATION_SELECTORS: tuple[str, ...] = (".location-data",)
SKILL_CHIP_SELECTOR = ".skill-chip"
