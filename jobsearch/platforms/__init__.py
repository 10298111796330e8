"""Job-source adapter registry with lazy loading.

Usage:
    from jobsearch.platforms import build_adapters

    adapters = build_adapters(settings, client)
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

from jobsearch.platforms.base import SourceAdapter, SourceError

if TYPE_CHECKING:
    import httpx

    from jobsearch.core.config import Settings

__all__ = ["SourceAdapter", "SourceError", "available_sources", "build_adapters", "get_adapter"]

# Lazy registry: maps source id → (module_path, class_name)
_REGISTRY: dict[str, tuple[str, str]] = {
    "saramin": ("jobsearch.platforms.saramin.adapter", "SaraminAdapter"),
    "wanted": ("jobsearch.platforms.wanted.adapter", "WantedAdapter"),
    "jobkorea": ("jobsearch.platforms.jobkorea.adapter", "JobKoreaAdapter"),
    "jumpit": ("jobsearch.platforms.jumpit.adapter", "JumpitAdapter"),
    "linkedin": ("jobsearch.platforms.linkedin.adapter", "LinkedInAdapter"),
    "wishket": ("jobsearch.platforms.wishket.adapter", "WishketAdapter"),
}


def get_adapter(name: str, client: httpx.AsyncClient, settings: Settings) -> SourceAdapter:
    """Instantiate a source adapter by id.

    Raises:
        ValueError: If the source id is unknown.
    """
    if name not in _REGISTRY:
        valid = ", ".join(sorted(_REGISTRY))
        msg = f"Unknown job source '{name}'. Available: {valid}"
        raise ValueError(msg)

    module_path, class_name = _REGISTRY[name]
    module = importlib.import_module(module_path)
    cls = getattr(module, class_name)
    return cls(client, settings)  # type: ignore[no-any-return]


def build_adapters(settings: Settings, client: httpx.AsyncClient) -> list[SourceAdapter]:
    """Adapters for every enabled source, in configured order."""
    return [get_adapter(name, client, settings) for name in settings.sources.enabled]


def available_sources() -> list[str]:
    """Return sorted list of registered source ids."""
    return sorted(_REGISTRY)
