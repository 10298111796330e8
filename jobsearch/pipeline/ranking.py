"""Region-balanced top matches across all sources.

A single high-volume source or area must not crowd out the others, so the
best listings are picked per region bucket first and only then ranked
together.
"""

import logging
from collections.abc import Sequence

from jobsearch.core.config import RankingConfig, RegionBucket
from jobsearch.core.schemas import Listing, SourceResult

logger = logging.getLogger(__name__)


def pool_listings(sites: Sequence[SourceResult]) -> list[Listing]:
    """Every listing of every site, tagged with its site's display name."""
    pooled: list[Listing] = []
    for site in sites:
        for job in site.jobs:
            pooled.append(job.model_copy(update={"source_name": site.display_name}))
    return pooled


def matches_bucket(listing: Listing, bucket: RegionBucket) -> bool:
    text = f"{listing.location} {listing.title}".lower()
    return any(term in text for term in bucket.terms)


def select_top_matches(listings: Sequence[Listing], config: RankingConfig) -> list[Listing]:
    """Up to ``per_region_limit`` best listings per bucket, then sorted by score.

    A url claimed by an earlier bucket never reappears in a later one.
    Listings matching no bucket are left out.
    """
    claimed: set[str] = set()
    selected: list[Listing] = []
    for bucket in config.buckets:
        candidates = [
            job for job in listings
            if job.url not in claimed and matches_bucket(job, bucket)
        ]
        candidates.sort(key=_score, reverse=True)
        picked: list[Listing] = []
        for job in candidates:
            if len(picked) >= config.per_region_limit:
                break
            # The same posting can arrive from two sources under one url.
            if job.url in claimed:
                continue
            claimed.add(job.url)
            picked.append(job)
        logger.debug("Region '%s': %d top matches", bucket.key, len(picked))
        selected.extend(picked)

    selected.sort(key=_score, reverse=True)
    return selected


def build_top_matches(sites: Sequence[SourceResult], config: RankingConfig) -> list[Listing]:
    return select_top_matches(pool_listings(sites), config)


def _score(listing: Listing) -> int:
    return listing.match_score or 0
