"""Configuration models and YAML loader for the job-search aggregator."""

import logging
import math
import os
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, field_validator

from jobsearch.core.schemas import Region

logger = logging.getLogger(__name__)

CACHE_TTL_ENV_VAR = "JOB_SEARCH_CACHE_TTL_MINUTES"

KNOWN_SOURCES = ("saramin", "wanted", "jobkorea", "jumpit", "linkedin", "wishket")

DEFAULT_SKILLS: list[str] = [
    "Java", "Spring Boot", "Vue.js", "JPA", "Node.js",
    "React", "JavaScript", "TypeScript",
    "Oracle", "MySQL", "Docker", "AWS",
]

DEFAULT_REGIONS: list[Region] = [
    Region(name="경기도 성남시(판교)", keyword="판교", saramin_code="102000",
           linkedin_location="Pangyo"),
    Region(name="경기도", keyword="경기", saramin_code="102000",
           linkedin_location="Gyeonggi-do"),
    Region(name="세종시", keyword="세종", saramin_code="118000",
           linkedin_location="Sejong"),
    Region(name="천안시", keyword="천안", saramin_code="115000",
           linkedin_location="Cheonan"),
    Region(name="대전", keyword="대전", saramin_code="105000",
           linkedin_location="Daejeon"),
    Region(name="청주시", keyword="청주", saramin_code="110000",
           linkedin_location="Cheongju"),
]


class CacheConfig(BaseModel):
    """Lifetime and capacity of the composite search cache."""

    ttl_minutes: float = Field(default=30.0, gt=0)
    max_entries: int = Field(default=50, ge=1)

    @property
    def ttl_seconds(self) -> float:
        return self.ttl_minutes * 60.0


class HttpConfig(BaseModel):
    """Shared HTTP client settings used by the scraping and API adapters."""

    timeout_ms: int = Field(default=10000, ge=100)
    user_agent: str = (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    )

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000.0


class BrowserConfig(BaseModel):
    """Browser session configuration for sources that need a real page."""

    headless: bool = True
    timeout_ms: int = Field(default=10000, ge=1000)
    blocked_resource_types: list[str] = Field(
        default_factory=lambda: ["image", "stylesheet", "font"],
    )


class SourcesConfig(BaseModel):
    """Which sources run, in the order their results are reported."""

    enabled: list[str] = Field(
        default_factory=lambda: ["saramin", "wanted", "jobkorea", "jumpit", "linkedin"],
    )
    linkedin_mode: Literal["link_only", "scrape"] = "link_only"

    @field_validator("enabled")
    @classmethod
    def known_sources_only(cls, v: list[str]) -> list[str]:
        cleaned: list[str] = []
        for source in v:
            key = source.lower().strip()
            if key not in KNOWN_SOURCES:
                msg = f"unknown source '{source}', expected one of {list(KNOWN_SOURCES)}"
                raise ValueError(msg)
            if key not in cleaned:
                cleaned.append(key)
        return cleaned


class ScoringConfig(BaseModel):
    """Thresholds and bonuses for the relevance filter."""

    limit: int = Field(default=20, ge=1)
    min_skill_score: float = Field(default=20.0, ge=0.0, le=100.0)
    max_skill_divisor: int = Field(default=10, ge=1)
    senior_default_years: int = Field(default=5, ge=0)
    overqualification_gap: int = Field(default=10, ge=0)
    senior_bonus: float = 20.0
    contract_bonus: float = 30.0
    freelance_bonus: float = 30.0


class RegionBucket(BaseModel):
    """A named region used to balance top matches across areas."""

    key: str
    terms: list[str]

    @field_validator("terms")
    @classmethod
    def terms_not_empty(cls, v: list[str]) -> list[str]:
        terms = [t.lower().strip() for t in v if t.strip()]
        if not terms:
            msg = "region bucket needs at least one match term"
            raise ValueError(msg)
        return terms


def _default_buckets() -> list[RegionBucket]:
    return [
        RegionBucket(key="판교", terms=["판교", "분당"]),
        RegionBucket(key="세종", terms=["세종"]),
        RegionBucket(key="천안", terms=["천안"]),
        RegionBucket(key="대전청주", terms=["대전", "청주"]),
        RegionBucket(key="경기", terms=["경기", "화성", "기흥", "용인", "수원"]),
    ]


class RankingConfig(BaseModel):
    """Region-balanced top-match selection."""

    per_region_limit: int = Field(default=10, ge=1)
    buckets: list[RegionBucket] = Field(default_factory=_default_buckets)


class Settings(BaseModel):
    """Top-level settings loaded from YAML."""

    cache: CacheConfig = Field(default_factory=CacheConfig)
    http: HttpConfig = Field(default_factory=HttpConfig)
    browser: BrowserConfig = Field(default_factory=BrowserConfig)
    sources: SourcesConfig = Field(default_factory=SourcesConfig)
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    ranking: RankingConfig = Field(default_factory=RankingConfig)
    default_skills: list[str] = Field(default_factory=lambda: list(DEFAULT_SKILLS))
    default_regions: list[Region] = Field(default_factory=lambda: list(DEFAULT_REGIONS))

    @field_validator("default_skills")
    @classmethod
    def at_least_one_skill(cls, v: list[str]) -> list[str]:
        skills = [s.strip() for s in v if s.strip()]
        if not skills:
            msg = "default_skills must not be empty"
            raise ValueError(msg)
        return skills

    @field_validator("default_regions")
    @classmethod
    def at_least_one_region(cls, v: list[Region]) -> list[Region]:
        if not v:
            msg = "default_regions must not be empty"
            raise ValueError(msg)
        return v

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Settings":
        """Load settings from a YAML file, then apply environment overrides."""
        path = Path(path)
        if not path.exists():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)
        raw: dict[str, Any] = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        return cls.model_validate(raw).with_env_overrides()

    def with_env_overrides(self) -> "Settings":
        """Apply the cache TTL override from the environment, if set.

        A non-numeric or non-positive value is logged and ignored.
        """
        raw_ttl = os.environ.get(CACHE_TTL_ENV_VAR, "").strip()
        if not raw_ttl:
            return self
        try:
            ttl = float(raw_ttl)
        except ValueError:
            ttl = 0.0
        if not math.isfinite(ttl) or ttl <= 0:
            logger.warning(
                "Ignoring %s=%r, keeping ttl_minutes=%s",
                CACHE_TTL_ENV_VAR, raw_ttl, self.cache.ttl_minutes,
            )
            return self
        cache = CacheConfig(ttl_minutes=ttl, max_entries=self.cache.max_entries)
        return self.model_copy(update={"cache": cache})
