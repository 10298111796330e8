"""Core data models for the job-search aggregator.

Models serialize to camelCase JSON (``model_dump(by_alias=True)``) so the
composite result can be handed to the HTTP layer verbatim. Python code uses
the snake_case attribute names; construction accepts either form.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

_FROZEN = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    populate_by_name=True,
)


# ---------------------------------------------------------------------------
# Resume document (supplied by the surrounding application)
# ---------------------------------------------------------------------------


class _ResumePart(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: object) -> object:
        """Stored resumes leave optional fields null; treat those as absent."""
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class ResumeProfile(_ResumePart):
    name: str = ""
    role: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    summary: str = ""


class SkillCategory(_ResumePart):
    category: str = ""
    items: list[str] = Field(default_factory=list)


class ExperienceEntry(_ResumePart):
    company: str = ""
    period: str = ""
    position: str = ""
    project: str = ""
    description: str = ""
    tech_stack: list[str] = Field(default_factory=list)


class EducationEntry(_ResumePart):
    school: str = ""
    major: str = ""
    period: str = ""


class Certification(_ResumePart):
    name: str = ""
    date: str = ""


class ResumeDocument(_ResumePart):
    """Resume as stored by the surrounding application.

    Experience entries are ordered most recent first.
    """

    profile: ResumeProfile = Field(default_factory=ResumeProfile)
    skills: list[SkillCategory] = Field(default_factory=list)
    experience: list[ExperienceEntry] = Field(default_factory=list)
    education: list[EducationEntry] = Field(default_factory=list)
    certifications: list[Certification] = Field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.experience and not self.skills


# ---------------------------------------------------------------------------
# Candidate profile
# ---------------------------------------------------------------------------


class CareerLevel(str, Enum):
    JUNIOR = "junior"
    JUNIOR_MID = "junior-mid"
    MID = "mid"
    SENIOR = "senior"


_CAREER_LEVEL_DISPLAY: dict[CareerLevel, str] = {
    CareerLevel.SENIOR: "시니어/리드급",
    CareerLevel.MID: "중급",
}


class TechStack(BaseModel):
    """Technologies tiered by how often they appear in the resume."""

    model_config = _FROZEN

    primary: list[str] = Field(default_factory=list)
    secondary: list[str] = Field(default_factory=list)
    interest: list[str] = Field(default_factory=list)

    def technologies(self) -> list[str]:
        return [*self.primary, *self.secondary, *self.interest]


class CandidateProfile(BaseModel):
    """Search and scoring inputs derived from a resume. Immutable."""

    model_config = _FROZEN

    years_of_experience: int = Field(default=0, ge=0)
    career_level: CareerLevel = CareerLevel.JUNIOR
    tech_stack: TechStack = Field(default_factory=TechStack)
    preferred_roles: list[str] = Field(default_factory=list)
    summary: str = ""

    @property
    def career_level_display(self) -> str:
        return _CAREER_LEVEL_DISPLAY.get(self.career_level, "주니어")

    @property
    def is_senior(self) -> bool:
        return self.career_level is CareerLevel.SENIOR


# ---------------------------------------------------------------------------
# Search request
# ---------------------------------------------------------------------------


class Region(BaseModel):
    """A requested work location plus the locators each source understands.

    A missing locator means the source cannot filter by this region.
    """

    model_config = _FROZEN

    name: str
    keyword: str = ""
    saramin_code: str | None = None
    linkedin_location: str | None = None

    @property
    def search_term(self) -> str:
        """Short term appended to keyword queries (falls back to the name)."""
        return self.keyword or self.name


class SearchRequest(BaseModel):
    """Input to a single aggregate search. Blank entries are dropped."""

    model_config = _FROZEN

    skills: list[str] = Field(default_factory=list)
    locations: list[Region] = Field(default_factory=list)
    profile: CandidateProfile | None = None

    @field_validator("skills", mode="before")
    @classmethod
    def drop_blank_skills(cls, v: object) -> object:
        if v is None:
            return []
        if isinstance(v, list):
            return [s.strip() for s in v if isinstance(s, str) and s.strip()]
        return v

    @field_validator("locations", mode="before")
    @classmethod
    def drop_blank_locations(cls, v: object) -> object:
        if v is None:
            return []
        if isinstance(v, list):
            return [loc for loc in v if _has_region_name(loc)]
        return v


def _has_region_name(value: object) -> bool:
    if isinstance(value, Region):
        return bool(value.name.strip())
    if isinstance(value, dict):
        name = value.get("name")
        return isinstance(name, str) and bool(name.strip())
    return False


# ---------------------------------------------------------------------------
# Listings and source results
# ---------------------------------------------------------------------------


class Listing(BaseModel):
    """A job posting normalized across sources.

    Frozen. ``match_score``/``is_contract``/``is_freelance`` are filled in by
    the relevance filter via ``model_copy``.
    """

    model_config = _FROZEN

    title: str
    company: str = ""
    location: str = ""
    url: str
    experience_text: str = ""
    deadline: str = ""
    tech_stacks: list[str] = Field(default_factory=list)
    source: str
    match_score: int | None = Field(default=None, ge=0, le=100)
    is_contract: bool = False
    is_freelance: bool = False
    source_name: str | None = None
    posted_date: str = ""
    job_category: str = ""
    reward: str = ""
    budget: str = ""
    duration: str = ""
    work_type: str = ""

    @field_validator("tech_stacks")
    @classmethod
    def unique_tech_stacks(cls, v: list[str]) -> list[str]:
        return list(dict.fromkeys(t for t in v if t))


class _SourceResultBase(BaseModel):
    model_config = _FROZEN

    source: str
    display_name: str
    search_url: str = ""
    message: str | None = None
    jobs: list[Listing] = Field(default_factory=list)


class OkResult(_SourceResultBase):
    """Source answered with listings."""

    status: Literal["ok"] = "ok"
    total_scraped: int | None = None
    filtered_count: int | None = None


class ErrorResult(_SourceResultBase):
    """Source failed or found nothing. Never carries listings."""

    status: Literal["error"] = "error"
    message: str = "Unknown error"
    jobs: list[Listing] = Field(default_factory=list, max_length=0)


class LinkOnlyResult(_SourceResultBase):
    """Source cannot be scraped; only a human-usable search link is given."""

    status: Literal["link_only"] = "link_only"
    jobs: list[Listing] = Field(default_factory=list, max_length=0)


SourceResult = Annotated[
    OkResult | ErrorResult | LinkOnlyResult,
    Field(discriminator="status"),
]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AggregateResult(BaseModel):
    """Composite answer of one aggregate search."""

    model_config = _FROZEN

    sites: list[SourceResult] = Field(default_factory=list)
    top_matches: list[Listing] = Field(default_factory=list)
    searched_at: datetime = Field(default_factory=_utcnow)
    skills_used: list[str] = Field(default_factory=list)
    locations_used: list[str] = Field(default_factory=list)
    cached: bool = False

    def to_json_dict(self) -> dict[str, object]:
        return self.model_dump(by_alias=True, mode="json")
