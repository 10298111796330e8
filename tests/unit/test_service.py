"""Tests for the request-handler facade."""

from collections.abc import Sequence

import httpx
import pytest

from jobsearch.core.config import Settings
from jobsearch.core.schemas import CandidateProfile, CareerLevel, Listing, OkResult, Region, SourceResult, TechStack
from jobsearch.platforms.base import SourceAdapter
from jobsearch.service import JobSearchService, parse_skills, resume_analysis_block

RESUME = {
    "profile": {"name": "홍길동", "role": "백엔드 개발자"},
    "skills": [{"category": "Backend", "items": ["Java", "Spring"]}],
    "experience": [
        {
            "company": "A",
            "period": "2015.01 ~ 2025.06",
            "position": "차장",
            "description": "백엔드 API 개발",
            "techStack": ["Java", "Spring"],
        },
    ],
}


class RecordingAdapter(SourceAdapter):
    """Returns one listing in 판교 and records the skills it was asked for."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        super().__init__(client, Settings())
        self.calls: list[list[str]] = []

    @property
    def source_id(self) -> str:
        return "saramin"

    @property
    def display_name(self) -> str:
        return "사람인"

    def search_url(self, keyword: str) -> str:
        return f"https://www.saramin.co.kr/zf_user/search?searchword={keyword}"

    async def search(self, skills: Sequence[str], regions: Sequence[Region]) -> SourceResult:
        self.calls.append(list(skills))
        return await super().search(skills, regions)

    async def _collect(self, keyword: str, regions: Sequence[Region]) -> list[Listing]:
        return [
            Listing(
                title="Senior Java Spring 개발자",
                location="경기 성남시 판교",
                url="https://www.saramin.co.kr/job/1",
                source="saramin",
            ),
        ]


@pytest.fixture
def client() -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(500)))


class TestParseSkills:
    def test_splits_and_strips(self) -> None:
        assert parse_skills(" Java, Spring ,,  ") == ["Java", "Spring"]

    def test_empty(self) -> None:
        assert parse_skills(None) == []
        assert parse_skills("") == []


class TestResumeAnalysisBlock:
    def test_shape(self) -> None:
        profile = CandidateProfile(
            years_of_experience=7,
            career_level=CareerLevel.MID,
            tech_stack=TechStack(primary=["Java"]),
            preferred_roles=["백엔드 개발자"],
            summary="7년차 백엔드 개발자 (Java)",
        )
        assert resume_analysis_block(profile) == {
            "yearsOfExperience": 7,
            "careerLevel": "중급",
            "primaryTech": ["Java"],
            "preferredRoles": ["백엔드 개발자"],
            "summary": "7년차 백엔드 개발자 (Java)",
        }


class TestJobSearchService:
    async def test_requires_enter(self) -> None:
        with pytest.raises(RuntimeError, match="not entered"):
            await JobSearchService().search_for_resume(RESUME)

    async def test_search_for_resume(self, client: httpx.AsyncClient) -> None:
        adapter = RecordingAdapter(client)
        async with JobSearchService(Settings(), adapters=[adapter], client=client) as service:
            payload = await service.search_for_resume(RESUME)

        assert adapter.calls[0][:2] == ["Java", "Spring"]
        assert "시니어" in adapter.calls[0]
        assert payload["cached"] is False
        assert payload["sites"][0]["status"] == "ok"
        assert payload["sites"][0]["totalScraped"] == 1
        assert payload["sites"][0]["filteredCount"] == 1
        assert payload["topMatches"][0]["sourceName"] == "사람인"
        assert payload["resumeAnalysis"]["careerLevel"] == "시니어/리드급"
        assert payload["skillsUsed"] == adapter.calls[0]

    async def test_skill_override_string(self, client: httpx.AsyncClient) -> None:
        adapter = RecordingAdapter(client)
        async with JobSearchService(Settings(), adapters=[adapter], client=client) as service:
            payload = await service.search_for_resume(RESUME, skills="Kotlin, Go")
        assert adapter.calls == [["Kotlin", "Go"]]
        assert payload["skillsUsed"] == ["Kotlin", "Go"]

    async def test_second_call_served_from_cache(self, client: httpx.AsyncClient) -> None:
        adapter = RecordingAdapter(client)
        async with JobSearchService(Settings(), adapters=[adapter], client=client) as service:
            await service.search_for_resume(RESUME)
            payload = await service.search_for_resume(RESUME)
        assert len(adapter.calls) == 1
        assert payload["cached"] is True

    async def test_no_resume_uses_default_skills(self, client: httpx.AsyncClient) -> None:
        adapter = RecordingAdapter(client)
        settings = Settings()
        async with JobSearchService(settings, adapters=[adapter], client=client) as service:
            payload = await service.search_for_resume(None)
        assert adapter.calls == [settings.default_skills]
        assert payload["resumeAnalysis"]["summary"] == "이력서 데이터 없음"
        assert payload["locationsUsed"] == [r.name for r in settings.default_regions]
        # Nothing to score against: listings pass through unfiltered.
        assert len(payload["sites"][0]["jobs"]) == 1
        assert payload["sites"][0]["totalScraped"] is None

    async def test_injected_client_not_closed(self, client: httpx.AsyncClient) -> None:
        async with JobSearchService(Settings(), adapters=[], client=client):
            pass
        assert not client.is_closed

    async def test_owned_client_closed(self) -> None:
        service = JobSearchService(Settings(), adapters=[])
        async with service:
            owned = service._client
            assert owned is not None
        assert owned.is_closed
