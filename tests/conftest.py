"""테스트 공통 fixture"""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from app.domain.profile.repository import reset_repository
from app.domain.profile.schemas import (
    CustomSection,
    Education,
    ProfileDocument,
    Project,
    Skill,
    WorkExperience,
)
from app.main import app


@pytest.fixture(autouse=True)
def _reset_profile_repository():
    """테스트마다 인메모리 저장소 초기화"""
    reset_repository()
    yield
    reset_repository()


@pytest.fixture
def sample_work_experience() -> WorkExperience:
    """테스트용 경력"""
    return WorkExperience(
        id="work-1",
        company="Acme Corp",
        role="Backend Engineer",
        start_date="Jan 2020",
        description="Built the billing platform",
        achievements=["Cut latency by 40%", "Led a team of 3"],
    )


@pytest.fixture
def sample_education() -> Education:
    """테스트용 학력"""
    return Education(
        id="edu-1",
        institution="University of Testing",
        degree="BSc",
        field_of_study="Computer Science",
        start_date="2015",
        end_date="2019",
        gpa="3.9",
    )


@pytest.fixture
def sample_skills() -> list[Skill]:
    """테스트용 기술 - 카테고리 있는 것과 없는 것"""
    return [
        Skill(id="skill-1", name="Go", category="Languages", proficiency="Expert"),
        Skill(id="skill-2", name="Git"),
    ]


@pytest.fixture
def sample_profile(sample_work_experience, sample_education, sample_skills) -> ProfileDocument:
    """테스트용 프로필"""
    return ProfileDocument(
        id="user-1",
        full_name="Jane Doe",
        email="jane@example.com",
        phone="010-1234-5678",
        github="github.com/janedoe",
        summary="Backend engineer who likes **reliable** systems.",
        work_experiences=[sample_work_experience],
        education=[sample_education],
        skills=sample_skills,
        projects=[
            Project(
                id="proj-1",
                name="Resume Forge",
                description="CV builder",
                technologies=["Python", "FastAPI"],
            )
        ],
        custom_sections=[CustomSection(id="custom-1", heading="Volunteering", content="Code club")],
        section_order=["skills", "workExperiences"],
    )


@pytest.fixture
def empty_profile() -> ProfileDocument:
    """테스트용 빈 프로필"""
    return ProfileDocument(id="user-empty")


@pytest.fixture
def async_client():
    """비동기 HTTP 클라이언트"""
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="http://test")


@pytest.fixture
def mock_generator_client():
    """문서 생성용 LLM 클라이언트 mock"""
    with patch("app.infra.llm.client.get_generator_client") as mock_get:
        mock_client = MagicMock()
        mock_get.return_value = mock_client
        yield mock_client


@pytest.fixture
def mock_evaluator_client():
    """적합도 평가용 LLM 클라이언트 mock"""
    with patch("app.infra.llm.client.get_evaluator_client") as mock_get:
        mock_client = MagicMock()
        mock_get.return_value = mock_client
        yield mock_client


@pytest.fixture
def structured_llm():
    """with_structured_output 결과를 지정하는 helper"""

    def _set(mock_client: MagicMock, return_value=None, side_effect=None) -> AsyncMock:
        ainvoke = AsyncMock(return_value=return_value, side_effect=side_effect)
        mock_client.with_structured_output.return_value.ainvoke = ainvoke
        return ainvoke

    return _set


@pytest.fixture
def create_http_error():
    """HTTPStatusError 생성 helper"""

    def _create(status_code: int, message: str = "Error"):
        return httpx.HTTPStatusError(
            message,
            request=httpx.Request("GET", "https://test.com"),
            response=httpx.Response(status_code),
        )

    return _create
