from typing import Literal

from pydantic import BaseModel, Field

MatchCategory = Literal["Excellent Match", "Good Match", "Fair Match", "Poor Match"]


class MatchOutput(BaseModel):
    """프로필-채용공고 적합도 LLM 출력"""

    match_percentage: int = Field(ge=0, le=100, description="Match score from 0 to 100")
    match_summary: str = Field(
        description="2-4 sentences: 2-3 key matching points and 1-2 key gaps"
    )
    match_category: MatchCategory


class TailoredResumeOutput(BaseModel):
    """맞춤 이력서 LLM 출력"""

    tailored_resume: str
    analysis: str


class CoverLetterOutput(BaseModel):
    """커버레터 LLM 출력"""

    cover_letter_text: str = ""


class PolishedTextOutput(BaseModel):
    """문장 다듬기 LLM 출력"""

    polished_text: str = ""


class ExtractedJob(BaseModel):
    """RSS item에서 추출한 채용 정보"""

    title: str
    company: str | None = None
    location: str | None = None
    link: str | None = None
    description: str = ""
    published_at: str | None = None


class ScoredJob(BaseModel):
    """적합도가 계산된 채용 정보"""

    job: ExtractedJob
    match: MatchOutput | None = None


class JobFeed(BaseModel):
    """채용 RSS 피드"""

    name: str
    url: str
    category: str


class FeedIngestResult(BaseModel):
    """피드 수집 결과"""

    feed_url: str
    total_items: int
    jobs: list[ScoredJob]
    failed_items: int = 0


class JobDetailsOutput(BaseModel):
    """채용공고에서 추출한 직무명/회사명, 찾지 못하면 빈 문자열"""

    job_title: str = Field(default="", description="The job title, or an empty string if not found")
    company_name: str = Field(
        default="", description="The company name, or an empty string if not found"
    )


class FeedSelection(BaseModel):
    """요청에 맞는 채용 피드 선택 LLM 출력"""

    selected_feed_url: str = Field(
        default="", description="The single best URL from the available feeds"
    )
    reasoning: str | None = Field(
        default=None, description="A brief explanation for why this feed was chosen"
    )


class GeneratedJobPosting(BaseModel):
    """모델이 만든 예시 채용공고"""

    role: str
    company: str
    requirements_summary: str = Field(
        description="1-3 sentences on the key skills and experience needed"
    )
    deadline_text: str = Field(description="A future deadline or an open status")
    location: str | None = None
    job_url: str | None = None


class GeneratedJobPostings(BaseModel):
    job_postings: list[GeneratedJobPosting] = Field(default_factory=list)


class SearchQueries(BaseModel):
    """채용 사이트 검색어 LLM 출력"""

    queries: list[str] = Field(
        default_factory=list, description="3 to 5 distinct, concise job search queries"
    )


class JobSearchLink(BaseModel):
    site_name: str
    query: str
    url: str


class JobPosting(BaseModel):
    """웹 검색으로 찾은 채용공고 페이지"""

    title: str
    url: str
    markdown_content: str
    company: str | None = None
    location: str | None = None
