"""채용 API 스키마."""

from pydantic import BaseModel, Field, field_validator, model_validator


class JobSourceRequest(BaseModel):
    """채용공고 본문 또는 URL, 둘 중 하나는 필요."""

    job_description: str | None = Field(default=None, alias="jobDescription")
    job_url: str | None = Field(default=None, alias="jobUrl")

    @model_validator(mode="after")
    def validate_job_source(self):
        if not (self.job_description or "").strip() and not self.job_url:
            raise ValueError("jobDescription 또는 jobUrl 중 하나는 필요합니다")
        if self.job_url and not self.job_url.startswith(("http://", "https://")):
            raise ValueError("job_url은 http:// 또는 https://로 시작해야 합니다")
        return self

    class Config:
        populate_by_name = True


class JobRequest(JobSourceRequest):
    """저장된 프로필과 채용공고를 함께 쓰는 요청."""

    user_id: str = Field(alias="userId", min_length=1)


class MatchResponse(BaseModel):
    match_percentage: int = Field(alias="matchPercentage")
    match_summary: str = Field(alias="matchSummary")
    match_category: str = Field(alias="matchCategory")

    class Config:
        populate_by_name = True


class TailorResponse(BaseModel):
    tailored_resume: str = Field(alias="tailoredResume")
    analysis: str

    class Config:
        populate_by_name = True


class CoverLetterResponse(BaseModel):
    cover_letter_text: str = Field(alias="coverLetterText")

    class Config:
        populate_by_name = True


class PolishRequest(BaseModel):
    text: str = Field(min_length=1, max_length=5000)


class PolishResponse(BaseModel):
    polished_text: str = Field(alias="polishedText")

    class Config:
        populate_by_name = True


class FeedIngestRequest(BaseModel):
    """피드 수집 요청 - userId가 있으면 프로필 적합도도 계산."""

    feed_url: str = Field(alias="feedUrl")
    user_id: str | None = Field(default=None, alias="userId")

    @field_validator("feed_url")
    @classmethod
    def validate_feed_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("feed_url은 http:// 또는 https://로 시작해야 합니다")
        return v

    class Config:
        populate_by_name = True


class JobDetailsResponse(BaseModel):
    job_title: str = Field(alias="jobTitle")
    company_name: str = Field(alias="companyName")

    class Config:
        populate_by_name = True


class FeedSelectRequest(BaseModel):
    prompt: str = Field(min_length=1, max_length=1000)


class FeedSelectResponse(BaseModel):
    selected_feed_url: str = Field(alias="selectedFeedUrl")
    reasoning: str | None = None

    class Config:
        populate_by_name = True


class JobSearchRequest(BaseModel):
    """키워드/지역 채용 검색 요청."""

    keywords: str = Field(min_length=1, max_length=200)
    location: str | None = Field(default=None, max_length=200)


class JobPostingResponse(BaseModel):
    title: str
    url: str
    markdown_content: str = Field(alias="markdownContent")
    company: str | None = None
    location: str | None = None

    class Config:
        populate_by_name = True


class JobSearchResponse(BaseModel):
    job_postings: list[JobPostingResponse] = Field(alias="jobPostings")

    class Config:
        populate_by_name = True


class GeneratedJobPostingResponse(BaseModel):
    role: str
    company: str
    requirements_summary: str = Field(alias="requirementsSummary")
    deadline_text: str = Field(alias="deadlineText")
    location: str | None = None
    job_url: str | None = Field(default=None, alias="jobUrl")

    class Config:
        populate_by_name = True


class GeneratedJobsResponse(BaseModel):
    job_postings: list[GeneratedJobPostingResponse] = Field(alias="jobPostings")

    class Config:
        populate_by_name = True


class SearchLinksRequest(BaseModel):
    prompt: str = Field(min_length=1, max_length=1000)


class SearchLinkResponse(BaseModel):
    site_name: str = Field(alias="siteName")
    query: str
    url: str

    class Config:
        populate_by_name = True


class SearchLinksResponse(BaseModel):
    links: list[SearchLinkResponse]
