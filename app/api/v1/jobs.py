import httpx
from fastapi import APIRouter, Depends, Query

from app.api.v1.schemas import (
    CoverLetterResponse,
    FeedIngestRequest,
    FeedSelectRequest,
    FeedSelectResponse,
    GeneratedJobsResponse,
    JobDetailsResponse,
    JobRequest,
    JobSearchRequest,
    JobSearchResponse,
    JobSourceRequest,
    MatchResponse,
    PolishRequest,
    PolishResponse,
    SearchLinksRequest,
    SearchLinksResponse,
    TailorResponse,
)
from app.core.context import get_request_id
from app.core.exceptions import LLMError
from app.core.logging import get_logger
from app.domain.cv.render import RenderTarget, render
from app.domain.jobs.catalog import find_feeds
from app.domain.jobs.feed import fetch_job_description, ingest_feed
from app.domain.jobs.schemas import FeedIngestResult, JobFeed
from app.domain.jobs.search import build_search_links
from app.domain.profile.repository import ProfileRepository, get_profile_repository
from app.infra.llm.client import (
    LLM_CALL_ERRORS,
    calculate_profile_match,
    extract_job_details,
    generate_cover_letter,
    generate_job_postings,
    polish_text,
    select_job_feed,
    suggest_search_queries,
    tailor_resume,
)
from app.infra.search.client import search_jobs

router = APIRouter(prefix="/jobs", tags=["jobs"])
logger = get_logger(__name__)


async def _profile_text(repository: ProfileRepository, user_id: str) -> tuple[str, str | None]:
    """저장된 프로필을 평문으로 렌더링, 이름과 함께 반환"""
    doc = await repository.get_or_raise(user_id)
    return render(doc, None, RenderTarget.PLAIN_TEXT), doc.full_name


async def _job_description(request: JobSourceRequest) -> str:
    """요청 본문의 채용공고, 없으면 jobUrl 페이지 본문"""
    if request.job_description and request.job_description.strip():
        return request.job_description
    return await fetch_job_description(request.job_url)


async def _call_llm(coro):
    try:
        return await coro
    except httpx.HTTPStatusError as e:
        logger.error("LLM API 오류 status=%d", e.response.status_code)
        raise LLMError(detail=f"HTTP {e.response.status_code}") from e
    except LLM_CALL_ERRORS as e:
        logger.error("LLM 호출 실패 error=%s", e)
        raise LLMError(detail=str(e)) from e
    except (ValueError, KeyError, TypeError) as e:
        logger.error("LLM 호출 실패 error=%s", e)
        raise LLMError(detail=str(e)) from e


@router.post("/match", response_model=MatchResponse)
async def match_profile(
    request: JobRequest,
    repository: ProfileRepository = Depends(get_profile_repository),
) -> MatchResponse:
    profile_text, _ = await _profile_text(repository, request.user_id)
    job_description = await _job_description(request)
    result = await _call_llm(
        calculate_profile_match(profile_text, job_description, get_request_id())
    )
    return MatchResponse(**result.model_dump())


@router.post("/tailor", response_model=TailorResponse)
async def tailor(
    request: JobRequest,
    repository: ProfileRepository = Depends(get_profile_repository),
) -> TailorResponse:
    profile_text, _ = await _profile_text(repository, request.user_id)
    job_description = await _job_description(request)
    result = await _call_llm(tailor_resume(profile_text, job_description, get_request_id()))
    return TailorResponse(**result.model_dump())


@router.post("/cover-letter", response_model=CoverLetterResponse)
async def cover_letter(
    request: JobRequest,
    repository: ProfileRepository = Depends(get_profile_repository),
) -> CoverLetterResponse:
    profile_text, full_name = await _profile_text(repository, request.user_id)
    job_description = await _job_description(request)
    result = await _call_llm(
        generate_cover_letter(
            profile_text,
            job_description,
            user_name=full_name,
            session_id=get_request_id(),
        )
    )
    return CoverLetterResponse(**result.model_dump())


@router.post("/polish", response_model=PolishResponse)
async def polish(request: PolishRequest) -> PolishResponse:
    result = await _call_llm(polish_text(request.text, get_request_id()))
    return PolishResponse(**result.model_dump())


@router.get("/feeds", response_model=list[JobFeed])
async def list_feeds(category: str | None = Query(default=None)) -> list[JobFeed]:
    return find_feeds(category)


@router.post("/feeds/ingest", response_model=FeedIngestResult)
async def ingest(
    request: FeedIngestRequest,
    repository: ProfileRepository = Depends(get_profile_repository),
) -> FeedIngestResult:
    """피드 수집 후 채용 정보 추출, userId가 있으면 적합도 계산"""
    profile_text = None
    if request.user_id:
        profile_text, _ = await _profile_text(repository, request.user_id)

    return await ingest_feed(request.feed_url, profile_text, session_id=get_request_id())


@router.post("/details", response_model=JobDetailsResponse)
async def job_details(request: JobSourceRequest) -> JobDetailsResponse:
    """채용공고에서 직무명/회사명 추출"""
    job_description = await _job_description(request)
    result = await _call_llm(extract_job_details(job_description, get_request_id()))
    return JobDetailsResponse(**result.model_dump())


@router.post("/feeds/select", response_model=FeedSelectResponse)
async def select_feed(request: FeedSelectRequest) -> FeedSelectResponse:
    """요청 문장에 맞는 채용 피드 선택"""
    result = await _call_llm(select_job_feed(request.prompt, session_id=get_request_id()))
    return FeedSelectResponse(**result.model_dump())


@router.post("/search", response_model=JobSearchResponse)
async def search(request: JobSearchRequest) -> JobSearchResponse:
    """Firecrawl 웹 검색으로 채용공고 페이지 조회"""
    postings = await search_jobs(request.keywords, request.location)
    return JobSearchResponse(job_postings=[posting.model_dump() for posting in postings])


@router.post("/search/generated", response_model=GeneratedJobsResponse)
async def generated_jobs(request: JobSearchRequest) -> GeneratedJobsResponse:
    """키워드로 예시 채용공고 생성"""
    result = await _call_llm(
        generate_job_postings(request.keywords, request.location, get_request_id())
    )
    return GeneratedJobsResponse(**result.model_dump())


@router.post("/search/links", response_model=SearchLinksResponse)
async def search_links(request: SearchLinksRequest) -> SearchLinksResponse:
    """요청 문장으로 검색어를 만들고 채용 사이트 검색 링크 생성"""
    queries = await _call_llm(suggest_search_queries(request.prompt, get_request_id()))
    links = build_search_links(queries)
    logger.info("검색 링크 생성 queries=%d links=%d", len(queries), len(links))
    return SearchLinksResponse(links=[link.model_dump() for link in links])
