import httpx

from app.core.config import settings
from app.core.exceptions import JobSearchError
from app.core.logging import get_logger
from app.domain.jobs.schemas import JobPosting

logger = get_logger(__name__)

UNTITLED_POSTING = "Untitled Job Posting"
NO_CONTENT = "No content scraped."

_client = httpx.AsyncClient(timeout=settings.firecrawl_timeout)


def _get_headers() -> dict[str, str]:
    """Firecrawl API 요청 헤더 생성

    Raises:
        JobSearchError: API 키가 설정되지 않은 경우
    """
    if not settings.firecrawl_api_key:
        raise JobSearchError(detail="FIRECRAWL_API_KEY가 설정되지 않았습니다", status_code=503)
    return {
        "Authorization": f"Bearer {settings.firecrawl_api_key}",
        "Content-Type": "application/json",
    }


async def close_client():
    """httpx 클라이언트 종료"""
    await _client.aclose()


def parse_search_result(entry: dict) -> JobPosting | None:
    """검색 결과 항목을 JobPosting으로 변환, URL 없는 항목은 None"""
    url = entry.get("url") if isinstance(entry, dict) else None
    if not url:
        return None

    metadata = entry.get("metadata") or {}
    return JobPosting(
        title=metadata.get("title") or entry.get("title") or UNTITLED_POSTING,
        url=url,
        markdown_content=entry.get("markdown") or entry.get("description") or NO_CONTENT,
        company=metadata.get("company") or None,
        location=metadata.get("location") or None,
    )


async def search_jobs(keywords: str, location: str | None = None) -> list[JobPosting]:
    """Firecrawl 웹 검색으로 채용공고 페이지 조회

    Args:
        keywords: 검색 키워드, 검색어는 "<keywords> jobs"
        location: 검색 지역

    Returns:
        URL이 있는 검색 결과, 응답 순서 유지

    Raises:
        JobSearchError: API 키 누락, 요청 실패, 예상과 다른 응답 형식
    """
    payload = {
        "query": f"{keywords} jobs",
        "limit": settings.job_search_limit,
        "scrapeOptions": {"formats": ["markdown"]},
    }
    if location:
        payload["location"] = location

    url = f"{settings.firecrawl_api_url.rstrip('/')}/search"
    try:
        response = await _client.post(url, headers=_get_headers(), json=payload)
        response.raise_for_status()
        body = response.json()
    except httpx.HTTPStatusError as e:
        status_code = e.response.status_code
        logger.error("채용 검색 실패 status=%d", status_code)
        raise JobSearchError(detail=f"HTTP {status_code}") from e
    except httpx.RequestError as e:
        logger.error("채용 검색 요청 오류 error=%s", e)
        raise JobSearchError(detail=type(e).__name__) from e
    except ValueError as e:
        raise JobSearchError(detail="JSON이 아닌 검색 응답") from e

    data = body.get("data") if isinstance(body, dict) else None
    if not isinstance(data, list):
        logger.error("채용 검색 응답 형식 오류 type=%s", type(data).__name__)
        raise JobSearchError(detail='검색 응답에 "data" 목록이 없습니다')

    postings = [parse_search_result(entry) for entry in data]
    postings = [posting for posting in postings if posting is not None]
    logger.info(
        "채용 검색 완료 keywords=%s results=%d dropped=%d",
        keywords,
        len(postings),
        len(data) - len(postings),
    )
    return postings
