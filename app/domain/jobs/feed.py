import asyncio
import re

import httpx
from bs4 import BeautifulSoup, Comment

from app.core.config import settings
from app.core.exceptions import FeedFetchError
from app.core.logging import get_logger
from app.domain.jobs.schemas import ExtractedJob, FeedIngestResult, ScoredJob
from app.infra.feed.client import fetch_feed, fetch_url_text
from app.infra.llm.client import LLM_CALL_ERRORS, calculate_profile_match, extract_feed_item

logger = get_logger(__name__)

ITEM_PATTERN = re.compile(r"<item\b[^>]*>.*?</item>", re.IGNORECASE | re.DOTALL)
NON_CONTENT_TAGS = ["script", "style", "noscript"]
WHITESPACE_PATTERN = re.compile(r"\s+")


def split_feed_items(xml: str, limit: int | None = None) -> list[str]:
    """RSS 문서를 <item> 단위 조각으로 분리

    Args:
        xml: RSS 문서
        limit: 최대 개수, None이면 설정값 사용

    Returns:
        문서 순서대로의 <item> XML 조각 목록
    """
    limit = settings.feed_max_items if limit is None else limit
    if limit <= 0:
        return []
    return ITEM_PATTERN.findall(xml)[:limit]


def strip_html(text: str) -> str:
    """HTML에서 본문 텍스트만 추출"""
    soup = BeautifulSoup(text, "html.parser")
    for tag in soup(NON_CONTENT_TAGS):
        tag.decompose()
    for comment in soup.find_all(string=lambda node: isinstance(node, Comment)):
        comment.extract()
    return WHITESPACE_PATTERN.sub(" ", soup.get_text(" ", strip=True)).strip()


async def fetch_job_description(url: str) -> str:
    """채용공고 페이지를 조회해서 본문 텍스트 반환

    Raises:
        FeedFetchError: 조회 실패 또는 본문이 비어 있는 경우
    """
    text = strip_html(await fetch_url_text(url))
    if not text:
        raise FeedFetchError(detail=f"빈 채용공고 페이지: {url}")

    logger.debug("채용공고 페이지 조회 완료 url=%s length=%d", url, len(text))
    return text[: settings.job_page_max_chars]


def _job_description(job: ExtractedJob) -> str:
    parts = [job.title]
    if job.company:
        parts.append(f"Company: {job.company}")
    if job.location:
        parts.append(f"Location: {job.location}")
    if job.description:
        parts.append(job.description)
    return "\n".join(parts)


async def _process_item(
    item_xml: str,
    profile_text: str | None,
    semaphore: asyncio.Semaphore,
    session_id: str | None,
) -> ScoredJob | None:
    async with semaphore:
        try:
            job = await extract_feed_item(item_xml, session_id=session_id)
            match = None
            if profile_text:
                match = await calculate_profile_match(
                    profile_text=profile_text,
                    job_description=_job_description(job),
                    session_id=session_id,
                )
        except httpx.HTTPStatusError as e:
            logger.warning("피드 항목 처리 LLM API 오류 status=%d", e.response.status_code)
            return None
        except LLM_CALL_ERRORS as e:
            logger.warning("피드 항목 처리 LLM 호출 실패 error=%s", e)
            return None
        except (ValueError, KeyError, TypeError) as e:
            logger.warning("피드 항목 처리 실패 error=%s", e)
            return None

    return ScoredJob(job=job, match=match)


async def ingest_feed(
    url: str,
    profile_text: str | None = None,
    session_id: str | None = None,
) -> FeedIngestResult:
    """RSS 피드를 조회해서 채용 정보 추출 후 프로필 적합도 계산

    항목별 실패는 건너뛰고 failed_items에 집계한다.

    Raises:
        FeedFetchError: 피드 조회 실패
    """
    xml = await fetch_feed(url)
    items = split_feed_items(xml)
    logger.info("피드 수집 시작 url=%s items=%d", url, len(items))

    semaphore = asyncio.Semaphore(settings.feed_max_concurrent_requests)
    results = await asyncio.gather(
        *(_process_item(item, profile_text, semaphore, session_id) for item in items)
    )

    jobs = [job for job in results if job is not None]
    failed = len(items) - len(jobs)
    logger.info("피드 수집 완료 url=%s jobs=%d failed=%d", url, len(jobs), failed)

    return FeedIngestResult(
        feed_url=url,
        total_items=len(items),
        jobs=jobs,
        failed_items=failed,
    )
