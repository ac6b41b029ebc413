import httpx

from app.core.config import settings
from app.core.exceptions import FeedFetchError
from app.core.logging import get_logger

logger = get_logger(__name__)

FEED_HEADERS = {
    "Accept": "application/rss+xml, application/xml, text/xml, text/html;q=0.9",
    "User-Agent": "resume-forge/0.1 (+feed-ingest)",
}

_client = httpx.AsyncClient(
    timeout=settings.feed_timeout,
    headers=FEED_HEADERS,
    follow_redirects=True,
)


async def close_client():
    """httpx 클라이언트 종료"""
    await _client.aclose()


async def _get_text(url: str) -> str:
    try:
        response = await _client.get(url)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        status_code = e.response.status_code
        logger.error("URL 요청 실패 url=%s status=%d", url, status_code)
        raise FeedFetchError(detail=f"HTTP {status_code}: {url}") from e
    except httpx.RequestError as e:
        logger.error("URL 요청 오류 url=%s error=%s", url, e)
        raise FeedFetchError(detail=f"{type(e).__name__}: {url}") from e

    return response.text


async def fetch_feed(url: str) -> str:
    """RSS 피드 XML 조회

    Args:
        url: 피드 URL

    Returns:
        피드 본문

    Raises:
        FeedFetchError: 요청 실패 또는 빈 응답인 경우
    """
    text = await _get_text(url)
    if not text.strip():
        raise FeedFetchError(detail=f"빈 피드: {url}")

    logger.debug("피드 조회 완료 url=%s length=%d", url, len(text))
    return text


async def fetch_url_text(url: str) -> str:
    """웹 페이지 HTML 조회"""
    return await _get_text(url)
