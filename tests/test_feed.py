"""채용 피드 테스트"""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from app.core.exceptions import FeedFetchError
from app.domain.jobs.catalog import JOB_FEEDS, find_feeds
from app.domain.jobs.feed import (
    fetch_job_description,
    ingest_feed,
    split_feed_items,
    strip_html,
)
from app.domain.jobs.schemas import ExtractedJob, MatchOutput
from app.infra.feed.client import fetch_feed, fetch_url_text

SAMPLE_FEED = """<?xml version="1.0"?>
<rss version="2.0"><channel>
<title>Jobs</title>
<item><title>Lecturer in AI</title><link>https://jobs/1</link></item>
<ITEM><title>Research Fellow</title><link>https://jobs/2</link></ITEM>
<item>
  <title>Data Engineer</title>
  <link>https://jobs/3</link>
</item>
</channel></rss>"""


class TestSplitFeedItems:
    """split_feed_items 함수 테스트"""

    def test_split_in_document_order(self):
        """문서 순서대로 분리"""
        items = split_feed_items(SAMPLE_FEED, limit=10)

        assert len(items) == 3
        assert "Lecturer in AI" in items[0]
        assert "Research Fellow" in items[1]
        assert "Data Engineer" in items[2]

    def test_limit(self):
        """최대 개수 제한"""
        assert len(split_feed_items(SAMPLE_FEED, limit=2)) == 2

    def test_zero_limit(self):
        """0 이하 제한은 빈 목록"""
        assert split_feed_items(SAMPLE_FEED, limit=0) == []

    def test_no_items(self):
        """item 없는 문서"""
        assert split_feed_items("<rss><channel></channel></rss>", limit=5) == []

    def test_default_limit_from_settings(self):
        """설정값 기본 제한"""
        with patch("app.domain.jobs.feed.settings") as mock_settings:
            mock_settings.feed_max_items = 1
            assert len(split_feed_items(SAMPLE_FEED)) == 1


class TestStripHtml:
    """strip_html 함수 테스트"""

    def test_removes_tags_scripts_and_styles(self):
        """태그/스크립트/스타일 제거"""
        html = (
            "<html><head><style>p {color: red}</style><script>alert(1)</script></head>"
            "<body><!-- nav --><h1>Senior  Engineer</h1>\n<p>Python &amp; Go</p></body></html>"
        )

        assert strip_html(html) == "Senior Engineer Python & Go"

    def test_angle_bracket_in_attribute(self):
        """속성값 안의 > 는 본문으로 새지 않음"""
        assert strip_html('<p><a title="x > y" href="/a">Apply</a> now</p>') == "Apply now"

    def test_noscript_and_comment_removed(self):
        """noscript와 주석 제거"""
        html = "<div><noscript>Enable JS</noscript><!-- <b>hidden</b> -->Visible</div>"

        assert strip_html(html) == "Visible"

    def test_empty(self):
        """빈 입력"""
        assert strip_html("") == ""


class TestFetchJobDescription:
    """fetch_job_description 함수 테스트"""

    @pytest.mark.asyncio
    async def test_page_text(self):
        """페이지 HTML에서 본문 추출"""
        with patch(
            "app.domain.jobs.feed.fetch_url_text",
            new_callable=AsyncMock,
            return_value="<html><body><h1>Go Engineer</h1><p>Remote</p></body></html>",
        ):
            result = await fetch_job_description("https://jobs/1")

        assert result == "Go Engineer Remote"

    @pytest.mark.asyncio
    async def test_empty_page(self):
        """본문 없는 페이지"""
        with patch(
            "app.domain.jobs.feed.fetch_url_text",
            new_callable=AsyncMock,
            return_value="<html><script>x()</script></html>",
        ):
            with pytest.raises(FeedFetchError):
                await fetch_job_description("https://jobs/1")


class TestIngestFeed:
    """ingest_feed 함수 테스트"""

    @pytest.mark.asyncio
    async def test_extract_and_score(self):
        """항목 추출 후 적합도 계산"""
        jobs = [
            ExtractedJob(title="Lecturer in AI"),
            ExtractedJob(title="Research Fellow"),
            ExtractedJob(title="Data Engineer"),
        ]
        match = MatchOutput(match_percentage=70, match_summary="ok", match_category="Good Match")

        with (
            patch(
                "app.domain.jobs.feed.fetch_feed",
                new_callable=AsyncMock,
                return_value=SAMPLE_FEED,
            ),
            patch(
                "app.domain.jobs.feed.extract_feed_item",
                new_callable=AsyncMock,
                side_effect=jobs,
            ),
            patch(
                "app.domain.jobs.feed.calculate_profile_match",
                new_callable=AsyncMock,
                return_value=match,
            ) as mock_match,
        ):
            result = await ingest_feed("https://feed", profile_text="Jane Doe")

        assert result.total_items == 3
        assert result.failed_items == 0
        assert [j.job.title for j in result.jobs] == [
            "Lecturer in AI",
            "Research Fellow",
            "Data Engineer",
        ]
        assert all(j.match.match_percentage == 70 for j in result.jobs)
        assert mock_match.await_count == 3

    @pytest.mark.asyncio
    async def test_failed_items_skipped(self, create_http_error):
        """항목별 실패는 건너뜀"""
        with (
            patch(
                "app.domain.jobs.feed.fetch_feed",
                new_callable=AsyncMock,
                return_value=SAMPLE_FEED,
            ),
            patch(
                "app.domain.jobs.feed.extract_feed_item",
                new_callable=AsyncMock,
                side_effect=[
                    ExtractedJob(title="Lecturer in AI"),
                    ValueError("no output"),
                    create_http_error(429),
                ],
            ),
            patch(
                "app.domain.jobs.feed.calculate_profile_match",
                new_callable=AsyncMock,
            ) as mock_match,
        ):
            result = await ingest_feed("https://feed")

        assert result.total_items == 3
        assert result.failed_items == 2
        assert len(result.jobs) == 1
        assert result.jobs[0].match is None
        mock_match.assert_not_called()

    @pytest.mark.asyncio
    async def test_unreachable_model_items_skipped(self):
        """모델 서버 연결 실패 항목도 건너뜀"""
        with (
            patch(
                "app.domain.jobs.feed.fetch_feed",
                new_callable=AsyncMock,
                return_value=SAMPLE_FEED,
            ),
            patch(
                "app.domain.jobs.feed.extract_feed_item",
                new_callable=AsyncMock,
                side_effect=[
                    httpx.ConnectError("unreachable"),
                    ExtractedJob(title="Research Fellow"),
                    httpx.ReadTimeout("timed out"),
                ],
            ),
        ):
            result = await ingest_feed("https://feed")

        assert result.failed_items == 2
        assert [j.job.title for j in result.jobs] == ["Research Fellow"]

    @pytest.mark.asyncio
    async def test_fetch_error_propagates(self):
        """피드 조회 실패"""
        with patch(
            "app.domain.jobs.feed.fetch_feed",
            new_callable=AsyncMock,
            side_effect=FeedFetchError(detail="HTTP 404"),
        ):
            with pytest.raises(FeedFetchError):
                await ingest_feed("https://feed")


class TestFeedClient:
    """피드 HTTP 클라이언트 테스트"""

    @pytest.fixture
    def mock_response(self):
        response = MagicMock()
        response.raise_for_status = MagicMock()
        response.text = SAMPLE_FEED
        return response

    @pytest.mark.asyncio
    async def test_fetch_feed(self, mock_response):
        """피드 조회"""
        with patch("app.infra.feed.client._client") as mock_client:
            mock_client.get = AsyncMock(return_value=mock_response)
            result = await fetch_feed("https://feed")

        assert result == SAMPLE_FEED
        mock_client.get.assert_called_once_with("https://feed")

    @pytest.mark.asyncio
    async def test_fetch_feed_empty_body(self, mock_response):
        """빈 응답"""
        mock_response.text = "   "
        with patch("app.infra.feed.client._client") as mock_client:
            mock_client.get = AsyncMock(return_value=mock_response)
            with pytest.raises(FeedFetchError):
                await fetch_feed("https://feed")

    @pytest.mark.asyncio
    async def test_http_status_error(self, create_http_error):
        """HTTP 오류는 FeedFetchError"""
        with patch("app.infra.feed.client._client") as mock_client:
            mock_client.get = AsyncMock(side_effect=create_http_error(404))
            with pytest.raises(FeedFetchError) as exc_info:
                await fetch_url_text("https://page")

        assert "HTTP 404" in exc_info.value.detail

    @pytest.mark.asyncio
    async def test_request_error(self):
        """연결 오류는 FeedFetchError"""
        with patch("app.infra.feed.client._client") as mock_client:
            mock_client.get = AsyncMock(
                side_effect=httpx.ConnectTimeout("timeout", request=httpx.Request("GET", "x"))
            )
            with pytest.raises(FeedFetchError) as exc_info:
                await fetch_feed("https://feed")

        assert "ConnectTimeout" in exc_info.value.detail


class TestCatalog:
    """피드 카탈로그 테스트"""

    def test_catalogue_urls_unique(self):
        """URL 중복 없음"""
        urls = [feed.url for feed in JOB_FEEDS]

        assert len(urls) == len(set(urls))

    def test_catalogue_sorted_by_category_then_name(self):
        """카테고리, 이름 순 정렬"""
        keys = [(feed.category, feed.name) for feed in JOB_FEEDS]

        assert keys == sorted(keys)

    def test_find_by_category_case_insensitive(self):
        """대소문자 무시 조회"""
        feeds = find_feeds("uk locations")

        assert feeds
        assert all(feed.category == "UK Locations" for feed in feeds)
        assert any(feed.name == "London" for feed in feeds)

    def test_find_all(self):
        """카테고리 없으면 전체"""
        assert find_feeds() == JOB_FEEDS

    def test_find_unknown_category(self):
        """없는 카테고리"""
        assert find_feeds("Underwater Basket Weaving") == []

    def test_name_overrides(self):
        """표시 이름 보정"""
        names = {feed.name for feed in JOB_FEEDS}

        assert "Computer Science" in names
        assert "PhDs" in names
