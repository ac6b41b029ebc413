import json
import os
from collections.abc import Sequence

import httpx
import openai
from google.api_core.exceptions import GoogleAPIError
from langchain_core.messages import HumanMessage, SystemMessage
from langfuse.langchain import CallbackHandler
from pydantic import BaseModel

from app.core.config import settings
from app.core.logging import get_logger
from app.domain.cv.prompts import (
    DEFAULT_PREFERENCE,
    DEFAULT_STYLE_PREFERENCE,
    LATEX_CV_HUMAN,
    LATEX_CV_SYSTEM,
    LATEX_FALLBACK_TEMPLATE,
    SECTION_ORDER_HUMAN,
    SECTION_ORDER_SYSTEM,
)
from app.domain.cv.renderers import escape_latex
from app.domain.cv.schemas import LatexCvOutput, SectionOrderSuggestion
from app.domain.jobs.catalog import ALL_JOBS_FEED_URL, JOB_FEEDS
from app.domain.jobs.prompts import (
    COVER_LETTER_HUMAN,
    COVER_LETTER_SYSTEM,
    DEFAULT_APPLICANT,
    EXTRACT_FEED_ITEM_HUMAN,
    EXTRACT_FEED_ITEM_SYSTEM,
    EXTRACT_JOB_DETAILS_HUMAN,
    EXTRACT_JOB_DETAILS_SYSTEM,
    FIND_JOBS_HUMAN,
    FIND_JOBS_SYSTEM,
    POLISH_TEXT_HUMAN,
    POLISH_TEXT_SYSTEM,
    PROFILE_MATCH_HUMAN,
    PROFILE_MATCH_SYSTEM,
    SEARCH_QUERIES_HUMAN,
    SEARCH_QUERIES_SYSTEM,
    SELECT_JOB_FEED_HUMAN,
    SELECT_JOB_FEED_SYSTEM,
    TAILOR_RESUME_HUMAN,
    TAILOR_RESUME_SYSTEM,
)
from app.domain.jobs.schemas import (
    CoverLetterOutput,
    ExtractedJob,
    FeedSelection,
    GeneratedJobPostings,
    JobDetailsOutput,
    JobFeed,
    MatchOutput,
    PolishedTextOutput,
    SearchQueries,
    TailoredResumeOutput,
)
from app.domain.profile.constants import SectionKey
from app.domain.profile.extraction import ExtractedProfile
from app.domain.profile.prompts import EXTRACT_PROFILE_HUMAN, EXTRACT_PROFILE_SYSTEM
from app.infra.llm.base import BaseLLMClient
from app.infra.llm.factory import get_evaluator_client, get_generator_client

logger = get_logger(__name__)

if settings.langfuse_public_key:
    os.environ["LANGFUSE_PUBLIC_KEY"] = settings.langfuse_public_key
if settings.langfuse_secret_key:
    os.environ["LANGFUSE_SECRET_KEY"] = settings.langfuse_secret_key
if settings.langfuse_base_url:
    os.environ["LANGFUSE_HOST"] = settings.langfuse_base_url

COVER_LETTER_FALLBACK = "Could not generate cover letter at this time. Please try again."
MATCH_FALLBACK_SUMMARY = "Could not determine match. The AI model did not provide a valid response."
FEED_SELECTION_FALLBACK_REASONING = (
    'Could not determine a specific feed, so the general "All Jobs" feed was selected.'
)
UNSPECIFIED_LOCATION = "Not specified"
MAX_SEARCH_QUERIES = 5

# 전송 계층 오류와 프로바이더 SDK 오류
LLM_CALL_ERRORS = (httpx.HTTPError, openai.APIError, GoogleAPIError)


def get_langfuse_handler() -> CallbackHandler | None:
    """Langfuse 콜백 핸들러 반환"""
    if not settings.langfuse_public_key or not settings.langfuse_secret_key:
        return None

    return CallbackHandler()


def _build_config(tags: list[str], session_id: str | None) -> dict:
    langfuse_handler = get_langfuse_handler()
    return {
        "callbacks": [langfuse_handler] if langfuse_handler else [],
        "metadata": {
            "langfuse_session_id": session_id,
            "langfuse_tags": tags,
        },
    }


def _get_json_schema_prompt(model_class: type[BaseModel]) -> str:
    """Pydantic 모델의 JSON 스키마를 프롬프트용 문자열로 변환"""
    schema = model_class.model_json_schema()
    return json.dumps(schema, indent=2, ensure_ascii=False)


async def _invoke_structured(
    client: BaseLLMClient,
    schema: type[BaseModel],
    system_content: str,
    human_content: str,
    tags: list[str],
    session_id: str | None = None,
):
    """구조화 출력 LLM 호출 - 모델이 응답을 못 만들면 None"""
    human_content += (
        "\n\nRespond only in the following JSON format:\n"
        f"```json\n{_get_json_schema_prompt(schema)}\n```"
    )
    llm = client.with_structured_output(schema)
    messages = [
        SystemMessage(content=system_content),
        HumanMessage(content=human_content),
    ]
    return await llm.ainvoke(messages, config=_build_config(tags, session_id))


def _format_keys(keys: Sequence[SectionKey | str]) -> str:
    if not keys:
        return "- (none)"
    return "\n".join(f"- {getattr(k, 'value', k)}" for k in keys)


async def suggest_section_order(
    preference: str | None,
    current_order: Sequence[SectionKey],
    available_sections: Sequence[SectionKey],
    session_id: str | None = None,
) -> SectionOrderSuggestion:
    """사용자 선호에 맞는 섹션 순서 제안 - 결과는 호출자가 보정해야 함"""
    preference = (preference or "").strip() or DEFAULT_PREFERENCE
    logger.debug(
        "섹션 순서 제안 요청 preference=%s available=%d",
        preference,
        len(available_sections),
    )

    human_content = SECTION_ORDER_HUMAN.format(
        preference=preference,
        current_order=_format_keys(current_order),
        available_sections=_format_keys(available_sections),
    )
    result = await _invoke_structured(
        get_generator_client(),
        SectionOrderSuggestion,
        SECTION_ORDER_SYSTEM,
        human_content,
        ["cv", "section-order"],
        session_id,
    )

    if result is None or not result.new_section_order:
        logger.warning("섹션 순서 제안 결과 없음 preference=%s", preference)
        return SectionOrderSuggestion(new_section_order=[], reasoning=None)

    logger.debug("섹션 순서 제안 완료 order=%s", result.new_section_order)
    return result


def build_latex_fallback(profile_text: str) -> str:
    """LaTeX 생성 실패 시 입력 일부를 담은 문서 반환"""
    excerpt = escape_latex(profile_text[: settings.latex_fallback_excerpt_length])
    return LATEX_FALLBACK_TEMPLATE % excerpt


async def generate_latex_cv(
    profile_text: str,
    style_preference: str | None = None,
    session_id: str | None = None,
) -> LatexCvOutput:
    """LaTeX 프롬프트 텍스트로 LaTeX CV 문서 생성"""
    style_preference = (style_preference or "").strip() or DEFAULT_STYLE_PREFERENCE
    logger.debug("LaTeX 생성 요청 style=%s length=%d", style_preference, len(profile_text))

    human_content = LATEX_CV_HUMAN.format(
        profile_text=profile_text,
        style_preference=style_preference,
    )
    result = await _invoke_structured(
        get_generator_client(),
        LatexCvOutput,
        LATEX_CV_SYSTEM,
        human_content,
        ["cv", "latex"],
        session_id,
    )

    if result is None or not result.latex_code.strip():
        logger.error("LaTeX 생성 결과 없음, 대체 문서 반환")
        return LatexCvOutput(latex_code=build_latex_fallback(profile_text))

    logger.debug("LaTeX 생성 완료 length=%d", len(result.latex_code))
    return result


async def generate_cover_letter(
    resume_text: str,
    job_description: str,
    user_name: str | None = None,
    session_id: str | None = None,
) -> CoverLetterOutput:
    """이력서와 채용공고 기반 커버레터 생성"""
    human_content = COVER_LETTER_HUMAN.format(
        user_name=user_name or DEFAULT_APPLICANT,
        resume_text=resume_text,
        job_description=job_description,
    )
    result = await _invoke_structured(
        get_generator_client(),
        CoverLetterOutput,
        COVER_LETTER_SYSTEM,
        human_content,
        ["jobs", "cover-letter"],
        session_id,
    )

    if result is None or not result.cover_letter_text.strip():
        logger.error("커버레터 생성 결과 없음")
        return CoverLetterOutput(cover_letter_text=COVER_LETTER_FALLBACK)
    return result


async def calculate_profile_match(
    profile_text: str,
    job_description: str,
    session_id: str | None = None,
) -> MatchOutput:
    """프로필과 채용공고 적합도 계산"""
    human_content = PROFILE_MATCH_HUMAN.format(
        profile_text=profile_text,
        job_description=job_description,
    )
    result = await _invoke_structured(
        get_evaluator_client(),
        MatchOutput,
        PROFILE_MATCH_SYSTEM,
        human_content,
        ["jobs", "match"],
        session_id,
    )

    if result is None:
        logger.error("적합도 계산 결과 없음")
        return MatchOutput(
            match_percentage=0,
            match_summary=MATCH_FALLBACK_SUMMARY,
            match_category="Poor Match",
        )

    logger.debug(
        "적합도 계산 완료 percentage=%d category=%s",
        result.match_percentage,
        result.match_category,
    )
    return result


async def tailor_resume(
    resume: str,
    job_description: str,
    session_id: str | None = None,
) -> TailoredResumeOutput:
    """채용공고에 맞춘 이력서 작성

    Raises:
        ValueError: 모델이 결과를 반환하지 않은 경우
    """
    human_content = TAILOR_RESUME_HUMAN.format(resume=resume, job_description=job_description)
    result = await _invoke_structured(
        get_generator_client(),
        TailoredResumeOutput,
        TAILOR_RESUME_SYSTEM,
        human_content,
        ["jobs", "tailor"],
        session_id,
    )

    if result is None:
        raise ValueError("맞춤 이력서 생성 결과가 없습니다")
    return result


async def polish_text(text: str, session_id: str | None = None) -> PolishedTextOutput:
    """문장 다듬기 - 실패 시 원문 반환"""
    result = await _invoke_structured(
        get_generator_client(),
        PolishedTextOutput,
        POLISH_TEXT_SYSTEM,
        POLISH_TEXT_HUMAN.format(text=text),
        ["profile", "polish"],
        session_id,
    )

    if result is None or not result.polished_text.strip():
        logger.warning("문장 다듬기 결과 없음, 원문 반환")
        return PolishedTextOutput(polished_text=text)
    return result


async def extract_feed_item(item_xml: str, session_id: str | None = None) -> ExtractedJob:
    """RSS item 조각에서 채용 정보 추출

    Raises:
        ValueError: 모델이 결과를 반환하지 않은 경우
    """
    result = await _invoke_structured(
        get_generator_client(),
        ExtractedJob,
        EXTRACT_FEED_ITEM_SYSTEM,
        EXTRACT_FEED_ITEM_HUMAN.format(item_xml=item_xml),
        ["jobs", "feed"],
        session_id,
    )

    if result is None:
        raise ValueError("RSS item 추출 결과가 없습니다")
    return result


async def extract_profile_from_cv(cv_text: str, session_id: str | None = None) -> ExtractedProfile:
    """CV 텍스트에서 프로필 정보 추출 - 실패 시 빈 결과"""
    logger.debug("CV 추출 요청 length=%d", len(cv_text))
    result = await _invoke_structured(
        get_generator_client(),
        ExtractedProfile,
        EXTRACT_PROFILE_SYSTEM,
        EXTRACT_PROFILE_HUMAN.format(cv_text=cv_text),
        ["profile", "import"],
        session_id,
    )

    if result is None:
        logger.warning("CV 추출 결과 없음")
        return ExtractedProfile()
    return result


async def extract_job_details(
    job_description: str, session_id: str | None = None
) -> JobDetailsOutput:
    """채용공고에서 직무명과 회사명 추출 - 찾지 못한 값은 빈 문자열"""
    result = await _invoke_structured(
        get_generator_client(),
        JobDetailsOutput,
        EXTRACT_JOB_DETAILS_SYSTEM,
        EXTRACT_JOB_DETAILS_HUMAN.format(job_description=job_description),
        ["jobs", "details"],
        session_id,
    )

    if result is None:
        logger.warning("채용공고 정보 추출 결과 없음")
        return JobDetailsOutput()
    return JobDetailsOutput(
        job_title=(result.job_title or "").strip(),
        company_name=(result.company_name or "").strip(),
    )


def _format_feeds(feeds: Sequence[JobFeed]) -> str:
    return "\n".join(
        f"- Name: {feed.name}\n  - Category: {feed.category}\n  - URL: {feed.url}"
        for feed in feeds
    )


def _general_feed_url(feeds: Sequence[JobFeed]) -> str:
    for feed in feeds:
        if feed.url == ALL_JOBS_FEED_URL:
            return feed.url
    return ALL_JOBS_FEED_URL


async def select_job_feed(
    user_prompt: str,
    feeds: Sequence[JobFeed] | None = None,
    session_id: str | None = None,
) -> FeedSelection:
    """요청에 가장 맞는 채용 피드 선택

    목록에 없는 URL이나 빈 응답이면 전체 채용 피드를 선택한다.
    """
    feeds = JOB_FEEDS if feeds is None else feeds
    result = await _invoke_structured(
        get_generator_client(),
        FeedSelection,
        SELECT_JOB_FEED_SYSTEM,
        SELECT_JOB_FEED_HUMAN.format(user_prompt=user_prompt, feeds=_format_feeds(feeds)),
        ["jobs", "feed-select"],
        session_id,
    )

    known_urls = {feed.url for feed in feeds}
    selected = (result.selected_feed_url or "").strip() if result else ""
    if selected not in known_urls:
        logger.warning("피드 선택 실패, 전체 피드 사용 selected=%s", selected or None)
        return FeedSelection(
            selected_feed_url=_general_feed_url(feeds),
            reasoning=FEED_SELECTION_FALLBACK_REASONING,
        )

    logger.debug("피드 선택 완료 url=%s", selected)
    return FeedSelection(selected_feed_url=selected, reasoning=result.reasoning)


async def generate_job_postings(
    keywords: str,
    location: str | None = None,
    session_id: str | None = None,
) -> GeneratedJobPostings:
    """키워드로 예시 채용공고 생성 - 실패 시 빈 목록"""
    result = await _invoke_structured(
        get_generator_client(),
        GeneratedJobPostings,
        FIND_JOBS_SYSTEM,
        FIND_JOBS_HUMAN.format(keywords=keywords, location=location or "Any"),
        ["jobs", "find"],
        session_id,
    )

    if result is None:
        logger.error("예시 채용공고 생성 결과 없음 keywords=%s", keywords)
        return GeneratedJobPostings()

    postings = [
        posting.model_copy(update={"location": posting.location or UNSPECIFIED_LOCATION})
        for posting in result.job_postings
    ]
    return GeneratedJobPostings(job_postings=postings)


async def suggest_search_queries(prompt: str, session_id: str | None = None) -> list[str]:
    """채용 사이트 검색어 생성

    Raises:
        ValueError: 모델이 검색어를 반환하지 않은 경우
    """
    result = await _invoke_structured(
        get_generator_client(),
        SearchQueries,
        SEARCH_QUERIES_SYSTEM,
        SEARCH_QUERIES_HUMAN.format(prompt=prompt),
        ["jobs", "search-queries"],
        session_id,
    )

    queries = [q.strip() for q in (result.queries if result else []) if q.strip()]
    if not queries:
        raise ValueError("검색어 생성 결과가 없습니다")
    return queries[:MAX_SEARCH_QUERIES]
