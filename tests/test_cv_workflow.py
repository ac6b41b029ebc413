"""CV 워크플로우 테스트"""

from unittest.mock import AsyncMock, patch

import httpx
import openai
import pytest
from google.api_core.exceptions import GoogleAPIError

from app.core.exceptions import CvGenerationError, ErrorCode
from app.domain.cv.render import RenderTarget
from app.domain.cv.schemas import CvRequest, CvState, LatexCvOutput, SectionOrderSuggestion
from app.domain.cv.workflow import (
    generate_latex_node,
    render_node,
    run_cv_workflow,
    should_generate_latex,
    suggest_order_node,
)
from app.domain.profile.constants import SectionKey

W = SectionKey.WORK_EXPERIENCES
E = SectionKey.EDUCATION
S = SectionKey.SKILLS
P = SectionKey.PROJECTS
C = SectionKey.CUSTOM_SECTIONS


@pytest.fixture
def cv_state(sample_profile) -> CvState:
    """워크플로우 시작 상태"""
    return CvState(profile=sample_profile, request=CvRequest(preference="Academic"))


class TestSuggestOrderNode:
    """suggest_order_node 함수 테스트"""

    @pytest.mark.asyncio
    async def test_suggestion_is_reconciled(self, cv_state):
        """제안 순서를 보정해서 사용"""
        suggestion = SectionOrderSuggestion(
            new_section_order=["education", "hobbies", "publications", "education"],
            reasoning="Academic CV",
        )
        with patch(
            "app.domain.cv.workflow.suggest_section_order",
            new_callable=AsyncMock,
            return_value=suggestion,
        ):
            result = await suggest_order_node(cv_state)

        assert result["section_order"] == [E, W, P, S, C]
        assert result["order_source"] == "suggested"
        assert result["reasoning"] == "Academic CV"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [ValueError("bad output"), KeyError("x"), TypeError("y")],
        ids=["value_error", "key_error", "type_error"],
    )
    async def test_failure_keeps_stored_order(self, cv_state, error):
        """실패 시 저장된 순서 유지"""
        with patch(
            "app.domain.cv.workflow.suggest_section_order",
            new_callable=AsyncMock,
            side_effect=error,
        ):
            result = await suggest_order_node(cv_state)

        assert result["section_order"] == [S, W, E, P, C]
        assert result["order_source"] == "stored"
        assert result.get("error_code") is None

    @pytest.mark.asyncio
    async def test_http_error_keeps_stored_order(self, cv_state, create_http_error):
        """LLM API 오류 시 저장된 순서 유지"""
        with patch(
            "app.domain.cv.workflow.suggest_section_order",
            new_callable=AsyncMock,
            side_effect=create_http_error(503),
        ):
            result = await suggest_order_node(cv_state)

        assert result["order_source"] == "stored"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [
            httpx.ConnectError("unreachable"),
            httpx.ReadTimeout("timed out"),
            openai.APIConnectionError(request=httpx.Request("POST", "https://api.openai.com")),
            GoogleAPIError("quota exhausted"),
        ],
        ids=["connect", "timeout", "openai_connection", "google_api"],
    )
    async def test_transport_error_keeps_stored_order(self, cv_state, error):
        """모델 서버 연결 실패, 프로바이더 SDK 오류 시 저장된 순서 유지"""
        with patch(
            "app.domain.cv.workflow.suggest_section_order",
            new_callable=AsyncMock,
            side_effect=error,
        ):
            result = await suggest_order_node(cv_state)

        assert result["order_source"] == "stored"
        assert result["section_order"] == [S, W, E, P, C]
        assert result.get("error_code") is None

    @pytest.mark.asyncio
    async def test_empty_suggestion_keeps_stored_order(self, cv_state):
        """빈 제안은 저장된 순서"""
        with patch(
            "app.domain.cv.workflow.suggest_section_order",
            new_callable=AsyncMock,
            return_value=SectionOrderSuggestion(),
        ):
            result = await suggest_order_node(cv_state)

        assert result["order_source"] == "stored"


class TestRenderNode:
    """render_node 함수 테스트"""

    @pytest.mark.asyncio
    async def test_render(self, cv_state):
        """요청한 형식으로 렌더링"""
        state = {**cv_state, "section_order": [S, W]}

        result = await render_node(state)

        assert result["content"].startswith("Jane Doe")
        assert result["content"].index("SKILLS") < result["content"].index("WORK EXPERIENCE")


class TestGenerateLatexNode:
    """generate_latex_node 함수 테스트"""

    @pytest.mark.asyncio
    async def test_latex_prompt_text_passed_verbatim(self, sample_profile):
        """LaTeX 프롬프트 텍스트를 그대로 전달"""
        state = CvState(
            profile=sample_profile,
            request=CvRequest(target=RenderTarget.LATEX_PROMPT_TEXT, generate_latex=True),
            section_order=[W],
            content="# Jane Doe",
        )
        with patch(
            "app.domain.cv.workflow.generate_latex_cv",
            new_callable=AsyncMock,
            return_value=LatexCvOutput(latex_code="\\documentclass{article}"),
        ) as mock_generate:
            result = await generate_latex_node(state)

        assert result["latex_code"] == "\\documentclass{article}"
        assert mock_generate.call_args.kwargs["profile_text"] == "# Jane Doe"

    @pytest.mark.asyncio
    async def test_renders_latex_text_for_other_targets(self, sample_profile):
        """다른 형식을 요청했으면 LaTeX 텍스트를 따로 렌더링"""
        state = CvState(
            profile=sample_profile,
            request=CvRequest(generate_latex=True),
            section_order=[W],
            content="plain",
        )
        with patch(
            "app.domain.cv.workflow.generate_latex_cv",
            new_callable=AsyncMock,
            return_value=LatexCvOutput(latex_code="x"),
        ) as mock_generate:
            await generate_latex_node(state)

        assert mock_generate.call_args.kwargs["profile_text"].startswith("# Jane Doe")

    @pytest.mark.asyncio
    async def test_http_error(self, sample_profile, create_http_error):
        """LLM API 오류"""
        state = CvState(
            profile=sample_profile,
            request=CvRequest(generate_latex=True),
            section_order=[W],
            content="plain",
        )
        with patch(
            "app.domain.cv.workflow.generate_latex_cv",
            new_callable=AsyncMock,
            side_effect=create_http_error(500),
        ):
            result = await generate_latex_node(state)

        assert result["error_code"] == ErrorCode.LLM_ERROR
        assert "HTTP 500" in result["error_message"]

    @pytest.mark.asyncio
    async def test_connection_error(self, sample_profile):
        """모델 서버 연결 실패는 LLM_ERROR"""
        state = CvState(
            profile=sample_profile,
            request=CvRequest(generate_latex=True),
            section_order=[W],
            content="plain",
        )
        with patch(
            "app.domain.cv.workflow.generate_latex_cv",
            new_callable=AsyncMock,
            side_effect=httpx.ConnectError("unreachable"),
        ):
            result = await generate_latex_node(state)

        assert result["error_code"] == ErrorCode.LLM_ERROR
        assert "unreachable" in result["error_message"]


class TestShouldGenerateLatex:
    """should_generate_latex 함수 테스트"""

    @pytest.mark.parametrize(
        "generate_latex,error_code,expected",
        [
            (True, None, "generate_latex"),
            (False, None, "end"),
            (True, ErrorCode.RENDER_ERROR, "end"),
        ],
        ids=["requested", "not_requested", "error"],
    )
    def test_routing(self, sample_profile, generate_latex, error_code, expected):
        """분기 결정"""
        state = CvState(profile=sample_profile, request=CvRequest(generate_latex=generate_latex))
        if error_code:
            state["error_code"] = error_code

        assert should_generate_latex(state) == expected


class TestRunCvWorkflow:
    """run_cv_workflow 함수 테스트"""

    @pytest.mark.asyncio
    async def test_full_run_with_latex(self, sample_profile):
        """제안 -> 렌더링 -> LaTeX 생성"""
        with (
            patch(
                "app.domain.cv.workflow.suggest_section_order",
                new_callable=AsyncMock,
                return_value=SectionOrderSuggestion(new_section_order=["projects"]),
            ),
            patch(
                "app.domain.cv.workflow.generate_latex_cv",
                new_callable=AsyncMock,
                return_value=LatexCvOutput(latex_code="\\documentclass{article}"),
            ) as mock_generate,
        ):
            result = await run_cv_workflow(
                sample_profile,
                CvRequest(
                    preference="Startup",
                    target=RenderTarget.LATEX_PROMPT_TEXT,
                    generate_latex=True,
                ),
                session_id="s-1",
            )

        assert result.section_order == [P, W, E, S, C]
        assert result.order_source == "suggested"
        assert result.content.startswith("# Jane Doe")
        assert result.latex_code == "\\documentclass{article}"
        assert mock_generate.call_args.kwargs["profile_text"] == result.content

    @pytest.mark.asyncio
    async def test_run_without_latex(self, sample_profile):
        """LaTeX 생성 없이 종료"""
        with (
            patch(
                "app.domain.cv.workflow.suggest_section_order",
                new_callable=AsyncMock,
                side_effect=ValueError("no output"),
            ),
            patch(
                "app.domain.cv.workflow.generate_latex_cv",
                new_callable=AsyncMock,
            ) as mock_generate,
        ):
            result = await run_cv_workflow(sample_profile, CvRequest())

        assert result.order_source == "stored"
        assert result.latex_code is None
        mock_generate.assert_not_called()

    @pytest.mark.asyncio
    async def test_error_state_raises(self, sample_profile, create_http_error):
        """에러 상태로 끝나면 실패 단계 코드로 CvGenerationError"""
        with (
            patch(
                "app.domain.cv.workflow.suggest_section_order",
                new_callable=AsyncMock,
                return_value=SectionOrderSuggestion(),
            ),
            patch(
                "app.domain.cv.workflow.generate_latex_cv",
                new_callable=AsyncMock,
                side_effect=create_http_error(502),
            ),
        ):
            with pytest.raises(CvGenerationError) as exc_info:
                await run_cv_workflow(sample_profile, CvRequest(generate_latex=True))

        assert exc_info.value.error_code == ErrorCode.LLM_ERROR
        assert exc_info.value.status_code == 502
        assert "HTTP 502" in exc_info.value.detail
