from typing import Literal

import httpx
from langgraph.graph import END, StateGraph
from langgraph.graph.state import CompiledStateGraph

from app.core.exceptions import CvGenerationError, ErrorCode
from app.core.logging import get_logger
from app.domain.cv.render import RenderTarget, render
from app.domain.cv.schemas import CvRequest, CvResult, CvState
from app.domain.profile.reconciler import reconcile_section_order, resolve_section_order
from app.domain.profile.schemas import ProfileDocument
from app.domain.profile.sections import non_empty_sections
from app.infra.llm.client import LLM_CALL_ERRORS, generate_latex_cv, suggest_section_order

logger = get_logger(__name__)


def _stored_order_state(state: CvState) -> CvState:
    return {
        **state,
        "section_order": resolve_section_order(state["profile"]),
        "order_source": "stored",
        "reasoning": None,
    }


async def suggest_order_node(state: CvState) -> CvState:
    """섹션 순서 제안 노드: 실패 시 저장된 순서 유지"""
    profile = state["profile"]
    request = state["request"]
    available = non_empty_sections(profile)
    logger.info("suggest_order_node 시작 available=%d", len(available))

    try:
        suggestion = await suggest_section_order(
            preference=request.preference,
            current_order=resolve_section_order(profile),
            available_sections=sorted(available, key=lambda k: k.value),
            session_id=state.get("session_id"),
        )

    except httpx.HTTPStatusError as e:
        logger.warning(
            "suggest_order_node LLM API 오류, 저장된 순서 유지 status=%d",
            e.response.status_code,
        )
        return _stored_order_state(state)

    except LLM_CALL_ERRORS as e:
        logger.warning("suggest_order_node LLM 호출 실패, 저장된 순서 유지 error=%s", e)
        return _stored_order_state(state)

    except (ValueError, KeyError, TypeError) as e:
        logger.warning("suggest_order_node 오류, 저장된 순서 유지 error=%s", e)
        return _stored_order_state(state)

    if not suggestion.new_section_order:
        return _stored_order_state(state)

    order = reconcile_section_order(suggestion.new_section_order, available)
    logger.info("suggest_order_node 완료 order=%s", [k.value for k in order])

    return {
        **state,
        "section_order": order,
        "order_source": "suggested",
        "reasoning": suggestion.reasoning,
    }


async def render_node(state: CvState) -> CvState:
    """렌더링 노드: 요청한 형식으로 프로필 렌더링"""
    request = state["request"]

    try:
        content = render(state["profile"], state["section_order"], request.target)

    except (ValueError, KeyError, TypeError) as e:
        logger.error("render_node 렌더링 오류 error=%s", e, exc_info=True)
        return {
            **state,
            "error_code": ErrorCode.RENDER_ERROR,
            "error_message": f"렌더링 오류: {e}",
        }

    logger.info("render_node 완료 target=%s length=%d", request.target.value, len(content))
    return {**state, "content": content}


async def generate_latex_node(state: CvState) -> CvState:
    """LaTeX 생성 노드: LaTeX 프롬프트 텍스트를 그대로 전달"""
    request = state["request"]
    logger.info("generate_latex_node 시작")

    if request.target == RenderTarget.LATEX_PROMPT_TEXT:
        profile_text = state["content"]
    else:
        profile_text = render(
            state["profile"], state["section_order"], RenderTarget.LATEX_PROMPT_TEXT
        )

    try:
        output = await generate_latex_cv(
            profile_text=profile_text,
            style_preference=request.style_preference,
            session_id=state.get("session_id"),
        )

    except httpx.HTTPStatusError as e:
        status_code = e.response.status_code
        logger.error("generate_latex_node LLM API 오류 status=%d", status_code)
        return {
            **state,
            "error_code": ErrorCode.LLM_ERROR,
            "error_message": f"LLM API 오류: HTTP {status_code}",
        }

    except LLM_CALL_ERRORS as e:
        logger.error("generate_latex_node LLM 호출 실패 error=%s", e)
        return {
            **state,
            "error_code": ErrorCode.LLM_ERROR,
            "error_message": f"LLM 호출 실패: {e}",
        }

    except (ValueError, KeyError, TypeError) as e:
        logger.error("generate_latex_node 생성 오류 error=%s", e, exc_info=True)
        return {
            **state,
            "error_code": ErrorCode.LATEX_GENERATE_ERROR,
            "error_message": f"LaTeX 생성 오류: {e}",
        }

    logger.info("generate_latex_node 완료 length=%d", len(output.latex_code))
    return {**state, "latex_code": output.latex_code}


def should_generate_latex(state: CvState) -> Literal["generate_latex", "end"]:
    """에러가 없고 LaTeX 생성을 요청한 경우에만 진행"""
    if state.get("error_code"):
        logger.info("should_generate_latex: 에러 발생, 종료")
        return "end"
    if state["request"].generate_latex:
        return "generate_latex"
    return "end"


def create_cv_workflow() -> CompiledStateGraph:
    """CV 생성 워크플로우 생성"""
    workflow = StateGraph(CvState)

    workflow.add_node("suggest_order", suggest_order_node)
    workflow.add_node("render", render_node)
    workflow.add_node("generate_latex", generate_latex_node)

    workflow.set_entry_point("suggest_order")
    workflow.add_edge("suggest_order", "render")

    workflow.add_conditional_edges(
        "render",
        should_generate_latex,
        {
            "generate_latex": "generate_latex",
            "end": END,
        },
    )
    workflow.add_edge("generate_latex", END)

    return workflow.compile()


async def run_cv_workflow(
    profile: ProfileDocument,
    request: CvRequest,
    session_id: str | None = None,
) -> CvResult:
    """CV 생성 워크플로우 실행

    Raises:
        CvGenerationError: 워크플로우가 에러 상태로 끝난 경우, error_code는 실패한 단계
    """
    workflow = create_cv_workflow()
    final_state = await workflow.ainvoke(
        {
            "profile": profile,
            "request": request,
            "session_id": session_id,
        }
    )

    error_code = final_state.get("error_code")
    if error_code:
        raise CvGenerationError(
            detail=final_state.get("error_message"),
            error_code=error_code,
            status_code=500 if error_code == ErrorCode.RENDER_ERROR else None,
        )

    return CvResult(
        section_order=final_state["section_order"],
        order_source=final_state["order_source"],
        reasoning=final_state.get("reasoning"),
        content=final_state["content"],
        latex_code=final_state.get("latex_code"),
    )
