import httpx
from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from app.api.v1.schemas import (
    LatexRequest,
    LatexResponse,
    RenderResponse,
    SectionOrderRequest,
    SectionOrderResponse,
)
from app.core.context import get_request_id
from app.core.exceptions import LLMError, ValidationError
from app.core.logging import get_logger
from app.domain.cv.export import ExportFormat, build_export, build_latex_export, export_filename
from app.domain.cv.render import RenderTarget, render
from app.domain.cv.schemas import CvRequest
from app.domain.cv.workflow import run_cv_workflow
from app.domain.profile.reconciler import resolve_section_order
from app.domain.profile.repository import ProfileRepository, get_profile_repository
from app.domain.profile.service import set_section_order
from app.infra.llm.client import LLM_CALL_ERRORS, generate_latex_cv

router = APIRouter(prefix="/cv", tags=["cv"])
logger = get_logger(__name__)


@router.post("/{user_id}/section-order", response_model=SectionOrderResponse)
async def suggest_order(
    user_id: str,
    request: SectionOrderRequest,
    repository: ProfileRepository = Depends(get_profile_repository),
) -> SectionOrderResponse:
    """선호에 맞는 섹션 순서 제안 후 저장 - LLM 실패 시 저장된 순서 유지"""
    doc = await repository.get_or_raise(user_id)

    result = await run_cv_workflow(
        profile=doc,
        request=CvRequest(preference=request.preference),
        session_id=get_request_id(),
    )

    if result.order_source == "suggested":
        await repository.save(set_section_order(doc, result.section_order))
        logger.info("섹션 순서 저장 user_id=%s sections=%d", user_id, len(result.section_order))

    return SectionOrderResponse(
        section_order=[key.value for key in result.section_order],
        order_source=result.order_source,
        reasoning=result.reasoning,
    )


@router.get("/{user_id}/render", response_model=RenderResponse)
async def render_profile(
    user_id: str,
    target: str = Query(default=RenderTarget.PLAIN_TEXT.value),
    repository: ProfileRepository = Depends(get_profile_repository),
) -> RenderResponse:
    doc = await repository.get_or_raise(user_id)
    order = resolve_section_order(doc)
    content = render(doc, order, target)

    return RenderResponse(
        target=target,
        section_order=[key.value for key in order],
        content=content,
    )


@router.get("/{user_id}/export/{fmt}")
async def export_profile(
    user_id: str,
    fmt: str,
    repository: ProfileRepository = Depends(get_profile_repository),
) -> Response:
    """다운로드 파일 생성 - tex는 LaTeX 생성 모델을 거친다"""
    try:
        export_format = ExportFormat(fmt)
    except ValueError:
        raise ValidationError(detail=f"지원하지 않는 다운로드 형식: {fmt}") from None

    doc = await repository.get_or_raise(user_id)
    order = resolve_section_order(doc)

    if export_format == ExportFormat.TEX:
        profile_text = render(doc, order, RenderTarget.LATEX_PROMPT_TEXT)
        try:
            output = await generate_latex_cv(profile_text, session_id=get_request_id())
        except httpx.HTTPStatusError as e:
            raise LLMError(detail=f"HTTP {e.response.status_code}") from e
        except LLM_CALL_ERRORS as e:
            raise LLMError(detail=str(e)) from e
        except (ValueError, KeyError, TypeError) as e:
            raise LLMError(detail=str(e)) from e
        export = build_latex_export(doc, output.latex_code)
    else:
        export = build_export(doc, order, export_format)

    logger.info("다운로드 생성 user_id=%s filename=%s", user_id, export.filename)
    return Response(
        content=export.content,
        media_type=export.media_type,
        headers={"Content-Disposition": f'attachment; filename="{export.filename}"'},
    )


@router.post("/{user_id}/latex", response_model=LatexResponse)
async def generate_latex(
    user_id: str,
    request: LatexRequest,
    repository: ProfileRepository = Depends(get_profile_repository),
) -> LatexResponse:
    doc = await repository.get_or_raise(user_id)

    result = await run_cv_workflow(
        profile=doc,
        request=CvRequest(
            preference=request.preference,
            target=RenderTarget.LATEX_PROMPT_TEXT,
            generate_latex=True,
            style_preference=request.style_preference,
        ),
        session_id=get_request_id(),
    )

    return LatexResponse(
        filename=export_filename(doc, ExportFormat.TEX),
        latex_code=result.latex_code or "",
        section_order=[key.value for key in result.section_order],
        order_source=result.order_source,
    )
