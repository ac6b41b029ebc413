from collections.abc import Callable, Sequence
from enum import Enum
from typing import Any

from app.core.exceptions import UnsupportedTargetKindError
from app.core.logging import get_logger
from app.domain.cv.renderers import (
    render_latex_prompt_text,
    render_plain_text,
    render_styled_markup,
)
from app.domain.profile.constants import SectionKey
from app.domain.profile.reconciler import resolve_section_order
from app.domain.profile.schemas import ProfileDocument

logger = get_logger(__name__)


class RenderTarget(str, Enum):
    """렌더링 대상 형식"""

    PLAIN_TEXT = "plain_text"
    STYLED_MARKUP = "styled_markup"
    LATEX_PROMPT_TEXT = "latex_prompt_text"


RENDERERS: dict[RenderTarget, Callable[[ProfileDocument, Sequence[SectionKey]], str]] = {
    RenderTarget.PLAIN_TEXT: render_plain_text,
    RenderTarget.STYLED_MARKUP: render_styled_markup,
    RenderTarget.LATEX_PROMPT_TEXT: render_latex_prompt_text,
}


def _to_target(target: Any) -> RenderTarget:
    if isinstance(target, RenderTarget):
        return target
    try:
        return RenderTarget(target)
    except ValueError:
        raise UnsupportedTargetKindError(detail=f"target={target!r}") from None


def render(
    doc: ProfileDocument,
    order: Sequence[SectionKey] | None,
    target: RenderTarget | str,
) -> str:
    """프로필을 지정한 형식으로 렌더링.

    Args:
        doc: 프로필 문서 (수정하지 않음)
        order: 보정된 섹션 순서, None이면 저장된 순서를 보정해서 사용
        target: 렌더링 대상 형식

    Returns:
        렌더링된 텍스트

    Raises:
        UnsupportedTargetKindError: 알 수 없는 형식인 경우
    """
    resolved = _to_target(target)
    if order is None:
        order = resolve_section_order(doc)

    logger.debug("렌더링 target=%s sections=%d", resolved.value, len(order))
    return RENDERERS[resolved](doc, order)
