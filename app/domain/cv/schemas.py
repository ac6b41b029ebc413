from typing import Literal, TypedDict

from pydantic import BaseModel, Field

from app.domain.cv.render import RenderTarget
from app.domain.profile.constants import SectionKey
from app.domain.profile.schemas import ProfileDocument


class SectionOrderSuggestion(BaseModel):
    """섹션 순서 제안 LLM 출력 - 신뢰하지 않는 입력"""

    new_section_order: list[str] = Field(
        default_factory=list,
        description="Section keys in the suggested display order",
    )
    reasoning: str | None = Field(default=None, description="Short explanation of the order")


class LatexCvOutput(BaseModel):
    """LaTeX CV 생성 LLM 출력"""

    latex_code: str = Field(
        default="",
        description="Complete LaTeX document from \\documentclass to \\end{document}",
    )


class CvRequest(BaseModel):
    """CV 생성 워크플로우 요청"""

    preference: str | None = None
    target: RenderTarget = RenderTarget.PLAIN_TEXT
    generate_latex: bool = False
    style_preference: str | None = None


class CvResult(BaseModel):
    """CV 생성 워크플로우 결과"""

    section_order: list[SectionKey]
    order_source: Literal["suggested", "stored"]
    reasoning: str | None = None
    content: str
    latex_code: str | None = None


class CvState(TypedDict, total=False):
    """LangGraph 워크플로우 상태"""

    profile: ProfileDocument
    request: CvRequest
    session_id: str | None
    section_order: list[SectionKey]
    order_source: Literal["suggested", "stored"]
    reasoning: str | None
    content: str
    latex_code: str | None
    error_code: str
    error_message: str
