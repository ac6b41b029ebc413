import re
from collections.abc import Sequence
from enum import Enum

from pydantic import BaseModel

from app.domain.cv.render import RenderTarget, render
from app.domain.profile.constants import SectionKey
from app.domain.profile.schemas import ProfileDocument

WHITESPACE_PATTERN = re.compile(r"\s+")


class ExportFormat(str, Enum):
    """다운로드 형식"""

    MARKDOWN = "md"
    DOCX = "docx"
    HTML = "html"
    TEX = "tex"


MEDIA_TYPES: dict[ExportFormat, str] = {
    ExportFormat.MARKDOWN: "text/markdown;charset=utf-8",
    ExportFormat.DOCX: "application/msword",
    ExportFormat.HTML: "text/html;charset=utf-8",
    ExportFormat.TEX: "application/x-tex;charset=utf-8",
}

EXPORT_TARGETS: dict[ExportFormat, RenderTarget] = {
    ExportFormat.MARKDOWN: RenderTarget.PLAIN_TEXT,
    ExportFormat.DOCX: RenderTarget.STYLED_MARKUP,
    ExportFormat.HTML: RenderTarget.STYLED_MARKUP,
}


class ExportFile(BaseModel):
    """다운로드 파일"""

    filename: str
    media_type: str
    content: str


def export_filename(doc: ProfileDocument, fmt: ExportFormat, fallback: str = "resume") -> str:
    """<이름>_CV.<확장자> 형식 파일명 생성 - 공백은 밑줄로 치환"""
    name = (doc.full_name or "").strip() or fallback
    return f"{WHITESPACE_PATTERN.sub('_', name)}_CV.{fmt.value}"


def build_export(
    doc: ProfileDocument,
    order: Sequence[SectionKey] | None,
    fmt: ExportFormat,
) -> ExportFile:
    """렌더러 기반 다운로드 파일 생성

    tex는 LaTeX 생성 결과가 필요하므로 build_latex_export를 사용한다.
    """
    target = EXPORT_TARGETS.get(fmt)
    if target is None:
        raise ValueError(f"렌더러로 생성할 수 없는 형식: {fmt.value}")

    return ExportFile(
        filename=export_filename(doc, fmt),
        media_type=MEDIA_TYPES[fmt],
        content=render(doc, order, target),
    )


def build_latex_export(doc: ProfileDocument, latex_code: str) -> ExportFile:
    """생성된 LaTeX 코드를 다운로드 파일로 포장"""
    return ExportFile(
        filename=export_filename(doc, ExportFormat.TEX),
        media_type=MEDIA_TYPES[ExportFormat.TEX],
        content=latex_code,
    )
