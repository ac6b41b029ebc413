"""프로필 -> 스타일 마크업(HTML) 이력서

워드 프로세서 가져오기와 인쇄용 HTML. 구조와 섹션 순서는 일반 텍스트와 동일하며,
자유 텍스트 필드의 **굵게** / *기울임* 표기를 의미 태그로 변환한다.
"""

import re
from collections.abc import Sequence
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined
from markupsafe import Markup, escape

from app.domain.profile.constants import SectionKey
from app.domain.profile.schemas import ProfileDocument
from app.domain.profile.sections import (
    contact_parts,
    get_section_items,
    group_skills,
    has_summary,
    iter_sections,
    section_title,
)

TEMPLATE_DIR = Path(__file__).parent / "templates"
TEMPLATE_NAME = "resume.html.j2"

BOLD_PATTERN = re.compile(r"\*\*(?!\s)(.+?)(?<!\s)\*\*")
ITALIC_STAR_PATTERN = re.compile(r"(?<!\*)\*(?![\s*])(.+?)(?<![\s*])\*(?!\*)")
ITALIC_UNDERSCORE_PATTERN = re.compile(r"(?<!\w)_(?![\s_])(.+?)(?<![\s_])_(?!\w)")


def emphasize(text: str | None) -> Markup:
    """HTML 이스케이프 후 강조 표기를 <strong>/<em>으로 변환"""
    if not text:
        return Markup("")
    html = str(escape(text))
    html = BOLD_PATTERN.sub(r"<strong>\1</strong>", html)
    html = ITALIC_STAR_PATTERN.sub(r"<em>\1</em>", html)
    html = ITALIC_UNDERSCORE_PATTERN.sub(r"<em>\1</em>", html)
    html = html.replace("\n", "<br>\n")
    return Markup(html)


def _create_environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(TEMPLATE_DIR),
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
        keep_trailing_newline=False,
    )
    env.filters["emphasis"] = emphasize
    return env


_env = _create_environment()


def _section_views(doc: ProfileDocument, order: Sequence[SectionKey]) -> list[dict]:
    views = []
    for key in iter_sections(doc, order):
        items = get_section_items(doc, key)
        if key == SectionKey.CUSTOM_SECTIONS:
            for custom in items:
                views.append({"key": key.value, "title": custom.heading.upper(), "items": [custom]})
        elif key == SectionKey.SKILLS:
            views.append(
                {
                    "key": key.value,
                    "title": section_title(key).upper(),
                    "items": items,
                    "groups": group_skills(items),
                }
            )
        else:
            views.append({"key": key.value, "title": section_title(key).upper(), "items": items})
    return views


def render_styled_markup(doc: ProfileDocument, order: Sequence[SectionKey]) -> str:
    """프로필을 HTML 이력서로 렌더링"""
    template = _env.get_template(TEMPLATE_NAME)
    html = template.render(
        title=f"{doc.full_name} CV" if doc.full_name else "CV",
        name=doc.full_name,
        contacts=contact_parts(doc),
        summary=doc.summary.strip() if has_summary(doc) else None,
        sections=_section_views(doc, order),
    )
    return html.strip()
