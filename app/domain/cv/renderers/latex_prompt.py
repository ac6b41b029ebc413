"""프로필 -> LaTeX 생성용 프롬프트 텍스트

LaTeX 문서 자체가 아니라 LaTeX 생성 LLM에 그대로 전달되는 마크다운 형태의 텍스트.
사용자 입력 값은 모두 LaTeX 특수문자를 이스케이프하고, 고정 제목과 라벨은 그대로 둔다.
"""

import re
from collections.abc import Callable, Sequence

from app.domain.profile.constants import SectionKey
from app.domain.profile.schemas import (
    Certification,
    CustomSection,
    Education,
    HonorAward,
    ProfileDocument,
    Project,
    Publication,
    Reference,
    Skill,
    WorkExperience,
)
from app.domain.profile.sections import (
    contact_parts,
    get_section_items,
    group_skills,
    has_summary,
    iter_sections,
    section_title,
)

LATEX_ESCAPES = {
    "%": r"\%",
    "&": r"\&",
    "#": r"\#",
    "_": r"\_",
    "{": r"\{",
    "}": r"\}",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
    "\\": r"\textbackslash{}",
}

# 이미 이스케이프된 시퀀스는 그대로 두어 두 번 이스케이프되지 않게 한다
_ESCAPED_SEQUENCE = r"\\(?:[%&#_{}]|textbackslash\{\}|textasciitilde\{\}|textasciicircum\{\})"
LATEX_SPECIAL_PATTERN = re.compile(_ESCAPED_SEQUENCE + r"|[%&#_{}~^\\]")


def escape_latex(text: str) -> str:
    """LaTeX 특수문자 이스케이프 - 멱등"""
    return LATEX_SPECIAL_PATTERN.sub(
        lambda m: LATEX_ESCAPES.get(m.group(0), m.group(0)),
        text,
    )


def _e(value: str | None) -> str:
    return escape_latex(value) if value else ""


def _bullets(items: Sequence[str]) -> list[str]:
    return [f"- {escape_latex(item)}" for item in items]


def _work_experience(exp: WorkExperience) -> list[str]:
    lines = [f"### {_e(exp.role)} | {_e(exp.company)}", _e(exp.period)]
    if exp.description:
        lines.append(_e(exp.description))
    lines.extend(_bullets(exp.achievements))
    return lines


def _project(proj: Project) -> list[str]:
    lines = [f"### {_e(proj.name)}"]
    if proj.description:
        lines.append(_e(proj.description))
    if proj.technologies:
        lines.append(f"Technologies: {_e(', '.join(proj.technologies))}")
    if proj.link:
        lines.append(f"Link: {_e(proj.link)}")
    lines.extend(_bullets(proj.achievements))
    return lines


def _education(edu: Education) -> list[str]:
    lines = [f"### {_e(edu.title)}", _e(edu.institution), _e(edu.period)]
    if edu.gpa:
        lines.append(f"GPA/Result: {_e(edu.gpa)}")
    if edu.thesis_title:
        lines.append(f"Thesis: {_e(edu.thesis_title)}")
    if edu.relevant_courses:
        lines.append(f"Relevant Courses: {_e(', '.join(edu.relevant_courses))}")
    if edu.description:
        lines.append(f"Notes: {_e(edu.description)}")
    return lines


def _certification(cert: Certification) -> list[str]:
    line = f"### {_e(cert.name)}"
    if cert.issuing_organization:
        line += f" - {_e(cert.issuing_organization)}"
    if cert.issue_date:
        line += f" ({_e(cert.issue_date)})"
    lines = [line]
    if cert.credential_id:
        lines.append(f"ID: {_e(cert.credential_id)}")
    if cert.credential_url:
        lines.append(f"URL: {_e(cert.credential_url)}")
    return lines


def _honor_award(item: HonorAward) -> list[str]:
    lines = [f"### {_e(item.name)}"]
    if item.organization:
        lines.append(f"From: {_e(item.organization)}")
    if item.date:
        lines.append(f"Date: {_e(item.date)}")
    if item.description:
        lines.append(_e(item.description))
    return lines


def _publication(item: Publication) -> list[str]:
    lines = [f"### {_e(item.title)}"]
    if item.authors:
        lines.append(f"Authors: {_e(', '.join(item.authors))}")
    if item.journal_or_conference:
        lines.append(f"Venue: {_e(item.journal_or_conference)}")
    if item.publication_date:
        lines.append(f"Date: {_e(item.publication_date)}")
    if item.doi:
        lines.append(f"DOI: {_e(item.doi)}")
    if item.link:
        lines.append(f"Link: {_e(item.link)}")
    if item.description:
        lines.append(f"Abstract/Summary: {_e(item.description)}")
    return lines


def _reference(item: Reference) -> list[str]:
    lines = [f"### {_e(item.name)}"]
    if item.title_and_company:
        lines.append(_e(item.title_and_company))
    if item.contact_details_or_note:
        lines.append(_e(item.contact_details_or_note))
    return lines


ITEM_RENDERERS: dict[SectionKey, Callable] = {
    SectionKey.WORK_EXPERIENCES: _work_experience,
    SectionKey.PROJECTS: _project,
    SectionKey.EDUCATION: _education,
    SectionKey.CERTIFICATIONS: _certification,
    SectionKey.HONORS_AND_AWARDS: _honor_award,
    SectionKey.PUBLICATIONS: _publication,
    SectionKey.REFERENCES: _reference,
}


def _skills_block(skills: Sequence[Skill]) -> str:
    lines = [f"## {section_title(SectionKey.SKILLS)}"]
    for label, names in group_skills(skills):
        lines.append(f"- {_e(label)}: {_e(', '.join(names))}")
    return "\n".join(lines)


def _custom_blocks(sections: Sequence[CustomSection]) -> list[str]:
    blocks = []
    for custom in sections:
        lines = [f"## {_e(custom.heading)}"]
        if custom.content:
            lines.append(_e(custom.content))
        blocks.append("\n".join(lines))
    return blocks


def _section_blocks(doc: ProfileDocument, key: SectionKey) -> list[str]:
    items = get_section_items(doc, key)
    if not items:
        return []
    if key == SectionKey.SKILLS:
        return [_skills_block(items)]
    if key == SectionKey.CUSTOM_SECTIONS:
        return _custom_blocks(items)

    render_item = ITEM_RENDERERS[key]
    entries = ["\n".join(render_item(item)) for item in items]
    return [f"## {section_title(key)}\n" + "\n\n".join(entries)]


def render_latex_prompt_text(doc: ProfileDocument, order: Sequence[SectionKey]) -> str:
    """프로필을 LaTeX 생성 입력 텍스트로 렌더링"""
    blocks: list[str] = []

    header = []
    if doc.full_name:
        header.append(f"# {_e(doc.full_name)}")
    parts = [f"{label}: {_e(value)}" if label else _e(value) for label, value in contact_parts(doc)]
    if parts:
        header.append(" | ".join(parts))
    if header:
        blocks.append("\n".join(header))

    if has_summary(doc):
        blocks.append(f"## Summary\n{_e(doc.summary.strip())}")

    for key in iter_sections(doc, order):
        blocks.extend(_section_blocks(doc, key))

    return "\n\n".join(blocks).strip()
