"""프로필 -> 일반 텍스트 이력서"""

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

UNDERLINE = "-" * 20


def _heading(title: str) -> list[str]:
    return [title.upper(), UNDERLINE]


def _bullets(items: Sequence[str]) -> list[str]:
    return [f"- {item}" for item in items]


def _work_experience(exp: WorkExperience) -> list[str]:
    lines = [f"{exp.role.upper()} | {exp.company}", exp.period]
    if exp.description:
        lines.append(exp.description)
    lines.extend(_bullets(exp.achievements))
    return lines


def _project(proj: Project) -> list[str]:
    lines = [proj.name.upper()]
    if proj.description:
        lines.append(proj.description)
    if proj.technologies:
        lines.append(f"Technologies: {', '.join(proj.technologies)}")
    if proj.link:
        lines.append(f"Link: {proj.link}")
    lines.extend(_bullets(proj.achievements))
    return lines


def _education(edu: Education) -> list[str]:
    lines = [edu.title, edu.institution, edu.period]
    if edu.gpa:
        lines.append(f"GPA/Result: {edu.gpa}")
    if edu.thesis_title:
        lines.append(f"Thesis: {edu.thesis_title}")
    if edu.relevant_courses:
        lines.append(f"Relevant Courses: {', '.join(edu.relevant_courses)}")
    if edu.description:
        lines.append(f"Notes: {edu.description}")
    return lines


def _certification(cert: Certification) -> list[str]:
    line = cert.name
    if cert.issuing_organization:
        line += f" - {cert.issuing_organization}"
    if cert.issue_date:
        line += f" ({cert.issue_date})"
    lines = [line]
    if cert.credential_id:
        lines.append(f"ID: {cert.credential_id}")
    if cert.credential_url:
        lines.append(f"URL: {cert.credential_url}")
    return lines


def _honor_award(item: HonorAward) -> list[str]:
    lines = [item.name]
    if item.organization:
        lines.append(f"From: {item.organization}")
    if item.date:
        lines.append(f"Date: {item.date}")
    if item.description:
        lines.append(item.description)
    return lines


def _publication(item: Publication) -> list[str]:
    lines = [item.title]
    if item.authors:
        lines.append(f"Authors: {', '.join(item.authors)}")
    if item.journal_or_conference:
        lines.append(f"Venue: {item.journal_or_conference}")
    if item.publication_date:
        lines.append(f"Date: {item.publication_date}")
    if item.doi:
        lines.append(f"DOI: {item.doi}")
    if item.link:
        lines.append(f"Link: {item.link}")
    if item.description:
        lines.append(f"Abstract/Summary: {item.description}")
    return lines


def _reference(item: Reference) -> list[str]:
    lines = [item.name]
    if item.title_and_company:
        lines.append(item.title_and_company)
    if item.contact_details_or_note:
        lines.append(item.contact_details_or_note)
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
    lines = _heading(section_title(SectionKey.SKILLS))
    for label, names in group_skills(skills):
        lines.append(f"{label.upper()}: {', '.join(names)}")
    return "\n".join(lines)


def _custom_blocks(sections: Sequence[CustomSection]) -> list[str]:
    blocks = []
    for custom in sections:
        lines = _heading(custom.heading)
        if custom.content:
            lines.append(custom.content)
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
    heading = "\n".join(_heading(section_title(key)))
    entries = ["\n".join(render_item(item)) for item in items]
    return [heading + "\n" + "\n\n".join(entries)]


def _contact_block(doc: ProfileDocument) -> str | None:
    lines = []
    if doc.full_name:
        lines.append(doc.full_name)
    parts = [f"{label}: {value}" if label else value for label, value in contact_parts(doc)]
    if parts:
        lines.append(" | ".join(parts))
    return "\n".join(lines) if lines else None


def render_plain_text(doc: ProfileDocument, order: Sequence[SectionKey]) -> str:
    """프로필을 일반 텍스트 이력서로 렌더링.

    Args:
        doc: 프로필 문서
        order: 보정된 섹션 순서

    Returns:
        블록 사이에 빈 줄 하나를 둔 텍스트
    """
    blocks: list[str] = []

    contact = _contact_block(doc)
    if contact:
        blocks.append(contact)

    if has_summary(doc):
        blocks.append("\n".join(_heading("Summary") + [doc.summary.strip()]))

    for key in iter_sections(doc, order):
        blocks.extend(_section_blocks(doc, key))

    return "\n\n".join(blocks).strip()
