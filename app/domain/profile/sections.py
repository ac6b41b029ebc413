from collections.abc import Sequence

from app.domain.profile.constants import SECTION_FIELDS, SECTION_TITLES, SectionKey
from app.domain.profile.schemas import (
    Certification,
    CustomSection,
    Education,
    HonorAward,
    ProfileDocument,
    ProfileItem,
    Project,
    Publication,
    Reference,
    Skill,
    WorkExperience,
)

ITEM_MODELS: dict[SectionKey, type[ProfileItem]] = {
    SectionKey.WORK_EXPERIENCES: WorkExperience,
    SectionKey.PROJECTS: Project,
    SectionKey.EDUCATION: Education,
    SectionKey.SKILLS: Skill,
    SectionKey.CERTIFICATIONS: Certification,
    SectionKey.HONORS_AND_AWARDS: HonorAward,
    SectionKey.PUBLICATIONS: Publication,
    SectionKey.REFERENCES: Reference,
    SectionKey.CUSTOM_SECTIONS: CustomSection,
}

OTHER_SKILLS_LABEL = "Other"
GENERAL_SKILLS_LABEL = "General"


def get_section_items(doc: ProfileDocument, key: SectionKey) -> list[ProfileItem]:
    """섹션 키에 해당하는 컬렉션 반환"""
    return getattr(doc, SECTION_FIELDS[key], None) or []


def non_empty_sections(doc: ProfileDocument) -> set[SectionKey]:
    """내용이 있는 섹션 집합 계산 - 호출마다 새로 계산"""
    return {key for key in SectionKey if len(get_section_items(doc, key)) > 0}


def has_summary(doc: ProfileDocument) -> bool:
    """요약이 비어 있지 않은지 확인"""
    return bool(doc.summary and doc.summary.strip())


def section_title(key: SectionKey) -> str:
    return SECTION_TITLES[key]


def iter_sections(doc: ProfileDocument, order: Sequence[SectionKey]) -> list[SectionKey]:
    """렌더링 순서대로 내용이 있는 섹션만 반환

    비어 있는 섹션과 중복 키는 건너뛴다. 오래된 순서가 들어와도 빈 제목은 나오지 않는다.
    """
    available = non_empty_sections(doc)
    seen: set[SectionKey] = set()
    result = []
    for token in order:
        try:
            key = SectionKey(token)
        except ValueError:
            continue
        if key in available and key not in seen:
            seen.add(key)
            result.append(key)
    return result


def group_skills(skills: Sequence[Skill]) -> list[tuple[str, list[str]]]:
    """카테고리별 기술 그룹핑

    카테고리 없는 기술은 다른 그룹이 있으면 "Other", 없으면 "General"로 묶는다.
    그룹 순서는 처음 등장한 순서를 따른다.
    """
    categorized: dict[str, list[str]] = {}
    uncategorized: list[str] = []

    for skill in skills:
        if skill.category:
            categorized.setdefault(skill.category, []).append(skill.label)
        else:
            uncategorized.append(skill.label)

    groups = list(categorized.items())
    if uncategorized:
        label = OTHER_SKILLS_LABEL if categorized else GENERAL_SKILLS_LABEL
        groups.append((label, uncategorized))
    return groups


def contact_parts(doc: ProfileDocument) -> list[tuple[str | None, str]]:
    """연락처 항목을 고정 순서로 반환 - 링크 필드에만 라벨"""
    candidates = [
        (None, doc.email),
        (None, doc.phone),
        (None, doc.address),
        ("LinkedIn", doc.linkedin),
        ("GitHub", doc.github),
        ("Portfolio", doc.portfolio),
    ]
    return [(label, value) for label, value in candidates if value]
