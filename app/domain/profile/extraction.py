"""CV 텍스트에서 추출한 프로필 반영.

모델 출력은 모든 필드가 선택값이다. 필수 필드가 빠진 항목은 버리고,
반영할 때 항목 ID는 새로 발급한다.
"""

from typing import Any

from pydantic import Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from app.core.logging import get_logger
from app.domain.profile.constants import PROFICIENCY_LEVELS, SECTION_FIELDS, SectionKey
from app.domain.profile.schemas import (
    CONTACT_FIELDS,
    OptionalText,
    ProfileDocument,
    ProfileItem,
    ProfileModel,
    TextList,
)
from app.domain.profile.sections import ITEM_MODELS

logger = get_logger(__name__)


class ExtractedWorkExperience(ProfileModel):
    company: OptionalText = None
    role: OptionalText = None
    start_date: OptionalText = None
    end_date: OptionalText = None
    description: OptionalText = None
    achievements: TextList = Field(default_factory=list)


class ExtractedEducation(ProfileModel):
    institution: OptionalText = None
    degree: OptionalText = None
    field_of_study: OptionalText = None
    start_date: OptionalText = None
    end_date: OptionalText = None
    gpa: OptionalText = None
    description: OptionalText = None


class ExtractedProject(ProfileModel):
    name: OptionalText = None
    description: OptionalText = None
    technologies: TextList = Field(default_factory=list)
    achievements: TextList = Field(default_factory=list)
    link: OptionalText = None


class ExtractedSkill(ProfileModel):
    name: OptionalText = None
    category: OptionalText = None
    proficiency: OptionalText = None

    @field_validator("proficiency", mode="before")
    @classmethod
    def normalize_proficiency(cls, v: Any) -> Any:
        """대소문자 무시하고 정해진 수준으로 맞춤, 나머지는 버림"""
        if not isinstance(v, str):
            return v
        levels = {level.lower(): level for level in PROFICIENCY_LEVELS}
        return levels.get(v.strip().lower())


class ExtractedCertification(ProfileModel):
    name: OptionalText = None
    issuing_organization: OptionalText = None
    issue_date: OptionalText = None
    credential_id: OptionalText = None
    credential_url: OptionalText = None


class ExtractedHonorAward(ProfileModel):
    name: OptionalText = None
    organization: OptionalText = None
    date: OptionalText = None
    description: OptionalText = None


class ExtractedPublication(ProfileModel):
    title: OptionalText = None
    authors: TextList = Field(default_factory=list)
    journal_or_conference: OptionalText = None
    publication_date: OptionalText = None
    link: OptionalText = None
    doi: OptionalText = None
    description: OptionalText = None


class ExtractedReference(ProfileModel):
    name: OptionalText = None
    title_and_company: OptionalText = None
    contact_details_or_note: OptionalText = None


class ExtractedCustomSection(ProfileModel):
    heading: OptionalText = None
    content: OptionalText = None


class ExtractedProfile(ProfileModel):
    """CV 텍스트 추출 LLM 출력"""

    full_name: OptionalText = None
    email: OptionalText = None
    phone: OptionalText = None
    address: OptionalText = None
    linkedin: OptionalText = None
    github: OptionalText = None
    portfolio: OptionalText = None
    summary: OptionalText = None

    work_experiences: list[ExtractedWorkExperience] = Field(default_factory=list)
    projects: list[ExtractedProject] = Field(default_factory=list)
    education: list[ExtractedEducation] = Field(default_factory=list)
    skills: list[ExtractedSkill] = Field(default_factory=list)
    certifications: list[ExtractedCertification] = Field(default_factory=list)
    honors_and_awards: list[ExtractedHonorAward] = Field(default_factory=list)
    publications: list[ExtractedPublication] = Field(default_factory=list)
    references: list[ExtractedReference] = Field(default_factory=list)
    custom_sections: list[ExtractedCustomSection] = Field(default_factory=list)

    @field_validator(*SECTION_FIELDS.values(), mode="before")
    @classmethod
    def none_to_empty(cls, v: Any) -> Any:
        return [] if v is None else v


def _to_items(key: SectionKey, extracted: list[ProfileModel]) -> list[ProfileItem]:
    model = ITEM_MODELS[key]
    items = []
    for entry in extracted:
        try:
            items.append(model.model_validate(entry.model_dump(exclude_none=True)))
        except PydanticValidationError as e:
            logger.debug("추출 항목 제외 section=%s errors=%d", key.value, e.error_count())
    return items


def apply_extracted_profile(
    doc: ProfileDocument, extracted: ExtractedProfile
) -> tuple[ProfileDocument, list[SectionKey]]:
    """추출 결과를 프로필에 반영

    값이 있는 연락처/요약 필드는 덮어쓰고, CV에 있는 섹션은 통째로 교체한다.
    CV에 없는 섹션과 section_order는 그대로 둔다.

    Returns:
        새 프로필 문서, 교체된 섹션 목록
    """
    update: dict[str, Any] = {
        name: getattr(extracted, name)
        for name in (*CONTACT_FIELDS, "summary")
        if getattr(extracted, name)
    }

    imported = []
    for key, field in SECTION_FIELDS.items():
        items = _to_items(key, getattr(extracted, field))
        if items:
            update[field] = items
            imported.append(key)

    logger.info(
        "CV 추출 결과 반영 user_id=%s fields=%d sections=%s",
        doc.id,
        len(update) - len(imported),
        [key.value for key in imported],
    )
    return doc.model_copy(update=update), imported
