"""프로필 문서 모델.

선택 필드의 기본값 규칙은 `OptionalText` 한 곳에서 정의한다.
공백뿐인 문자열은 None으로 정규화되어 렌더러는 None 여부만 확인하면 된다.
"""

import uuid
from typing import Annotated, Any, Literal

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from app.domain.profile.constants import (
    EXPECTED_LABEL,
    PRESENT_LABEL,
    SECTION_KEY_VALUES,
    SectionKey,
)


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _clean_list(value: Any) -> Any:
    if value is None:
        return []
    if isinstance(value, list):
        return [v for v in value if not (isinstance(v, str) and not v.strip())]
    return value


OptionalText = Annotated[str | None, BeforeValidator(_blank_to_none)]
TextList = Annotated[list[str], BeforeValidator(_clean_list)]
Proficiency = Literal["Beginner", "Intermediate", "Advanced", "Expert"]


def new_item_id() -> str:
    """컬렉션 항목 ID 생성"""
    return uuid.uuid4().hex


class ProfileModel(BaseModel):
    """camelCase 별칭을 사용하는 프로필 모델 베이스"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProfileItem(ProfileModel):
    """컬렉션 항목 베이스 - id는 생성 후 변경 불가"""

    id: str = Field(default_factory=new_item_id, frozen=True)


def date_range(start: str | None, end_label: str) -> str:
    """기간 문자열 생성"""
    if start:
        return f"{start} - {end_label}"
    return end_label


class WorkExperience(ProfileItem):
    """경력"""

    company: str
    role: str
    start_date: OptionalText = None
    end_date: OptionalText = None
    description: OptionalText = None
    achievements: TextList = Field(default_factory=list)

    @property
    def end_label(self) -> str:
        return self.end_date or PRESENT_LABEL

    @property
    def period(self) -> str:
        return date_range(self.start_date, self.end_label)


class Project(ProfileItem):
    """프로젝트"""

    name: str
    description: OptionalText = None
    technologies: TextList = Field(default_factory=list)
    achievements: TextList = Field(default_factory=list)
    link: OptionalText = None


class Education(ProfileItem):
    """학력"""

    institution: str
    degree: str
    field_of_study: OptionalText = None
    start_date: OptionalText = None
    end_date: OptionalText = None
    gpa: OptionalText = None
    thesis_title: OptionalText = None
    relevant_courses: TextList = Field(default_factory=list)
    description: OptionalText = None

    @property
    def end_label(self) -> str:
        return self.end_date or EXPECTED_LABEL

    @property
    def period(self) -> str:
        return date_range(self.start_date, self.end_label)

    @property
    def title(self) -> str:
        if self.field_of_study:
            return f"{self.degree} in {self.field_of_study}"
        return self.degree


class Skill(ProfileItem):
    """기술"""

    name: str
    category: OptionalText = None
    proficiency: Annotated[Proficiency | None, BeforeValidator(_blank_to_none)] = None

    @property
    def label(self) -> str:
        if self.proficiency:
            return f"{self.name} ({self.proficiency})"
        return self.name


class Certification(ProfileItem):
    """자격증"""

    name: str
    issuing_organization: OptionalText = None
    issue_date: OptionalText = None
    credential_id: OptionalText = None
    credential_url: OptionalText = None


class HonorAward(ProfileItem):
    """수상"""

    name: str
    organization: OptionalText = None
    date: OptionalText = None
    description: OptionalText = None


class Publication(ProfileItem):
    """논문/출판물"""

    title: str
    authors: TextList = Field(default_factory=list)
    journal_or_conference: OptionalText = None
    publication_date: OptionalText = None
    link: OptionalText = None
    doi: OptionalText = None
    description: OptionalText = None


class Reference(ProfileItem):
    """추천인"""

    name: str
    title_and_company: OptionalText = None
    contact_details_or_note: OptionalText = None


class CustomSection(ProfileItem):
    """사용자 정의 섹션"""

    heading: str
    content: OptionalText = None


class ProfileDocument(ProfileModel):
    """사용자 프로필 문서 - 사용자 계정당 하나"""

    id: str
    full_name: OptionalText = None
    email: OptionalText = None
    phone: OptionalText = None
    address: OptionalText = None
    linkedin: OptionalText = None
    github: OptionalText = None
    portfolio: OptionalText = None
    summary: OptionalText = None

    work_experiences: list[WorkExperience] = Field(default_factory=list)
    projects: list[Project] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)
    skills: list[Skill] = Field(default_factory=list)
    certifications: list[Certification] = Field(default_factory=list)
    honors_and_awards: list[HonorAward] = Field(default_factory=list)
    publications: list[Publication] = Field(default_factory=list)
    references: list[Reference] = Field(default_factory=list)
    custom_sections: list[CustomSection] = Field(default_factory=list)

    section_order: list[SectionKey] = Field(default_factory=list)

    @field_validator(
        "work_experiences",
        "projects",
        "education",
        "skills",
        "certifications",
        "honors_and_awards",
        "publications",
        "references",
        "custom_sections",
        mode="before",
    )
    @classmethod
    def none_to_empty(cls, v: Any) -> Any:
        return [] if v is None else v

    @field_validator("section_order", mode="before")
    @classmethod
    def drop_unknown_sections(cls, v: Any) -> Any:
        """저장된 순서에서 알 수 없는 토큰 제거"""
        if v is None:
            return []
        if isinstance(v, list):
            return [
                s for s in v if isinstance(s, str) and getattr(s, "value", s) in SECTION_KEY_VALUES
            ]
        return v


CONTACT_FIELDS = ("full_name", "email", "phone", "address", "linkedin", "github", "portfolio")
