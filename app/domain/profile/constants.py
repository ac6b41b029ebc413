"""프로필 섹션 상수

섹션 키는 닫힌 집합이며 저장소/API/LLM 응답 모두 동일한 토큰을 사용한다.
"""

from enum import Enum


class SectionKey(str, Enum):
    """프로필 섹션 식별자"""

    WORK_EXPERIENCES = "workExperiences"
    PROJECTS = "projects"
    EDUCATION = "education"
    SKILLS = "skills"
    CERTIFICATIONS = "certifications"
    HONORS_AND_AWARDS = "honorsAndAwards"
    PUBLICATIONS = "publications"
    REFERENCES = "references"
    CUSTOM_SECTIONS = "customSections"


DEFAULT_SECTION_ORDER: tuple[SectionKey, ...] = (
    SectionKey.WORK_EXPERIENCES,
    SectionKey.EDUCATION,
    SectionKey.PROJECTS,
    SectionKey.SKILLS,
    SectionKey.CERTIFICATIONS,
    SectionKey.HONORS_AND_AWARDS,
    SectionKey.PUBLICATIONS,
    SectionKey.REFERENCES,
    SectionKey.CUSTOM_SECTIONS,
)

SECTION_TITLES: dict[SectionKey, str] = {
    SectionKey.WORK_EXPERIENCES: "Work Experience",
    SectionKey.PROJECTS: "Projects",
    SectionKey.EDUCATION: "Education",
    SectionKey.SKILLS: "Skills",
    SectionKey.CERTIFICATIONS: "Certifications",
    SectionKey.HONORS_AND_AWARDS: "Honors & Awards",
    SectionKey.PUBLICATIONS: "Publications",
    SectionKey.REFERENCES: "References",
    SectionKey.CUSTOM_SECTIONS: "Additional Information",
}

# SectionKey -> ProfileDocument 필드명
SECTION_FIELDS: dict[SectionKey, str] = {
    SectionKey.WORK_EXPERIENCES: "work_experiences",
    SectionKey.PROJECTS: "projects",
    SectionKey.EDUCATION: "education",
    SectionKey.SKILLS: "skills",
    SectionKey.CERTIFICATIONS: "certifications",
    SectionKey.HONORS_AND_AWARDS: "honors_and_awards",
    SectionKey.PUBLICATIONS: "publications",
    SectionKey.REFERENCES: "references",
    SectionKey.CUSTOM_SECTIONS: "custom_sections",
}

SECTION_KEY_VALUES = frozenset(key.value for key in SectionKey)

PRESENT_LABEL = "Present"
EXPECTED_LABEL = "Expected"

PROFICIENCY_LEVELS = ("Beginner", "Intermediate", "Advanced", "Expert")
