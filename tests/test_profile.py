"""프로필 모델/섹션/편집/저장소 테스트"""

import pytest
from pydantic import ValidationError

from app.core.exceptions import ItemNotFoundError, ProfileNotFoundError
from app.domain.profile.constants import SectionKey
from app.domain.profile.repository import (
    InMemoryProfileRepository,
    get_profile_repository,
)
from app.domain.profile.schemas import (
    Education,
    ProfileDocument,
    Skill,
    WorkExperience,
)
from app.domain.profile.sections import (
    contact_parts,
    group_skills,
    has_summary,
    iter_sections,
    non_empty_sections,
)
from app.domain.profile.service import (
    add_item,
    new_profile,
    remove_item,
    set_section_order,
    update_contact,
    update_item,
)


class TestProfileDocument:
    """ProfileDocument 모델 테스트"""

    def test_blank_text_normalized_to_none(self):
        """공백 문자열은 None"""
        doc = ProfileDocument(id="u", full_name="   ", summary="")

        assert doc.full_name is None
        assert doc.summary is None

    def test_none_collections_become_empty(self):
        """None 컬렉션은 빈 리스트"""
        doc = ProfileDocument(id="u", skills=None, projects=None)

        assert doc.skills == []
        assert doc.projects == []

    def test_unknown_section_tokens_dropped(self):
        """알 수 없는 섹션 토큰 제거"""
        doc = ProfileDocument(id="u", section_order=["skills", "hobbies", 3, "education"])

        assert doc.section_order == [SectionKey.SKILLS, SectionKey.EDUCATION]

    def test_camel_case_aliases(self):
        """camelCase 입력/출력"""
        doc = ProfileDocument.model_validate(
            {
                "id": "u",
                "fullName": "Jane",
                "workExperiences": [{"company": "A", "role": "Dev"}],
                "sectionOrder": ["workExperiences"],
            }
        )

        dumped = doc.model_dump(by_alias=True)

        assert doc.full_name == "Jane"
        assert dumped["workExperiences"][0]["company"] == "A"
        assert dumped["sectionOrder"] == [SectionKey.WORK_EXPERIENCES]

    def test_revalidation_keeps_section_order(self, sample_profile):
        """덤프 후 재검증해도 섹션 순서 유지"""
        restored = ProfileDocument.model_validate(sample_profile.model_dump())

        assert restored.section_order == sample_profile.section_order

    def test_item_ids_generated(self):
        """항목 ID 자동 생성"""
        first = Skill(name="Go")
        second = Skill(name="Go")

        assert first.id
        assert first.id != second.id

    def test_invalid_proficiency_rejected(self):
        """허용되지 않은 숙련도 거부"""
        with pytest.raises(ValidationError):
            Skill(name="Go", proficiency="Guru")

    def test_blank_list_entries_dropped(self):
        """빈 성과 항목 제거"""
        exp = WorkExperience(company="A", role="B", achievements=["Shipped", " ", ""])

        assert exp.achievements == ["Shipped"]


class TestDateDefaults:
    """기간 기본값 테스트"""

    def test_work_without_end_date_is_present(self):
        """종료일 없는 경력은 Present"""
        exp = WorkExperience(company="A", role="B", start_date="2020")

        assert exp.period == "2020 - Present"

    def test_education_without_end_date_is_expected(self):
        """종료일 없는 학력은 Expected"""
        edu = Education(institution="U", degree="MSc", start_date="2023")

        assert edu.period == "2023 - Expected"

    def test_education_title_with_field(self, sample_education):
        """학위와 전공 결합"""
        assert sample_education.title == "BSc in Computer Science"


class TestSections:
    """섹션 헬퍼 테스트"""

    def test_non_empty_sections(self, sample_profile):
        """내용이 있는 섹션만 포함"""
        assert non_empty_sections(sample_profile) == {
            SectionKey.WORK_EXPERIENCES,
            SectionKey.EDUCATION,
            SectionKey.SKILLS,
            SectionKey.PROJECTS,
            SectionKey.CUSTOM_SECTIONS,
        }

    def test_non_empty_sections_of_empty_profile(self, empty_profile):
        """빈 프로필"""
        assert non_empty_sections(empty_profile) == set()

    def test_summary_is_not_a_section(self, empty_profile):
        """요약은 섹션 집합에 포함되지 않음"""
        doc = empty_profile.model_copy(update={"summary": "Hello"})

        assert has_summary(doc)
        assert non_empty_sections(doc) == set()

    def test_iter_sections_skips_empty_and_duplicates(self, sample_profile):
        """빈 섹션과 중복 키 건너뜀"""
        order = ["publications", "skills", "skills", SectionKey.EDUCATION, "bogus"]

        assert iter_sections(sample_profile, order) == [SectionKey.SKILLS, SectionKey.EDUCATION]

    def test_group_skills_with_other(self, sample_skills):
        """카테고리 없는 기술은 Other"""
        assert group_skills(sample_skills) == [
            ("Languages", ["Go (Expert)"]),
            ("Other", ["Git"]),
        ]

    def test_group_skills_without_categories(self):
        """카테고리가 전혀 없으면 General"""
        skills = [Skill(name="Go"), Skill(name="Rust", proficiency="Beginner")]

        assert group_skills(skills) == [("General", ["Go", "Rust (Beginner)"])]

    def test_contact_parts_order(self, sample_profile):
        """연락처 고정 순서"""
        assert contact_parts(sample_profile) == [
            (None, "jane@example.com"),
            (None, "010-1234-5678"),
            ("GitHub", "github.com/janedoe"),
        ]


class TestProfileService:
    """프로필 편집 연산 테스트"""

    def test_new_profile(self):
        """빈 프로필 생성"""
        doc = new_profile("user-9")

        assert doc.id == "user-9"
        assert non_empty_sections(doc) == set()

    def test_update_contact(self, sample_profile):
        """연락처 수정은 새 문서 반환"""
        updated = update_contact(sample_profile, full_name="Jane Q. Doe", phone="")

        assert updated.full_name == "Jane Q. Doe"
        assert updated.phone is None
        assert updated.section_order == sample_profile.section_order
        assert sample_profile.full_name == "Jane Doe"

    def test_update_contact_rejects_unknown_field(self, sample_profile):
        """수정 불가 필드 거부"""
        with pytest.raises(ValueError):
            update_contact(sample_profile, skills=[])

    def test_add_item_from_dict(self, sample_profile):
        """dict로 항목 추가"""
        updated = add_item(sample_profile, SectionKey.SKILLS, {"name": "Rust"})

        assert [s.name for s in updated.skills] == ["Go", "Git", "Rust"]
        assert len(sample_profile.skills) == 2

    def test_add_item_wrong_type(self, sample_profile, sample_education):
        """다른 섹션 모델 거부"""
        with pytest.raises(ValueError):
            add_item(sample_profile, SectionKey.SKILLS, sample_education)

    def test_add_item_duplicate_id(self, sample_profile):
        """중복 ID 거부"""
        with pytest.raises(ValueError):
            add_item(sample_profile, SectionKey.SKILLS, Skill(id="skill-1", name="Go"))

    def test_update_item_keeps_id_and_position(self, sample_profile):
        """수정 시 ID와 위치 유지"""
        updated = update_item(
            sample_profile,
            SectionKey.SKILLS,
            "skill-1",
            {"name": "Golang", "id": "hijack"},
        )

        assert updated.skills[0].id == "skill-1"
        assert updated.skills[0].name == "Golang"
        assert updated.skills[0].category == "Languages"

    def test_update_item_accepts_camel_case(self, sample_profile):
        """camelCase 키로 수정"""
        updated = update_item(
            sample_profile,
            SectionKey.WORK_EXPERIENCES,
            "work-1",
            {"endDate": "Dec 2023"},
        )

        assert updated.work_experiences[0].period == "Jan 2020 - Dec 2023"

    def test_update_missing_item(self, sample_profile):
        """없는 항목 수정"""
        with pytest.raises(ItemNotFoundError):
            update_item(sample_profile, SectionKey.SKILLS, "missing", {"name": "x"})

    def test_remove_item_keeps_section_order(self, sample_profile):
        """마지막 항목을 삭제해도 저장된 순서는 그대로"""
        updated = remove_item(sample_profile, SectionKey.EDUCATION, "edu-1")

        assert updated.education == []
        assert SectionKey.EDUCATION not in non_empty_sections(updated)
        assert updated.section_order == sample_profile.section_order

    def test_remove_missing_item(self, sample_profile):
        """없는 항목 삭제"""
        with pytest.raises(ItemNotFoundError):
            remove_item(sample_profile, SectionKey.SKILLS, "missing")

    def test_set_section_order(self, sample_profile):
        """섹션 순서 반영"""
        updated = set_section_order(sample_profile, [SectionKey.EDUCATION])

        assert updated.section_order == [SectionKey.EDUCATION]


class TestInMemoryProfileRepository:
    """인메모리 저장소 테스트"""

    @pytest.mark.asyncio
    async def test_save_and_get_roundtrip(self, sample_profile):
        """저장 후 동일 문서 조회"""
        repository = InMemoryProfileRepository()

        await repository.save(sample_profile)
        loaded = await repository.get("user-1")

        assert loaded.model_dump() == sample_profile.model_dump()

    @pytest.mark.asyncio
    async def test_snapshot_isolated_from_caller(self, sample_profile):
        """조회 결과는 매번 새 객체"""
        repository = InMemoryProfileRepository()
        await repository.save(sample_profile)

        first = await repository.get("user-1")
        first.skills.clear()
        second = await repository.get("user-1")

        assert len(second.skills) == 2

    @pytest.mark.asyncio
    async def test_get_or_raise(self):
        """없는 프로필"""
        repository = InMemoryProfileRepository()

        with pytest.raises(ProfileNotFoundError):
            await repository.get_or_raise("nobody")

    @pytest.mark.asyncio
    async def test_delete(self, sample_profile):
        """삭제"""
        repository = InMemoryProfileRepository()
        await repository.save(sample_profile)

        assert await repository.delete("user-1") is True
        assert await repository.delete("user-1") is False
        assert await repository.get("user-1") is None

    def test_dependency_returns_singleton(self):
        """의존성은 같은 저장소 반환"""
        assert get_profile_repository() is get_profile_repository()
