"""프로필 API 스키마."""

from pydantic import BaseModel, Field

from app.domain.profile.schemas import OptionalText, ProfileDocument


class ContactUpdateRequest(BaseModel):
    """연락처/요약 수정 요청 - 보낸 필드만 반영."""

    full_name: OptionalText = Field(default=None, alias="fullName")
    email: OptionalText = None
    phone: OptionalText = None
    address: OptionalText = None
    linkedin: OptionalText = None
    github: OptionalText = None
    portfolio: OptionalText = None
    summary: OptionalText = None

    class Config:
        populate_by_name = True


class SectionOrderRequest(BaseModel):
    """섹션 순서 제안 요청."""

    preference: str | None = Field(default=None, max_length=500)


class SectionOrderResponse(BaseModel):
    """섹션 순서 제안 응답."""

    section_order: list[str] = Field(alias="sectionOrder")
    order_source: str = Field(alias="orderSource")
    reasoning: str | None = None

    class Config:
        populate_by_name = True


class ProfileImportRequest(BaseModel):
    """CV 텍스트 가져오기 요청."""

    cv_text: str = Field(alias="cvText", min_length=1, max_length=50000)

    class Config:
        populate_by_name = True


class ProfileImportResponse(BaseModel):
    """가져오기 결과 - 교체된 섹션과 반영된 프로필."""

    profile: ProfileDocument
    imported_sections: list[str] = Field(alias="importedSections")

    class Config:
        populate_by_name = True
