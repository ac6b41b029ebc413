"""CV API 스키마."""

from pydantic import BaseModel, Field


class RenderResponse(BaseModel):
    """렌더링 응답."""

    target: str
    section_order: list[str] = Field(alias="sectionOrder")
    content: str

    class Config:
        populate_by_name = True


class LatexRequest(BaseModel):
    """LaTeX CV 생성 요청."""

    preference: str | None = Field(default=None, max_length=500)
    style_preference: str | None = Field(default=None, alias="stylePreference", max_length=200)

    class Config:
        populate_by_name = True


class LatexResponse(BaseModel):
    """LaTeX CV 생성 응답."""

    filename: str
    latex_code: str = Field(alias="latexCode")
    section_order: list[str] = Field(alias="sectionOrder")
    order_source: str = Field(alias="orderSource")

    class Config:
        populate_by_name = True
