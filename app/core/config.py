from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LLMProvider = Literal["gemini", "openai", "vllm"]

# 프로바이더별 필수 설정 (환경 변수 이름, 필드 이름)
PROVIDER_REQUIRED_SETTING: dict[str, tuple[str, str]] = {
    "gemini": ("GEMINI_API_KEY", "gemini_api_key"),
    "openai": ("OPENAI_API_KEY", "openai_api_key"),
    "vllm": ("VLLM_API_URL", "vllm_api_url"),
}


class Settings(BaseSettings):
    """서비스 설정, .env와 환경 변수에서 읽는다"""

    environment: str = "development"
    log_level: str = "INFO"

    # 문서 생성 모델 프로바이더, 적합도 평가는 Gemini 키가 있으면 Gemini 사용
    llm_provider: LLMProvider = "gemini"
    llm_temperature: float = Field(default=0.2, ge=0.0, le=2.0)
    llm_max_retries: int = Field(default=2, ge=0)

    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.0-flash"
    gemini_timeout: float = 120.0

    openai_api_key: str = ""
    openai_model: str = "gpt-4o-mini"
    openai_timeout: float = 120.0

    vllm_api_url: str = ""
    vllm_api_key: str = ""
    vllm_model: str = ""
    vllm_timeout: float = 180.0

    # 채용 피드 수집
    feed_timeout: float = 30.0
    feed_max_items: int = Field(default=20, ge=0)
    feed_max_concurrent_requests: int = Field(default=3, ge=1)
    job_page_max_chars: int = Field(default=20000, ge=1)

    # Firecrawl 웹 검색
    firecrawl_api_key: str = ""
    firecrawl_api_url: str = "https://api.firecrawl.dev/v1"
    firecrawl_timeout: float = 60.0
    job_search_limit: int = Field(default=7, ge=1)

    # LaTeX 생성 실패 시 대체 문서에 넣을 프로필 발췌 길이
    latex_fallback_excerpt_length: int = Field(default=500, ge=0)

    # 쉼표로 구분한 허용 Origin 목록
    cors_allowed_origins: str = ""
    rate_limit_default: str = "60/minute"

    langfuse_public_key: str = ""
    langfuse_secret_key: str = ""
    langfuse_base_url: str = "https://cloud.langfuse.com"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    @field_validator("llm_provider", mode="before")
    @classmethod
    def normalize_provider(cls, v):
        return v.strip().lower() if isinstance(v, str) else v

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.cors_allowed_origins.split(",") if origin.strip()]

    def validate_for_production(self) -> list[str]:
        """선택한 프로바이더의 필수 설정 중 비어 있는 항목"""
        env_name, field_name = PROVIDER_REQUIRED_SETTING[self.llm_provider]
        return [] if getattr(self, field_name) else [env_name]

    @model_validator(mode="after")
    def validate_production_settings(self):
        if self.is_production:
            missing = self.validate_for_production()
            if missing:
                raise ValueError(f"프로덕션 환경에서 필수 설정 누락: {', '.join(missing)}")
        return self


settings = Settings()
