from langchain_core.language_models import BaseChatModel
from langchain_google_genai import ChatGoogleGenerativeAI

from app.core.config import settings
from app.infra.llm.base import BaseLLMClient


class GeminiClient(BaseLLMClient):
    """Gemini 클라이언트, 기본 생성 모델이자 적합도 평가 모델"""

    provider = "gemini"

    def missing_setting(self) -> str | None:
        return None if settings.gemini_api_key else "GEMINI_API_KEY"

    @property
    def model_name(self) -> str:
        return settings.gemini_model

    def create_chat_model(self) -> BaseChatModel:
        return ChatGoogleGenerativeAI(
            model=self.model_name,
            google_api_key=settings.gemini_api_key,
            timeout=settings.gemini_timeout,
            temperature=settings.llm_temperature,
            max_retries=settings.llm_max_retries,
        )
