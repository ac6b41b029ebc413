from langchain_core.language_models import BaseChatModel
from langchain_openai import ChatOpenAI

from app.core.config import settings
from app.infra.llm.base import BaseLLMClient


class OpenAIClient(BaseLLMClient):
    """OpenAI API 클라이언트"""

    provider = "openai"

    def missing_setting(self) -> str | None:
        return None if settings.openai_api_key else "OPENAI_API_KEY"

    @property
    def model_name(self) -> str:
        return settings.openai_model

    def create_chat_model(self) -> BaseChatModel:
        return ChatOpenAI(
            model=self.model_name,
            api_key=settings.openai_api_key,
            timeout=settings.openai_timeout,
            temperature=settings.llm_temperature,
            max_retries=settings.llm_max_retries,
        )
