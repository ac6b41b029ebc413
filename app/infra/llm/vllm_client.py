from langchain_core.language_models import BaseChatModel
from langchain_openai import ChatOpenAI

from app.core.config import settings
from app.infra.llm.base import BaseLLMClient

# vLLM 서버는 키 없이 띄우는 경우가 많아 OpenAI SDK용 더미 키 사용
EMPTY_API_KEY = "EMPTY"


class VLLMClient(BaseLLMClient):
    """OpenAI 호환 vLLM 서버 클라이언트"""

    provider = "vllm"

    def missing_setting(self) -> str | None:
        return None if settings.vllm_api_url else "VLLM_API_URL"

    @property
    def model_name(self) -> str:
        return settings.vllm_model

    def create_chat_model(self) -> BaseChatModel:
        return ChatOpenAI(
            model=self.model_name,
            api_key=settings.vllm_api_key or EMPTY_API_KEY,
            base_url=settings.vllm_api_url,
            timeout=settings.vllm_timeout,
            temperature=settings.llm_temperature,
            max_retries=settings.llm_max_retries,
        )
