from collections.abc import Callable

from app.core.config import settings
from app.core.logging import get_logger
from app.infra.llm.base import BaseLLMClient
from app.infra.llm.gemini_client import GeminiClient
from app.infra.llm.openai_client import OpenAIClient
from app.infra.llm.vllm_client import VLLMClient

logger = get_logger(__name__)

PROVIDERS: dict[str, Callable[[], BaseLLMClient]] = {
    "openai": lambda: OpenAIClient(),
    "vllm": lambda: VLLMClient(),
    "gemini": lambda: GeminiClient(),
}

_generator_client: BaseLLMClient | None = None
_evaluator_client: BaseLLMClient | None = None


def _create_client(provider: str) -> BaseLLMClient:
    create = PROVIDERS.get(provider.lower())
    if create is None:
        raise ValueError(f"지원하지 않는 LLM 프로바이더: {provider}")

    client = create()
    logger.info("LLM 클라이언트 초기화 client=%r", client)
    return client


def get_generator_client() -> BaseLLMClient:
    """CV/커버레터/문장 생성용 클라이언트, 설정된 프로바이더 사용"""
    global _generator_client

    if _generator_client is None:
        _generator_client = _create_client(settings.llm_provider)
    return _generator_client


def get_evaluator_client() -> BaseLLMClient:
    """채용공고 적합도 평가용 클라이언트

    Gemini 키가 있으면 Gemini, 없으면 생성용 클라이언트를 같이 쓴다.
    """
    global _evaluator_client

    if _evaluator_client is None:
        if settings.gemini_api_key:
            _evaluator_client = _create_client("gemini")
        else:
            _evaluator_client = get_generator_client()
    return _evaluator_client


def reset_clients() -> None:
    global _generator_client, _evaluator_client
    _generator_client = None
    _evaluator_client = None
