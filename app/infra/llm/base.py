from abc import ABC, abstractmethod
from typing import TypeVar

from langchain_core.language_models import BaseChatModel
from langchain_core.runnables import Runnable
from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


class BaseLLMClient(ABC):
    """프로바이더별 LangChain 채팅 모델 래퍼

    하위 클래스는 프로바이더 이름과 필수 설정 확인, 모델 생성만 정의한다.
    """

    provider: str = ""

    def __init__(self):
        missing = self.missing_setting()
        if missing:
            raise ValueError(f"{missing}가 설정되지 않았습니다")
        self._model = self.create_chat_model()

    @abstractmethod
    def missing_setting(self) -> str | None:
        """누락된 필수 설정 이름, 모두 있으면 None"""

    @abstractmethod
    def create_chat_model(self) -> BaseChatModel:
        pass

    @property
    @abstractmethod
    def model_name(self) -> str:
        pass

    def get_chat_model(self) -> BaseChatModel:
        return self._model

    def with_structured_output(self, schema: type[T]) -> Runnable:
        """Pydantic 스키마로 파싱되는 Runnable 반환"""
        return self._model.with_structured_output(schema)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(provider={self.provider!r}, model={self.model_name!r})"
