from enum import Enum

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.logging import get_logger

logger = get_logger(__name__)


class ErrorCode(str, Enum):
    """API 에러 코드"""

    INVALID_INPUT = "INVALID_INPUT"
    LLM_ERROR = "LLM_ERROR"

    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"
    ITEM_NOT_FOUND = "ITEM_NOT_FOUND"
    UNSUPPORTED_TARGET = "UNSUPPORTED_TARGET"

    RENDER_ERROR = "RENDER_ERROR"
    LATEX_GENERATE_ERROR = "LATEX_GENERATE_ERROR"

    FEED_FETCH_ERROR = "FEED_FETCH_ERROR"
    JOB_SEARCH_ERROR = "JOB_SEARCH_ERROR"


class CustomException(Exception):
    """API 응답으로 변환되는 예외

    하위 클래스는 status_code, error_code, message 기본값을 클래스 속성으로 정의한다.
    """

    status_code: int = 500
    error_code: ErrorCode | str = ErrorCode.LLM_ERROR
    message: str = "요청을 처리하지 못했습니다"

    def __init__(
        self,
        detail: str | None = None,
        *,
        status_code: int | None = None,
        error_code: ErrorCode | str | None = None,
        message: str | None = None,
    ):
        if status_code is not None:
            self.status_code = status_code
        if error_code is not None:
            self.error_code = error_code
        if message is not None:
            self.message = message
        self.detail = detail
        super().__init__(self.message)


class ValidationError(CustomException):
    status_code = 400
    error_code = ErrorCode.INVALID_INPUT
    message = "입력값이 올바르지 않습니다"


class LLMError(CustomException):
    status_code = 502
    error_code = ErrorCode.LLM_ERROR
    message = "LLM 호출에 실패했습니다"


class ProfileNotFoundError(CustomException):
    status_code = 404
    error_code = ErrorCode.PROFILE_NOT_FOUND
    message = "프로필을 찾을 수 없습니다"


class ItemNotFoundError(CustomException):
    status_code = 404
    error_code = ErrorCode.ITEM_NOT_FOUND
    message = "프로필 항목을 찾을 수 없습니다"


class UnsupportedTargetKindError(CustomException):
    """존재하지 않는 렌더링 형식 요청, 호출자와 서버의 형식 목록이 어긋난 경우"""

    status_code = 400
    error_code = ErrorCode.UNSUPPORTED_TARGET
    message = "지원하지 않는 렌더링 형식입니다"


class CvGenerationError(CustomException):
    """CV 워크플로우가 에러 상태로 끝난 경우, error_code는 실패한 단계"""

    status_code = 502
    error_code = ErrorCode.LATEX_GENERATE_ERROR
    message = "CV 생성에 실패했습니다"


class FeedFetchError(CustomException):
    status_code = 502
    error_code = ErrorCode.FEED_FETCH_ERROR
    message = "채용 피드 조회에 실패했습니다"


class JobSearchError(CustomException):
    """외부 채용 검색 실패, API 키가 없으면 503"""

    status_code = 502
    error_code = ErrorCode.JOB_SEARCH_ERROR
    message = "채용 검색에 실패했습니다"


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(CustomException)
    async def custom_exception_handler(request: Request, exc: CustomException):
        logger.warning(
            "요청 처리 실패 path=%s error_code=%s",
            request.url.path,
            getattr(exc.error_code, "value", exc.error_code),
        )
        content = {
            "error_code": exc.error_code,
            "message": exc.message,
        }
        if exc.detail and not settings.is_production:
            content["detail"] = exc.detail

        return JSONResponse(status_code=exc.status_code, content=content)
