"""structlog 로깅 설정

개발 환경은 콘솔 출력, 프로덕션은 JSON 출력.
프로필에는 연락처가 들어 있으므로 프로덕션에서는 연락처 필드와 키/토큰 값을 가린다.
"""

import logging
import re
import sys

import structlog

from app.core.config import settings
from app.core.context import current_context

MASK = "***"

SENSITIVE_PATTERNS = [
    (re.compile(r"(token=)[^&\s]+", re.IGNORECASE), rf"\1{MASK}"),
    (re.compile(r"(Bearer\s+)\S+", re.IGNORECASE), rf"\1{MASK}"),
    (re.compile(r"(api[_-]?key=)[^&\s]+", re.IGNORECASE), rf"\1{MASK}"),
    (re.compile(r"[\w.+-]+@([\w-]+\.[\w.-]+)"), rf"{MASK}@\1"),
    (re.compile(r"(?<!\d)\+?\d{2,4}[ -]\d{3,4}[ -]\d{4}(?!\d)"), MASK),
]

# 프로필 연락처 필드는 값 전체를 가림
SENSITIVE_KEYS = frozenset(
    {"email", "phone", "address", "full_name", "fullName", "linkedin", "github", "portfolio"}
)

QUIET_LOGGERS = (
    "httpcore",
    "httpx",
    "langfuse",
    "langchain",
    "langgraph",
    "openai",
    "google_genai",
    "anyio",
    "multipart",
)


def _mask_sensitive_data(value: str) -> str:
    for pattern, replacement in SENSITIVE_PATTERNS:
        value = pattern.sub(replacement, value)
    return value


def add_context_processor(logger: logging.Logger, method_name: str, event_dict: dict) -> dict:
    """요청 컨텍스트의 request_id/user_id 주입"""
    ctx = current_context()
    if ctx is None:
        return event_dict

    event_dict.setdefault("request_id", ctx.request_id)
    if ctx.user_id:
        event_dict.setdefault("user_id", ctx.user_id)
    return event_dict


def mask_sensitive_processor(logger: logging.Logger, method_name: str, event_dict: dict) -> dict:
    """프로덕션에서 연락처 필드와 민감한 문자열 마스킹"""
    if not settings.is_production:
        return event_dict

    for key, value in event_dict.items():
        if key in SENSITIVE_KEYS and value:
            event_dict[key] = MASK
        elif isinstance(value, str):
            event_dict[key] = _mask_sensitive_data(value)
    return event_dict


def _shared_processors() -> list:
    processors: list = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        add_context_processor,
        mask_sensitive_processor,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if settings.is_production:
        processors.append(structlog.processors.format_exc_info)
    return processors


def _renderer():
    if settings.is_production:
        return structlog.processors.JSONRenderer(ensure_ascii=False)
    return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())


def setup_logging(level: str | None = None) -> None:
    """structlog와 표준 logging을 같은 포맷으로 설정"""
    log_level = getattr(logging, (level or settings.log_level).upper(), logging.INFO)
    shared = _shared_processors()

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, _renderer()],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(log_level)

    # uvicorn 로그도 루트 핸들러로 출력
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(name).handlers.clear()

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
