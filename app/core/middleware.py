"""요청 로깅 미들웨어

요청마다 request_context를 열고 시작/완료 로그를 남긴다.
프로필 경로(/profiles/{user_id}, /cv/{user_id})에서는 user_id도 컨텍스트에 싣는다.
"""

import re
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.core.context import request_context
from app.core.logging import get_logger

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
USER_ID_HEADER = "X-User-ID"

UNLOGGED_PATHS = frozenset({"/health", "/docs", "/redoc", "/openapi.json", "/favicon.ico"})

PROFILE_PATH = re.compile(r"^/api/v1/(?:profiles|cv)/(?P<user_id>[^/]+)")


def resolve_user_id(request: Request) -> str | None:
    """경로의 프로필 id, 없으면 X-User-ID 헤더"""
    match = PROFILE_PATH.match(request.url.path)
    if match:
        return match.group("user_id")
    return request.headers.get(USER_ID_HEADER)


def client_ip(request: Request) -> str:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",", 1)[0].strip()
    return request.client.host if request.client else "unknown"


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """요청 컨텍스트 설정과 요청 단위 로깅"""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if request.url.path in UNLOGGED_PATHS:
            return await call_next(request)

        with request_context(
            request_id=request.headers.get(REQUEST_ID_HEADER),
            user_id=resolve_user_id(request),
        ) as ctx:
            started = time.perf_counter()
            logger.info(
                "요청 시작",
                method=request.method,
                path=request.url.path,
                query=str(request.query_params) or None,
                client_ip=client_ip(request),
            )

            try:
                response = await call_next(request)
            except Exception as e:
                logger.error(
                    "요청 실패",
                    method=request.method,
                    path=request.url.path,
                    error=str(e),
                    duration_ms=_elapsed_ms(started),
                )
                raise

            logger.info(
                "요청 완료",
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                duration_ms=_elapsed_ms(started),
            )
            response.headers[REQUEST_ID_HEADER] = ctx.request_id
            return response
