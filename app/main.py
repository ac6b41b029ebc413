from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from app.api.routers import api_router
from app.core.config import settings
from app.core.exceptions import register_exception_handlers
from app.core.limiter import limiter
from app.core.logging import get_logger, setup_logging
from app.core.middleware import REQUEST_ID_HEADER, RequestLoggingMiddleware
from app.infra.feed.client import close_client as close_feed_client
from app.infra.search.client import close_client as close_search_client

APP_TITLE = "Resume Forge"
APP_VERSION = "0.1.0"

setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """시작 시 프로덕션 설정 확인, 종료 시 HTTP 클라이언트 정리"""
    if settings.is_production:
        errors = settings.validate_for_production()
        if errors:
            raise RuntimeError(f"프로덕션 설정 오류: {', '.join(errors)}")

    logger.info(
        "서비스 시작 environment=%s llm_provider=%s",
        settings.environment,
        settings.llm_provider,
    )
    yield
    await close_feed_client()
    await close_search_client()


def _add_middleware(app: FastAPI) -> None:
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)
    app.add_middleware(RequestLoggingMiddleware)

    if settings.cors_origins:
        # 브라우저에서 다운로드 파일명을 읽으려면 Content-Disposition 노출 필요
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_methods=["*"],
            allow_headers=["*"],
            expose_headers=["Content-Disposition", REQUEST_ID_HEADER],
        )


def create_app() -> FastAPI:
    docs_enabled = not settings.is_production
    app = FastAPI(
        title=APP_TITLE,
        version=APP_VERSION,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        lifespan=lifespan,
    )

    _add_middleware(app)
    register_exception_handlers(app)
    app.include_router(api_router)

    @app.get("/health")
    async def health_check():
        return {"status": "UP"}

    return app


app = create_app()
