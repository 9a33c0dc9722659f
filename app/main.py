"""CastIron Feed 애플리케이션 진입점"""

from contextlib import asynccontextmanager
from typing import Any

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.v1 import api_router as api_v1_router
from app.core.config import settings
from app.core.database import close_db
from app.core.exceptions import register_exception_handlers
from app.core.logging import get_logger, setup_logging
from app.core.middlewares.logging import LoggingMiddleware
from app.core.migration import run_migrations_on_startup
from app.core.schemas import APIResponse, create_response

setup_logging()
logger = get_logger(__name__)

health_router = APIRouter(tags=["Health"])


@health_router.get("/health", response_model=APIResponse[dict[str, Any]])
async def health_check():
    """헬스 체크 엔드포인트"""
    return create_response(
        data={
            "status": "healthy",
            "app_name": settings.app_name,
            "environment": settings.app_env,
            "places_configured": bool(settings.google_places_api_key),
        },
        message="OK",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기 관리"""
    logger.info(f"🚀 Starting {settings.app_name} ({settings.app_env})...")
    if not settings.google_places_api_key:
        logger.warning("⚠️ GOOGLE_PLACES_API_KEY가 없어 피드 요청은 실패합니다.")

    run_migrations_on_startup(auto_migrate=settings.auto_migrate)

    yield

    logger.info(f"👋 Shutting down {settings.app_name}...")
    await close_db()


def create_app() -> FastAPI:
    """FastAPI 애플리케이션 팩토리"""
    docs_enabled = settings.is_development
    app = FastAPI(
        title=settings.app_name,
        description="위치 기반 개인화 식당 피드 API",
        version="0.1.0",
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        lifespan=lifespan,
    )

    # 미들웨어는 등록 역순으로 실행 (LoggingMiddleware가 가장 바깥)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(api_v1_router, prefix="/api/v1")

    return app


app = create_app()
