"""마이그레이션 자동 실행 유틸리티

서버 시작 시 Alembic 마이그레이션 상태를 확인하고, 설정에 따라 최신 버전까지
업그레이드합니다. Alembic은 동기 드라이버로 연결합니다.
"""

from pathlib import Path
from typing import Optional

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import settings
from app.core.logging import get_logger

logger = get_logger(__name__)

# async 드라이버 → sync 드라이버
SYNC_DRIVER_MAP = {
    "+asyncpg": "+psycopg2",
    "+aiosqlite": "",
}


def to_sync_url(database_url: str) -> str:
    """async DB URL을 Alembic용 sync URL로 변환"""
    for async_driver, sync_driver in SYNC_DRIVER_MAP.items():
        if async_driver in database_url:
            return database_url.replace(async_driver, sync_driver, 1)
    return database_url


def get_alembic_config(database_url: Optional[str] = None) -> Config:
    """Alembic 설정 객체 반환"""
    project_root = Path(__file__).resolve().parents[2]

    config = Config(str(project_root / "alembic.ini"))
    config.set_main_option("script_location", str(project_root / "migrations"))
    config.set_main_option(
        "sqlalchemy.url", to_sync_url(database_url or settings.database_url)
    )
    return config


def get_current_revision(database_url: Optional[str] = None) -> Optional[str]:
    """현재 데이터베이스의 마이그레이션 버전 (조회 실패 시 None)"""
    engine = create_engine(to_sync_url(database_url or settings.database_url))
    try:
        with engine.connect() as conn:
            rev = MigrationContext.configure(conn).get_current_revision()
            return str(rev) if rev else None
    except SQLAlchemyError as e:
        logger.warning(f"현재 마이그레이션 버전 조회 실패: {e}")
        return None
    finally:
        engine.dispose()


def get_head_revision() -> Optional[str]:
    """최신 마이그레이션 버전 조회"""
    script = ScriptDirectory.from_config(get_alembic_config())
    head = script.get_current_head()
    return str(head) if head else None


def check_migration_status() -> dict:
    """마이그레이션 상태 확인

    Returns:
        dict: current (현재 버전), head (최신 버전), is_up_to_date (최신 여부)
    """
    current = get_current_revision()
    head = get_head_revision()
    return {
        "current": current,
        "head": head,
        "is_up_to_date": current == head,
    }


def run_migrations() -> bool:
    """최신 버전까지 업그레이드

    Returns:
        bool: 성공 여부
    """
    status = check_migration_status()
    if status["is_up_to_date"]:
        logger.info(f"✅ 마이그레이션이 최신 상태입니다 (revision: {status['current']})")
        return True

    logger.info(
        f"🔄 마이그레이션 업데이트 중... ({status['current']} → {status['head']})"
    )
    try:
        command.upgrade(get_alembic_config(), "head")
    except SQLAlchemyError as e:
        logger.error(f"❌ 마이그레이션 실행 실패: {e}")
        return False

    logger.info(f"✅ 마이그레이션 완료 (revision: {status['head']})")
    return True


def run_migrations_on_startup(auto_migrate: bool = True) -> None:
    """서버 시작 시 마이그레이션 확인 및 실행

    Args:
        auto_migrate: True면 자동 마이그레이션, False면 상태만 확인

    Raises:
        RuntimeError: 프로덕션 환경에서 마이그레이션 확인에 실패한 경우
    """
    try:
        status = check_migration_status()
        if status["is_up_to_date"]:
            logger.info(f"✅ 마이그레이션 상태: 최신 (revision: {status['current']})")
            return

        logger.warning(
            f"⚠️ 마이그레이션이 최신 상태가 아닙니다. "
            f"(현재: {status['current']}, 최신: {status['head']})"
        )
        if auto_migrate and not run_migrations():
            raise RuntimeError("마이그레이션 실행 실패")

    except Exception as e:
        logger.error(f"❌ 마이그레이션 상태 확인 실패: {e}")
        # 개발 환경에서는 DB 없이도 서버 시작
        if settings.is_production:
            raise RuntimeError("프로덕션 환경에서 마이그레이션 확인 실패") from e
        logger.warning("⚠️ 개발 환경이므로 서버를 계속 시작합니다.")
