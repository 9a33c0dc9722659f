"""날짜/시간 유틸리티"""

from datetime import datetime, timezone

UTC = timezone.utc


def now_utc() -> datetime:
    """현재 UTC 시간 반환"""
    return datetime.now(UTC)


def to_utc(dt: datetime) -> datetime:
    """datetime을 UTC aware 값으로 변환

    naive datetime은 UTC로 간주합니다 (SQLite 등 타임존을 보존하지 않는
    드라이버에서 읽은 값 비교용).
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)
