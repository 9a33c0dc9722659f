"""전역 로깅 설정

- 개발 환경: 컬러 텍스트 로그
- 그 외 환경: 한 줄 JSON 로그 (``extra`` 로 넘긴 필드 포함)

모든 레코드에는 ``request_id`` 가 주입됩니다 (요청 밖에서는 ``-``).
"""

import json
import logging
import sys
from typing import Any

from app.core.config import settings
from app.core.middlewares.context import get_request_id

# LogRecord 기본 속성 (extra 필드 구분용)
_RESERVED_ATTRS = frozenset(
    logging.makeLogRecord({}).__dict__.keys() | {"message", "asctime"}
)


class RequestIdFilter(logging.Filter):
    """로그 레코드에 현재 요청 ID 주입

    ``extra={"request_id": ...}`` 로 이미 지정된 경우 덮어쓰지 않습니다.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "request_id", None):
            record.request_id = get_request_id() or "-"
        return True


class ColoredFormatter(logging.Formatter):
    """컬러 로그 포맷터 (개발 환경용)"""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        # 다른 핸들러와 공유되는 레코드는 변경하지 않음
        colored = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(record.levelname, self.RESET)
        colored.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(colored)


class JsonFormatter(logging.Formatter):
    """JSON 로그 포맷터 (로그 수집 시스템 연동용)"""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "request_id": getattr(record, "request_id", "-"),
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and key not in payload:
                payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_logging() -> None:
    """애플리케이션 로깅 설정"""

    log_level = logging.DEBUG if settings.debug else logging.INFO

    formatter: logging.Formatter
    if settings.is_development:
        formatter = ColoredFormatter(
            fmt=(
                "%(asctime)s | %(levelname)-8s | %(request_id)s | "
                "%(name)s:%(lineno)d | %(message)s"
            ),
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        formatter = JsonFormatter(datefmt="%Y-%m-%dT%H:%M:%S%z")

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    handler.setLevel(log_level)
    handler.addFilter(RequestIdFilter())

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    logging.getLogger("uvicorn").setLevel(logging.INFO)
    logging.getLogger("uvicorn.access").setLevel(logging.INFO)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.database_echo else logging.WARNING
    )
    # Places API 키가 요청 로그에 남지 않도록 httpx는 WARNING 이상만
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """로거 인스턴스 반환 (보통 ``__name__`` 사용)"""
    return logging.getLogger(name)
