"""미들웨어 모듈

``LoggingMiddleware`` 는 ``app.core.logging`` 과의 순환 임포트를 피하기 위해
``app.core.middlewares.logging`` 에서 직접 임포트합니다.
"""

from app.core.middlewares.context import (
    generate_request_id,
    get_request_id,
    reset_request_id,
    set_request_id,
)

__all__ = [
    "get_request_id",
    "set_request_id",
    "reset_request_id",
    "generate_request_id",
]
