"""공통 의존성 함수 정의

이 모듈은 FastAPI 엔드포인트에서 사용되는 공통 의존성 함수들을 정의합니다.
"""

from typing import Optional

from fastapi import Header

from app.core.config import settings
from app.core.exceptions import ErrorCode, UnauthorizedException


async def verify_internal_api_key(
    x_internal_api_key: str = Header(..., alias="X-Internal-Api-Key")
) -> None:
    """내부 API Key 검증 (인증 서버 → 프로필 동기화용)

    Raises:
        UnauthorizedException: API Key가 유효하지 않은 경우
    """
    if x_internal_api_key != settings.internal_api_key:
        raise UnauthorizedException(
            message="유효하지 않은 API 키입니다.",
            error_code=ErrorCode.INVALID_API_KEY,
        )


async def get_bearer_credential(
    authorization: Optional[str] = Header(default=None),
) -> Optional[str]:
    """Authorization 헤더에서 Bearer 토큰 추출

    헤더가 없거나 비어 있으면 None을 반환합니다. 토큰의 유효성은
    여기서 검증하지 않습니다 (IdentityResolver 책임).
    """
    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer":
        token = authorization
    token = token.strip()
    return token or None
