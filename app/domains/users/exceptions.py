"""Users 도메인 예외 정의"""

from enum import Enum

from app.core.exceptions import NotFoundException


class UserErrorCode(str, Enum):
    """사용자 도메인 에러 코드"""

    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"


class ProfileNotFoundException(NotFoundException):
    """프로필을 찾을 수 없는 경우"""

    def __init__(self, user_id: str | None = None):
        detail = {"user_id": user_id} if user_id else {}
        super().__init__(
            message="프로필을 찾을 수 없습니다.",
            error_code=UserErrorCode.PROFILE_NOT_FOUND,
            detail=detail,
        )


class IdentityResolutionError(Exception):
    """토큰으로 사용자를 확인할 수 없는 경우

    피드 요청에서는 개인화를 건너뛰는 신호로만 쓰이며, API 오류로
    노출되지 않습니다.
    """
