"""Users 도메인 타입 정의"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CallerIdentity:
    """요청자 식별 정보

    Attributes:
        user_id: 인증 서버의 사용자 ID
        is_tester: 랭킹 진단 정보 노출 대상 여부 (프로필 조회 결과)
    """

    user_id: str
    is_tester: bool = False
