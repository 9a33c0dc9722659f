"""Users 도메인 모듈

요청자 식별과 프로필(테스터 플래그) 관리를 위한 도메인입니다.

구조:
    - types.py: CallerIdentity
    - identity.py: IdentityResolver (Bearer 토큰 → 사용자 ID)
    - models.py: SQLAlchemy 모델 정의 (Profile)
    - schemas.py: Pydantic 스키마 (ProfileSync, ProfileResponse)
    - repository.py: 데이터 접근 계층
    - service.py: 비즈니스 로직 (프로필 Upsert, 요청자 식별)
    - router.py: API 엔드포인트 (API Key 인증 포함)
    - exceptions.py: 도메인 예외
"""

from app.domains.users.exceptions import (
    IdentityResolutionError,
    ProfileNotFoundException,
    UserErrorCode,
)
from app.domains.users.identity import (
    AuthServerIdentityResolver,
    IdentityResolver,
)
from app.domains.users.models import Profile
from app.domains.users.router import router
from app.domains.users.schemas import ProfileResponse, ProfileSync
from app.domains.users.service import UserService
from app.domains.users.types import CallerIdentity

__all__ = [
    "Profile",
    "UserService",
    "ProfileSync",
    "ProfileResponse",
    "CallerIdentity",
    "IdentityResolver",
    "AuthServerIdentityResolver",
    "router",
    "UserErrorCode",
    "ProfileNotFoundException",
    "IdentityResolutionError",
]
