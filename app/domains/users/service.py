"""Users 도메인 서비스

프로필 동기화와 요청자 식별을 담당합니다.
"""

from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.logging import get_logger
from app.core.middlewares.context import get_request_id
from app.domains.users.exceptions import ProfileNotFoundException
from app.domains.users.identity import IdentityResolver
from app.domains.users.models import Profile
from app.domains.users.repository import ProfileRepository
from app.domains.users.schemas import ProfileSync
from app.domains.users.types import CallerIdentity

logger = get_logger(__name__)


class UserService:
    """사용자 서비스"""

    def __init__(
        self,
        session: AsyncSession,
        identity_resolver: Optional[IdentityResolver] = None,
    ):
        self.repository = ProfileRepository(session)
        self.identity_resolver = identity_resolver

    async def get_profile(self, user_id: str) -> Profile:
        """프로필 조회

        Raises:
            ProfileNotFoundException: 프로필이 없는 경우
        """
        profile = await self.repository.get_by_id(user_id)
        if not profile:
            raise ProfileNotFoundException(user_id=user_id)
        return profile

    async def upsert_profile(self, data: ProfileSync) -> Profile:
        """프로필 Upsert (생성 또는 업데이트)

        - 존재하지 않으면 생성 (is_tester 미지정 시 False)
        - 이미 존재하면 지정된 필드만 업데이트

        Args:
            data: 프로필 동기화 데이터

        Returns:
            생성 또는 업데이트된 프로필
        """
        existing = await self.repository.get_by_id(data.id)

        if existing:
            if data.full_name is not None:
                existing.full_name = data.full_name
            if data.is_tester is not None:
                existing.is_tester = data.is_tester
            profile = await self.repository.update(existing)
            action = "updated"
        else:
            profile = await self.repository.create(
                Profile(
                    id=data.id,
                    full_name=data.full_name,
                    is_tester=bool(data.is_tester),
                )
            )
            action = "created"

        logger.info(
            "Profile synced",
            extra={
                "request_id": get_request_id(),
                "user_id": profile.id,
                "action": action,
            },
        )
        return profile

    async def is_tester(self, user_id: str) -> bool:
        """테스터 여부 (프로필이 없으면 False)"""
        profile = await self.repository.get_by_id(user_id)
        return bool(profile and profile.is_tester)

    async def resolve_caller(
        self, credential: Optional[str]
    ) -> Optional[CallerIdentity]:
        """토큰으로 요청자 식별

        프로필 조회에 실패하면 세션을 롤백하고 테스터가 아닌 것으로 간주합니다.

        Args:
            credential: Bearer 토큰 (없으면 익명)

        Returns:
            CallerIdentity 또는 None (익명)

        Raises:
            IdentityResolutionError: 토큰 확인 실패
        """
        if not credential or self.identity_resolver is None:
            return None

        user_id = await self.identity_resolver.resolve(credential)
        if user_id is None:
            return None
        try:
            is_tester = await self.is_tester(user_id)
        except SQLAlchemyError:
            logger.warning(
                "Profile lookup failed, treating caller as non-tester",
                exc_info=True,
            )
            await self.repository.session.rollback()
            is_tester = False
        return CallerIdentity(user_id=user_id, is_tester=is_tester)
