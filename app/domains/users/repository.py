"""Users 도메인 리포지토리"""

from typing import Optional, cast

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.domains.users.models import Profile


class ProfileRepository:
    """프로필 리포지토리"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: str) -> Optional[Profile]:
        """ID로 프로필 조회

        Args:
            user_id: 사용자 ID

        Returns:
            프로필 객체 또는 None
        """
        result = await self.session.execute(
            select(Profile).where(Profile.id == user_id)
        )
        return cast(Optional[Profile], result.scalar_one_or_none())

    async def create(self, profile: Profile) -> Profile:
        """프로필 생성"""
        self.session.add(profile)
        await self.session.flush()
        await self.session.refresh(profile)
        return profile

    async def update(self, profile: Profile) -> Profile:
        """프로필 수정"""
        await self.session.flush()
        await self.session.refresh(profile)
        return profile
