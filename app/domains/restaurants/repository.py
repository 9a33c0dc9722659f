"""Restaurants 도메인 리포지토리

상호작용 로그 조회/추가를 위한 데이터 접근 계층입니다.
"""

from typing import Optional, Sequence, cast

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.utils.datetime import now_utc
from app.domains.restaurants.models import RestaurantInteraction
from app.domains.restaurants.types import InteractionEvent


class InteractionRepository:
    """상호작용 로그 리포지토리"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_for_user(
        self, user_id: str, limit: Optional[int] = None
    ) -> list[InteractionEvent]:
        """사용자의 상호작용 로그 조회 (최신순)

        Args:
            user_id: 사용자 ID
            limit: 조회할 최대 이벤트 수 (None이면 전체)

        Returns:
            최신순으로 정렬된 이벤트 목록
        """
        query = (
            select(RestaurantInteraction)
            .where(RestaurantInteraction.user_id == user_id)
            .order_by(RestaurantInteraction.created_at.desc())
        )
        if limit is not None:
            query = query.limit(limit)

        result = await self.session.execute(query)
        rows = cast(Sequence[RestaurantInteraction], result.scalars().all())
        return [
            InteractionEvent(
                place_id=row.place_id,
                action=row.action,
                time_spent_ms=row.time_spent_ms,
                created_at=row.created_at,
            )
            for row in rows
        ]

    async def create(
        self,
        user_id: str,
        place_id: str,
        action: str,
        time_spent_ms: int,
    ) -> RestaurantInteraction:
        """상호작용 추가

        ``created_at`` 은 애플리케이션에서 채워 같은 세션 안에서도 순서가
        보장되도록 합니다.

        Returns:
            생성된 상호작용 객체
        """
        interaction = RestaurantInteraction(
            user_id=user_id,
            place_id=place_id,
            action=action,
            time_spent_ms=time_spent_ms,
            created_at=now_utc(),
        )
        self.session.add(interaction)
        await self.session.flush()
        await self.session.refresh(interaction)
        return interaction
