"""Restaurants 도메인 모델 정의

사용자 상호작용은 append-only 로그로만 저장합니다 (수정/삭제 없음).
"""

import uuid
from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Index, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base


class RestaurantInteraction(Base):
    """식당 상호작용 로그 모델"""

    __tablename__ = "restaurant_interactions"
    __table_args__ = (
        CheckConstraint(
            "action IN ('like', 'skip', 'unlike')",
            name="restaurant_interactions_action_check",
        ),
        Index("idx_restaurant_interactions_user_id", "user_id"),
        Index(
            "idx_restaurant_interactions_user_place", "user_id", "place_id"
        ),
    )

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
        comment="상호작용 ID (UUID)",
    )
    user_id: Mapped[str] = mapped_column(
        String(64), nullable=False, comment="인증 서버 사용자 ID"
    )
    place_id: Mapped[str] = mapped_column(
        String(255), nullable=False, comment="장소 ID (places/ 접두사 제거)"
    )
    action: Mapped[str] = mapped_column(
        String(16), nullable=False, comment="like | skip | unlike"
    )
    time_spent_ms: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        server_default="0",
        comment="상호작용 전 카드 조회 시간 (ms)",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        comment="생성 일시",
    )

    def __repr__(self) -> str:
        return (
            f"<RestaurantInteraction(user_id={self.user_id}, "
            f"place_id={self.place_id}, action={self.action})>"
        )
