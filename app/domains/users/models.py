"""Users 도메인 모델 정의

인증 서버 사용자에 대응하는 프로필입니다. ID는 인증 서버에서 제공되며,
자동 증가하지 않습니다.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, String, false, func
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base


class Profile(Base):
    """사용자 프로필 모델"""

    __tablename__ = "profiles"

    id: Mapped[str] = mapped_column(
        String(64),
        primary_key=True,
        comment="인증 서버에서 제공하는 사용자 ID",
    )
    full_name: Mapped[Optional[str]] = mapped_column(
        String(255), nullable=True, comment="표시 이름"
    )
    is_tester: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=false(),
        comment="베타 테스터 여부 (랭킹 진단 정보 노출)",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        comment="생성 일시",
    )
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        onupdate=func.now(),
        nullable=True,
        comment="수정 일시",
    )

    def __repr__(self) -> str:
        return f"<Profile(id={self.id}, is_tester={self.is_tester})>"
