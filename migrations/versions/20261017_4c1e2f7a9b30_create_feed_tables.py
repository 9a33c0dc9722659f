"""create_profiles_and_restaurant_interactions

Revision ID: 4c1e2f7a9b30
Revises:
Create Date: 2026-10-17 10:00:00.000000

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "4c1e2f7a9b30"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """업그레이드 마이그레이션: profiles, restaurant_interactions 테이블 생성"""
    op.create_table(
        "profiles",
        sa.Column(
            "id",
            sa.String(length=64),
            nullable=False,
            comment="인증 서버에서 제공하는 사용자 ID",
        ),
        sa.Column(
            "full_name", sa.String(length=255), nullable=True, comment="표시 이름"
        ),
        sa.Column(
            "is_tester",
            sa.Boolean(),
            server_default=sa.false(),
            nullable=False,
            comment="베타 테스터 여부 (랭킹 진단 정보 노출)",
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
            comment="생성 일시",
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=True,
            comment="수정 일시",
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "restaurant_interactions",
        sa.Column(
            "id", sa.String(length=36), nullable=False, comment="상호작용 ID (UUID)"
        ),
        sa.Column(
            "user_id",
            sa.String(length=64),
            nullable=False,
            comment="인증 서버 사용자 ID",
        ),
        sa.Column(
            "place_id",
            sa.String(length=255),
            nullable=False,
            comment="장소 ID (places/ 접두사 제거)",
        ),
        sa.Column(
            "action",
            sa.String(length=16),
            nullable=False,
            comment="like | skip | unlike",
        ),
        sa.Column(
            "time_spent_ms",
            sa.Integer(),
            server_default="0",
            nullable=False,
            comment="상호작용 전 카드 조회 시간 (ms)",
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
            comment="생성 일시",
        ),
        sa.CheckConstraint(
            "action IN ('like', 'skip', 'unlike')",
            name="restaurant_interactions_action_check",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_restaurant_interactions_user_id",
        "restaurant_interactions",
        ["user_id"],
        unique=False,
    )
    op.create_index(
        "idx_restaurant_interactions_user_place",
        "restaurant_interactions",
        ["user_id", "place_id"],
        unique=False,
    )


def downgrade() -> None:
    """다운그레이드 마이그레이션: 테이블 삭제"""
    op.drop_index(
        "idx_restaurant_interactions_user_place",
        table_name="restaurant_interactions",
    )
    op.drop_index(
        "idx_restaurant_interactions_user_id",
        table_name="restaurant_interactions",
    )
    op.drop_table("restaurant_interactions")
    op.drop_table("profiles")
