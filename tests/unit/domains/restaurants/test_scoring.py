"""랭킹 점수 계산 테스트"""

import pytest

from app.domains.restaurants.scoring import ScoringConfig, score_restaurant
from app.domains.restaurants.types import InteractionSignal


@pytest.fixture
def config():
    return ScoringConfig()


class TestScoreRestaurant:
    """score_restaurant 테스트"""

    def test_no_signal_uses_rating_only(self, config):
        """상호작용이 없으면 평점 × 20"""
        breakdown = score_restaurant(4.5, None, config)

        assert breakdown.score == 90.0
        assert breakdown.base == 90.0
        assert breakdown.interaction_delta == 0.0
        assert breakdown.time_bonus == 0.0
        assert breakdown.action is None

    def test_missing_rating_scores_zero(self, config):
        """평점이 0이면 기본 점수 0"""
        assert score_restaurant(0.0, None, config).score == 0.0

    def test_like_adds_bonus_and_view_time(self, config):
        """like: +50 + 조회 시간 보너스"""
        breakdown = score_restaurant(
            4.0, InteractionSignal(action="like", time_spent_ms=2500), config
        )

        assert breakdown.interaction_delta == 50.0
        assert breakdown.time_bonus == 2.5
        assert breakdown.score == 80.0 + 50.0 + 2.5
        assert breakdown.action == "like"

    def test_skip_gets_view_time_only(self, config):
        """skip: 조회 시간 보너스만"""
        breakdown = score_restaurant(
            3.0, InteractionSignal(action="skip", time_spent_ms=4000), config
        )

        assert breakdown.interaction_delta == 0.0
        assert breakdown.score == 60.0 + 4.0

    def test_unlike_penalty_without_view_time(self, config):
        """unlike: -30, 조회 시간 보너스 없음"""
        breakdown = score_restaurant(
            4.0, InteractionSignal(action="unlike", time_spent_ms=9000), config
        )

        assert breakdown.interaction_delta == -30.0
        assert breakdown.time_bonus == 0.0
        assert breakdown.score == 50.0

    def test_view_time_bonus_is_capped(self, config):
        """조회 시간 보너스 상한 10"""
        breakdown = score_restaurant(
            4.0, InteractionSignal(action="like", time_spent_ms=600_000), config
        )

        assert breakdown.time_bonus == 10.0
        assert breakdown.score == 140.0

    def test_custom_weights(self):
        """가중치 설정 반영"""
        config = ScoringConfig(rating_weight=10, like_bonus=5, view_time_bonus_cap=1)
        breakdown = score_restaurant(
            4.0, InteractionSignal(action="like", time_spent_ms=5000), config
        )

        assert breakdown.score == 40.0 + 5.0 + 1.0

    @pytest.mark.parametrize(
        "action,expected",
        [(None, 80.0), ("like", 140.0), ("skip", 90.0), ("unlike", 50.0)],
    )
    def test_rating_four_with_long_view(self, config, action, expected):
        """평점 4.0, 조회 12초"""
        signal = (
            InteractionSignal(action=action, time_spent_ms=12000) if action else None
        )

        assert score_restaurant(4.0, signal, config).score == expected
