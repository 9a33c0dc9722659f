"""랭킹 점수 계산

``score = rating * rating_weight`` 에 사용자의 최신 상호작용 신호를 더합니다.

- like: +like_bonus
- unlike: -unlike_penalty
- unlike가 아닌 경우: 조회 시간 보너스 min(ms / 1000, view_time_bonus_cap)
"""

from dataclasses import dataclass
from typing import Optional

from app.core.config import Settings
from app.domains.restaurants.types import (
    InteractionAction,
    InteractionSignal,
    ScoreBreakdown,
)


@dataclass(frozen=True)
class ScoringConfig:
    """점수 가중치 (제품 튜닝 값)"""

    rating_weight: float = 20.0
    like_bonus: float = 50.0
    unlike_penalty: float = 30.0
    view_time_bonus_cap: float = 10.0
    ms_per_bonus_point: float = 1000.0

    @classmethod
    def from_settings(cls, settings: Settings) -> "ScoringConfig":
        return cls(
            rating_weight=settings.score_rating_weight,
            like_bonus=settings.score_like_bonus,
            unlike_penalty=settings.score_unlike_penalty,
            view_time_bonus_cap=settings.score_view_time_bonus_cap,
        )


def score_restaurant(
    rating: float,
    signal: Optional[InteractionSignal],
    config: ScoringConfig,
) -> ScoreBreakdown:
    """평점과 상호작용 신호로 랭킹 점수 계산

    Args:
        rating: 평점 (없으면 0으로 정규화된 값)
        signal: 해당 장소의 최신 상호작용 신호 (없으면 None)
        config: 점수 가중치

    Returns:
        ScoreBreakdown: 최종 점수와 구성 요소
    """
    base = rating * config.rating_weight
    if signal is None:
        return ScoreBreakdown(score=base, base=base)

    delta = 0.0
    if signal.action == InteractionAction.LIKE.value:
        delta = config.like_bonus
    elif signal.action == InteractionAction.UNLIKE.value:
        delta = -config.unlike_penalty

    time_bonus = 0.0
    if signal.action != InteractionAction.UNLIKE.value:
        time_bonus = min(
            signal.time_spent_ms / config.ms_per_bonus_point,
            config.view_time_bonus_cap,
        )

    return ScoreBreakdown(
        score=base + delta + time_bonus,
        base=base,
        interaction_delta=delta,
        time_bonus=time_bonus,
        action=signal.action,
    )
