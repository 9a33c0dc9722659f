"""피드 조립

정규화 → 필터링(이름 없음, 중복 장소) → 점수 계산 → 정렬 → 페이지 토큰 전달을 순서대로 수행합니다.
설정은 FeedConfig로 명시적으로 주입받으며, 전역 상태를 읽지 않습니다.
"""

from dataclasses import dataclass, field, replace
from typing import Iterable, Optional

from app.core.config import Settings
from app.core.logging import get_logger
from app.domains.restaurants.interactions import aggregate_interactions
from app.domains.restaurants.normalizer import is_resolvable, normalize_place
from app.domains.restaurants.scoring import ScoringConfig, score_restaurant
from app.domains.restaurants.types import (
    FeedPage,
    GeoPoint,
    InteractionEvent,
    PlacesPage,
    Restaurant,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class FeedConfig:
    """피드 조립 설정"""

    scoring: ScoringConfig = field(default_factory=ScoringConfig)
    default_radius_m: float = 3000.0
    min_radius_m: float = 100.0
    max_radius_m: float = 50000.0
    page_size: int = 20

    @classmethod
    def from_settings(cls, settings: Settings) -> "FeedConfig":
        return cls(
            scoring=ScoringConfig.from_settings(settings),
            default_radius_m=settings.feed_default_radius_m,
            min_radius_m=settings.feed_min_radius_m,
            max_radius_m=settings.feed_max_radius_m,
            page_size=settings.feed_page_size,
        )


def normalize_page_token(token: Optional[str]) -> Optional[str]:
    """공백/빈 토큰은 None (다음 페이지 없음), 그 외는 그대로 전달"""
    if token is None or not token.strip():
        return None
    return token


class FeedAssembler:
    """Places 응답 + 상호작용 로그 → 정렬된 FeedPage"""

    def __init__(self, config: Optional[FeedConfig] = None):
        self.config = config or FeedConfig()

    def clamp_radius(self, radius_m: Optional[float]) -> float:
        """검색 반경을 [min_radius_m, max_radius_m] 범위로 제한

        Args:
            radius_m: 요청 반경 (None이면 기본 반경)

        Returns:
            float: 제한된 반경 (미터)
        """
        if radius_m is None:
            radius_m = self.config.default_radius_m
        return min(
            max(radius_m, self.config.min_radius_m), self.config.max_radius_m
        )

    def assemble(
        self,
        places_page: PlacesPage,
        events: Optional[Iterable[InteractionEvent]] = None,
        distance_origin: Optional[GeoPoint] = None,
        include_diagnostics: bool = False,
    ) -> FeedPage:
        """정렬된 피드 페이지 생성

        Args:
            places_page: Places 공급자 응답
            events: 요청자의 상호작용 로그 (식별 정보가 없으면 None)
            distance_origin: 거리 계산 기준 좌표
            include_diagnostics: True면 점수 구성 요소를 응답에 유지

        Returns:
            FeedPage: 점수 내림차순 식당 목록 + 다음 페이지 토큰
        """
        signals = aggregate_interactions(events)

        scored: list[Restaurant] = []
        seen: set[str] = set()
        dropped = 0
        duplicates = 0
        for raw in places_page.places:
            restaurant = normalize_place(raw, origin=distance_origin)
            if not is_resolvable(restaurant):
                dropped += 1
                continue
            # 같은 장소가 여러 번 오면 공급자 순서상 첫 레코드만 사용
            if restaurant.id in seen:
                duplicates += 1
                continue
            seen.add(restaurant.id)
            restaurant.breakdown = score_restaurant(
                restaurant.rating,
                signals.get(restaurant.id),
                self.config.scoring,
            )
            scored.append(restaurant)

        if dropped:
            logger.debug(f"Dropped {dropped} place(s) without a display name")
        if duplicates:
            logger.debug(f"Skipped {duplicates} duplicate place(s)")

        # sorted()는 stable이므로 동점은 공급자 순서를 유지
        ranked = sorted(scored, key=lambda r: r.score, reverse=True)
        if not include_diagnostics:
            ranked = [replace(r, breakdown=None) for r in ranked]

        return FeedPage(
            restaurants=ranked,
            next_page_token=normalize_page_token(places_page.next_page_token),
        )
