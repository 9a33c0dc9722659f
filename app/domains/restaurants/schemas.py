"""Restaurants 도메인 스키마 정의

응답 키는 모바일 클라이언트와 맞추기 위해 camelCase를 사용합니다.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.core.schemas import CamelSchema
from app.domains.restaurants.types import (
    FeedPage,
    InteractionAction,
    Restaurant,
)


class Coordinates(BaseModel):
    """요청 좌표"""

    lat: float = Field(..., ge=-90, le=90, allow_inf_nan=False)
    lng: float = Field(..., ge=-180, le=180, allow_inf_nan=False)


class FeedRequest(BaseModel):
    """피드 조회 요청 스키마

    ``lat``/``lng`` 누락이나 범위 위반은 서비스에서 400으로 거부합니다.
    """

    lat: Optional[float] = Field(default=None, allow_inf_nan=False)
    lng: Optional[float] = Field(default=None, allow_inf_nan=False)
    radius: Optional[float] = Field(
        default=None,
        allow_inf_nan=False,
        description="검색 반경 (미터, [100, 50000]으로 제한)",
    )
    page_token: Optional[str] = Field(
        default=None, alias="pageToken", description="다음 페이지 토큰"
    )
    user_location: Optional[Coordinates] = Field(
        default=None,
        alias="userLocation",
        description="거리 계산 기준 위치 (없으면 검색 위치 사용)",
    )

    model_config = ConfigDict(populate_by_name=True)


class ScoreDiagnostics(CamelSchema):
    """랭킹 진단 정보 (테스터 전용)"""

    score: float
    base: float
    interaction_delta: float
    time_bonus: float
    action: Optional[str] = None


class RestaurantResponse(CamelSchema):
    """식당 응답 스키마"""

    id: str
    name: str
    cuisine: str
    rating: float
    address: str
    user_rating_count: int
    photos: list[str] = Field(default_factory=list)
    distance_meters: Optional[float] = None
    price_level: Optional[str] = None
    open_now: Optional[bool] = None
    debug: Optional[ScoreDiagnostics] = None

    @classmethod
    def from_restaurant(cls, restaurant: Restaurant) -> "RestaurantResponse":
        breakdown = restaurant.breakdown
        return cls(
            id=restaurant.id,
            name=restaurant.name,
            cuisine=restaurant.cuisine,
            rating=restaurant.rating,
            address=restaurant.address,
            user_rating_count=restaurant.user_rating_count,
            photos=list(restaurant.photos),
            distance_meters=(
                round(restaurant.distance_m)
                if restaurant.distance_m is not None
                else None
            ),
            price_level=restaurant.price_level,
            open_now=restaurant.open_now,
            debug=(
                ScoreDiagnostics(
                    score=breakdown.score,
                    base=breakdown.base,
                    interaction_delta=breakdown.interaction_delta,
                    time_bonus=breakdown.time_bonus,
                    action=breakdown.action,
                )
                if breakdown is not None
                else None
            ),
        )


class FeedResponse(CamelSchema):
    """피드 응답 스키마"""

    restaurants: list[RestaurantResponse] = Field(default_factory=list)
    next_page_token: Optional[str] = None

    @classmethod
    def from_page(cls, page: FeedPage) -> "FeedResponse":
        return cls(
            restaurants=[
                RestaurantResponse.from_restaurant(r) for r in page.restaurants
            ],
            next_page_token=page.next_page_token,
        )


class InteractionCreate(BaseModel):
    """상호작용 기록 요청 스키마"""

    place_id: str = Field(
        ..., min_length=1, max_length=255, alias="placeId"
    )
    action: InteractionAction
    time_spent_ms: int = Field(default=0, ge=0, alias="timeSpentMs")

    model_config = ConfigDict(populate_by_name=True)


class InteractionResponse(CamelSchema):
    """상호작용 기록 응답 스키마"""

    id: str
    place_id: str
    action: str
    time_spent_ms: int
