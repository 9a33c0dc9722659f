"""식당 피드 도메인 타입 정의

외부 Places 응답(RawPlace)과 사용자 상호작용 로그(InteractionEvent)에서
정렬된 피드 페이지(FeedPage)를 만들기까지 사용하는 값 객체들입니다.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional


class InteractionAction(str, Enum):
    """사용자 상호작용 종류"""

    LIKE = "like"
    SKIP = "skip"
    UNLIKE = "unlike"


@dataclass(frozen=True)
class GeoPoint:
    """위도/경도 좌표 (단위: 도)"""

    latitude: float
    longitude: float

    @classmethod
    def from_api(cls, data: Any) -> Optional["GeoPoint"]:
        """Places API ``location`` 객체 파싱 (누락/손상 시 None)"""
        if not isinstance(data, dict):
            return None
        lat = data.get("latitude")
        lng = data.get("longitude")
        if not _is_number(lat) or not _is_number(lng):
            return None
        return cls(latitude=float(lat), longitude=float(lng))


@dataclass(frozen=True)
class RawPhoto:
    """Places API 사진 항목 (``places/<id>/photos/<photo-id>`` 리소스 이름)"""

    name: Optional[str] = None


@dataclass(frozen=True)
class RawPlace:
    """Places API가 반환한 원본 장소 레코드

    Attributes:
        id: 장소 ID (``places/`` 접두사가 붙어 있을 수 있음)
        display_name: 표시 이름
        formatted_address: 주소
        rating: 평점 (0~5)
        user_rating_count: 리뷰 수
        primary_type: 대표 타입 태그 (예: ``korean_restaurant``)
        types: 보조 타입 태그 목록
        photos: 사진 항목 목록
        location: 좌표
        price_level: 가격대 enum 문자열 (예: ``PRICE_LEVEL_MODERATE``)
        open_now: 현재 영업 여부
    """

    id: str
    display_name: Optional[str] = None
    formatted_address: Optional[str] = None
    rating: Optional[float] = None
    user_rating_count: Optional[int] = None
    primary_type: Optional[str] = None
    types: tuple[str, ...] = ()
    photos: tuple[RawPhoto, ...] = ()
    location: Optional[GeoPoint] = None
    price_level: Optional[str] = None
    open_now: Optional[bool] = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "RawPlace":
        """Places API JSON 레코드를 RawPlace로 변환

        타입이 맞지 않는 필드는 누락된 것으로 취급합니다.
        """
        display_name = data.get("displayName")
        name_text = (
            display_name.get("text") if isinstance(display_name, dict) else None
        )
        opening_hours = data.get("currentOpeningHours")
        open_now = (
            opening_hours.get("openNow")
            if isinstance(opening_hours, dict)
            else None
        )
        rating = data.get("rating")
        rating_count = data.get("userRatingCount")

        return cls(
            id=str(data.get("id") or ""),
            display_name=name_text if isinstance(name_text, str) else None,
            formatted_address=_str_or_none(data.get("formattedAddress")),
            rating=float(rating) if _is_number(rating) else None,
            user_rating_count=(
                int(rating_count) if _is_number(rating_count) else None
            ),
            primary_type=_str_or_none(data.get("primaryType")),
            types=tuple(
                t for t in data.get("types") or [] if isinstance(t, str)
            ),
            photos=tuple(
                RawPhoto(name=_str_or_none(p.get("name")))
                for p in data.get("photos") or []
                if isinstance(p, dict)
            ),
            location=GeoPoint.from_api(data.get("location")),
            price_level=_str_or_none(data.get("priceLevel")),
            open_now=open_now if isinstance(open_now, bool) else None,
        )


@dataclass(frozen=True)
class PlacesPage:
    """Places 공급자 응답 한 페이지"""

    places: list[RawPlace] = field(default_factory=list)
    next_page_token: Optional[str] = None


@dataclass(frozen=True)
class InteractionEvent:
    """사용자 상호작용 이벤트 (append-only 로그의 한 행)"""

    place_id: str
    action: str
    time_spent_ms: int
    created_at: datetime


@dataclass(frozen=True)
class InteractionSignal:
    """장소별 최신 상호작용 신호"""

    action: str
    time_spent_ms: int


@dataclass(frozen=True)
class ScoreBreakdown:
    """랭킹 점수와 구성 요소 (진단용)"""

    score: float
    base: float
    interaction_delta: float = 0.0
    time_bonus: float = 0.0
    action: Optional[str] = None


@dataclass
class Restaurant:
    """정규화된 식당 레코드

    ``breakdown`` 은 내부 랭킹 키이며, 진단 모드가 아니면 응답에 포함되지
    않습니다.
    """

    id: str
    name: str
    cuisine: str
    rating: float
    address: str
    user_rating_count: int
    photos: list[str] = field(default_factory=list)
    distance_m: Optional[float] = None
    price_level: Optional[str] = None
    open_now: Optional[bool] = None
    breakdown: Optional[ScoreBreakdown] = None

    @property
    def score(self) -> float:
        return self.breakdown.score if self.breakdown else 0.0


@dataclass(frozen=True)
class FeedPage:
    """정렬된 식당 목록 + 다음 페이지 토큰"""

    restaurants: list[Restaurant] = field(default_factory=list)
    next_page_token: Optional[str] = None

    @property
    def has_more(self) -> bool:
        return self.next_page_token is not None


def _is_number(value: Any) -> bool:
    # bool은 int의 하위 타입이므로 제외
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _str_or_none(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None
