"""장소 정규화

Places API 원본 레코드를 서비스의 표준 Restaurant 형태로 변환합니다.
"""

from typing import Iterable, Optional

from app.core.utils.geo import distance_or_none
from app.domains.restaurants.types import (
    GeoPoint,
    RawPhoto,
    RawPlace,
    Restaurant,
)

PLACE_RESOURCE_PREFIX = "places/"
PHOTO_SEGMENT = "/photos/"
UNKNOWN_NAME = "Unknown"
FALLBACK_CUISINE = "Restaurant"
CUISINE_KEYWORD = "restaurant"


def canonical_place_id(place_id: str) -> str:
    """``places/`` 리소스 접두사 제거 (없으면 그대로)"""
    if place_id.startswith(PLACE_RESOURCE_PREFIX):
        return place_id[len(PLACE_RESOURCE_PREFIX):]
    return place_id


def resolve_name(display_name: Optional[str]) -> str:
    """표시 이름 결정 (없거나 공백이면 UNKNOWN_NAME)"""
    if display_name is None or not display_name.strip():
        return UNKNOWN_NAME
    return display_name


def resolve_cuisine(primary_type: Optional[str], types: Iterable[str]) -> str:
    """요리 라벨 결정

    대표 타입 → ``restaurant`` 를 포함하는 첫 보조 타입 → 기본 라벨 순서로
    선택하고, 밑줄은 공백으로 바꿉니다.
    """
    if primary_type:
        return primary_type.replace("_", " ")
    for tag in types:
        if CUISINE_KEYWORD in tag:
            return tag.replace("_", " ")
    return FALLBACK_CUISINE


def extract_photo_ids(photos: Iterable[RawPhoto]) -> list[str]:
    """``places/<id>/photos/<photo-id>`` 형식에서 사진 ID만 추출

    형식이 맞지 않는 항목은 오류 없이 건너뜁니다.
    """
    photo_ids: list[str] = []
    for photo in photos:
        name = photo.name
        if not name or not name.startswith(PLACE_RESOURCE_PREFIX):
            continue
        if PHOTO_SEGMENT not in name:
            continue
        photo_id = name.split(PHOTO_SEGMENT, 1)[1]
        if photo_id:
            photo_ids.append(photo_id)
    return photo_ids


def normalize_place(
    raw: RawPlace, origin: Optional[GeoPoint] = None
) -> Restaurant:
    """RawPlace → Restaurant (점수 미포함)

    Args:
        raw: 원본 장소 레코드
        origin: 거리 계산 기준 좌표 (없으면 거리 미계산)

    Returns:
        Restaurant: 이름을 확인할 수 없으면 name이 UNKNOWN_NAME인 레코드
    """
    return Restaurant(
        id=canonical_place_id(raw.id),
        name=resolve_name(raw.display_name),
        cuisine=resolve_cuisine(raw.primary_type, raw.types),
        rating=raw.rating if raw.rating is not None else 0.0,
        address=raw.formatted_address or "",
        user_rating_count=raw.user_rating_count or 0,
        photos=extract_photo_ids(raw.photos),
        distance_m=distance_or_none(origin, raw.location),
        price_level=raw.price_level,
        open_now=raw.open_now,
    )


def is_resolvable(restaurant: Restaurant) -> bool:
    """이름이 확인된 레코드인지 여부"""
    return restaurant.name != UNKNOWN_NAME
