"""지리 좌표 유틸리티"""

import math
from typing import Optional, Protocol

# 지구 평균 반지름 (미터)
EARTH_RADIUS_M = 6_371_000.0


class Coordinate(Protocol):
    """위도/경도를 가진 객체 (단위: 도)"""

    @property
    def latitude(self) -> float: ...

    @property
    def longitude(self) -> float: ...


def haversine_distance_m(a: Coordinate, b: Coordinate) -> float:
    """두 좌표 사이의 대원 거리 (haversine 공식)

    Args:
        a: 시작 좌표
        b: 도착 좌표

    Returns:
        float: 거리 (미터)
    """
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    delta_lat = math.radians(b.latitude - a.latitude)
    delta_lng = math.radians(b.longitude - a.longitude)

    h = (
        math.sin(delta_lat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(delta_lng / 2) ** 2
    )
    return 2 * EARTH_RADIUS_M * math.asin(min(1.0, math.sqrt(h)))


def distance_or_none(
    a: Optional[Coordinate], b: Optional[Coordinate]
) -> Optional[float]:
    """어느 한쪽 좌표라도 없으면 None (거리 미상)"""
    if a is None or b is None:
        return None
    return haversine_distance_m(a, b)


def is_valid_coordinate(latitude: float, longitude: float) -> bool:
    """위도 [-90, 90], 경도 [-180, 180] 범위의 유한한 값인지 검사"""
    if not (math.isfinite(latitude) and math.isfinite(longitude)):
        return False
    return -90.0 <= latitude <= 90.0 and -180.0 <= longitude <= 180.0
