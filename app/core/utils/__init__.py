"""유틸리티 모듈"""

from app.core.utils.datetime import UTC, now_utc, to_utc
from app.core.utils.geo import (
    EARTH_RADIUS_M,
    distance_or_none,
    haversine_distance_m,
    is_valid_coordinate,
)
from app.core.utils.time import measure_time

__all__ = [
    # datetime
    "UTC",
    "now_utc",
    "to_utc",
    # geo
    "EARTH_RADIUS_M",
    "haversine_distance_m",
    "distance_or_none",
    "is_valid_coordinate",
    # time measurement
    "measure_time",
]
