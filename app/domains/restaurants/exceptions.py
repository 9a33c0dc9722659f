"""Restaurants 도메인 예외 정의"""

from enum import Enum
from typing import Optional

from app.core.exceptions import (
    BadGatewayException,
    BadRequestException,
    InternalServerException,
)


class RestaurantErrorCode(str, Enum):
    """식당 피드 도메인 에러 코드"""

    INVALID_ORIGIN = "INVALID_ORIGIN"
    PLACES_FETCH_FAILED = "PLACES_FETCH_FAILED"
    PLACES_PROVIDER_NOT_CONFIGURED = "PLACES_PROVIDER_NOT_CONFIGURED"


class InvalidOriginException(BadRequestException):
    """검색 기준 좌표가 없거나 범위를 벗어난 경우

    Places API 호출 전에 거부합니다.
    """

    def __init__(
        self,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
    ):
        super().__init__(
            message="유효한 검색 위치(lat, lng)가 필요합니다.",
            error_code=RestaurantErrorCode.INVALID_ORIGIN,
            detail={"lat": latitude, "lng": longitude},
        )


class PlacesFetchFailedException(BadGatewayException):
    """Places API 호출 실패 또는 비정상 응답

    부분 결과는 반환하지 않습니다.
    """

    def __init__(
        self,
        reason: str = "upstream error",
        status_code: Optional[int] = None,
    ):
        detail: dict = {"reason": reason}
        if status_code is not None:
            detail["status_code"] = status_code
        super().__init__(
            message="주변 식당 정보를 가져오지 못했습니다.",
            error_code=RestaurantErrorCode.PLACES_FETCH_FAILED,
            detail=detail,
        )


class PlacesProviderNotConfiguredException(InternalServerException):
    """Places API 키가 설정되지 않은 경우"""

    def __init__(self):
        super().__init__(
            message="Places API 키가 설정되지 않았습니다.",
            error_code=RestaurantErrorCode.PLACES_PROVIDER_NOT_CONFIGURED,
        )
