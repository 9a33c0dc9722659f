"""Places 공급자

주변 식당 원본 레코드를 가져오는 외부 데이터 소스 인터페이스와
Google Places API (New) 구현입니다. 랭킹 로직은 포함하지 않습니다.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

import httpx

from app.core.config import Settings
from app.core.logging import get_logger
from app.domains.restaurants.exceptions import (
    PlacesFetchFailedException,
    PlacesProviderNotConfiguredException,
)
from app.domains.restaurants.types import GeoPoint, PlacesPage, RawPlace

logger = get_logger(__name__)

SEARCH_NEARBY_FIELD_MASK = ",".join(
    [
        "places.id",
        "places.displayName",
        "places.formattedAddress",
        "places.rating",
        "places.userRatingCount",
        "places.primaryType",
        "places.types",
        "places.photos",
        "places.location",
        "places.priceLevel",
        "places.currentOpeningHours.openNow",
        "nextPageToken",
    ]
)


class PlacesProvider(ABC):
    """주변 장소 검색 인터페이스"""

    @abstractmethod
    async def search_nearby(
        self,
        origin: GeoPoint,
        radius_m: float,
        page_token: Optional[str] = None,
        max_results: int = 20,
    ) -> PlacesPage:
        """기준 좌표 주변의 식당을 검색합니다.

        Args:
            origin: 검색 중심 좌표
            radius_m: 검색 반경 (미터, 이미 제한된 값)
            page_token: 이전 응답의 다음 페이지 토큰
            max_results: 최대 결과 수

        Returns:
            PlacesPage: 원본 장소 목록 + 다음 페이지 토큰

        Raises:
            PlacesFetchFailedException: 호출 실패 또는 비정상 응답
        """
        raise NotImplementedError


class GooglePlacesProvider(PlacesProvider):
    """Google Places API (New) ``places:searchNearby`` 구현"""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://places.googleapis.com/v1",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "GooglePlacesProvider":
        return cls(
            api_key=settings.google_places_api_key,
            base_url=settings.places_base_url,
            timeout=settings.places_timeout_seconds,
        )

    def build_request_body(
        self,
        origin: GeoPoint,
        radius_m: float,
        page_token: Optional[str],
        max_results: int,
    ) -> dict[str, Any]:
        """searchNearby 요청 본문 생성"""
        body: dict[str, Any] = {
            "includedTypes": ["restaurant"],
            "maxResultCount": max_results,
            "locationRestriction": {
                "circle": {
                    "center": {
                        "latitude": origin.latitude,
                        "longitude": origin.longitude,
                    },
                    "radius": radius_m,
                },
            },
            "rankPreference": "POPULARITY",
        }
        if page_token:
            body["pageToken"] = page_token
        return body

    async def search_nearby(
        self,
        origin: GeoPoint,
        radius_m: float,
        page_token: Optional[str] = None,
        max_results: int = 20,
    ) -> PlacesPage:
        if not self.api_key:
            raise PlacesProviderNotConfiguredException()

        body = self.build_request_body(origin, radius_m, page_token, max_results)
        headers = {
            "Content-Type": "application/json",
            "X-Goog-Api-Key": self.api_key,
            "X-Goog-FieldMask": SEARCH_NEARBY_FIELD_MASK,
        }

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.post(
                    f"{self.base_url}/places:searchNearby",
                    json=body,
                    headers=headers,
                )
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                f"Places API error: HTTP {e.response.status_code} "
                f"{e.response.text[:500]}"
            )
            raise PlacesFetchFailedException(
                reason="non-success status",
                status_code=e.response.status_code,
            ) from e
        except httpx.TimeoutException as e:
            logger.error("Places API request timed out")
            raise PlacesFetchFailedException(reason="timeout") from e
        except httpx.HTTPError as e:
            logger.error(f"Places API request failed: {e}")
            raise PlacesFetchFailedException(reason="transport error") from e
        except ValueError as e:
            logger.error(f"Places API returned invalid JSON: {e}")
            raise PlacesFetchFailedException(reason="invalid response") from e

        if not isinstance(data, dict):
            raise PlacesFetchFailedException(reason="invalid response")

        places = [
            RawPlace.from_api(item)
            for item in data.get("places") or []
            if isinstance(item, dict)
        ]
        token = data.get("nextPageToken")
        logger.info(
            f"Fetched {len(places)} place(s) "
            f"(radius={radius_m:.0f}m, paged={'yes' if page_token else 'no'})"
        )
        return PlacesPage(
            places=places,
            next_page_token=token if isinstance(token, str) else None,
        )
