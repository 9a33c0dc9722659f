"""Restaurants 도메인 모듈

주변 식당을 검색해 사용자 상호작용 이력으로 점수를 매긴 피드를 제공합니다.

구조:
    - types.py: 내부 데이터 타입 (RawPlace, Restaurant, FeedPage 등)
    - providers.py: Places 공급자 (Google Places API)
    - normalizer.py: 원본 장소 → Restaurant 정규화
    - interactions.py: 상호작용 로그 집계 (장소별 최신 이벤트)
    - scoring.py: 점수 계산
    - assembler.py: 정규화/점수/정렬/페이지 토큰 조립
    - models.py: SQLAlchemy 모델 정의 (RestaurantInteraction)
    - schemas.py: Pydantic 스키마
    - repository.py: 데이터 접근 계층
    - service.py: 비즈니스 로직
    - router.py: API 엔드포인트
    - exceptions.py: 도메인 예외
"""

from app.domains.restaurants.assembler import FeedAssembler, FeedConfig
from app.domains.restaurants.exceptions import (
    InvalidOriginException,
    PlacesFetchFailedException,
    PlacesProviderNotConfiguredException,
    RestaurantErrorCode,
)
from app.domains.restaurants.models import RestaurantInteraction
from app.domains.restaurants.providers import GooglePlacesProvider, PlacesProvider
from app.domains.restaurants.router import router
from app.domains.restaurants.scoring import ScoringConfig, score_restaurant
from app.domains.restaurants.service import RestaurantFeedService
from app.domains.restaurants.types import FeedPage, InteractionAction, Restaurant

__all__ = [
    "RestaurantInteraction",
    "RestaurantFeedService",
    "FeedAssembler",
    "FeedConfig",
    "ScoringConfig",
    "score_restaurant",
    "PlacesProvider",
    "GooglePlacesProvider",
    "FeedPage",
    "Restaurant",
    "InteractionAction",
    "router",
    "RestaurantErrorCode",
    "InvalidOriginException",
    "PlacesFetchFailedException",
    "PlacesProviderNotConfiguredException",
]
