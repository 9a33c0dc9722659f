"""Restaurants 도메인 서비스

요청 1건에 대해 Places 검색과 개인화 정보(요청자 식별 → 상호작용 로그)를
동시에 조회한 뒤 FeedAssembler로 최종 페이지를 만듭니다.

- Places 호출 실패: 요청 전체 실패 (부분 결과 없음, 재시도 없음)
- 식별/로그 조회 실패: 개인화 없이 계속 진행
"""

import asyncio
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.logging import get_logger
from app.core.middlewares.context import get_request_id
from app.core.utils.geo import is_valid_coordinate
from app.core.utils.time import measure_time
from app.domains.restaurants.assembler import FeedAssembler, normalize_page_token
from app.domains.restaurants.exceptions import InvalidOriginException
from app.domains.restaurants.models import RestaurantInteraction
from app.domains.restaurants.normalizer import canonical_place_id
from app.domains.restaurants.providers import PlacesProvider
from app.domains.restaurants.repository import InteractionRepository
from app.domains.restaurants.schemas import FeedRequest, InteractionCreate
from app.domains.restaurants.types import (
    FeedPage,
    GeoPoint,
    InteractionEvent,
    PlacesPage,
)
from app.domains.users.exceptions import IdentityResolutionError
from app.domains.users.service import UserService
from app.domains.users.types import CallerIdentity

logger = get_logger(__name__)


@dataclass(frozen=True)
class Personalization:
    """요청자 식별 결과 + 상호작용 로그"""

    caller: Optional[CallerIdentity] = None
    events: Optional[list[InteractionEvent]] = None

    @property
    def include_diagnostics(self) -> bool:
        return bool(self.caller and self.caller.is_tester)


class RestaurantFeedService:
    """식당 피드 서비스"""

    def __init__(
        self,
        session: AsyncSession,
        provider: PlacesProvider,
        assembler: FeedAssembler,
        user_service: UserService,
    ):
        self.repository = InteractionRepository(session)
        self.provider = provider
        self.assembler = assembler
        self.user_service = user_service

    async def get_feed(
        self, request: FeedRequest, credential: Optional[str] = None
    ) -> FeedPage:
        """개인화된 식당 피드 조회

        Args:
            request: 피드 요청 (검색 위치, 반경, 페이지 토큰)
            credential: Bearer 토큰 (없으면 익명)

        Returns:
            FeedPage: 정렬된 식당 목록 + 다음 페이지 토큰

        Raises:
            InvalidOriginException: 검색 위치가 없거나 범위를 벗어난 경우
            PlacesFetchFailedException: Places 호출 실패
        """
        origin = self._validate_origin(request.lat, request.lng)
        radius_m = self.assembler.clamp_radius(request.radius)

        # 두 조회가 모두 끝난 뒤에 Places 실패를 전파 (세션 사용 중 롤백 방지)
        with measure_time("feed fetch") as timer:
            places_result, personalization_result = await asyncio.gather(
                self.provider.search_nearby(
                    origin,
                    radius_m,
                    page_token=normalize_page_token(request.page_token),
                    max_results=self.assembler.config.page_size,
                ),
                self._load_personalization(credential),
                return_exceptions=True,
            )
        if isinstance(places_result, BaseException):
            raise places_result
        if isinstance(personalization_result, BaseException):
            raise personalization_result
        places_page: PlacesPage = places_result
        personalization: Personalization = personalization_result

        distance_origin = origin
        if request.user_location is not None:
            distance_origin = GeoPoint(
                latitude=request.user_location.lat,
                longitude=request.user_location.lng,
            )

        page = self.assembler.assemble(
            places_page,
            events=personalization.events,
            distance_origin=distance_origin,
            include_diagnostics=personalization.include_diagnostics,
        )

        logger.info(
            "Feed assembled",
            extra={
                "request_id": get_request_id(),
                "places": len(places_page.places),
                "returned": len(page.restaurants),
                "personalized": personalization.events is not None,
                "has_more": page.has_more,
                "fetch_ms": round(timer["elapsed_ms"], 1),
            },
        )
        return page

    async def record_interaction(
        self, caller: CallerIdentity, data: InteractionCreate
    ) -> RestaurantInteraction:
        """상호작용 기록 (append-only)

        Args:
            caller: 식별된 요청자
            data: 상호작용 데이터

        Returns:
            생성된 상호작용 객체
        """
        interaction = await self.repository.create(
            user_id=caller.user_id,
            place_id=canonical_place_id(data.place_id),
            action=data.action.value,
            time_spent_ms=data.time_spent_ms,
        )
        logger.info(
            "Interaction recorded",
            extra={
                "request_id": get_request_id(),
                "user_id": caller.user_id,
                "place_id": interaction.place_id,
                "action": interaction.action,
            },
        )
        return interaction

    async def _load_personalization(
        self, credential: Optional[str]
    ) -> Personalization:
        """요청자 식별 + 상호작용 로그 조회 (실패 시 개인화 생략)"""
        try:
            caller = await self.user_service.resolve_caller(credential)
        except IdentityResolutionError as e:
            logger.warning(f"Identity lookup failed, skipping personalization: {e}")
            return Personalization()

        if caller is None:
            return Personalization()

        try:
            events = await self.repository.list_for_user(caller.user_id)
        except SQLAlchemyError:
            logger.warning(
                "Interaction log lookup failed, skipping personalization",
                exc_info=True,
            )
            await self.repository.session.rollback()
            return Personalization(caller=caller)

        return Personalization(caller=caller, events=events)

    @staticmethod
    def _validate_origin(
        latitude: Optional[float], longitude: Optional[float]
    ) -> GeoPoint:
        if latitude is None or longitude is None:
            raise InvalidOriginException(latitude, longitude)
        if not is_valid_coordinate(latitude, longitude):
            raise InvalidOriginException(latitude, longitude)
        return GeoPoint(latitude=latitude, longitude=longitude)
