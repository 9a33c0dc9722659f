"""Restaurants 도메인 라우터

개인화 식당 피드 조회와 상호작용 기록 API 엔드포인트입니다.
"""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.database import get_db
from app.core.dependencies import get_bearer_credential
from app.core.exceptions import ErrorCode, UnauthorizedException
from app.core.logging import get_logger
from app.core.schemas import APIResponse, create_response
from app.domains.restaurants.assembler import FeedAssembler, FeedConfig
from app.domains.restaurants.providers import GooglePlacesProvider, PlacesProvider
from app.domains.restaurants.schemas import (
    FeedRequest,
    FeedResponse,
    InteractionCreate,
    InteractionResponse,
)
from app.domains.restaurants.service import RestaurantFeedService
from app.domains.users.exceptions import IdentityResolutionError
from app.domains.users.identity import AuthServerIdentityResolver, IdentityResolver
from app.domains.users.service import UserService

logger = get_logger(__name__)

router = APIRouter()


def get_places_provider() -> PlacesProvider:
    """Places 공급자 의존성"""
    return GooglePlacesProvider.from_settings(settings)


def get_identity_resolver() -> IdentityResolver:
    """요청자 식별 의존성"""
    return AuthServerIdentityResolver.from_settings(settings)


def get_feed_assembler() -> FeedAssembler:
    """FeedAssembler 의존성"""
    return FeedAssembler(FeedConfig.from_settings(settings))


def get_restaurant_service(
    session: AsyncSession = Depends(get_db),
    provider: PlacesProvider = Depends(get_places_provider),
    assembler: FeedAssembler = Depends(get_feed_assembler),
    identity_resolver: IdentityResolver = Depends(get_identity_resolver),
) -> RestaurantFeedService:
    """RestaurantFeedService 의존성"""
    return RestaurantFeedService(
        session=session,
        provider=provider,
        assembler=assembler,
        user_service=UserService(session, identity_resolver=identity_resolver),
    )


@router.post("/feed", response_model=APIResponse[FeedResponse])
async def get_feed(
    request: FeedRequest,
    credential: Optional[str] = Depends(get_bearer_credential),
    service: RestaurantFeedService = Depends(get_restaurant_service),
):
    """개인화 식당 피드 조회

    - Authorization 헤더가 없으면 익명 피드 (개인화 없음)
    - 테스터 계정이면 각 식당에 ``debug`` 점수 정보 포함
    """
    page = await service.get_feed(request, credential)
    return create_response(
        data=FeedResponse.from_page(page),
        message="피드를 조회했습니다.",
    )


@router.post(
    "/interactions",
    response_model=APIResponse[InteractionResponse],
    status_code=201,
)
async def record_interaction(
    data: InteractionCreate,
    credential: Optional[str] = Depends(get_bearer_credential),
    service: RestaurantFeedService = Depends(get_restaurant_service),
):
    """상호작용 기록 (like / skip / unlike)"""
    try:
        caller = await service.user_service.resolve_caller(credential)
    except IdentityResolutionError as e:
        logger.warning(f"Identity lookup failed: {e}")
        caller = None

    if caller is None:
        raise UnauthorizedException(
            message="로그인이 필요합니다.",
            error_code=ErrorCode.INVALID_TOKEN,
        )

    interaction = await service.record_interaction(caller, data)
    return create_response(
        data=InteractionResponse.model_validate(interaction),
        message="상호작용이 기록되었습니다.",
    )
