"""Users 도메인 라우터

인증 서버 → 프로필 동기화 API 엔드포인트입니다.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.dependencies import verify_internal_api_key
from app.core.schemas import APIResponse, create_response
from app.domains.users.schemas import ProfileResponse, ProfileSync
from app.domains.users.service import UserService

router = APIRouter()


def get_user_service(session: AsyncSession = Depends(get_db)) -> UserService:
    """UserService 의존성 (프로필 관리 전용, 토큰 확인 없음)"""
    return UserService(session)


@router.get(
    "/{user_id}",
    response_model=APIResponse[ProfileResponse],
    dependencies=[Depends(verify_internal_api_key)],
)
async def get_profile(
    user_id: str,
    service: UserService = Depends(get_user_service),
):
    """프로필 조회"""
    profile = await service.get_profile(user_id)
    return create_response(
        data=ProfileResponse.model_validate(profile),
        message="프로필을 조회했습니다.",
    )


@router.post(
    "",
    response_model=APIResponse[ProfileResponse],
    status_code=201,
    dependencies=[Depends(verify_internal_api_key)],
)
async def upsert_profile(
    profile_data: ProfileSync,
    service: UserService = Depends(get_user_service),
):
    """프로필 동기화 (Upsert)"""
    profile = await service.upsert_profile(profile_data)
    return create_response(
        data=ProfileResponse.model_validate(profile),
        message="프로필이 동기화되었습니다.",
    )
