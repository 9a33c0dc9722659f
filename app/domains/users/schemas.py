"""Users 도메인 스키마 정의"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ProfileSync(BaseModel):
    """프로필 동기화 요청 스키마

    인증 서버의 가입 이벤트에서 호출됩니다.
    """

    id: str = Field(..., min_length=1, max_length=64, description="사용자 ID")
    full_name: Optional[str] = Field(default=None, max_length=255)
    is_tester: Optional[bool] = Field(
        default=None, description="지정하지 않으면 기존 값 유지 (신규는 False)"
    )


class ProfileResponse(BaseModel):
    """프로필 응답 스키마"""

    model_config = ConfigDict(from_attributes=True)

    id: str
    full_name: Optional[str] = None
    is_tester: bool
    created_at: datetime
    updated_at: Optional[datetime] = None
