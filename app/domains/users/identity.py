"""요청자 식별

Bearer 토큰을 인증 서버에 조회해 사용자 ID를 확인하고, 프로필에서
테스터 여부를 읽어 CallerIdentity를 만듭니다.
"""

from abc import ABC, abstractmethod
from typing import Optional

import httpx

from app.core.config import Settings
from app.core.logging import get_logger
from app.domains.users.exceptions import IdentityResolutionError

logger = get_logger(__name__)


class IdentityResolver(ABC):
    """토큰 → 사용자 ID 확인 인터페이스"""

    @abstractmethod
    async def resolve(self, credential: str) -> Optional[str]:
        """토큰에 해당하는 사용자 ID를 반환합니다.

        Args:
            credential: Bearer 토큰 (``Bearer `` 접두사 제거된 값)

        Returns:
            사용자 ID 또는 None (익명)

        Raises:
            IdentityResolutionError: 토큰이 유효하지 않거나 조회에 실패한 경우
        """
        raise NotImplementedError


class AuthServerIdentityResolver(IdentityResolver):
    """인증 서버 ``GET /auth/v1/user`` 조회 구현"""

    def __init__(
        self,
        base_url: str,
        api_key: str = "",
        timeout: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "AuthServerIdentityResolver":
        return cls(
            base_url=settings.auth_base_url,
            api_key=settings.auth_api_key,
            timeout=settings.auth_timeout_seconds,
        )

    async def resolve(self, credential: str) -> Optional[str]:
        headers = {"Authorization": f"Bearer {credential}"}
        if self.api_key:
            headers["apikey"] = self.api_key

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.get(
                    f"{self.base_url}/auth/v1/user", headers=headers
                )
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            raise IdentityResolutionError(
                f"auth server rejected token: HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise IdentityResolutionError(
                f"auth server request failed: {e}"
            ) from e
        except ValueError as e:
            raise IdentityResolutionError("auth server returned invalid JSON") from e

        user_id = data.get("id") if isinstance(data, dict) else None
        if not user_id:
            return None
        return str(user_id)
