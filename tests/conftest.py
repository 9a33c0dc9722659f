"""테스트 설정"""

from datetime import datetime, timedelta
from typing import Any, Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from app.core.config import settings
from app.core.database import Base, get_db
from app.core.utils.datetime import now_utc
from app.domains.restaurants.exceptions import PlacesFetchFailedException
from app.domains.restaurants.providers import PlacesProvider
from app.domains.restaurants.router import (
    get_identity_resolver,
    get_places_provider,
)
from app.domains.restaurants.types import (
    GeoPoint,
    InteractionEvent,
    PlacesPage,
    RawPhoto,
    RawPlace,
)
from app.domains.users.exceptions import IdentityResolutionError
from app.domains.users.identity import IdentityResolver
from app.main import app

TEST_DATABASE_URL = "sqlite+aiosqlite://"


class FakePlacesProvider(PlacesProvider):
    """고정 응답을 돌려주는 Places 공급자"""

    def __init__(self, page: Optional[PlacesPage] = None):
        self.page = page or PlacesPage()
        self.error: Optional[Exception] = None
        self.calls: list[dict[str, Any]] = []

    async def search_nearby(
        self,
        origin: GeoPoint,
        radius_m: float,
        page_token: Optional[str] = None,
        max_results: int = 20,
    ) -> PlacesPage:
        self.calls.append(
            {
                "origin": origin,
                "radius_m": radius_m,
                "page_token": page_token,
                "max_results": max_results,
            }
        )
        if self.error is not None:
            raise self.error
        return self.page

    def fail(self, reason: str = "timeout") -> None:
        self.error = PlacesFetchFailedException(reason=reason)


class FakeIdentityResolver(IdentityResolver):
    """토큰 → 사용자 ID 고정 매핑

    ``broken`` 토큰은 인증 서버 장애를 흉내 냅니다.
    """

    def __init__(self, tokens: Optional[dict[str, str]] = None):
        self.tokens = tokens or {}
        self.calls: list[str] = []

    async def resolve(self, credential: str) -> Optional[str]:
        self.calls.append(credential)
        if credential == "broken":
            raise IdentityResolutionError("auth server unavailable")
        return self.tokens.get(credential)


def make_raw_place(
    place_id: str,
    name: Optional[str] = "Test Place",
    rating: Optional[float] = 4.0,
    **kwargs: Any,
) -> RawPlace:
    """테스트용 RawPlace 생성"""
    kwargs.setdefault("formatted_address", f"{place_id} street")
    kwargs.setdefault("user_rating_count", 10)
    kwargs.setdefault("primary_type", "korean_restaurant")
    return RawPlace(
        id=place_id,
        display_name=name,
        rating=rating,
        **kwargs,
    )


def make_event(
    place_id: str,
    action: str = "like",
    time_spent_ms: int = 0,
    minutes_ago: int = 0,
    base: Optional[datetime] = None,
) -> InteractionEvent:
    """테스트용 InteractionEvent 생성 (base 기준 minutes_ago분 전)"""
    base = base or now_utc()
    return InteractionEvent(
        place_id=place_id,
        action=action,
        time_spent_ms=time_spent_ms,
        created_at=base - timedelta(minutes=minutes_ago),
    )


@pytest.fixture
def raw_place_factory():
    """RawPlace 팩토리"""
    return make_raw_place


@pytest.fixture
def event_factory():
    """InteractionEvent 팩토리"""
    return make_event


@pytest.fixture
def sample_places_page() -> PlacesPage:
    """정렬 검증용 Places 응답 (평점 순서와 공급자 순서가 다름)"""
    return PlacesPage(
        places=[
            make_raw_place(
                "places/aaa",
                name="Alpha Bistro",
                rating=4.0,
                location=GeoPoint(37.5665, 126.9780),
                photos=(RawPhoto(name="places/aaa/photos/p1"),),
                price_level="PRICE_LEVEL_MODERATE",
                open_now=True,
            ),
            make_raw_place(
                "places/bbb",
                name="Bravo Grill",
                rating=4.5,
                location=GeoPoint(37.5700, 126.9820),
            ),
            make_raw_place("places/ccc", name=None, rating=5.0),
        ],
        next_page_token="next-token",
    )


@pytest.fixture
def fake_places_provider(sample_places_page) -> FakePlacesProvider:
    """Fake Places 공급자"""
    return FakePlacesProvider(sample_places_page)


@pytest.fixture
def fake_identity_resolver() -> FakeIdentityResolver:
    """Fake 요청자 식별 (user-token → user-1, tester-token → tester-1)"""
    return FakeIdentityResolver(
        {"user-token": "user-1", "tester-token": "tester-1"}
    )


@pytest_asyncio.fixture
async def db_session():
    """테스트 데이터베이스 세션 (인메모리 SQLite)"""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session: async_sessionmaker[AsyncSession] = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()

    await engine.dispose()


# NOTE:
# pytest-asyncio는 테스트마다 독립적인 event loop를 생성하므로
# async fixture는 모두 function 스코프로 유지
@pytest_asyncio.fixture
async def client(db_session, fake_places_provider, fake_identity_resolver):
    """비동기 테스트 클라이언트 (테스트 DB + Fake 외부 서비스)"""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_places_provider] = lambda: fake_places_provider
    app.dependency_overrides[get_identity_resolver] = (
        lambda: fake_identity_resolver
    )

    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport, base_url="http://test"
    ) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def api_key_header():
    """Internal API Key 헤더"""
    return {"X-Internal-Api-Key": settings.internal_api_key}


@pytest.fixture
def user_auth_header():
    """일반 사용자 Bearer 헤더"""
    return {"Authorization": "Bearer user-token"}


@pytest.fixture
def tester_auth_header():
    """테스터 Bearer 헤더"""
    return {"Authorization": "Bearer tester-token"}
