"""Config 설정 검증 테스트"""

import pytest
from pydantic import ValidationError

from app.core.config import Settings

VALID_INTERNAL_KEY = "valid-internal-api-key-with-32-chars"


class TestDevelopmentConfig:
    """개발 환경 설정 테스트"""

    def test_development_allows_default_keys(self):
        """개발 환경에서는 기본 키와 빈 Places 키 허용"""
        config = Settings(
            app_env="development",
            internal_api_key="your-internal-api-key-here",
            google_places_api_key="",
        )
        assert config.is_development
        assert config.google_places_api_key == ""

    def test_feed_defaults(self):
        """피드/점수 기본값"""
        config = Settings(app_env="development")

        assert config.feed_default_radius_m == 3000.0
        assert config.feed_min_radius_m == 100.0
        assert config.feed_max_radius_m == 50000.0
        assert config.score_rating_weight == 20.0
        assert config.score_like_bonus == 50.0
        assert config.score_unlike_penalty == 30.0
        assert config.score_view_time_bonus_cap == 10.0


class TestFeedConfigValidation:
    """피드 설정 검증 테스트"""

    def test_rejects_inverted_radius_bounds(self):
        """최소 반경이 최대 반경보다 크면 거부"""
        with pytest.raises(ValidationError) as exc_info:
            Settings(feed_min_radius_m=5000, feed_max_radius_m=1000)

        assert "FEED_MIN_RADIUS_M" in str(exc_info.value)

    def test_rejects_zero_page_size(self):
        """페이지 크기 0 거부"""
        with pytest.raises(ValidationError) as exc_info:
            Settings(feed_page_size=0)

        assert "FEED_PAGE_SIZE" in str(exc_info.value)


class TestProductionConfig:
    """프로덕션 환경 설정 검증 테스트"""

    def test_production_rejects_default_internal_api_key(self):
        """프로덕션에서 기본 Internal API Key 거부"""
        with pytest.raises(ValidationError) as exc_info:
            Settings(
                app_env="production",
                internal_api_key="your-internal-api-key-here",
                google_places_api_key="places-key",
            )

        assert "INTERNAL_API_KEY" in str(exc_info.value)

    def test_production_rejects_short_internal_api_key(self):
        """프로덕션에서 짧은 Internal API Key 거부"""
        with pytest.raises(ValidationError) as exc_info:
            Settings(
                app_env="production",
                internal_api_key="short-key",
                google_places_api_key="places-key",
            )

        assert "32 characters" in str(exc_info.value)

    def test_production_requires_places_api_key(self):
        """프로덕션에서 Places API 키 필수"""
        with pytest.raises(ValidationError) as exc_info:
            Settings(
                app_env="production",
                internal_api_key=VALID_INTERNAL_KEY,
                google_places_api_key="",
            )

        assert "GOOGLE_PLACES_API_KEY" in str(exc_info.value)

    def test_production_accepts_valid_settings(self):
        """유효한 프로덕션 설정"""
        config = Settings(
            app_env="production",
            internal_api_key=VALID_INTERNAL_KEY,
            google_places_api_key="places-key",
        )
        assert config.is_production
        assert not config.is_development


class TestCorsOrigins:
    """CORS 설정 파싱 테스트"""

    def test_parse_comma_separated(self):
        """쉼표 구분 문자열"""
        config = Settings(cors_origins="http://a.test, http://b.test")
        assert config.cors_origins == ["http://a.test", "http://b.test"]

    def test_parse_json_list(self):
        """JSON 배열 문자열"""
        config = Settings(cors_origins='["http://a.test"]')
        assert config.cors_origins == ["http://a.test"]
