"""피드 조립 테스트"""

import pytest

from app.domains.restaurants.assembler import (
    FeedAssembler,
    FeedConfig,
    normalize_page_token,
)
from app.domains.restaurants.types import GeoPoint, PlacesPage


@pytest.fixture
def assembler():
    return FeedAssembler(FeedConfig())


class TestClampRadius:
    """검색 반경 제한 테스트"""

    def test_default_when_missing(self, assembler):
        assert assembler.clamp_radius(None) == 3000.0

    @pytest.mark.parametrize(
        "requested,expected",
        [(10, 100.0), (100, 100), (2500, 2500), (50000, 50000), (999999, 50000.0)],
    )
    def test_clamped_to_bounds(self, assembler, requested, expected):
        assert assembler.clamp_radius(requested) == expected


class TestNormalizePageToken:
    """페이지 토큰 전달 테스트"""

    @pytest.mark.parametrize("token", [None, "", "   "])
    def test_blank_is_none(self, token):
        assert normalize_page_token(token) is None

    def test_passthrough(self):
        assert normalize_page_token("opaque-token==") == "opaque-token=="


class TestAssemble:
    """assemble 테스트"""

    def test_anonymous_feed_sorted_by_rating(self, assembler, sample_places_page):
        """개인화 없이 평점 순 정렬, 이름 없는 장소 제외"""
        page = assembler.assemble(sample_places_page)

        assert [r.id for r in page.restaurants] == ["bbb", "aaa"]
        assert page.next_page_token == "next-token"
        assert page.has_more

    def test_breakdown_stripped_without_diagnostics(
        self, assembler, sample_places_page
    ):
        """진단 모드가 아니면 점수 구성 요소 제거"""
        page = assembler.assemble(sample_places_page)

        assert all(r.breakdown is None for r in page.restaurants)

    def test_diagnostics_keep_breakdown(self, assembler, sample_places_page):
        """진단 모드면 점수 구성 요소 유지"""
        page = assembler.assemble(sample_places_page, include_diagnostics=True)

        scores = [r.breakdown.score for r in page.restaurants]
        assert scores == [90.0, 80.0]

    def test_like_outranks_higher_rating(
        self, assembler, sample_places_page, event_factory
    ):
        """like 신호가 평점 차이를 뒤집음"""
        events = [event_factory("aaa", action="like")]

        page = assembler.assemble(sample_places_page, events=events)

        assert [r.id for r in page.restaurants] == ["aaa", "bbb"]

    def test_latest_unlike_demotes(
        self, assembler, sample_places_page, event_factory
    ):
        """예전 like 이후의 unlike가 우선"""
        events = [
            event_factory("bbb", action="like", minutes_ago=60),
            event_factory("bbb", action="unlike", minutes_ago=1),
        ]

        page = assembler.assemble(
            sample_places_page, events=events, include_diagnostics=True
        )

        bravo = next(r for r in page.restaurants if r.id == "bbb")
        assert bravo.breakdown.score == 90.0 - 30.0
        assert [r.id for r in page.restaurants] == ["aaa", "bbb"]

    def test_ties_keep_provider_order(self, assembler, raw_place_factory):
        """동점이면 공급자 순서 유지"""
        page = assembler.assemble(
            PlacesPage(
                places=[
                    raw_place_factory("places/z", name="Zulu", rating=4.0),
                    raw_place_factory("places/y", name="Yankee", rating=4.0),
                    raw_place_factory("places/x", name="Xray", rating=4.0),
                ]
            )
        )

        assert [r.id for r in page.restaurants] == ["z", "y", "x"]

    def test_distance_from_origin(self, assembler, raw_place_factory):
        """기준 좌표가 있으면 거리 계산"""
        page = assembler.assemble(
            PlacesPage(
                places=[
                    raw_place_factory(
                        "places/a", name="A", location=GeoPoint(0.0, 1.0)
                    ),
                    raw_place_factory("places/b", name="B"),
                ]
            ),
            distance_origin=GeoPoint(0.0, 0.0),
        )

        distances = {r.id: r.distance_m for r in page.restaurants}
        assert distances["a"] == pytest.approx(111_195, abs=1)
        assert distances["b"] is None

    def test_empty_page(self, assembler):
        """빈 응답"""
        page = assembler.assemble(PlacesPage(places=[], next_page_token=" "))

        assert page.restaurants == []
        assert page.next_page_token is None
        assert not page.has_more

    def test_token_without_places_still_has_more(self, assembler):
        """목록이 비어도 토큰이 있으면 다음 페이지 있음"""
        page = assembler.assemble(PlacesPage(places=[], next_page_token="tok"))

        assert page.has_more

    def test_events_for_unknown_places_ignored(
        self, assembler, sample_places_page, event_factory
    ):
        """페이지에 없는 장소의 이벤트는 무시"""
        page = assembler.assemble(
            sample_places_page,
            events=[event_factory("zzz", action="like")],
            include_diagnostics=True,
        )

        assert all(r.breakdown.action is None for r in page.restaurants)

    def test_input_order_does_not_change_ranking(
        self, assembler, raw_place_factory
    ):
        """점수가 다르면 입력 순서와 무관하게 같은 결과"""
        places = [
            raw_place_factory("places/a", name="A", rating=3.1),
            raw_place_factory("places/b", name="B", rating=4.9),
            raw_place_factory("places/c", name="C", rating=4.2),
            raw_place_factory("places/d", name=None, rating=5.0),
        ]

        forward = assembler.assemble(PlacesPage(places=places))
        backward = assembler.assemble(PlacesPage(places=list(reversed(places))))

        assert [r.id for r in forward.restaurants] == ["b", "c", "a"]
        assert [r.id for r in backward.restaurants] == ["b", "c", "a"]

    def test_duplicate_place_ids_collapse(self, assembler, raw_place_factory):
        """접두사 유무와 관계없이 같은 장소는 첫 레코드만 사용"""
        page = assembler.assemble(
            PlacesPage(
                places=[
                    raw_place_factory("places/X", name="First", rating=4.0),
                    raw_place_factory("X", name="Second", rating=3.0),
                    raw_place_factory("places/X", name="Third", rating=5.0),
                ]
            )
        )

        assert [r.id for r in page.restaurants] == ["X"]
        assert page.restaurants[0].name == "First"

    def test_duplicates_do_not_shift_ranking(self, assembler, raw_place_factory):
        """뒤에 오는 중복 레코드의 높은 평점은 무시"""
        page = assembler.assemble(
            PlacesPage(
                places=[
                    raw_place_factory("places/a", name="A", rating=3.0),
                    raw_place_factory("places/b", name="B", rating=4.0),
                    raw_place_factory("a", name="A again", rating=5.0),
                ]
            )
        )

        ids = [r.id for r in page.restaurants]
        assert ids == ["b", "a"]
        assert len(ids) == len(set(ids))

    def test_prefixed_event_id_personalizes(
        self, assembler, sample_places_page, event_factory
    ):
        """이벤트의 장소 ID에 접두사가 있어도 같은 장소로 매칭"""
        page = assembler.assemble(
            sample_places_page,
            events=[event_factory("places/aaa", action="like")],
            include_diagnostics=True,
        )

        alpha = next(r for r in page.restaurants if r.id == "aaa")
        assert alpha.breakdown.action == "like"
        assert [r.id for r in page.restaurants] == ["aaa", "bbb"]
