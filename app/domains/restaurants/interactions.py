"""상호작용 집계

사용자의 상호작용 로그를 장소별 "가장 최근 신호" 하나로 축약합니다.
"""

from typing import Iterable, Optional

from app.core.utils.datetime import to_utc
from app.domains.restaurants.normalizer import canonical_place_id
from app.domains.restaurants.types import InteractionEvent, InteractionSignal


def aggregate_interactions(
    events: Optional[Iterable[InteractionEvent]],
) -> dict[str, InteractionSignal]:
    """장소 ID → 최신 상호작용 신호 매핑 생성

    저장소의 정렬 보장 여부와 관계없이 ``created_at`` 내림차순으로 먼저
    정렬한 뒤, 장소별로 처음 만난 이벤트만 사용합니다. 동일 시각의
    이벤트는 입력 순서를 유지합니다 (stable sort). 장소 ID는 ``places/``
    접두사를 제거한 값으로 맞춥니다.

    Args:
        events: 상호작용 이벤트 목록 (식별 정보가 없으면 None)

    Returns:
        dict[str, InteractionSignal]: 장소별 최신 신호 (이벤트가 없으면 빈 dict)
    """
    if not events:
        return {}

    ordered = sorted(events, key=lambda e: to_utc(e.created_at), reverse=True)

    signals: dict[str, InteractionSignal] = {}
    for event in ordered:
        place_id = canonical_place_id(event.place_id)
        if place_id in signals:
            continue
        signals[place_id] = InteractionSignal(
            action=event.action,
            time_spent_ms=event.time_spent_ms,
        )
    return signals
