"""시간 유틸리티 테스트"""

import logging
import time
from datetime import datetime, timedelta, timezone

import pytest

from app.core.utils.datetime import UTC, now_utc, to_utc
from app.core.utils.time import measure_time


def test_measure_time_context_manager():
    """measure_time 컨텍스트 매니저 테스트"""
    with measure_time() as timer:
        # 초기값은 0
        assert timer["elapsed_ms"] == 0.0
        time.sleep(0.03)

    assert timer["elapsed_ms"] >= 30


def test_measure_time_with_exception():
    """예외 발생 시에도 시간이 측정되는지 테스트"""
    with pytest.raises(ValueError):
        with measure_time() as timer:
            time.sleep(0.02)
            raise ValueError("Test error")

    assert timer["elapsed_ms"] >= 20


def test_now_utc_is_aware():
    """now_utc는 UTC aware datetime"""
    assert now_utc().tzinfo is UTC


def test_to_utc_treats_naive_as_utc():
    """naive datetime은 UTC로 간주"""
    naive = datetime(2024, 1, 1, 12, 0, 0)
    assert to_utc(naive) == datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC)


def test_to_utc_converts_offset():
    """다른 타임존은 UTC로 변환"""
    kst = timezone(timedelta(hours=9))
    value = datetime(2024, 1, 1, 21, 0, 0, tzinfo=kst)
    assert to_utc(value) == datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC)


def test_measure_time_label_logs_debug(caplog):
    """label을 지정하면 DEBUG 로그 기록"""
    with caplog.at_level(logging.DEBUG, logger="app.core.utils.time"):
        with measure_time("places fetch"):
            pass

    assert any("places fetch took" in r.getMessage() for r in caplog.records)
