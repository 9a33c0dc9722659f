"""시간 측정 유틸리티"""

import logging
import time
from contextlib import contextmanager
from typing import Generator, Optional

_logger = logging.getLogger(__name__)


@contextmanager
def measure_time(
    label: Optional[str] = None,
) -> Generator[dict[str, float], None, None]:
    """처리 시간을 측정하는 컨텍스트 매니저

    ``label`` 을 지정하면 종료 시 DEBUG 로그로 경과 시간을 남깁니다.

    Usage:
        with measure_time("places fetch") as timer:
            ...
        elapsed_ms = timer["elapsed_ms"]
    """
    timer = {"elapsed_ms": 0.0}
    start = time.perf_counter()
    try:
        yield timer
    finally:
        timer["elapsed_ms"] = (time.perf_counter() - start) * 1000
        if label:
            _logger.debug(f"{label} took {timer['elapsed_ms']:.1f}ms")
