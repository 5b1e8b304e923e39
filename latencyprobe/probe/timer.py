"""Wall-clock timing of a single call."""

from __future__ import annotations

import time
from typing import Callable, TypeVar

T = TypeVar("T")


def timed(fn: Callable[[], T], clock: Callable[[], float] = time.perf_counter) -> tuple[T, float]:
    """Call ``fn`` once and return ``(result, elapsed_ms)``.

    Exceptions raised by ``fn`` propagate unchanged.

    Args:
        fn: Zero-argument callable to time.
        clock: Monotonic clock returning seconds. Defaults to time.perf_counter.
    """
    t0 = clock()
    result = fn()
    elapsed_ms = (clock() - t0) * 1000
    return result, elapsed_ms
