"""Tests for the call timer."""

import pytest

from latencyprobe.probe.timer import timed


def _fake_clock(*readings: float):
    it = iter(readings)
    return lambda: next(it)


def test_returns_result_and_milliseconds():
    result, elapsed_ms = timed(lambda: "done", clock=_fake_clock(1.0, 1.25))
    assert result == "done"
    assert elapsed_ms == pytest.approx(250.0)


def test_real_clock_is_non_negative():
    _, elapsed_ms = timed(lambda: None)
    assert elapsed_ms >= 0


def test_exceptions_propagate():
    def boom():
        raise RuntimeError("probe exploded")

    with pytest.raises(RuntimeError, match="probe exploded"):
        timed(boom, clock=_fake_clock(0.0, 1.0))
