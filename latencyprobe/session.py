"""Measurement driver.

MeasurementSession runs a probe repeatedly, times every call, and feeds the
successful timings to a SampleStore and a chart sink. A probe signals
success by returning exactly ``True``; any other return value or an
exception marks the iteration as failed, and failed iterations are never
pushed.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable

from latencyprobe.chart.live_chart import ChartSink, NullChart
from latencyprobe.probe.timer import timed
from latencyprobe.store.sample_store import SampleStore
from latencyprobe.store.summary import Summary

logger = logging.getLogger(__name__)

ITERATION_FIELD = "iteration"
DEFAULT_FIELD = "time"


@dataclass(frozen=True)
class IterationFailure:
    """A probe call that did not report success."""
    iteration: int
    reason: str


@dataclass
class RunReport:
    """Outcome tally of one MeasurementSession.run() call."""
    attempted: int = 0
    succeeded: int = 0
    failures: list[IterationFailure] = field(default_factory=list)

    @property
    def failed(self) -> int:
        return len(self.failures)

    def to_dict(self) -> dict[str, Any]:
        return {
            "attempted": self.attempted,
            "succeeded": self.succeeded,
            "failed": self.failed,
            "failures": [{"iteration": f.iteration, "reason": f.reason} for f in self.failures],
        }


class MeasurementSession:
    """Times a probe over many iterations.

    Args:
        probe: Zero-argument callable returning True on success.
        store: Destination for successful samples. A fresh SampleStore by default.
        chart: Live chart sink receiving the same records as the store.
        field: Record field holding the elapsed milliseconds.
        clock: Monotonic clock in seconds, passed to the timer.
        sleep: Function used to wait between iterations.
    """

    def __init__(
        self,
        probe: Callable[[], Any],
        store: SampleStore | None = None,
        chart: ChartSink | None = None,
        field: str = DEFAULT_FIELD,
        clock: Callable[[], float] = time.perf_counter,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.probe = probe
        self.store = store if store is not None else SampleStore()
        self.chart = chart if chart is not None else NullChart()
        self.field = field
        self._clock = clock
        self._sleep = sleep

    def run(self, iterations: int, delay_s: float = 0.0) -> RunReport:
        """Invoke the probe ``iterations`` times.

        Args:
            iterations: Number of probe calls, numbered from 1.
            delay_s: Pause between consecutive calls in seconds.

        Returns:
            RunReport with attempted/succeeded counts and failures.
        """
        if isinstance(iterations, bool) or not isinstance(iterations, int) or iterations <= 0:
            raise ValueError(f"iterations must be a positive integer, got {iterations!r}")
        if delay_s < 0:
            raise ValueError("delay_s must be non-negative.")

        report = RunReport()
        logger.info("Starting %d iterations of %r", iterations, self.probe)

        for i in range(1, iterations + 1):
            report.attempted += 1
            try:
                result, elapsed_ms = timed(self.probe, clock=self._clock)
            except Exception as e:
                self._fail(report, i, f"{type(e).__name__}: {e}")
            else:
                if result is True:
                    self._record(i, elapsed_ms)
                    report.succeeded += 1
                else:
                    self._fail(report, i, f"probe returned {result!r}")

            if delay_s and i < iterations:
                self._sleep(delay_s)

        logger.info(
            "Finished: %d/%d iterations succeeded", report.succeeded, report.attempted
        )
        return report

    def summarize(self) -> Summary:
        """Summary of the timing field. Raises EmptyFieldError if nothing succeeded."""
        return self.store.summarize(self.field)

    def _record(self, iteration: int, elapsed_ms: float) -> None:
        record = {ITERATION_FIELD: iteration, self.field: elapsed_ms}
        self.store.push(record)
        logger.debug(
            "Iteration %d took %.3f ms", iteration, elapsed_ms,
            extra={"iteration": iteration, "elapsed_ms": elapsed_ms},
        )
        try:
            self.chart.push(record)
        except Exception:
            logger.exception("Chart sink failed on iteration %d", iteration)

    def _fail(self, report: RunReport, iteration: int, reason: str) -> None:
        report.failures.append(IterationFailure(iteration, reason))
        logger.warning(
            "Iteration %d failed: %s", iteration, reason, extra={"iteration": iteration}
        )
