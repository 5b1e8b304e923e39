"""Probes and timing."""

from latencyprobe.probe.http import HttpProbe
from latencyprobe.probe.timer import timed

__all__ = [
    "HttpProbe",
    "timed",
]
