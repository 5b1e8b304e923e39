"""Live chart sinks."""

from latencyprobe.chart.live_chart import ChartConfig, ChartSink, LiveChart, NullChart

__all__ = [
    "ChartConfig",
    "ChartSink",
    "LiveChart",
    "NullChart",
]
