"""latencyprobe: time repeated HTTP requests and summarize the latencies.

Quick start:
    from latencyprobe import HttpProbe, MeasurementSession, render_markdown

    with HttpProbe("https://example.org") as probe:
        session = MeasurementSession(probe)
        session.run(20)
    print(render_markdown(session.summarize()))
"""

import logging

from latencyprobe.chart import ChartConfig, ChartSink, LiveChart, NullChart
from latencyprobe.config import RunConfig
from latencyprobe.logging_config import configure_from_env, enable_console_logging, setup_logging
from latencyprobe.probe import HttpProbe, timed
from latencyprobe.render import render_empty_field, render_markdown, render_report, render_text
from latencyprobe.session import IterationFailure, MeasurementSession, RunReport
from latencyprobe.store import EmptyFieldError, SampleStore, Summary

logging.getLogger("latencyprobe").addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "ChartConfig",
    "ChartSink",
    "EmptyFieldError",
    "HttpProbe",
    "IterationFailure",
    "LiveChart",
    "MeasurementSession",
    "NullChart",
    "RunConfig",
    "RunReport",
    "SampleStore",
    "Summary",
    "configure_from_env",
    "enable_console_logging",
    "render_empty_field",
    "render_markdown",
    "render_report",
    "render_text",
    "setup_logging",
    "timed",
]
