"""Command-line entry point.

    latencyprobe https://example.org -n 50 --chart latency.png
    LP_URL=https://example.org latencyprobe --format json --log-json --log-file run.log

Exit status is 0 when a summary was printed, 1 when no iteration
succeeded, and 2 for invalid arguments.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from latencyprobe.chart.live_chart import LiveChart
from latencyprobe.config import RunConfig
from latencyprobe.logging_config import configure_from_env, setup_logging
from latencyprobe.probe.http import HttpProbe
from latencyprobe.render import render_empty_field, render_markdown, render_report, render_text
from latencyprobe.session import MeasurementSession
from latencyprobe.store.sample_store import EmptyFieldError

logger = logging.getLogger(__name__)

FORMATS = ("markdown", "text", "json")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="latencyprobe",
        description="Time repeated HTTP requests and summarize the latencies",
    )
    parser.add_argument("url", nargs="?", default=None, help="Target URL (or set LP_URL)")
    parser.add_argument("-n", "--iterations", type=int, default=None)
    parser.add_argument("--method", default=None, help="HTTP method (default GET)")
    parser.add_argument("--timeout", dest="timeout_s", type=float, default=None)
    parser.add_argument("--delay", dest="delay_s", type=float, default=None,
                        help="Seconds to wait between requests")
    parser.add_argument("--chart", type=Path, default=None, help="Save the latency chart to this file")
    parser.add_argument("--show", action="store_true", help="Show the chart live while measuring")
    parser.add_argument("--csv", type=Path, default=None, help="Export the raw samples as CSV")
    parser.add_argument("--format", choices=FORMATS, default="markdown")
    parser.add_argument("--log-level", default=None,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    parser.add_argument("--log-file", type=Path, default=None,
                        help="Write logs to this file instead of stderr")
    parser.add_argument("--log-json", action="store_true", help="Log one JSON object per line")
    return parser


def _make_chart(show: bool) -> LiveChart:
    import matplotlib

    if show:
        import matplotlib.pyplot as plt

        plt.ion()
    else:
        matplotlib.use("Agg")
    return LiveChart()


def _setup_logging(args: argparse.Namespace) -> None:
    if args.log_level or args.log_file or args.log_json:
        setup_logging(
            level=args.log_level or "INFO",
            log_file=args.log_file,
            json_format=args.log_json,
        )
    else:
        configure_from_env()


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args)

    try:
        config = RunConfig.from_env(
            url=args.url,
            iterations=args.iterations,
            method=args.method,
            timeout_s=args.timeout_s,
            delay_s=args.delay_s,
        )
    except ValueError as e:
        parser.error(str(e))

    chart = None
    try:
        if args.chart or args.show:
            chart = _make_chart(args.show)

        with HttpProbe(config.url, method=config.method, timeout_s=config.timeout_s) as probe:
            session = MeasurementSession(probe, chart=chart, field=config.field)
            report = session.run(config.iterations, delay_s=config.delay_s)

        print(render_report(report), file=sys.stderr)

        if args.csv:
            args.csv.parent.mkdir(parents=True, exist_ok=True)
            session.store.to_dataframe().to_csv(args.csv, index=False)
            logger.info("Samples written to %s", args.csv)
        if chart is not None and args.chart:
            chart.save(args.chart)

        try:
            summary = session.summarize()
        except EmptyFieldError as e:
            print(render_empty_field(e), file=sys.stderr)
            return 1

        if args.format == "json":
            print(json.dumps({"report": report.to_dict(), "summary": summary.to_dict()}, indent=2))
        elif args.format == "text":
            print(render_text(summary))
        else:
            print(render_markdown(summary))

        if args.show:
            import matplotlib.pyplot as plt

            plt.ioff()
            plt.show()
    finally:
        if chart is not None:
            chart.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
