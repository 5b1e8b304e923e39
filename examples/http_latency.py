"""Measure the latency of repeated GET requests and chart it live.

Runs a MeasurementSession against a URL, streams every successful timing
into a LiveChart, then prints the Markdown summary and saves the chart.

Example:
    python examples/http_latency.py https://example.org --iterations 30
"""

from __future__ import annotations

from pathlib import Path

from latencyprobe import (
    EmptyFieldError,
    HttpProbe,
    LiveChart,
    MeasurementSession,
    enable_console_logging,
    render_empty_field,
    render_markdown,
    render_report,
)


# =============================================================================
# Measurement
# =============================================================================


def measure(url: str, iterations: int, delay_s: float, output_dir: Path) -> int:
    import matplotlib
    matplotlib.use("Agg")

    chart = LiveChart()
    try:
        with HttpProbe(url) as probe:
            session = MeasurementSession(probe, chart=chart)
            report = session.run(iterations, delay_s=delay_s)

        print(render_report(report))
        path = chart.save(output_dir / "http_latency.png")
        print(f"Saved: {path}")

        try:
            summary = session.summarize()
        except EmptyFieldError as e:
            print(render_empty_field(e))
            return 1

        print()
        print(render_markdown(summary))
        return 0
    finally:
        chart.close()


# =============================================================================
# Entry Point
# =============================================================================


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="HTTP latency demo")
    parser.add_argument("url")
    parser.add_argument("--iterations", type=int, default=20)
    parser.add_argument("--delay", type=float, default=0.0)
    parser.add_argument("--output", type=Path, default=Path("output"))
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    if args.verbose:
        enable_console_logging(level="DEBUG")

    raise SystemExit(measure(args.url, args.iterations, args.delay, args.output))
