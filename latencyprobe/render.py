"""Presentation of summaries and run reports."""

from __future__ import annotations

from latencyprobe.session import RunReport
from latencyprobe.store.sample_store import EmptyFieldError
from latencyprobe.store.summary import Summary


def render_markdown(summary: Summary, unit: str = "ms", decimals: int = 2) -> str:
    """Two-column Markdown table, one row per statistic in summary order."""
    value_header = f"Value ({unit})" if unit else "Value"
    lines = [
        f"| Statistic | {value_header} |",
        "|---|---:|",
    ]
    for name, value in summary:
        lines.append(f"| {name} | {value:.{decimals}f} |")
    return "\n".join(lines)


def render_text(summary: Summary, unit: str = "ms", decimals: int = 2) -> str:
    """Aligned plain-text block."""
    width = max(len(name) for name in summary.names())
    suffix = f" {unit}" if unit else ""
    lines = [f"{summary.field} ({summary.count} samples)"]
    for name, value in summary:
        lines.append(f"  {name:<{width}}  {value:>12.{decimals}f}{suffix}")
    return "\n".join(lines)


def render_empty_field(error: EmptyFieldError) -> str:
    return f"No data available for statistic on field '{error.field}'."


def render_report(report: RunReport) -> str:
    return (
        f"{report.succeeded}/{report.attempted} iterations succeeded"
        f" ({report.failed} failed)"
    )
