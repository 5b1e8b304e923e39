"""Live chart sinks for streaming measurement records.

A chart sink receives the same records the SampleStore does, one push at a
time, while the measurement loop is running. Sinks must return quickly:
LiveChart only requests a redraw and never waits on the GUI event loop.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Protocol, runtime_checkable

from latencyprobe.store.sample_store import is_numeric

logger = logging.getLogger(__name__)


@runtime_checkable
class ChartSink(Protocol):
    """Anything that accepts streamed records."""

    def push(self, record: Mapping[str, Any]) -> None: ...

    def close(self) -> None: ...


class NullChart:
    """Sink that discards every record."""

    def push(self, record: Mapping[str, Any]) -> None:
        pass

    def close(self) -> None:
        pass


@dataclass
class ChartConfig:
    """Display settings for a LiveChart.

    Args:
        title: Chart title.
        x_label: X-axis label text.
        y_label: Y-axis label text.
        color: Line color, any matplotlib color spec.
    """

    title: str = "Request latency"
    x_label: str = "Iteration"
    y_label: str = "Time (ms)"
    color: str = "#3b82f6"


class LiveChart:
    """Line chart of one field against another, updated on every push.

    Args:
        x_field: Record field used for the x axis.
        y_field: Record field used for the y axis.
        config: Display settings. Defaults to ChartConfig().
    """

    def __init__(
        self,
        x_field: str = "iteration",
        y_field: str = "time",
        config: ChartConfig | None = None,
    ):
        import matplotlib.pyplot as plt

        self.x_field = x_field
        self.y_field = y_field
        self.config = config or ChartConfig()
        self._xs: list[float] = []
        self._ys: list[float] = []

        self.figure, self.ax = plt.subplots(figsize=(8, 4))
        (self._line,) = self.ax.plot([], [], marker="o", markersize=3, color=self.config.color)
        self.ax.set_title(self.config.title)
        self.ax.set_xlabel(self.config.x_label)
        self.ax.set_ylabel(self.config.y_label)
        self.ax.grid(True, alpha=0.3)
        self._closed = False

    def push(self, record: Mapping[str, Any]) -> None:
        """Append one point. Records missing either field are ignored."""
        x = record.get(self.x_field)
        y = record.get(self.y_field)
        if not (is_numeric(x) and is_numeric(y)):
            logger.debug("Chart skipped record without %s/%s: %r", self.x_field, self.y_field, record)
            return
        self._xs.append(x)
        self._ys.append(y)
        self._line.set_data(self._xs, self._ys)
        self.ax.relim()
        self.ax.autoscale_view()
        self._redraw()

    def _redraw(self) -> None:
        import matplotlib

        canvas = self.figure.canvas
        canvas.draw_idle()
        if matplotlib.is_interactive():
            canvas.flush_events()

    def points(self) -> list[tuple[float, float]]:
        """Plotted (x, y) points in push order."""
        return list(zip(self._xs, self._ys))

    def save(self, path: str | Path, dpi: int = 150) -> Path:
        """Write the current figure to ``path``, creating parent directories."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.figure.tight_layout()
        self.figure.savefig(path, dpi=dpi)
        logger.info("Chart saved to %s", path)
        return path

    def close(self) -> None:
        if self._closed:
            return
        import matplotlib.pyplot as plt

        plt.close(self.figure)
        self._closed = True

    def __len__(self) -> int:
        return len(self._xs)
