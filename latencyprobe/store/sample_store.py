"""In-memory storage for labeled numeric observations.

SampleStore collects records (field name -> value mappings) captured during
a measurement session and answers aggregate-statistic queries over a single
field. Only numeric values survive ingestion; everything else is dropped.

All public operations are serialized behind one lock, so the measurement
loop and a rendering thread may share a store.
"""

from __future__ import annotations

import logging
import math
import numbers
import statistics
import threading
from typing import Any, Mapping

from latencyprobe.store.summary import MAX, MEDIAN, MIN, STD_DEV, Summary

logger = logging.getLogger(__name__)


class EmptyFieldError(LookupError):
    """Raised when a field has no numeric observations to summarize."""

    def __init__(self, field: str) -> None:
        super().__init__(f"no data available for statistic on field {field!r}")
        self.field = field


def is_numeric(value: Any) -> bool:
    """True for finite real numbers.

    Booleans are flags, not measurements. NaN and infinities carry no
    usable latency and are rejected.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value)


def _as_builtin(value: numbers.Real) -> int | float:
    # numpy scalars are registered as numbers.Real but trip up statistics
    if isinstance(value, numbers.Integral):
        return int(value)
    return float(value)


class SampleStore:
    """Thread-safe container of numeric records with summary statistics.

    Records are kept in append order. A record that loses every field to
    filtering is still stored (as an empty dict) and still counts toward
    ``len(store)``.
    """

    def __init__(self) -> None:
        self._records: list[dict[str, Any]] = []
        self._lock = threading.Lock()

    def push(self, record: Mapping[str, Any]) -> None:
        """Store the numeric entries of ``record`` as one new record.

        Args:
            record: Field name to value mapping. Non-numeric values are dropped.
        """
        filtered = {k: _as_builtin(v) for k, v in record.items() if is_numeric(v)}
        if len(filtered) != len(record):
            logger.debug(
                "Dropped non-numeric fields %s", [k for k in record if k not in filtered]
            )
        with self._lock:
            self._records.append(filtered)

    def show(self) -> list[dict[str, Any]]:
        """All stored records, oldest first, as copies."""
        with self._lock:
            return [dict(r) for r in self._records]

    def values(self, field: str) -> list[Any]:
        """Values of ``field`` from every record that has it."""
        with self._lock:
            return [r[field] for r in self._records if field in r]

    def fields(self) -> list[str]:
        """Sorted names of every field present in at least one record."""
        with self._lock:
            names = {k for r in self._records for k in r}
        return sorted(names)

    def summarize(self, field: str) -> Summary:
        """Compute min, median, max and population standard deviation.

        Records lacking ``field`` are skipped.

        Raises:
            EmptyFieldError: No stored record holds ``field``.
        """
        vals = self.values(field)
        if not vals:
            raise EmptyFieldError(field)

        return Summary(
            field=field,
            count=len(vals),
            stats=(
                (MIN, min(vals)),
                (MEDIAN, statistics.median(vals)),
                (MAX, max(vals)),
                (STD_DEV, statistics.pstdev(vals)),
            ),
        )

    def clear(self) -> None:
        """Remove all stored records."""
        with self._lock:
            self._records.clear()

    def to_dataframe(self):
        """Snapshot of the stored records as a pandas DataFrame.

        Fields missing from a record show up as NaN.
        """
        import pandas as pd

        return pd.DataFrame(self.show())

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __bool__(self) -> bool:
        return len(self) > 0
