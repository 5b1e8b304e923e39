"""Summary statistics produced by SampleStore.summarize().

A Summary is a snapshot: it is computed once from the values present at
call time and does not follow later pushes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

MIN = "Min"
MEDIAN = "Median"
MAX = "Max"
STD_DEV = "Standard Deviation"

STAT_NAMES: tuple[str, ...] = (MIN, MEDIAN, MAX, STD_DEV)


@dataclass(frozen=True)
class Summary:
    """Ordered (statistic name, value) pairs for one field."""
    field: str
    count: int
    stats: tuple[tuple[str, float], ...]

    def __iter__(self) -> Iterator[tuple[str, float]]:
        return iter(self.stats)

    def __len__(self) -> int:
        return len(self.stats)

    def __getitem__(self, name: str) -> float:
        for stat_name, value in self.stats:
            if stat_name == name:
                return value
        raise KeyError(name)

    def names(self) -> list[str]:
        return [name for name, _ in self.stats]

    def __str__(self) -> str:
        lines = [f"Summary of '{self.field}' ({self.count} samples)"]
        for name, value in self.stats:
            lines.append(f"  {name}: {value:.3f}")
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        return {
            "field": self.field,
            "count": self.count,
            "stats": {name: value for name, value in self.stats},
        }
