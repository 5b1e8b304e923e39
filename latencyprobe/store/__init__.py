"""Sample storage and summary statistics."""

from latencyprobe.store.sample_store import EmptyFieldError, SampleStore, is_numeric
from latencyprobe.store.summary import MAX, MEDIAN, MIN, STAT_NAMES, STD_DEV, Summary

__all__ = [
    "EmptyFieldError",
    "MAX",
    "MEDIAN",
    "MIN",
    "STAT_NAMES",
    "STD_DEV",
    "SampleStore",
    "Summary",
    "is_numeric",
]
