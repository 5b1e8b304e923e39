"""Tests for summary and report rendering."""

import pytest

from latencyprobe.render import render_empty_field, render_markdown, render_report, render_text
from latencyprobe.session import IterationFailure, RunReport
from latencyprobe.store import EmptyFieldError, SampleStore


@pytest.fixture
def summary():
    store = SampleStore()
    for v in (100.0, 120.456, 180.0):
        store.push({"time": v})
    return store.summarize("time")


class TestMarkdown:
    def test_table(self, summary):
        lines = render_markdown(summary).splitlines()
        assert lines[0] == "| Statistic | Value (ms) |"
        assert lines[1] == "|---|---:|"
        assert lines[2] == "| Min | 100.00 |"
        assert lines[3] == "| Median | 120.46 |"
        assert lines[4] == "| Max | 180.00 |"
        assert lines[5].startswith("| Standard Deviation | ")
        assert len(lines) == 6

    def test_decimals_and_unit(self, summary):
        text = render_markdown(summary, unit="s", decimals=0)
        assert "| Statistic | Value (s) |" in text
        assert "| Median | 120 |" in text

    def test_no_unit(self, summary):
        assert render_markdown(summary, unit="").startswith("| Statistic | Value |")


class TestText:
    def test_block(self, summary):
        lines = render_text(summary).splitlines()
        assert lines[0] == "time (3 samples)"
        assert lines[1].strip().startswith("Min")
        assert lines[1].endswith("100.00 ms")
        assert "Standard Deviation" in lines[4]

    def test_columns_aligned(self, summary):
        lines = render_text(summary).splitlines()[1:]
        assert len({len(line) for line in lines}) == 1


def test_empty_field_message():
    with pytest.raises(EmptyFieldError) as exc_info:
        SampleStore().summarize("time")
    assert render_empty_field(exc_info.value) == "No data available for statistic on field 'time'."


def test_report_line():
    report = RunReport(attempted=5, succeeded=4, failures=[IterationFailure(3, "probe returned False")])
    assert render_report(report) == "4/5 iterations succeeded (1 failed)"
