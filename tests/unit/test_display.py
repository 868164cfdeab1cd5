"""Unit tests for display_estimate."""

import polars as pl
from rich.console import Console

from pyrdbes.display import display_estimate


def render(df, **kwargs):
    console = Console(record=True, width=100)
    display_estimate(df, console=console, **kwargs)
    return console.export_text()


class TestDisplayEstimate:
    """Tests for display_estimate."""

    def test_formats_numbers_and_nulls(self):
        df = pl.DataFrame({"age": [2, 3], "numAtAge": [1810.0, None]})

        text = render(df, title="Number at age")

        assert "Number at age" in text
        assert "1,810.00" in text
        assert "-" in text

    def test_precision(self):
        df = pl.DataFrame({"age": [2], "ratio": [0.123456]})

        assert "0.1235" in render(df, precision=4)

    def test_truncation_note(self):
        df = pl.DataFrame({"age": list(range(30)), "numAtAge": [1.0] * 30})

        assert "showing 5 of 30 rows" in render(df, max_rows=5)
