"""Tests for report rendering and export."""
import json

import pandas as pd

from instabl.report import (
    export_to_csv,
    export_to_json,
    format_report,
    render_report,
    to_dataframe,
)
from instabl.stats import Stability


def sample_stats():
    return {
        "example.com/proj/b": Stability(fan_in=0, fan_out=1),
        "example.com/proj/a": Stability(fan_in=1, fan_out=0),
        "example.com/proj/c": Stability(fan_in=1, fan_out=1),
        "example.com/proj/idle": Stability(),
    }


class TestRenderReport:
    """Test suite for the sorted console report."""

    def test_lines_are_formatted_with_two_decimals(self):
        """Test the '<instability>\\t<package>' line format."""
        assert render_report({"p": Stability(fan_in=2, fan_out=1)}) == ["0.33\tp"]

    def test_lines_sorted_on_rendered_text(self):
        """Test that ties are broken by identifier through the text sort."""
        assert render_report(sample_stats()) == [
            "0.00\texample.com/proj/a",
            "0.00\texample.com/proj/idle",
            "0.50\texample.com/proj/c",
            "1.00\texample.com/proj/b",
        ]

    def test_lines_non_decreasing(self):
        """Test that every line sorts at or after the previous one."""
        lines = render_report(sample_stats())

        assert all(a <= b for a, b in zip(lines, lines[1:]))

    def test_isolated_package_renders_zero(self):
        """Test that a zero/zero package prints exactly 0.00."""
        assert render_report({"idle": Stability()}) == ["0.00\tidle"]

    def test_empty_stats(self):
        """Test that an empty table renders no lines."""
        assert render_report({}) == []
        assert format_report({}) == ""

    def test_format_report_joins_lines(self):
        """Test that the text report has no header and no summary."""
        text = format_report({"b": Stability(0, 1), "a": Stability(1, 0)})

        assert text == "0.00\ta\n1.00\tb"


class TestDataFrameExport:
    """Test suite for the per-package table and its exports."""

    def test_dataframe_columns_and_order(self):
        """Test that the table is ordered by package with all counts."""
        df = to_dataframe(sample_stats())

        assert list(df.columns) == ["package", "fan_in", "fan_out", "instability"]
        assert list(df["package"]) == [
            "example.com/proj/a",
            "example.com/proj/b",
            "example.com/proj/c",
            "example.com/proj/idle",
        ]
        assert list(df["instability"]) == [0.0, 1.0, 0.5, 0.0]

    def test_empty_dataframe(self):
        """Test that an empty table still carries its columns."""
        df = to_dataframe({})

        assert len(df) == 0
        assert list(df.columns) == ["package", "fan_in", "fan_out", "instability"]

    def test_export_to_csv(self, temp_dir):
        """Test CSV export of the per-package table."""
        output_csv = temp_dir / "instability.csv"
        export_to_csv(to_dataframe(sample_stats()), output_csv)

        df = pd.read_csv(output_csv)
        assert len(df) == 4
        assert df.loc[df["package"] == "example.com/proj/c", "fan_out"].iloc[0] == 1

    def test_export_to_json(self, temp_dir):
        """Test JSON export of the per-package table."""
        output_json = temp_dir / "instability.json"
        export_to_json(to_dataframe(sample_stats()), output_json)

        records = json.loads(output_json.read_text())
        assert records[0] == {
            "package": "example.com/proj/a",
            "fan_in": 1,
            "fan_out": 0,
            "instability": 0.0,
        }
