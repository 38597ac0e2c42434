"""
Instability reporting.

Renders the stats table as sorted console lines and as a pandas DataFrame
for CSV/JSON export.
"""
from pathlib import Path
from typing import List

import pandas as pd

from instabl.stats import Stats

COLUMNS = ["package", "fan_in", "fan_out", "instability"]


def render_report(stats: Stats) -> List[str]:
    """
    Render one ``<instability>\\t<package>`` line per package.

    Lines are sorted on the rendered text itself, so packages with equal
    instability are ordered by identifier.

    Args:
        stats: Stats table from the analyzer

    Returns:
        Sorted report lines, without trailing newlines
    """
    lines = [f"{record.instability:.2f}\t{package}" for package, record in stats.items()]
    return sorted(lines)


def format_report(stats: Stats) -> str:
    """Join the rendered report lines with newlines."""
    return "\n".join(render_report(stats))


def to_dataframe(stats: Stats) -> pd.DataFrame:
    """
    Build a per-package table with fan-in, fan-out and instability.

    Args:
        stats: Stats table from the analyzer

    Returns:
        DataFrame ordered by package identifier
    """
    rows = [
        {
            "package": package,
            "fan_in": record.fan_in,
            "fan_out": record.fan_out,
            "instability": record.instability,
        }
        for package, record in sorted(stats.items())
    ]
    return pd.DataFrame(rows, columns=COLUMNS)


def export_to_csv(df: pd.DataFrame, output_path: Path) -> None:
    """
    Export DataFrame to CSV file.

    Args:
        df: DataFrame to export
        output_path: Path to output CSV file
    """
    df.to_csv(output_path, index=False)


def export_to_json(df: pd.DataFrame, output_path: Path) -> None:
    """
    Export DataFrame to JSON file.

    Args:
        df: DataFrame to export
        output_path: Path to output JSON file
    """
    df.to_json(output_path, orient="records", indent=2)
