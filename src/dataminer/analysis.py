"""
Analysis and Reporting Module.

The two pipeline steps shared by every format: reduce a Dataset to a
Summary, then render the Summary to a text sink.
"""

import sys
from typing import Dict, Optional, TextIO

from dataminer.records import Dataset, Summary

REPORT_HEADER = "=== Report Header ==="
REPORT_FOOTER = "=" * 27


def analyze(dataset: Dataset) -> Summary:
    """Count rows and collect distinct column names in first-seen order."""
    # dict keys keep insertion order and dedupe
    columns: Dict[str, None] = {}
    for row in dataset:
        for key in row:
            columns.setdefault(key, None)
    return Summary(row_count=len(dataset), columns=tuple(columns))


def report(summary: Summary, sink: Optional[TextIO] = None) -> None:
    """
    Write the report block for a Summary.

    Args:
        summary: Result of analyze().
        sink: Text stream to write to. Defaults to the current sys.stdout.
    """
    out = sink if sink is not None else sys.stdout
    out.write(f"{REPORT_HEADER}\n")
    out.write(f"Rows: {summary.row_count}\n")
    out.write(f"Columns: [{', '.join(summary.columns)}]\n")
    out.write(f"{REPORT_FOOTER}\n")
