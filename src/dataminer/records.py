"""
Record Model Module.

Shared data types for the mining pipeline: a Row maps column names to
values, a Dataset is the ordered list of Rows extracted from one file,
and a Summary holds the aggregate figures computed from a Dataset.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

import pandas as pd

Row = Dict[str, Any]
Dataset = List[Row]


@dataclass(frozen=True)
class Summary:
    """Aggregate statistics for one Dataset."""
    row_count: int
    columns: Tuple[str, ...]  # distinct, in first-seen order


def records_to_dataframe(dataset: Dataset) -> pd.DataFrame:
    """
    Convert a Dataset into a DataFrame for tabular inspection or export.

    Columns follow first-seen order across all rows. Rows that lack a
    column get NaN in that cell.

    Args:
        dataset: Rows produced by a format adapter.

    Returns:
        pd.DataFrame with one row per record.
    """
    columns = list(dict.fromkeys(key for row in dataset for key in row))
    return pd.DataFrame(dataset, columns=columns)
