"""
Summary Operators — read-only overviews of a table's labels.

    describe_columns   one row per (variable, category) pair
    list_variables     one row per variable

Both walk the columns in table order and never modify the table.
"""

from typing import Dict, List, Optional

import pandas as pd

from .config import DEFAULT_LOOKUP_SUFFIX, LISTING_COLUMNS, SUMMARY_COLUMNS
from .lookup import get_label
from .model import require_table


def describe_columns(table, limit: Optional[int] = None, repeat_label: bool = False) -> pd.DataFrame:
    """
    Flatten every column's variable label and value labels into one table.

    Columns of the result:
        variable_name, variable_label, category_value, category_label

    A column without value labels contributes a single row with a missing
    category_value and "No Labels Found".

    Args:
        table: LabelledTable to describe
        limit: Maximum categories per column (None or 0 for all)
        repeat_label: If False, only the first row of each variable
                      carries its variable label; the rest hold ""

    Raises:
        NotATableError: If `table` is not a LabelledTable
    """
    table = require_table(table)
    rows: List[Dict] = []

    for column in table.columns:
        variable_label = table.variable_label(column)
        lookup = get_label(table, column, suffix=DEFAULT_LOOKUP_SUFFIX, limit=limit)

        for position, (code, category) in enumerate(lookup.itertuples(index=False, name=None)):
            rows.append({
                "variable_name": column,
                "variable_label": variable_label if (repeat_label or position == 0) else "",
                "category_value": code,
                "category_label": category,
            })

    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)


def list_variables(table) -> pd.DataFrame:
    """List every column with its variable label ("" when unset)."""
    table = require_table(table)
    rows = [
        {"variable_name": column, "variable_label": table.variable_label(column)}
        for column in table.columns
    ]
    return pd.DataFrame(rows, columns=LISTING_COLUMNS)
