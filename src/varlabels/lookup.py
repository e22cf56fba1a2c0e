"""
Lookup Builder — turns a column's value labels into a code/label table.

The lookup table has two columns:
    <column>            the codes, in value-label insertion order
    <column><suffix>    the matching category labels

A column without value labels yields a single sentinel row
(missing code, "No Labels Found").
"""

from typing import Hashable, Optional

import pandas as pd

from .config import DEFAULT_LOOKUP_SUFFIX, NO_LABELS_FOUND
from .model import require_table


def get_label(
    table,
    column: Hashable,
    suffix: str = DEFAULT_LOOKUP_SUFFIX,
    limit: Optional[int] = None,
) -> pd.DataFrame:
    """
    Build the lookup table for one column.

    Args:
        table: LabelledTable holding the column
        column: Column name
        suffix: Appended to the column name to name the label column
        limit: Keep only the first `limit` rows when > 0;
               None, 0 or a negative value keeps every row

    Returns:
        DataFrame with columns (column, column + suffix)

    Raises:
        NotATableError: If `table` is not a LabelledTable
        UnknownColumnError: If the column is absent
    """
    table = require_table(table)
    record = table.column_labels(column)
    label_column = f"{column}{suffix}"

    if not record.has_value_labels:
        return pd.DataFrame([(None, NO_LABELS_FOUND)], columns=[column, label_column])

    rows = list(record.value_labels.items())
    if limit is not None and limit > 0:
        rows = rows[:limit]

    return pd.DataFrame(rows, columns=[column, label_column])
