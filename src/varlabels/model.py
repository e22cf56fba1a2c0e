"""
Core Label Model Objects

Defines the attribute store used by every operation in the package:
    - ColumnLabels (metadata record for one column)
    - LabelledTable (a DataFrame plus its label side-table)

Labels are NOT stored on the DataFrame or its cells. They live in an
explicit mapping from column name to ColumnLabels, held next to the data.

ARCHITECTURAL RULE:
    Operations in lookup/merge/summary never mutate a LabelledTable.
    Only the set_* methods below change metadata in place.
"""

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, Optional

import pandas as pd

from .errors import NotATableError, UnknownColumnError


@dataclass
class ColumnLabels:
    """
    Descriptive metadata attached to one column.

    Properties:
        variable_label:
            Human-readable meaning of the column (optional)
            Example: "Important in life: Family"

        value_labels:
            Ordered mapping from code to category label
            Example: {1: "Very important", 2: "Rather important"}
            Codes are unique; assigning a code twice keeps the last label.
    """

    variable_label: Optional[str] = None
    value_labels: Dict[Any, str] = field(default_factory=dict)

    @property
    def has_value_labels(self) -> bool:
        return len(self.value_labels) > 0

    @property
    def is_empty(self) -> bool:
        return self.variable_label is None and not self.has_value_labels


@dataclass(eq=False)
class LabelledTable:
    """
    A tabular dataset with per-column label metadata.

    Properties:
        data:
            The pandas DataFrame holding the codes

        labels:
            Side-table mapping column name -> ColumnLabels
            Every key must be a column of `data`.

    INVARIANTS:
        - data is a DataFrame
        - labels only references existing columns
    """

    data: pd.DataFrame
    labels: Dict[Hashable, ColumnLabels] = field(default_factory=dict)

    def __post_init__(self):
        if not isinstance(self.data, pd.DataFrame):
            raise NotATableError(
                f"Expected a pandas DataFrame, got {type(self.data).__name__}"
            )
        if self.labels is None:
            self.labels = {}
        unknown = [name for name in self.labels if name not in self.data.columns]
        if unknown:
            raise UnknownColumnError(unknown)

    @property
    def columns(self) -> List[Hashable]:
        return list(self.data.columns)

    def _require_column(self, column: Hashable) -> None:
        if column not in self.data.columns:
            raise UnknownColumnError([column])

    def column_labels(self, column: Hashable) -> ColumnLabels:
        """
        Retrieve the metadata record for a column.

        Returns an empty ColumnLabels if nothing is attached.

        Raises:
            UnknownColumnError: If the column is absent
        """
        self._require_column(column)
        return self.labels.get(column, ColumnLabels())

    def variable_label(self, column: Hashable) -> str:
        """Resolved variable label, or an empty string."""
        label = self.column_labels(column).variable_label
        return "" if label is None else label

    def value_labels(self, column: Hashable) -> Dict[Any, str]:
        return dict(self.column_labels(column).value_labels)

    def set_variable_label(self, column: Hashable, label: Optional[str]) -> None:
        """Attach (or with None, remove) the variable label of a column."""
        self._require_column(column)
        record = self.labels.setdefault(column, ColumnLabels())
        record.variable_label = label
        if record.is_empty:
            del self.labels[column]

    def set_value_labels(self, column: Hashable, value_labels: Optional[Dict[Any, str]]) -> None:
        """Attach (or with None, remove) the code -> label mapping of a column."""
        self._require_column(column)
        record = self.labels.setdefault(column, ColumnLabels())
        record.value_labels = dict(value_labels or {})
        if record.is_empty:
            del self.labels[column]

    def copy(self) -> "LabelledTable":
        return LabelledTable(data=self.data.copy(), labels=copy.deepcopy(self.labels))


def require_table(table: Any) -> LabelledTable:
    """Check that `table` is a usable LabelledTable and return it."""
    if isinstance(table, pd.DataFrame):
        raise NotATableError(
            "The input is a bare DataFrame; wrap it with LabelledTable(data=...) "
            "or build it with from_readstat(data, meta)"
        )
    if not isinstance(table, LabelledTable) or not isinstance(table.data, pd.DataFrame):
        raise NotATableError(
            f"The input is not a labelled table: got {type(table).__name__}"
        )
    return table
