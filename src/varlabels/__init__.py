"""
varlabels — Variable and Value Label Registry for pandas

Keeps human-readable metadata next to a DataFrame:
    - a variable label per column ("what does V6 mean?")
    - value labels per column ("what does code 2 in V6 mean?")

and joins those labels back onto the data.

Labels live in an explicit side-table (LabelledTable.labels), never in the
cells. Every operation returns a new object; reading and writing data
files is the caller's business.
"""

from .errors import (
    EmptyColumnListError,
    LabelError,
    NoLabelsWarning,
    NoMatchError,
    NotATableError,
    UnknownColumnError,
)
from .lookup import get_label
from .merge import set_label, set_labels, set_labels_by_pattern
from .model import ColumnLabels, LabelledTable
from .readstat import from_readstat
from .summary import describe_columns, list_variables

__version__ = "0.1.0"

__all__ = [
    "ColumnLabels",
    "LabelledTable",
    "get_label",
    "set_label",
    "set_labels",
    "set_labels_by_pattern",
    "describe_columns",
    "list_variables",
    "from_readstat",
    "LabelError",
    "NotATableError",
    "UnknownColumnError",
    "EmptyColumnListError",
    "NoMatchError",
    "NoLabelsWarning",
]
