"""
Merge Operators — join value labels back onto the data.

    set_label              one column
    set_labels             an explicit list of columns
    set_labels_by_pattern  every column whose name matches a regex

Each merge is a left join of the table with the column's lookup table,
so every original row survives and unmatched codes get a missing label.
The input table is never modified; a new LabelledTable is returned.

Bulk operators check every column name before the first merge. Because
no merge mutates its input, an error raised part-way through a bulk run
leaves the caller's table exactly as it was.
"""

import copy
import re
import warnings
from collections.abc import Iterable as IterableABC
from typing import Hashable, Iterable, List, Union

import pandas as pd

from .config import DEFAULT_MERGE_SUFFIX, DEFAULT_PATTERN
from .errors import EmptyColumnListError, NoLabelsWarning, NoMatchError, UnknownColumnError
from .lookup import get_label
from .model import LabelledTable, require_table


def _free_column_name(columns: Iterable[Hashable], name: str) -> str:
    """Return `name`, or `name.1`, `name.2`, ... if it is already taken."""
    taken = {str(c) for c in columns}
    if name not in taken:
        return name
    counter = 1
    while f"{name}.{counter}" in taken:
        counter += 1
    return f"{name}.{counter}"


def set_label(table, column: Hashable, suffix: str = DEFAULT_MERGE_SUFFIX) -> LabelledTable:
    """
    Append a label column for `column` by left-joining its lookup table.

    The new column is named `<column><suffix>`. If that name already exists
    a second, independent column is added (`<column><suffix>.1`, ...);
    the existing one is left as it is.

    Codes are matched by equality. When the value-label codes and the
    column differ in dtype (e.g. string codes on an int column) both sides
    are compared as Python objects, so mismatches give a missing label
    instead of an error.

    If the column has no value labels the input table is returned as is
    and a NoLabelsWarning is emitted with the message
    "<column>: no labels found".

    Raises:
        NotATableError: If `table` is not a LabelledTable
        UnknownColumnError: If the column is absent
    """
    table = require_table(table)
    if not table.column_labels(column).has_value_labels:
        warnings.warn(f"{column}: no labels found", NoLabelsWarning, stacklevel=2)
        return table

    data = table.data
    target = _free_column_name(data.columns, f"{column}{suffix}")
    lookup = get_label(table, column, suffix=suffix)
    lookup.columns = [column, target]

    left_codes = data[column]
    right_codes = lookup[column]
    if left_codes.dtype != right_codes.dtype:
        left_codes = left_codes.astype(object)
        right_codes = right_codes.astype(object)

    # Join on a temporary key so the original code column keeps its dtype
    key = _free_column_name(list(data.columns) + [target], "__code__")
    left = data.assign(**{key: left_codes.to_numpy()})
    right = pd.DataFrame({key: right_codes.to_numpy(), target: lookup[target].to_numpy()})

    merged = left.merge(right, on=key, how="left", sort=False, validate="many_to_one")
    merged = merged.drop(columns=key)
    merged.index = data.index

    return LabelledTable(data=merged, labels=copy.deepcopy(table.labels))


def set_labels(table, columns: Union[Hashable, Iterable[Hashable]]) -> LabelledTable:
    """
    Apply set_label to each named column in turn.

    Each merge's output is the next merge's input, so the result holds one
    label column per requested column. A plain string counts as a single
    column name, as does any non-iterable name (e.g. an int column label);
    repeated names are merged once.

    Raises:
        NotATableError: If `table` is not a LabelledTable
        EmptyColumnListError: If no column names are given
        UnknownColumnError: Listing every name absent from the table
    """
    table = require_table(table)

    if columns is None:
        raise EmptyColumnListError("No column names provided.")
    if isinstance(columns, str) or not isinstance(columns, IterableABC):
        columns = [columns]
    requested: List[Hashable] = list(dict.fromkeys(columns))
    if not requested:
        raise EmptyColumnListError("No column names provided.")

    invalid = [name for name in requested if name not in table.data.columns]
    if invalid:
        raise UnknownColumnError(invalid)

    result = table
    for name in requested:
        result = set_label(result, name)

    return result


def set_labels_by_pattern(table, pattern: Union[str, re.Pattern] = DEFAULT_PATTERN) -> LabelledTable:
    """
    Apply set_label to every column whose name matches `pattern`.

    Matching uses re.search, so the pattern is not anchored
    ("^V" selects V2, V2A, V3, ...).

    Raises:
        NotATableError: If `table` is not a LabelledTable
        NoMatchError: If no column name matches
    """
    table = require_table(table)
    regex = re.compile(pattern)

    matching = [name for name in table.columns if regex.search(str(name))]
    if not matching:
        raise NoMatchError(regex.pattern)

    return set_labels(table, matching)
