"""
Build a LabelledTable from pyreadstat-style metadata.

pyreadstat.read_sav / read_dta return (DataFrame, metadata); the metadata
object exposes

    column_names_to_labels   {column: variable label or None}
    variable_value_labels    {column: {code: label}}

This module only reads those two attributes. It does not import pyreadstat
and does not touch the filesystem.
"""

from typing import Any

import pandas as pd

from .model import ColumnLabels, LabelledTable


def from_readstat(data: pd.DataFrame, meta: Any) -> LabelledTable:
    """
    Wrap `data` with the labels found on `meta`.

    Columns present in the metadata but not in `data` (e.g. after
    usecols=...) are ignored, as are None variable labels.
    """
    variable_labels = getattr(meta, "column_names_to_labels", None) or {}
    value_labels = getattr(meta, "variable_value_labels", None) or {}

    labels = {}
    for column in data.columns:
        record = ColumnLabels(
            variable_label=variable_labels.get(column),
            value_labels=dict(value_labels.get(column) or {}),
        )
        if not record.is_empty:
            labels[column] = record

    return LabelledTable(data=data, labels=labels)
