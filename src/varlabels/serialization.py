"""
Serialization helpers for label metadata (the "codebook").

Provides lossless JSON/YAML round-trip of a table's label side-table via an
intermediate dict representation. Value labels are written as an ordered
list of {code, label} pairs so that numeric codes and their order survive
JSON, whose object keys are always strings.

The data itself is never serialized here; reading and writing data files
is left to the caller.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from .errors import UnknownColumnError
from .model import ColumnLabels, LabelledTable, require_table


def _plain(value: Any) -> Any:
    # numpy scalars -> builtins, so yaml.safe_dump accepts them
    item = getattr(value, "item", None)
    return item() if callable(item) else value


def column_labels_to_dict(c: ColumnLabels) -> Dict[str, Any]:
    return {
        "variable_label": c.variable_label,
        "value_labels": [
            {"code": _plain(code), "label": label} for code, label in c.value_labels.items()
        ],
    }


def column_labels_from_dict(d: Dict[str, Any]) -> ColumnLabels:
    return ColumnLabels(
        variable_label=d.get("variable_label"),
        value_labels={pair["code"]: pair["label"] for pair in d.get("value_labels") or []},
    )


def codebook_to_dict(table: LabelledTable) -> Dict[str, Any]:
    """Export the label side-table, in column order, skipping unlabelled columns."""
    table = require_table(table)
    variables = []
    for column in table.columns:
        record = table.labels.get(column)
        if record is None or record.is_empty:
            continue
        entry = {"name": _plain(column)}
        entry.update(column_labels_to_dict(record))
        variables.append(entry)
    return {"variables": variables}


def codebook_from_dict(d: Dict[str, Any]) -> Dict[Any, ColumnLabels]:
    return {v["name"]: column_labels_from_dict(v) for v in d.get("variables", [])}


def codebook_to_json(table: LabelledTable) -> str:
    return json.dumps(codebook_to_dict(table))


def codebook_from_json(s: str) -> Dict[Any, ColumnLabels]:
    d = json.loads(s)
    return codebook_from_dict(d)


def codebook_to_yaml(table: LabelledTable) -> str:
    return yaml.safe_dump(codebook_to_dict(table), sort_keys=False)


def codebook_from_yaml(s: str) -> Dict[Any, ColumnLabels]:
    d = yaml.safe_load(s) or {}
    return codebook_from_dict(d)


def apply_codebook(table: LabelledTable, codebook: Dict[Any, ColumnLabels]) -> LabelledTable:
    """
    Return a copy of `table` with the codebook's labels attached.

    Entries replace any labels the column already had.

    Raises:
        NotATableError: If `table` is not a LabelledTable
        UnknownColumnError: Listing codebook entries with no matching column
    """
    table = require_table(table)
    missing = [name for name in codebook if name not in table.data.columns]
    if missing:
        raise UnknownColumnError(missing)

    result = table.copy()
    for name, record in codebook.items():
        result.set_variable_label(name, record.variable_label)
        result.set_value_labels(name, record.value_labels)
    return result
