"""
Tests for the label model objects.

These tests verify:
    - ColumnLabels defaults and flags
    - LabelledTable construction checks
    - Metadata attach/remove through the set_* methods
    - Copies are independent
"""

import pandas as pd
import pytest

from varlabels.errors import NotATableError, UnknownColumnError
from varlabels.model import ColumnLabels, LabelledTable, require_table


def build_small_table() -> LabelledTable:
    data = pd.DataFrame({"V1": [1, 2, 1], "V2": ["a", "b", "c"]})
    return LabelledTable(data=data)


class TestColumnLabels:
    """Test ColumnLabels records."""

    def test_empty_record(self):
        """A new record holds nothing."""
        record = ColumnLabels()
        assert record.variable_label is None
        assert record.value_labels == {}
        assert record.is_empty
        assert not record.has_value_labels

    def test_value_labels_keep_insertion_order(self):
        """Codes come back in the order they were given."""
        record = ColumnLabels(value_labels={2: "Rather important", 1: "Very important"})
        assert list(record.value_labels) == [2, 1]
        assert record.has_value_labels
        assert not record.is_empty

    def test_variable_label_only_is_not_empty(self):
        record = ColumnLabels(variable_label="Country")
        assert not record.is_empty
        assert not record.has_value_labels


class TestLabelledTable:
    """Test LabelledTable construction and metadata access."""

    def test_rejects_non_dataframe(self):
        """Data must be a pandas DataFrame."""
        with pytest.raises(NotATableError):
            LabelledTable(data=[[1, 2], [3, 4]])

    def test_rejects_labels_for_absent_columns(self):
        """Side-table keys must name existing columns."""
        data = pd.DataFrame({"V1": [1]})
        with pytest.raises(UnknownColumnError, match="V9"):
            LabelledTable(data=data, labels={"V9": ColumnLabels(variable_label="x")})

    def test_columns_in_table_order(self):
        table = build_small_table()
        assert table.columns == ["V1", "V2"]

    def test_unlabelled_column_resolves_to_empty(self):
        """Columns without metadata give an empty record and empty label."""
        table = build_small_table()
        assert table.column_labels("V1").is_empty
        assert table.variable_label("V1") == ""
        assert table.value_labels("V1") == {}

    def test_unknown_column_lookup(self):
        table = build_small_table()
        with pytest.raises(UnknownColumnError) as excinfo:
            table.column_labels("missing")
        assert excinfo.value.columns == ["missing"]

    def test_set_variable_label(self):
        """Variable labels are attached in place."""
        table = build_small_table()
        table.set_variable_label("V1", "Importance")
        assert table.variable_label("V1") == "Importance"
        assert "V1" in table.labels

    def test_set_value_labels_copies_mapping(self):
        """Later changes to the caller's dict do not leak into the table."""
        table = build_small_table()
        mapping = {1: "Yes", 2: "No"}
        table.set_value_labels("V1", mapping)
        mapping[3] = "Maybe"
        assert table.value_labels("V1") == {1: "Yes", 2: "No"}

    def test_value_labels_returns_copy(self):
        table = build_small_table()
        table.set_value_labels("V1", {1: "Yes"})
        table.value_labels("V1")[2] = "No"
        assert table.value_labels("V1") == {1: "Yes"}

    def test_remove_labels_with_none(self):
        """Clearing both parts drops the record from the side-table."""
        table = build_small_table()
        table.set_variable_label("V1", "Importance")
        table.set_value_labels("V1", {1: "Yes"})

        table.set_value_labels("V1", None)
        assert table.variable_label("V1") == "Importance"
        assert table.value_labels("V1") == {}

        table.set_variable_label("V1", None)
        assert "V1" not in table.labels

    def test_set_labels_on_unknown_column(self):
        table = build_small_table()
        with pytest.raises(UnknownColumnError):
            table.set_variable_label("V9", "x")
        with pytest.raises(UnknownColumnError):
            table.set_value_labels("V9", {1: "x"})

    def test_copy_is_independent(self):
        """Copies share neither data nor metadata."""
        table = build_small_table()
        table.set_value_labels("V1", {1: "Yes"})
        clone = table.copy()

        clone.set_value_labels("V1", {1: "Oui"})
        clone.data.loc[0, "V1"] = 99

        assert table.value_labels("V1") == {1: "Yes"}
        assert table.data.loc[0, "V1"] == 1


class TestRequireTable:
    """Test argument validation shared by all operations."""

    @pytest.mark.parametrize("value", [None, "df", 42, pd.DataFrame({"V1": [1]})])
    def test_rejects_non_tables(self, value):
        with pytest.raises(NotATableError):
            require_table(value)

    def test_bare_dataframe_message_says_how_to_wrap(self):
        with pytest.raises(NotATableError, match=r"LabelledTable\(data=\.\.\.\)"):
            require_table(pd.DataFrame({"V1": [1]}))

    def test_accepts_labelled_table(self):
        table = build_small_table()
        assert require_table(table) is table
