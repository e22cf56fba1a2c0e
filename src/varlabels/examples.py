"""
Example table builder for docs, the demo script and tests.

A five-row extract shaped like World Values Survey microdata for Bosnia and
Herzegovina: country identifiers plus a few coded importance questions.
"""
import pandas as pd

from .model import LabelledTable


def build_example_table() -> LabelledTable:
    data = pd.DataFrame({
        "C_COW_ALPHA": ["BOS", "BOS", "BOS", "BOS", "BOS"],
        "COW": [346, 346, 346, 346, 346],
        "B_COUNTRY_ALPHA": ["BIH", "BIH", "BIH", "BIH", "BIH"],
        "V2": [70, 70, 70, 70, 70],
        "V2A": [70, 70, 70, 70, 70],
        "V3": [1, 2, 3, 4, 5],
        "V4": [1, 1, 1, 1, 1],
        "V5": [1, 1, 1, 1, 1],
        "V6": [1, 2, 2, 1, 2],
    })
    table = LabelledTable(data=data)

    # Variable labels
    table.set_variable_label("COW", "colum1")
    table.set_variable_label("V2", "colum2")
    table.set_variable_label("V2A", "colum3")
    table.set_variable_label("V4", "colum4")
    table.set_variable_label("V5", "colum5")
    table.set_variable_label("V6", "colum6")

    # Value labels
    table.set_value_labels("COW", {346: "Bosnia and Herzegovina"})
    table.set_value_labels("V2", {70: "Bosnia Herzegovina"})
    table.set_value_labels("V2A", {70: "Bosnia Herzegovina"})
    table.set_value_labels("V4", {1: "Very important"})
    table.set_value_labels("V5", {1: "Very important"})
    table.set_value_labels("V6", {1: "Very important", 2: "Rather important"})

    return table
