"""
Demo: Describe the example survey table, merge its labels and export the codebook.
"""

import warnings

from varlabels.examples import build_example_table
from varlabels.merge import set_label, set_labels_by_pattern
from varlabels.summary import describe_columns, list_variables
from varlabels.serialization import codebook_to_yaml


def print_section(title, frame):
    print()
    print("=" * 70)
    print(title)
    print("=" * 70)
    print(frame.to_string(index=False))


if __name__ == "__main__":
    table = build_example_table()

    print_section("VARIABLES", list_variables(table))
    print_section("CODEBOOK (first category per variable)", describe_columns(table, limit=1))

    labelled = set_label(table, "V6")
    print_section("V6 WITH LABELS", labelled.data[["V6", "V6_label"]])

    # V3 has no value labels; report it instead of raising
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        labelled = set_labels_by_pattern(table, pattern="^V")
    for w in caught:
        print(f"⚠️  {w.message}")
    print_section("ALL V* COLUMNS WITH LABELS", labelled.data)

    # Also save the codebook to YAML for inspection
    yaml_str = codebook_to_yaml(table)
    with open("example_codebook.yaml", "w") as f:
        f.write(yaml_str)
    print(f"✅ Codebook exported to example_codebook.yaml")
