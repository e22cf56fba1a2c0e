"""Package-wide defaults."""

# Suffix for the label column of a lookup table (get_label)
DEFAULT_LOOKUP_SUFFIX = "_labels"

# Suffix for the label column appended by a merge (set_label)
DEFAULT_MERGE_SUFFIX = "_label"

NO_LABELS_FOUND = "No Labels Found"

# Match-all, used by set_labels_by_pattern
DEFAULT_PATTERN = ".*"

SUMMARY_COLUMNS = ["variable_name", "variable_label", "category_value", "category_label"]
LISTING_COLUMNS = ["variable_name", "variable_label"]
