"""
Errors and warnings raised by the label registry.

Every hard failure derives from LabelError so callers can catch the whole
family at once. The one soft case (a column with nothing to merge) is a
warning, not an error.
"""

from typing import Iterable, List


class LabelError(Exception):
    """Base class for label registry errors."""
    pass


class NotATableError(LabelError):
    """Raised when an argument is not a LabelledTable wrapping a DataFrame."""
    pass


class UnknownColumnError(LabelError):
    """Raised when one or more named columns are absent from the table."""

    def __init__(self, columns: Iterable):
        self.columns: List = list(columns)
        names = ", ".join(str(c) for c in self.columns)
        if len(self.columns) == 1:
            message = f"Column does not exist in the table: {names}"
        else:
            message = f"The following columns do not exist in the table: {names}"
        super().__init__(message)


class EmptyColumnListError(LabelError):
    """Raised when a bulk operation is given no column names."""
    pass


class NoMatchError(LabelError):
    """Raised when a column-name pattern matches nothing."""

    def __init__(self, pattern: str):
        self.pattern = pattern
        super().__init__(f"No columns match the provided pattern: {pattern!r}")


class NoLabelsWarning(UserWarning):
    """Emitted when a merge is requested for a column without value labels."""
    pass
