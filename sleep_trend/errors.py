"""
Exception and warning types for Sleep vs Stress Trend.

Structural failures (empty input, missing required columns) are raised
as ``ValueError`` subclasses so callers that already guard with
``except ValueError`` keep working.  Row-level problems are never
raised: ingestion skips the row, records a diagnostic, and emits one
summary ``RowParseWarning``.
"""

from typing import Iterable, Tuple


class SleepTrendError(ValueError):
    """Base class for structural pipeline failures."""


class EmptyInputError(SleepTrendError):
    """Raised for an empty CSV / blank header, or an empty series map on export."""


class SchemaError(SleepTrendError):
    """Raised when one or more required columns are absent from the header.

    Parameters
    ----------
    missing_columns : iterable of str
        Names of the absent columns, in required-column order.
    """

    def __init__(self, missing_columns: Iterable[str]):
        self.missing_columns: Tuple[str, ...] = tuple(missing_columns)
        names = ", ".join(f"'{c}'" for c in self.missing_columns)
        super().__init__(f"CSV is missing required column(s): {names}.")


class RowParseWarning(UserWarning):
    """Emitted once per ingestion when data rows were skipped."""
