"""
Text export for Sleep vs Stress Trend.

Renders aggregated series as human-readable, column-aligned tables:
one block per group, blocks sorted by group key so identical input
always produces identical output.  Writing the text to disk is left to
the caller.

Example output::

    === Chart Export ===

    Dataset: A
    Avg Sleep   ,Avg Stress
    7.30        ,7.00

"""

from typing import Dict, List

from .aggregator import ordered_series
from .constants import (
    EXPORT_BLOCK_PREFIX, EXPORT_COLUMN_WIDTH, EXPORT_COLUMNS,
    EXPORT_DECIMALS, EXPORT_FILENAME_TEMPLATE, EXPORT_SEPARATOR,
    EXPORT_TITLE,
)
from .data_model import Series
from .errors import EmptyInputError


def _format_row(left: str, right: str) -> str:
    """Left-align two cells in fixed-width columns."""
    w = EXPORT_COLUMN_WIDTH
    return f"{left:<{w}}{EXPORT_SEPARATOR}{right:<{w}}"


def _format_block(series: Series) -> List[str]:
    d = EXPORT_DECIMALS
    lines = [
        f"{EXPORT_BLOCK_PREFIX}{series.key}",
        _format_row(*EXPORT_COLUMNS),
    ]
    for pt in series.points:
        lines.append(_format_row(f"{pt.x:.{d}f}", f"{pt.y:.{d}f}"))
    lines.append("")
    return lines


def format_series(series_map: Dict[str, Series]) -> str:
    """Format aggregated series as plain-text tables.

    Parameters
    ----------
    series_map : dict
        ``{group_key: Series}`` as returned by ``aggregate``.

    Returns
    -------
    str
        Newline-terminated text, one block per group.

    Raises
    ------
    EmptyInputError
        If *series_map* is empty.
    """
    if not series_map:
        raise EmptyInputError("No data available for export.")

    lines = [EXPORT_TITLE, ""]
    for series in ordered_series(series_map):
        lines.extend(_format_block(series))
    return "\n".join(lines) + "\n"


def export_filename(group_by: str) -> str:
    """Default export file name for a grouping attribute.

    Examples
    --------
    >>> export_filename("Department")
    'sleep_stress_by_department.txt'
    """
    safe_name = "".join(
        c if c.isalnum() or c in '-_ ' else '_'
        for c in group_by
    ).strip().replace(' ', '_').lower()
    return EXPORT_FILENAME_TEMPLATE.format(attribute=safe_name)
