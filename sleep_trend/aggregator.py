"""
Grouping / binning aggregator for Sleep vs Stress Trend.

Partitions records by a categorical attribute (Grade, Gender or
Department), bins each group's sleep hours into fixed-width intervals
of ``BIN_SIZE`` hours, and averages every bin into one ``Point``.

Points within a series are ordered by their averaged sleep value
(``x``), not by bin index.  Ties in ``x`` keep the order in which their
bins were first seen.

Bins are folded from immutable accumulator tuples that live only for
the duration of one ``aggregate`` call.
"""

import math
from fractions import Fraction
from typing import Dict, Iterable, List, NamedTuple, Sequence, Tuple

import numpy as np

from .constants import BIN_SIZE, DEFAULT_GROUP_ATTRIBUTE, GROUP_ATTRIBUTES
from .data_model import Point, Record, Series


class _BinAccumulator(NamedTuple):
    sum_sleep: float
    sum_stress: float
    count: int

    def add(self, record: Record) -> "_BinAccumulator":
        return _BinAccumulator(
            self.sum_sleep + record.sleep_hours,
            self.sum_stress + record.stress_level,
            self.count + 1,
        )

    def to_point(self) -> Point:
        return Point(
            x=self.sum_sleep / self.count,
            y=self.sum_stress / self.count,
        )


_EMPTY_BIN = _BinAccumulator(0.0, 0.0, 0)


def bin_index(sleep_hours: float, bin_size: float = BIN_SIZE) -> int:
    """Return ``floor(sleep_hours / bin_size)`` as an unbounded int.

    Falls back to exact rational arithmetic when the float division
    overflows, so every finite input still gets its own bin.

    Examples
    --------
    >>> bin_index(7.2)
    14
    >>> bin_index(-0.1)
    -1
    """
    quotient = sleep_hours / bin_size
    if math.isinf(quotient):
        return math.floor(Fraction(sleep_hours) / Fraction(bin_size))
    return math.floor(quotient)


def _field_for(group_by: str) -> str:
    """Resolve a grouping attribute name to its ``Record`` field."""
    try:
        return GROUP_ATTRIBUTES[group_by]
    except KeyError:
        accepted = ", ".join(f"'{a}'" for a in GROUP_ATTRIBUTES)
        raise ValueError(
            f"Unknown grouping attribute {group_by!r}; expected one of {accepted}."
        ) from None


def _bin_group(records: Sequence[Record], bin_size: float) -> Tuple[Point, ...]:
    """Fold one group's records into bins and return its ordered points."""
    bins: Dict[int, _BinAccumulator] = {}
    for record in records:
        idx = bin_index(record.sleep_hours, bin_size)
        bins[idx] = bins.get(idx, _EMPTY_BIN).add(record)

    points = [acc.to_point() for acc in bins.values()]
    return tuple(sorted(points, key=lambda p: p.x))


def aggregate(
    records: Iterable[Record],
    group_by: str = DEFAULT_GROUP_ATTRIBUTE,
    *,
    bin_size: float = BIN_SIZE,
) -> Dict[str, Series]:
    """Group, bin and average *records* into one ``Series`` per group.

    Parameters
    ----------
    records : iterable of Record
        Validated records, typically ``ingest(text).records``.
    group_by : str
        ``"Grade"`` (default), ``"Gender"`` or ``"Department"``.
    bin_size : float
        Width of each sleep-hours bin (default 0.5 h).

    Returns
    -------
    dict
        ``{group_key: Series}``.  Empty input gives an empty dict.
        Callers must not rely on key order; use ``ordered_series``.

    Raises
    ------
    ValueError
        If *group_by* is not an accepted grouping attribute.
    """
    field_name = _field_for(group_by)

    groups: Dict[str, List[Record]] = {}
    for record in records:
        groups.setdefault(getattr(record, field_name), []).append(record)

    return {
        key: Series(key=key, points=_bin_group(members, bin_size))
        for key, members in groups.items()
    }


def ordered_series(series_map: Dict[str, Series]) -> List[Series]:
    """Return the series of *series_map* sorted by group key."""
    return [series_map[key] for key in sorted(series_map)]


def series_arrays(series: Series) -> Tuple[np.ndarray, np.ndarray]:
    """Return ``(x, y)`` float arrays for handing a series to a chart."""
    return (
        np.array(series.xs, dtype=float),
        np.array(series.ys, dtype=float),
    )
