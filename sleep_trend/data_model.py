"""
Data model for Sleep vs Stress Trend.

Immutable value types passed between pipeline stages.  ``Record``
objects are built only by ``csv_parser`` after a row parses cleanly;
``Point`` and ``Series`` are produced by ``aggregator`` and handed
read-only to the export formatter or a chart renderer.

The loaded dataset itself is never held here.  Callers own the list of
records and pass it into each pipeline call.
"""

from dataclasses import dataclass
from typing import List, NamedTuple, Tuple


@dataclass(frozen=True)
class Record:
    """One validated survey row.

    Parameters
    ----------
    sleep_hours : float
        ``Sleep_Hours_per_Night``; always finite.
    stress_level : float
        ``Stress_Level (1-10)``; always finite (not range-checked).
    grade, gender, department : str
        Categorical attributes, whitespace-trimmed.  May be empty.
    """
    sleep_hours: float
    stress_level: float
    grade: str
    gender: str
    department: str


@dataclass(frozen=True)
class RowDiagnostic:
    """Why a data row was skipped during ingestion.

    Parameters
    ----------
    line_number : int
        1-based line number in the input text (the header is line 1).
    reason : str
        Human-readable cause, e.g. ``"non-numeric 'Stress_Level (1-10)': 'N/A'"``.
    raw_line : str
        The offending line as read.
    """
    line_number: int
    reason: str
    raw_line: str


class IngestResult(NamedTuple):
    """Outcome of one ingestion call.

    A named tuple so callers can unpack ``records, errors = ingest(text)``.
    """
    records: List[Record]
    diagnostics: List[RowDiagnostic]

    @property
    def skipped_count(self) -> int:
        return len(self.diagnostics)


@dataclass(frozen=True)
class Point:
    """Averaged bin: ``x`` = mean sleep hours, ``y`` = mean stress."""
    x: float
    y: float


@dataclass(frozen=True)
class Series:
    """Trend points for one group, ordered ascending by ``x``.

    Parameters
    ----------
    key : str
        Group key, i.e. the value of the grouping attribute.
    points : tuple of Point
        Never empty for a series produced by ``aggregate``.
    """
    key: str
    points: Tuple[Point, ...]

    @property
    def xs(self) -> Tuple[float, ...]:
        return tuple(p.x for p in self.points)

    @property
    def ys(self) -> Tuple[float, ...]:
        return tuple(p.y for p in self.points)
