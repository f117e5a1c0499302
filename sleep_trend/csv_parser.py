"""
CSV ingestion for Sleep vs Stress Trend.

Turns raw survey text into validated ``Record`` objects.  Handles:

- Header-name column lookup (column order is irrelevant, extra
  columns are ignored)
- UTF-8 BOM markers
- Quoted fields containing the delimiter
- Per-row numeric validation (malformed rows are skipped and reported,
  never fatal)

Structural problems (empty input, missing required columns) raise
``EmptyInputError`` / ``SchemaError`` and nothing is ingested.
"""

import csv
import io
import math
import os
import re
import warnings
from typing import Dict, List, Optional, Tuple

from .constants import (
    COL_DEPARTMENT, COL_GENDER, COL_GRADE, COL_SLEEP, COL_STRESS,
    CSV_DELIMITER, LARGE_FILE_BYTES, NUMERIC_COLUMNS, REQUIRED_COLUMNS,
)
from .data_model import IngestResult, Record, RowDiagnostic
from .errors import EmptyInputError, RowParseWarning, SchemaError

# Cap on examples quoted in the skipped-rows warning
_MAX_WARNING_EXAMPLES = 10

# ASCII decimal with optional exponent: "7", "-0.5", ".5", "6.", "1e-3"
_DECIMAL_RE = re.compile(r'[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?', re.ASCII)


def _parse_float(text: str) -> float:
    """Parse a standard decimal string into a finite float.

    Raises ``ValueError`` for empty, non-numeric, or non-finite
    (``nan``, ``inf``, ``1e999``) values.  Underscore separators and
    non-ASCII digits are rejected even though ``float()`` accepts them.
    """
    s = text.strip()
    if not s:
        raise ValueError("empty string")
    if not _DECIMAL_RE.fullmatch(s):
        raise ValueError(f"not a decimal number: {s!r}")
    result = float(s)
    if not math.isfinite(result):
        raise ValueError(f"non-finite value: {s!r}")
    return result


def _split_line(line: str) -> List[str]:
    """Split one line on the comma delimiter, trimming every field.

    ``csv.reader`` keeps quoted fields such as ``"Arts, Design"``
    in one piece.
    """
    rows = list(csv.reader([line], delimiter=CSV_DELIMITER))
    if rows:
        return [t.strip() for t in rows[0]]
    return []


def _column_index(header_tokens: List[str]) -> Dict[str, int]:
    """Map header name → column position.  Last occurrence wins."""
    index: Dict[str, int] = {}
    for pos, name in enumerate(header_tokens):
        index[name] = pos
    return index


def _split_lines(text: str) -> List[str]:
    """Split on ``\\n``, ``\\r`` and ``\\r\\n`` only.

    ``str.splitlines`` would also break on characters such as U+2028
    or form feed that may legitimately appear inside a field.
    """
    return [line.rstrip('\n') for line in io.StringIO(text, newline=None)]


def _parse_row(
    tokens: List[str],
    col_index: Dict[str, int],
    min_tokens: int,
) -> Tuple[Optional[Record], str]:
    """Build a ``Record`` from *tokens*, or return ``(None, reason)``."""
    if len(tokens) < min_tokens:
        return None, (
            f"short row: {len(tokens)} field(s), expected at least {min_tokens}"
        )

    numbers = {}
    for col in NUMERIC_COLUMNS:
        cell = tokens[col_index[col]]
        if not cell:
            return None, f"missing '{col}'"
        try:
            numbers[col] = _parse_float(cell)
        except ValueError:
            return None, f"non-numeric '{col}': {cell!r}"

    record = Record(
        sleep_hours=numbers[COL_SLEEP],
        stress_level=numbers[COL_STRESS],
        grade=tokens[col_index[COL_GRADE]],
        gender=tokens[col_index[COL_GENDER]],
        department=tokens[col_index[COL_DEPARTMENT]],
    )
    return record, ""


def _warn_skipped(diagnostics: List[RowDiagnostic], source: str) -> None:
    """Emit one summary ``RowParseWarning`` for all skipped rows."""
    examples = [
        f"line {d.line_number}: {d.reason}"
        for d in diagnostics[:_MAX_WARNING_EXAMPLES]
    ]
    detail = "; ".join(examples)
    if len(diagnostics) > _MAX_WARNING_EXAMPLES:
        detail += f" ... and {len(diagnostics) - _MAX_WARNING_EXAMPLES} more"
    warnings.warn(
        f"Skipped {len(diagnostics)} malformed row(s) in {source}: {detail}.",
        RowParseWarning,
        stacklevel=3,
    )


def ingest(text: str, *, source: str = "CSV input") -> IngestResult:
    """Parse survey CSV text into validated records.

    Parameters
    ----------
    text : str
        Raw CSV text; the first line is the header row.
    source : str
        Label used in warning messages (e.g. a file name).

    Returns
    -------
    IngestResult
        ``(records, diagnostics)``.  Records keep input row order;
        each diagnostic describes one skipped row.

    Raises
    ------
    EmptyInputError
        If the text is empty or its header line is blank.
    SchemaError
        If any required column is absent from the header.
    """
    if text.startswith('\ufeff'):
        text = text[1:]
    lines = _split_lines(text)
    if not lines or not lines[0].strip():
        raise EmptyInputError(f"{source} is empty: no header row found.")

    # ── Header row ──
    header_tokens = _split_line(lines[0])
    col_index = _column_index(header_tokens)
    missing = [c for c in REQUIRED_COLUMNS if c not in col_index]
    if missing:
        raise SchemaError(missing)
    min_tokens = max(col_index[c] for c in REQUIRED_COLUMNS) + 1

    # ── Data rows ──
    records: List[Record] = []
    diagnostics: List[RowDiagnostic] = []

    for line_number, raw_line in enumerate(lines[1:], start=2):
        if not raw_line.strip():
            continue
        record, reason = _parse_row(_split_line(raw_line), col_index, min_tokens)
        if record is None:
            diagnostics.append(RowDiagnostic(line_number, reason, raw_line))
            continue
        records.append(record)

    if diagnostics:
        _warn_skipped(diagnostics, source)

    return IngestResult(records, diagnostics)


def load_sleep_csv(filepath: str) -> IngestResult:
    """Read a survey CSV from disk and ingest it.

    Raises
    ------
    FileNotFoundError
        If *filepath* does not exist.
    EmptyInputError, SchemaError
        As for ``ingest``.
    """
    if not os.path.isfile(filepath):
        raise FileNotFoundError(f"CSV file not found: {filepath}")

    file_size = os.path.getsize(filepath)
    if file_size > LARGE_FILE_BYTES:
        warnings.warn(
            f"File is very large ({file_size / (1024 * 1024):.0f} MB). "
            f"Consider subsampling for analysis.",
            stacklevel=2,
        )

    with open(filepath, 'r', encoding='utf-8-sig', newline='') as fh:
        text = fh.read()
    return ingest(text, source=f"'{os.path.basename(filepath)}'")
