"""
Example data generator for Sleep vs Stress Trend.

Creates a synthetic student survey CSV for testing and demonstration.
Stress falls as sleep rises, with a per-grade offset so the grouped
trend lines separate visibly.  The required columns are written in a
non-canonical order next to an extra ``Student_ID`` column, and a few
rows are deliberately malformed to exercise the row-skipping logic.
"""

import io
import os
import random

from .constants import (
    COL_DEPARTMENT, COL_GENDER, COL_GRADE, COL_SLEEP, COL_STRESS,
)

_HEADER = [
    'Student_ID', COL_GENDER, COL_SLEEP, COL_DEPARTMENT, COL_STRESS, COL_GRADE,
]
_GRADES = ['A', 'B', 'C', 'D', 'F']
_GENDERS = ['Female', 'Male']
_DEPARTMENTS = ['Engineering', 'Business', 'CS', 'Mathematics']

# Stress offset per grade (lower grades report more stress)
_GRADE_STRESS_OFFSET = {'A': -1.0, 'B': -0.5, 'C': 0.0, 'D': 0.5, 'F': 1.0}

# Every n-th generated row is replaced by a malformed one
_MALFORMED_EVERY = 50


def example_csv_text(n_rows: int = 200, seed: int = 42) -> str:
    """Return synthetic survey CSV text with *n_rows* data rows."""
    # Reproducible randomness
    rng = random.Random(seed)
    buf = io.StringIO()
    buf.write(','.join(_HEADER) + '\n')

    for i in range(1, n_rows + 1):
        student_id = f"S{i:04d}"
        grade = rng.choice(_GRADES)
        gender = rng.choice(_GENDERS)
        department = rng.choice(_DEPARTMENTS)

        if i % _MALFORMED_EVERY == 0:
            buf.write(f"{student_id},{gender},N/A,{department},5,{grade}\n")
            continue

        sleep = min(max(rng.gauss(6.8, 1.3), 3.0), 10.5)
        stress = 10.5 - 0.9 * sleep + _GRADE_STRESS_OFFSET[grade]
        stress = min(max(stress + rng.gauss(0.0, 1.0), 1.0), 10.0)

        buf.write(
            f"{student_id},{gender},{sleep:.1f},{department},"
            f"{round(stress)},{grade}\n"
        )

    return buf.getvalue()


def generate_example_csv(output_path: str, n_rows: int = 200, seed: int = 42) -> str:
    """Write an example survey CSV to *output_path* and return the path."""
    parent = os.path.dirname(output_path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(output_path, 'w', encoding='utf-8', newline='') as fh:
        fh.write(example_csv_text(n_rows=n_rows, seed=seed))
    return output_path


if __name__ == '__main__':
    # Quick demo: generate, aggregate by every attribute, print the export
    import tempfile
    import warnings

    from .aggregator import aggregate
    from .constants import GROUP_ATTRIBUTES
    from .csv_parser import load_sleep_csv
    from .export import format_series

    path = generate_example_csv(
        os.path.join(tempfile.gettempdir(), 'sleep_trend_example.csv'))
    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        result = load_sleep_csv(path)
    print(f"{path}: {len(result.records)} records, "
          f"{result.skipped_count} skipped")
    for attribute in GROUP_ATTRIBUTES:
        print(f"\n## Grouped by {attribute}\n")
        print(format_series(aggregate(result.records, attribute)))
