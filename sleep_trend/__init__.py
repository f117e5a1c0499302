"""
Sleep vs Stress Trend v1.0.0

Aggregation pipeline for sleep/stress survey data.  Ingests a survey
CSV, groups records by Grade, Gender or Department, bins sleep hours
into 0.5 h intervals and averages each bin into (sleep, stress) trend
points per group.  Results can be handed to a chart renderer or
exported as aligned plain-text tables.
"""

APP_NAME = "Sleep vs Stress Trend"
APP_VERSION = "1.0.0"
APP_DATE = "2026-10-19"
__version__ = APP_VERSION

from .errors import EmptyInputError, RowParseWarning, SchemaError  # noqa: E402
from .data_model import IngestResult, Point, Record, RowDiagnostic, Series  # noqa: E402
from .csv_parser import ingest, load_sleep_csv  # noqa: E402
from .aggregator import aggregate, ordered_series, series_arrays  # noqa: E402
from .export import format_series  # noqa: E402

__all__ = [
    "APP_NAME", "APP_VERSION", "__version__",
    "EmptyInputError", "RowParseWarning", "SchemaError",
    "IngestResult", "Point", "Record", "RowDiagnostic", "Series",
    "ingest", "load_sleep_csv",
    "aggregate", "ordered_series", "series_arrays",
    "format_series",
]
