"""
Tests for the example survey generator, run end to end through the pipeline.
"""

import pytest

from sleep_trend.aggregator import aggregate
from sleep_trend.constants import GROUP_ATTRIBUTES
from sleep_trend.csv_parser import ingest, load_sleep_csv
from sleep_trend.errors import RowParseWarning
from sleep_trend.example_data import example_csv_text, generate_example_csv
from sleep_trend.export import format_series


class TestExampleData:
    """Synthetic data exercises the full pipeline."""

    def test_reproducible(self):
        assert example_csv_text(seed=1) == example_csv_text(seed=1)
        assert example_csv_text(seed=1) != example_csv_text(seed=2)

    def test_malformed_rows_are_skipped(self):
        with pytest.warns(RowParseWarning):
            result = ingest(example_csv_text(n_rows=200))
        assert result.skipped_count == 4
        assert len(result.records) == 196

    def test_writes_file(self, tmp_path):
        path = generate_example_csv(str(tmp_path / "out" / "survey.csv"), n_rows=20)
        result = load_sleep_csv(path)
        assert len(result.records) == 20
        assert result.skipped_count == 0

    @pytest.mark.parametrize("attribute", list(GROUP_ATTRIBUTES))
    def test_pipeline(self, attribute):
        with pytest.warns(RowParseWarning):
            records, _ = ingest(example_csv_text())
        series_map = aggregate(records, attribute)
        assert series_map
        text = format_series(series_map)
        assert text.count("Dataset: ") == len(series_map)
