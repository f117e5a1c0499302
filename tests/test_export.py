"""
Tests for the plain-text series export.
"""

import pytest

from sleep_trend.aggregator import aggregate
from sleep_trend.data_model import Point, Series
from sleep_trend.errors import EmptyInputError
from sleep_trend.export import export_filename, format_series


class TestFormatSeries:
    """Block layout and number formatting."""

    def test_example_export(self, sample_records):
        text = format_series(aggregate(sample_records, "Grade"))
        assert text == (
            "=== Chart Export ===\n"
            "\n"
            "Dataset: A\n"
            "Avg Sleep   ,Avg Stress  \n"
            "7.30        ,7.00        \n"
            "\n"
            "Dataset: B\n"
            "Avg Sleep   ,Avg Stress  \n"
            "3.10        ,9.00        \n"
            "\n"
        )

    def test_one_block_per_group(self, sample_records):
        text = format_series(aggregate(sample_records, "Department"))
        assert text.count("Dataset: ") == 2
        assert "Dataset: CS\n" in text
        assert "Dataset: EE\n" in text

    def test_blocks_sorted_by_key(self):
        series_map = {
            "Male": Series("Male", (Point(7.0, 4.0),)),
            "Female": Series("Female", (Point(6.0, 5.0),)),
        }
        text = format_series(series_map)
        assert text.index("Dataset: Female") < text.index("Dataset: Male")

    def test_same_output_regardless_of_insertion_order(self):
        a = Series("A", (Point(1.0, 2.0),))
        b = Series("B", (Point(3.0, 4.0),))
        assert format_series({"A": a, "B": b}) == format_series({"B": b, "A": a})

    def test_points_keep_series_order(self):
        series = Series("A", (Point(5.25, 8.0), Point(6.75, 3.333)))
        lines = format_series({"A": series}).splitlines()
        assert lines[4].startswith("5.25")
        assert lines[5].startswith("6.75")
        assert lines[5].split(",")[1].strip() == "3.33"

    def test_wide_values_are_not_truncated(self):
        series = Series("A", (Point(123456789.5, -0.004),))
        row = format_series({"A": series}).splitlines()[4]
        assert row.split(",") == ["123456789.50", "-0.00       "]

    def test_empty_map_is_an_error(self):
        with pytest.raises(EmptyInputError):
            format_series({})


class TestExportFilename:
    """Default file names offered by the adapter."""

    @pytest.mark.parametrize("attribute, expected", [
        ("Grade", "sleep_stress_by_grade.txt"),
        ("Department", "sleep_stress_by_department.txt"),
        ("Study Year/Term", "sleep_stress_by_study_year_term.txt"),
    ])
    def test_names(self, attribute, expected):
        assert export_filename(attribute) == expected
