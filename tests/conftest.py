"""Shared fixtures for the Sleep vs Stress Trend tests."""

import pytest

from sleep_trend.data_model import Record

HEADER = "Sleep_Hours_per_Night,Stress_Level (1-10),Grade,Gender,Department"


@pytest.fixture
def sample_text():
    """Three valid rows: two in grade A (same bin), one in grade B."""
    return "\n".join([
        HEADER,
        "7.2,6,A,F,CS",
        "7.4,8,A,F,CS",
        "3.1,9,B,M,EE",
    ]) + "\n"


@pytest.fixture
def sample_records():
    return [
        Record(7.2, 6.0, "A", "F", "CS"),
        Record(7.4, 8.0, "A", "F", "CS"),
        Record(3.1, 9.0, "B", "M", "EE"),
    ]
