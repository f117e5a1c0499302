"""
Tests for group colour lookup.
"""

import pytest

from sleep_trend.constants import DEFAULT_GROUP_COLOR, group_color


@pytest.mark.parametrize("attribute, key, expected", [
    ("Grade", "F", "#e74c3c"),
    ("Grade", "A", "#2ecc71"),
    ("Grade", "E", "#9b59b6"),
    ("Gender", "Male", "#3498db"),
    ("Gender", "", "#9b59b6"),
    ("Department", "CS", "#e74c3c"),
    ("Department", "History", "#e67e22"),
])
def test_group_color(attribute, key, expected):
    assert group_color(attribute, key) == expected


def test_unknown_attribute_uses_default():
    assert group_color("Age", "20") == DEFAULT_GROUP_COLOR
