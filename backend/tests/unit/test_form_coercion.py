"""
Unit tests for form value coercion helpers
"""
import pytest

from jobcost.schemas.common import coerce_flag, coerce_number, to_hours


class TestCoerceNumber:
    """Test reading numbers from form values"""

    @pytest.mark.parametrize("value,expected", [
        (3, 3.0),
        (2.5, 2.5),
        ("12", 12.0),
        (" 7.25 ", 7.25),
        ("$1,250.00", 1250.0),
        ("-4", -4.0),
    ])
    def test_numeric_values(self, value, expected):
        assert coerce_number(value) == expected

    @pytest.mark.parametrize("value", [None, "", "abc", True, float("nan"), float("inf"), "1e999"])
    def test_absent_or_junk_is_zero(self, value):
        assert coerce_number(value) == 0.0


class TestCoerceFlag:
    """Test reading checkbox values"""

    @pytest.mark.parametrize("value", [True, "Yes", "y", "on", "TRUE", "1", "x", 1, {"enabled": "yes"}])
    def test_truthy(self, value):
        assert coerce_flag(value) is True

    @pytest.mark.parametrize("value", [False, None, "No", "", "off", 0, {"enabled": False}, {}])
    def test_falsy(self, value):
        assert coerce_flag(value) is False


class TestToHours:
    """Test duration unit conversion"""

    def test_minutes(self):
        assert to_hours(90, "Minutes") == 1.5
        assert to_hours(30, " minutes ") == 0.5

    def test_hours_and_unknown_units(self):
        assert to_hours(2, "Hours") == 2
        assert to_hours(2, "") == 2
        assert to_hours(2, None) == 2
