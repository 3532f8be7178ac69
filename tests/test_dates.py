"""Tests for Brazilian date parsing."""

from datetime import datetime

import pytest

from procsheet.engine.dates import parse_brazilian_date


class TestParseBrazilianDate:
    """Test parse_brazilian_date."""

    def test_date_with_hours_and_minutes(self):
        assert parse_brazilian_date("01/01/2023 10:00") == datetime(2023, 1, 1, 10, 0)

    def test_date_with_seconds(self):
        assert parse_brazilian_date("31/12/2023 23:59:59") == datetime(2023, 12, 31, 23, 59, 59)

    def test_date_only_defaults_to_midnight(self):
        assert parse_brazilian_date("15/03/2024") == datetime(2024, 3, 15, 0, 0, 0)

    def test_hour_only(self):
        assert parse_brazilian_date("02/02/2023 11") == datetime(2023, 2, 2, 11, 0)

    def test_month_is_one_based(self):
        """The month in the text maps to the same calendar month."""
        parsed = parse_brazilian_date("05/07/2022")
        assert (parsed.day, parsed.month, parsed.year) == (5, 7, 2022)

    @pytest.mark.parametrize(
        "value",
        [
            "2023-01-01",
            "01/01",
            "00/01/2023",
            "01/13/2023",
            "32/01/2023",
            "aa/bb/cccc",
            "01/01/2023 ab:cd",
            " 01/01/2023",
            "",
        ],
    )
    def test_unparseable_text_returned_unchanged(self, value):
        assert parse_brazilian_date(value) == value

    @pytest.mark.parametrize("value", [None, 45000, 3.5, datetime(2020, 1, 1)])
    def test_non_string_passes_through(self, value):
        assert parse_brazilian_date(value) is value
