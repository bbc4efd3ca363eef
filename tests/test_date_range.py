"""Tests for DateRange."""

from datetime import date

import pytest
from pydantic import ValidationError

from fio_client.errors import ErrorKind
from fio_client.helpers.date_range import DateRange


class TestDateRange:
    def test_single_day(self):
        result = DateRange.create(date(2024, 5, 1), date(2024, 5, 1))

        assert result.is_success
        assert result.value.start == result.value.end

    def test_reversed_range_fails(self):
        result = DateRange.create(date(2024, 5, 2), date(2024, 5, 1))

        assert result.is_failure
        assert result.error.kind == ErrorKind.INVALID_DATE_RANGE

    def test_reversed_range_raises_on_construction(self):
        with pytest.raises(ValidationError):
            DateRange(start=date(2024, 5, 2), end=date(2024, 5, 1))

    def test_previous_month(self):
        date_range = DateRange.previous_month(date(2024, 3, 15))

        assert date_range.start == date(2024, 2, 1)
        assert date_range.end == date(2024, 2, 29)

    def test_previous_month_in_january(self):
        date_range = DateRange.previous_month(date(2025, 1, 1))

        assert date_range.start == date(2024, 12, 1)
        assert date_range.end == date(2024, 12, 31)

    def test_format(self):
        date_range = DateRange(start=date(2024, 1, 5), end=date(2024, 2, 6))

        assert date_range.format("%Y-%m-%d") == ("2024-01-05", "2024-02-06")
