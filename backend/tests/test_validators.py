"""
Unit tests for field validators and date helpers.
"""

from datetime import date

import pytest

from backend.app.domain.validators import is_valid_location, is_non_empty, get_initials
from backend.app.domain.dates import (
    normalize_shipment_date,
    format_display_date,
    is_date_in_past,
    days_between,
)


@pytest.mark.parametrize("location", ["Berlin", "New York", "Frankfurt am Main", ""])
def test_location_without_digits_is_valid(location):
    assert is_valid_location(location) is True


@pytest.mark.parametrize("location", ["Berlin5", "10115 Berlin", "0"])
def test_location_with_digits_is_invalid(location):
    assert is_valid_location(location) is False


def test_non_empty_trims_whitespace():
    assert is_non_empty("Anna") is True
    assert is_non_empty("  Anna ") is True
    assert is_non_empty("") is False
    assert is_non_empty("   \t") is False


def test_initials():
    assert get_initials("John Doe") == "JD"
    assert get_initials("maria schmidt") == "MS"
    assert get_initials("Cher") == "C"
    assert get_initials("") == ""


# Date helpers

@pytest.mark.parametrize("raw, expected", [
    ("2025-06-01", "2025-06-01"),
    ("2025-06-01T10:00:00.000Z", "2025-06-01"),
    ("2025-06-01T23:30:00-02:00", "2025-06-02"),
    ("01.06.2025", "2025-06-01"),
    (date(2025, 6, 1), "2025-06-01"),
    ("0999-01-05", "0999-01-05"),
    ("05.01.0999", "0999-01-05"),
])
def test_normalize_shipment_date(raw, expected):
    assert normalize_shipment_date(raw) == expected


@pytest.mark.parametrize("raw", ["", "   ", "not-a-date", "2025-13-01", "32.01.2025"])
def test_normalize_shipment_date_rejects_garbage(raw):
    with pytest.raises(ValueError):
        normalize_shipment_date(raw)


def test_format_display_date():
    assert format_display_date("2025-06-01") == "01.06.2025"
    assert format_display_date("garbage") == "Invalid date"


def test_early_years_keep_four_digits():
    assert format_display_date("0050-03-04") == "04.03.0050"
    assert is_date_in_past(normalize_shipment_date("0050-03-04"), date(2025, 6, 10)) is True
    assert days_between("0999-12-31", "1000-01-01") == 1


def test_is_date_in_past():
    today = date(2025, 6, 10)
    assert is_date_in_past("2025-06-09", today) is True
    assert is_date_in_past("2025-06-10", today) is False
    assert is_date_in_past("2025-06-11", today) is False
    assert is_date_in_past("garbage", today) is False


def test_days_between():
    assert days_between("2025-06-01", "2025-06-08") == 7
    assert days_between("2025-06-08", "2025-06-01") == -7
    assert days_between("garbage", "2025-06-01") == 0
