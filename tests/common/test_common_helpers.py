from datetime import date, time

import pytest

from src.hr_attendance.hr_attendance.common.datetime_utils import (
    normalize_time,
    parse_iso_date,
    parse_time,
    time_to_seconds,
)
from src.hr_attendance.hr_attendance.common.pagination import paginate
from src.hr_attendance.hr_attendance.common.validators import (
    require_int,
    require_min_length,
    require_non_empty,
    require_range,
)
from src.hr_attendance.hr_attendance.core.exceptions import ValidationError


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("8:5", "08:05:00"),
        ("08:30", "08:30:00"),
        ("22:00:15", "22:00:15"),
        ("08:30 AM", "08:30:00"),
    ],
)
def test_normalize_time_accepts_short_and_suffixed_forms(raw, expected):
    assert normalize_time(raw) == expected


@pytest.mark.parametrize("raw", ["", "8", "24:00", "12:60", "ab:cd", "08:30:00:99", 830])
def test_normalize_time_rejects_garbage(raw):
    with pytest.raises(ValidationError):
        normalize_time(raw)


def test_parse_time_and_seconds():
    assert parse_time("6:00") == time(6, 0)
    assert time_to_seconds("01:02:03") == 3723
    assert time_to_seconds(time(0, 1)) == 60


def test_parse_iso_date():
    assert parse_iso_date("2025-03-01") == date(2025, 3, 1)
    with pytest.raises(ValidationError):
        parse_iso_date("01/03/2025")


def test_validators():
    assert require_non_empty("  Head Office ", "Name") == "Head Office"
    with pytest.raises(ValidationError, match="Name is required"):
        require_non_empty("   ", "Name")

    assert require_min_length("secret1", "Password", 6) == "secret1"
    with pytest.raises(ValidationError, match="at least 6"):
        require_min_length("abc", "Password", 6)

    assert require_range(5, "Hours", minimum=1, maximum=24) == 5
    with pytest.raises(ValidationError):
        require_range(25, "Hours", minimum=1, maximum=24)


def test_paginate_reports_totals():
    page = paginate(list(range(45)), page_number=3, page_size=20)

    assert page["items"] == list(range(40, 45))
    assert page["total_count"] == 45
    assert page["total_pages"] == 3


def test_require_int_accepts_whole_numbers_only():
    assert require_int("7", "Days") == 7
    assert require_int(3.0, "Days") == 3

    for value in (True, 1.9, float("nan"), float("inf"), "1.5", None):
        with pytest.raises(ValidationError):
            require_int(value, "Days")
