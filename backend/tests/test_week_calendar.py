from __future__ import annotations

from datetime import date, datetime

import pytest

from agenda.services.week_calendar import (
    format_week_range,
    get_day_name,
    get_monday_of,
    get_week_days,
    is_monday,
    minutes_to_time,
    parse_iso_date,
    time_to_minutes,
)


def test_week_days_are_monday_to_friday():
    assert get_week_days("2026-02-16") == [
        date(2026, 2, 16),
        date(2026, 2, 17),
        date(2026, 2, 18),
        date(2026, 2, 19),
        date(2026, 2, 20),
    ]


def test_week_days_cross_month_boundary():
    days = get_week_days(date(2026, 3, 30))
    assert days[0] == date(2026, 3, 30)
    assert days[-1] == date(2026, 4, 3)


def test_monday_of_any_day_in_week():
    assert get_monday_of(date(2026, 2, 19)) == date(2026, 2, 16)
    assert get_monday_of("2026-02-22") == date(2026, 2, 16)
    assert get_monday_of(date(2026, 2, 16)) == date(2026, 2, 16)


def test_is_monday():
    assert is_monday("2026-02-16")
    assert not is_monday(date(2026, 2, 17))


def test_day_name():
    assert get_day_name("2026-02-16") == "Monday"
    assert get_day_name(date(2026, 2, 20)) == "Friday"


def test_format_week_range_same_month():
    assert format_week_range("2026-02-16") == "Feb 16 – 20, 2026"


def test_format_week_range_spanning_months():
    assert format_week_range("2026-03-30") == "Mar 30 – Apr 3, 2026"


def test_time_round_trip_examples():
    assert time_to_minutes("09:00") == 540
    assert time_to_minutes("13:30") == 810
    assert time_to_minutes("20:00") == 1200
    assert minutes_to_time(930) == "15:30"
    assert minutes_to_time(0) == "00:00"
    assert minutes_to_time(605) == "10:05"


@pytest.mark.parametrize("value", ["9am", "25:00", "12:60", "", "10:00:00"])
def test_time_to_minutes_rejects_malformed_values(value):
    with pytest.raises(ValueError):
        time_to_minutes(value)


def test_parse_iso_date_passes_dates_through():
    day = date(2026, 2, 16)
    assert parse_iso_date(day) is day
    assert parse_iso_date(" 2026-02-16 ") == day


def test_datetimes_are_reduced_to_their_date():
    assert parse_iso_date(datetime(2026, 2, 16, 14, 30)) == date(2026, 2, 16)
    assert type(parse_iso_date(datetime(2026, 2, 16, 14, 30))) is date
    assert get_week_days(datetime(2026, 2, 16, 8, 0))[4] == date(2026, 2, 20)
    assert get_monday_of(datetime(2026, 2, 19, 23, 59)) == date(2026, 2, 16)
