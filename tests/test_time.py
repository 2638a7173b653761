# SPDX-License-Identifier: MIT

import pytest

from pdcaflow.time import (
    add_days_to_date_str,
    is_time_of_day,
    minutes_to_time,
    monday_of_week_date_str,
    time_to_minutes,
    week_date_strs,
    week_id_for_date_str,
)


@pytest.mark.parametrize(
    "date,week_id",
    [
        ("2024-01-10", "2024-W02"),
        ("2021-01-03", "2020-W53"),
        ("2024-12-30", "2025-W01"),
    ],
)
def test_iso_week_id(date, week_id):
    assert week_id_for_date_str(date) == week_id


def test_week_dates():
    assert monday_of_week_date_str("2024-01-14") == "2024-01-08"
    assert monday_of_week_date_str("2024-01-08") == "2024-01-08"
    assert week_date_strs("2024-01-10") == [
        "2024-01-08",
        "2024-01-09",
        "2024-01-10",
        "2024-01-11",
        "2024-01-12",
        "2024-01-13",
        "2024-01-14",
    ]


def test_add_days_across_month():
    assert add_days_to_date_str("2024-01-31", 1) == "2024-02-01"


@pytest.mark.parametrize("time", ["00:00", "07:05", "23:59"])
def test_valid_times(time):
    assert is_time_of_day(time)
    assert minutes_to_time(time_to_minutes(time)) == time


@pytest.mark.parametrize("time", ["24:00", "7:05", "12:60", "noon", ""])
def test_invalid_times(time):
    assert not is_time_of_day(time)
