# SPDX-License-Identifier: MIT

import pytest

from pdcaflow.engine.bio_lock import SLEEP_LABEL, lock, system_labels, wake_up_time


@pytest.mark.parametrize("time", ["23:00", "23:30", "00:00", "03:00", "06:59"])
def test_sleep_window_wrapping_midnight_locks(bio_config, time):
    assert lock(time, bio_config) == (True, SLEEP_LABEL)


@pytest.mark.parametrize("time", ["07:00", "09:00", "22:59"])
def test_outside_sleep_window_is_unlocked(bio_config, time):
    assert lock(time, bio_config).locked is False
    assert lock(time, bio_config).label == ""


def test_meal_window_is_half_open(bio_config):
    assert lock("12:00", bio_config) == (True, "Lunch")
    assert lock("12:59", bio_config) == (True, "Lunch")
    assert lock("13:00", bio_config).locked is False


def test_meal_wins_over_sleep(bio_config):
    bio_config["meals"].append({"name": "Night snack", "time": "23:00", "duration": 30})

    assert lock("23:15", bio_config) == (True, "Night snack")
    assert lock("23:30", bio_config) == (True, SLEEP_LABEL)


def test_first_listed_meal_wins_overlap(bio_config):
    bio_config["meals"] = [
        {"name": "Brunch", "time": "11:00", "duration": 90},
        {"name": "Lunch", "time": "12:00", "duration": 60},
    ]

    assert lock("12:15", bio_config) == (True, "Brunch")
    assert lock("12:30", bio_config) == (True, "Lunch")


def test_sleep_window_within_one_day(bio_config):
    bio_config["sleep_window"] = ["01:00", "08:00"]

    assert lock("00:30", bio_config).locked is False
    assert lock("01:00", bio_config) == (True, SLEEP_LABEL)
    assert lock("07:59", bio_config) == (True, SLEEP_LABEL)
    assert lock("08:00", bio_config).locked is False


def test_system_labels_and_wake_up_time(bio_config):
    assert system_labels(bio_config) == {SLEEP_LABEL, "Lunch", "Dinner"}
    assert wake_up_time(bio_config) == "07:00"
