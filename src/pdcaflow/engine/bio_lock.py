# SPDX-License-Identifier: MIT

from typing import NamedTuple

from pdcaflow.model.bio_clock import BioClockConfig
from pdcaflow.time import time_to_minutes

SLEEP_LABEL = "Sleep"


class BioLock(NamedTuple):
    locked: bool
    label: str


UNLOCKED = BioLock(False, "")


def lock(time_of_day: str, config: BioClockConfig) -> BioLock:
    """
    Work out whether a time of day is held by a meal or by sleep.

    Meals are checked first, in configuration order, so an earlier meal wins
    when two overlap. The sleep window may wrap midnight. Its end (the wake
    up time) is never locked.

    Args:
        time_of_day: 'HH:MM' time to test
        config: the biological clock to test against

    Returns:
        BioLock with the meal name or the sleep label when locked
    """
    minutes = time_to_minutes(time_of_day)

    for meal in config["meals"]:
        meal_start = time_to_minutes(meal["time"])
        if meal_start <= minutes < meal_start + meal["duration"]:
            return BioLock(True, meal["name"])

    sleep_start = time_to_minutes(config["sleep_window"][0])
    sleep_end = time_to_minutes(config["sleep_window"][1])
    if sleep_start > sleep_end:
        if minutes >= sleep_start or minutes < sleep_end:
            return BioLock(True, SLEEP_LABEL)
    elif sleep_start <= minutes < sleep_end:
        return BioLock(True, SLEEP_LABEL)

    return UNLOCKED


def system_labels(config: BioClockConfig) -> set[str]:
    return {SLEEP_LABEL} | {meal["name"] for meal in config["meals"]}


def wake_up_time(config: BioClockConfig) -> str:
    return config["sleep_window"][1]
