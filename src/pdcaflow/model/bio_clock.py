# SPDX-License-Identifier: MIT

from typing import TypedDict


class Meal(TypedDict):
    name: str
    time: str
    duration: int


class BioClockConfig(TypedDict):
    sleep_window: list[str]
    meals: list[Meal]
    enable_sleep_fold: bool
