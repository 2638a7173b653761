# SPDX-License-Identifier: MIT

import logging

from pdcaflow.engine.error import InvalidTime
from pdcaflow.engine.reconcile import apply_bio_config
from pdcaflow.model.bio_clock import BioClockConfig, Meal
from pdcaflow.repository.bio_clock import BIO_CLOCK_REPO
from pdcaflow.repository.configuration import CONFIGURATION_REPO
from pdcaflow.repository.daily_record import DAILY_RECORD_REPO
from pdcaflow.time import is_time_of_day, today_local_date_str

logger = logging.getLogger(__name__)


def validate_bio_clock(config: BioClockConfig) -> None:
    if len(config["sleep_window"]) != 2:
        raise ValueError("the sleep window needs a start and an end time")
    for time in config["sleep_window"]:
        if not is_time_of_day(time):
            raise InvalidTime(time)
    for meal in config["meals"]:
        if not is_time_of_day(meal["time"]):
            raise InvalidTime(meal["time"])
        if meal["duration"] <= 0:
            raise ValueError(f"meal {meal['name']} needs a positive duration")


def update_bio_clock(config: BioClockConfig) -> list[str]:
    """
    Replace the live biological clock.

    When rebasing is enabled, stored days from today onwards are locked
    against the new clock and pinned to it. Earlier days keep the clock they
    were created with.

    Returns:
        Dates of the rebased days
    """
    validate_bio_clock(config)
    BIO_CLOCK_REPO.set_bio_clock(config)

    if not CONFIGURATION_REPO.get_config()["rebase_future_on_bio_change"]:
        return []

    rebased_dates = []
    for daily_record in DAILY_RECORD_REPO.get_daily_records_from(
        today_local_date_str()
    ):
        DAILY_RECORD_REPO.save_daily_record(apply_bio_config(daily_record, config))
        rebased_dates.append(daily_record["date"])
    logger.info("rebased %d days onto the new bio clock", len(rebased_dates))
    return rebased_dates


def set_sleep_window(start: str, end: str) -> list[str]:
    config = BIO_CLOCK_REPO.get_bio_clock()
    config["sleep_window"] = [start, end]
    return update_bio_clock(config)


def add_meal(name: str, time: str, duration: int) -> list[str]:
    config = BIO_CLOCK_REPO.get_bio_clock()
    meal: Meal = {"name": name, "time": time, "duration": duration}
    config["meals"] = [
        existing for existing in config["meals"] if existing["name"] != name
    ]
    config["meals"].append(meal)
    return update_bio_clock(config)


def remove_meal(name: str) -> list[str]:
    config = BIO_CLOCK_REPO.get_bio_clock()
    meals = [meal for meal in config["meals"] if meal["name"] != name]
    if len(meals) == len(config["meals"]):
        raise ValueError(f"no meal named {name}")
    config["meals"] = meals
    return update_bio_clock(config)


def set_sleep_fold(enabled: bool) -> None:
    # Folding is display only, stored days are left alone
    config = BIO_CLOCK_REPO.get_bio_clock()
    config["enable_sleep_fold"] = enabled
    BIO_CLOCK_REPO.set_bio_clock(config)
