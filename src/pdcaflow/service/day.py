# SPDX-License-Identifier: MIT

import logging
from typing import Callable

from pdcaflow.engine.edit import set_day_summary, set_primary_tasks
from pdcaflow.engine.grid import build_anchor_times, create_daily_record
from pdcaflow.engine.preset import PRIMARY_TASK_COUNT
from pdcaflow.engine.reconcile import reconcile
from pdcaflow.model.daily_record import DailyRecord
from pdcaflow.repository.bio_clock import BIO_CLOCK_REPO
from pdcaflow.repository.configuration import CONFIGURATION_REPO
from pdcaflow.repository.daily_record import DAILY_RECORD_REPO
from pdcaflow.service.week import find_weekly_plan
from pdcaflow.time import add_days_to_date_str

logger = logging.getLogger(__name__)


def get_anchor_times() -> list[str]:
    config = CONFIGURATION_REPO.get_config()
    return build_anchor_times(
        config["grid_start"], config["grid_end"], config["grid_interval_minutes"]
    )


def get_daily_record(date: str) -> DailyRecord:
    """
    Load the record for a date and reconcile it, creating it on first read.

    A new day is built from the configured grid, the live biological clock
    and the presets of its week, then stored.
    """
    stored_record = DAILY_RECORD_REPO.get_daily_record(date)
    if stored_record is not None:
        return reconcile(stored_record)

    daily_record = create_daily_record(
        date,
        get_anchor_times(),
        BIO_CLOCK_REPO.get_bio_clock(),
        find_weekly_plan(date),
    )
    DAILY_RECORD_REPO.save_daily_record(daily_record)
    return daily_record


def update_daily_record(daily_record: DailyRecord) -> None:
    DAILY_RECORD_REPO.save_daily_record(daily_record)


def modify_daily_record(
    date: str, transform: Callable[[DailyRecord], DailyRecord]
) -> DailyRecord:
    """
    Apply an engine operation to a day and store the result.

    When the operation raises, nothing is stored.
    """
    daily_record = transform(get_daily_record(date))
    update_daily_record(daily_record)
    return daily_record


def reset_day(date: str) -> DailyRecord:
    DAILY_RECORD_REPO.delete_daily_record(date)
    logger.info("reset %s", date)
    return get_daily_record(date)


def close_day(
    date: str, day_summary: str, next_primary_tasks: list[str]
) -> DailyRecord:
    """
    Finish a day: store its summary and seed the next day's primary tasks.

    Returns:
        The next day's record
    """
    if len(next_primary_tasks) != PRIMARY_TASK_COUNT:
        raise ValueError(
            f"the next day needs exactly {PRIMARY_TASK_COUNT} primary tasks, "
            f"got {len(next_primary_tasks)}"
        )
    modify_daily_record(date, lambda record: set_day_summary(record, day_summary))
    next_date = add_days_to_date_str(date, 1)
    next_record = modify_daily_record(
        next_date, lambda record: set_primary_tasks(record, next_primary_tasks)
    )
    logger.info("closed %s, primary tasks seeded for %s", date, next_date)
    return next_record
