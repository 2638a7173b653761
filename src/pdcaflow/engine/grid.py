# SPDX-License-Identifier: MIT

import logging
from typing import Optional

from pdcaflow.engine.preset import resolve_primary_tasks
from pdcaflow.engine.reconcile import apply_bio_config
from pdcaflow.model.bio_clock import BioClockConfig
from pdcaflow.model.daily_record import DailyRecord
from pdcaflow.model.weekly_plan import WeeklyPlan
from pdcaflow.template.daily_record import get_daily_record_template
from pdcaflow.template.time_block import get_time_block_template
from pdcaflow.time import minutes_to_time, time_to_minutes

logger = logging.getLogger(__name__)


def build_anchor_times(
    start: str = "00:00", end: str = "23:00", interval_minutes: int = 60
) -> list[str]:
    """
    Anchor times from start to end inclusive, every interval_minutes.

    Raises:
        ValueError: if the interval is not positive or end is before start
    """
    if interval_minutes <= 0:
        raise ValueError(f"grid interval must be positive, got {interval_minutes}")
    start_minutes = time_to_minutes(start)
    end_minutes = time_to_minutes(end)
    if end_minutes < start_minutes:
        raise ValueError(f"grid end {end} is before grid start {start}")
    return [
        minutes_to_time(minutes)
        for minutes in range(start_minutes, end_minutes + 1, interval_minutes)
    ]


def create_daily_record(
    date: str,
    anchors: list[str],
    config: BioClockConfig,
    weekly_plan: Optional[WeeklyPlan] = None,
) -> DailyRecord:
    """
    Build the skeleton of a new day.

    One ordinary block per distinct anchor, locks applied from config, config
    pinned to the record, one wake up block, and primary tasks taken from the
    weekly plan presets.
    """
    record = get_daily_record_template(date)
    record["primary_tasks"] = resolve_primary_tasks(date, weekly_plan)
    record["time_blocks"] = [
        get_time_block_template(date, time) for time in dict.fromkeys(anchors)
    ]

    new_record = apply_bio_config(record, config)
    logger.info(
        "created %s with %d blocks", date, len(new_record["time_blocks"])
    )
    return new_record
