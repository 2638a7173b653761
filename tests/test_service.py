# SPDX-License-Identifier: MIT

import pytest

from helpers import block_at
from pdcaflow.engine.bio_lock import SLEEP_LABEL
from pdcaflow.engine.edit import edit_plan
from pdcaflow.engine.error import InvalidTime
from pdcaflow.repository.configuration import CONFIGURATION_REPO
from pdcaflow.repository.daily_record import DAILY_RECORD_REPO
from pdcaflow.repository.task_pool import TASK_POOL_REPO
from pdcaflow.service.bio_clock import add_meal, remove_meal, set_sleep_window
from pdcaflow.service.day import (
    close_day,
    get_daily_record,
    modify_daily_record,
    reset_day,
)
from pdcaflow.service.task_pool import (
    add_task_item,
    complete_task_item,
    schedule_task_item,
)
from pdcaflow.service.week import get_weekly_plan, set_daily_preset, set_theme
from pdcaflow.time import add_days_to_date_str, today_local_date_str

DATE = "2024-01-10"


def test_first_read_creates_and_stores_day(data_path):
    record = get_daily_record(DATE)

    assert len(record["time_blocks"]) == 25
    assert DAILY_RECORD_REPO.get_daily_record(DATE) == record
    assert get_daily_record(DATE) == record


def test_grid_settings_shape_new_days(data_path):
    CONFIGURATION_REPO.update_config(
        grid_start="08:00", grid_end="10:00", grid_interval_minutes=30
    )

    record = get_daily_record(DATE)

    assert [block["time"] for block in record["time_blocks"]] == [
        "07:00",
        "08:00",
        "08:30",
        "09:00",
        "09:30",
        "10:00",
    ]


def test_weekly_presets_only_reach_new_days(data_path):
    get_daily_record(DATE)
    set_daily_preset(DATE, ["Ship v1", "Write docs"])
    set_daily_preset("2024-01-11", ["Review", ""])

    assert get_daily_record(DATE)["primary_tasks"] == ["", ""]
    assert get_daily_record("2024-01-11")["primary_tasks"] == ["Review", ""]


def test_weekly_plan_for_new_week(data_path):
    weekly_plan = get_weekly_plan(DATE)

    assert weekly_plan["week_id"] == "2024-W02"
    assert weekly_plan["start_date"] == "2024-01-08"

    set_theme("2024-01-14", "Launch")
    assert get_weekly_plan(DATE)["theme"] == "Launch"


def test_bio_clock_change_rebases_from_today_only(data_path):
    today = today_local_date_str()
    yesterday = add_days_to_date_str(today, -1)
    get_daily_record(yesterday)
    get_daily_record(today)

    rebased_dates = set_sleep_window("22:00", "06:00")

    assert rebased_dates == [today]
    assert block_at(get_daily_record(today), "22:00")["plan"]["content"] == SLEEP_LABEL
    past = get_daily_record(yesterday)
    assert block_at(past, "22:00")["plan"]["is_bio_locked"] is False
    assert block_at(past, "07:00", wake_up=True)["plan"]["content"] == "Wake up"


def test_bio_clock_change_without_rebase(data_path):
    CONFIGURATION_REPO.update_config(rebase_future_on_bio_change=False)
    today = today_local_date_str()
    get_daily_record(today)

    assert add_meal("Snack", "15:00", 30) == []
    assert block_at(get_daily_record(today), "15:00")["plan"]["is_bio_locked"] is False
    tomorrow = add_days_to_date_str(today, 1)
    assert block_at(get_daily_record(tomorrow), "15:00")["plan"]["content"] == "Snack"


def test_invalid_bio_clock_is_rejected(data_path):
    with pytest.raises(InvalidTime):
        add_meal("Snack", "25:00", 30)
    with pytest.raises(ValueError):
        add_meal("Snack", "15:00", 0)
    with pytest.raises(ValueError):
        remove_meal("Brunch")


def test_close_day_seeds_next_day(data_path):
    next_record = close_day(DATE, "Shipped", ["Write docs", "Rest"])

    assert next_record["date"] == "2024-01-11"
    assert next_record["primary_tasks"] == ["Write docs", "Rest"]
    assert get_daily_record(DATE)["day_summary"] == "Shipped"


def test_close_day_with_wrong_task_count_stores_nothing(data_path):
    with pytest.raises(ValueError):
        close_day(DATE, "Shipped", ["Only one"])

    assert DAILY_RECORD_REPO.get_all_dates() == []


def test_reset_day_discards_edits(data_path):
    modify_daily_record(
        DATE,
        lambda record: edit_plan(record, f"{DATE}-09:00", content="Write"),
    )

    record = reset_day(DATE)

    assert block_at(record, "09:00")["plan"]["content"] == ""


def test_task_pool_scheduling(data_path):
    first = add_task_item("Refactor parser")
    second = add_task_item("Update changelog")
    third = add_task_item("Plan sprint")

    schedule_task_item(first["id"], DATE)
    record = schedule_task_item(second["id"], DATE)

    assert record["primary_tasks"] == ["Refactor parser", "Update changelog"]
    assert TASK_POOL_REPO.get_task_item(first["id"])["status"] == "scheduled"
    with pytest.raises(ValueError):
        schedule_task_item(third["id"], DATE)
    assert TASK_POOL_REPO.get_task_item(third["id"])["status"] == "pending"

    complete_task_item(third["id"])
    assert [item["title"] for item in TASK_POOL_REPO.get_open_task_items()] == [
        "Refactor parser",
        "Update changelog",
    ]
