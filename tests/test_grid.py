# SPDX-License-Identifier: MIT

import pytest

from pdcaflow.engine.bio_lock import SLEEP_LABEL
from pdcaflow.engine.grid import build_anchor_times, create_daily_record
from pdcaflow.engine.preset import resolve_primary_tasks
from pdcaflow.template.weekly_plan import get_weekly_plan_template

DATE = "2024-01-10"


@pytest.fixture
def weekly_plan():
    weekly_plan = get_weekly_plan_template("2024-W02", "2024-01-08")
    weekly_plan["daily_presets"][DATE] = ["Ship v1", "Write docs"]
    return weekly_plan


def test_default_anchor_times_are_hourly():
    anchors = build_anchor_times()

    assert len(anchors) == 24
    assert anchors[0] == "00:00"
    assert anchors[-1] == "23:00"


def test_custom_anchor_times():
    assert build_anchor_times("09:00", "10:00", 30) == ["09:00", "09:30", "10:00"]


@pytest.mark.parametrize(
    "start,end,interval", [("09:00", "10:00", 0), ("10:00", "09:00", 60)]
)
def test_invalid_grid_settings(start, end, interval):
    with pytest.raises(ValueError):
        build_anchor_times(start, end, interval)


def test_create_daily_record(bio_config):
    record = create_daily_record(DATE, build_anchor_times(), bio_config)

    assert record["date"] == DATE
    assert record["primary_tasks"] == ["", ""]
    assert record["day_summary"] == ""
    assert record["bio_config"] == bio_config
    # 24 anchors plus the wake up block
    assert len(record["time_blocks"]) == 25
    by_id = {block["id"]: block for block in record["time_blocks"]}
    assert by_id[f"{DATE}-00:00"]["plan"]["content"] == SLEEP_LABEL
    assert by_id[f"{DATE}-12:00"]["plan"]["content"] == "Lunch"
    assert by_id[f"{DATE}-18:00"]["plan"]["is_bio_locked"] is True
    assert by_id[f"{DATE}-07:00"]["plan"]["is_bio_locked"] is False
    assert by_id[f"{DATE}-09:00"]["plan"]["content"] == ""
    assert all(
        block["plan"]["span"] == 1 and block["do"]["span"] == 1
        for block in record["time_blocks"]
    )


def test_create_daily_record_collapses_duplicate_anchors(bio_config):
    record = create_daily_record(DATE, ["09:00", "10:00", "09:00"], bio_config)

    assert [block["id"] for block in record["time_blocks"]] == [
        f"{DATE}-07:00-WAKEUP",
        f"{DATE}-09:00",
        f"{DATE}-10:00",
    ]


def test_create_daily_record_takes_presets(bio_config, weekly_plan):
    record = create_daily_record(DATE, build_anchor_times(), bio_config, weekly_plan)

    assert record["primary_tasks"] == ["Ship v1", "Write docs"]


def test_resolve_primary_tasks(weekly_plan):
    assert resolve_primary_tasks(DATE, weekly_plan) == ["Ship v1", "Write docs"]
    assert resolve_primary_tasks("2024-01-11", weekly_plan) == ["", ""]
    assert resolve_primary_tasks(DATE, None) == ["", ""]

    weekly_plan["daily_presets"][DATE] = ["Only one"]
    assert resolve_primary_tasks(DATE, weekly_plan) == ["Only one", ""]
