# SPDX-License-Identifier: MIT

from copy import deepcopy

import pytest

from helpers import block_at, make_record
from pdcaflow.engine.edit import (
    edit_check,
    edit_do,
    edit_plan,
    set_day_summary,
    set_primary_tasks,
)
from pdcaflow.engine.error import AbsorbedCell, BioLockedCell, InvalidTime
from pdcaflow.engine.span import set_span

DATE = "2024-01-10"
BLOCK_ID = f"{DATE}-09:00"


@pytest.fixture
def record():
    return make_record(DATE, ["09:00", "10:00"])


def test_edit_plan(record):
    before = deepcopy(record)

    new_record = edit_plan(
        record, BLOCK_ID, content="Write", is_primary=True, start_time="09:10"
    )

    plan = block_at(new_record, "09:00")["plan"]
    assert plan["content"] == "Write"
    assert plan["is_primary"] is True
    assert plan["start_time"] == "09:10"
    assert record == before

    cleared = edit_plan(new_record, BLOCK_ID, remove_start_time=True)
    assert block_at(cleared, "09:00")["plan"]["start_time"] is None


def test_edit_plan_of_locked_block(record):
    record["time_blocks"][0]["plan"]["is_bio_locked"] = True

    with pytest.raises(BioLockedCell):
        edit_plan(record, BLOCK_ID, content="Nap")


def test_edit_rejects_malformed_time(record):
    with pytest.raises(InvalidTime):
        edit_plan(record, BLOCK_ID, end_time="9:30")
    with pytest.raises(InvalidTime):
        edit_do(record, BLOCK_ID, start_time="25:00")


def test_edit_do(record):
    new_record = edit_do(
        record, BLOCK_ID, status="partial", actual_content="Half the report"
    )

    do = block_at(new_record, "09:00")["do"]
    assert do["status"] == "partial"
    assert do["actual_content"] == "Half the report"

    with pytest.raises(ValueError):
        edit_do(record, BLOCK_ID, status="finished")  # type: ignore[arg-type]


def test_absorbed_cells_cannot_be_edited(record):
    merged = set_span(record, BLOCK_ID, "do", "merge")

    with pytest.raises(AbsorbedCell):
        edit_do(merged, f"{DATE}-10:00", status="completed")
    # Check follows the Do grouping
    with pytest.raises(AbsorbedCell):
        edit_check(merged, f"{DATE}-10:00", comment="late")
    edit_plan(merged, f"{DATE}-10:00", content="still editable")


def test_edit_check_tags(record):
    new_record = edit_check(
        record,
        BLOCK_ID,
        efficiency="high",
        add_tags=["focus", "writing", "focus"],
    )
    new_record = edit_check(
        new_record, BLOCK_ID, add_tags=["writing", "meeting"], remove_tags=["focus"]
    )

    check = block_at(new_record, "09:00")["check"]
    assert check["efficiency"] == "high"
    assert check["tags"] == ["writing", "meeting"]

    unrated = edit_check(new_record, BLOCK_ID, remove_efficiency=True)
    assert block_at(unrated, "09:00")["check"]["efficiency"] is None


def test_primary_tasks_and_summary(record):
    new_record = set_day_summary(
        set_primary_tasks(record, ["Ship v1", "Write docs"]), "Good day"
    )

    assert new_record["primary_tasks"] == ["Ship v1", "Write docs"]
    assert new_record["day_summary"] == "Good day"

    with pytest.raises(ValueError):
        set_primary_tasks(record, ["a", "b", "c"])
