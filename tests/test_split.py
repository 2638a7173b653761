# SPDX-License-Identifier: MIT

from copy import deepcopy

import pytest

from helpers import block_at, make_record, spans
from pdcaflow.engine.bio_lock import SLEEP_LABEL
from pdcaflow.engine.error import (
    BlockNotFound,
    DuplicateTimePoint,
    InvalidSplitTime,
    InvalidTime,
)
from pdcaflow.engine.edit import edit_do
from pdcaflow.engine.grid import build_anchor_times, create_daily_record
from pdcaflow.engine.reconcile import reconcile
from pdcaflow.engine.span import is_visible, set_span
from pdcaflow.engine.split import split

DATE = "2024-01-10"


@pytest.fixture
def record():
    return make_record(DATE, ["09:00", "10:00"])


def test_split_moves_tagged_plan_text(record):
    record["time_blocks"][0]["plan"]["content"] = "[09:15] Write report\nOther stuff"

    new_record = split(record, f"{DATE}-09:00", "09:15")

    assert [block["time"] for block in new_record["time_blocks"]] == [
        "09:00",
        "09:15",
        "10:00",
    ]
    new_block = block_at(new_record, "09:15")
    assert new_block["id"] == f"{DATE}-09:15"
    assert new_block["plan"]["content"] == "Write report"
    assert new_block["plan"]["span"] == 1
    assert new_block["do"]["span"] == 1
    assert new_block["do"]["status"] == "none"
    assert block_at(new_record, "09:00")["plan"]["content"] == "Other stuff"


def test_split_moves_tagged_do_text(record):
    record["time_blocks"][0]["do"]["actual_content"] = "Emails [09:40] Standup ran long"

    new_record = split(record, f"{DATE}-09:00", "09:40")

    assert block_at(new_record, "09:40")["do"]["actual_content"] == "Standup ran long"
    assert block_at(new_record, "09:00")["do"]["actual_content"] == "Emails"


def test_split_without_tag_leaves_target(record):
    record["time_blocks"][0]["plan"]["content"] = "Deep work"

    new_record = split(record, f"{DATE}-09:00", "09:30")

    assert block_at(new_record, "09:30")["plan"]["content"] == ""
    assert block_at(new_record, "09:00")["plan"]["content"] == "Deep work"


@pytest.mark.parametrize("new_time", ["08:30", "09:00"])
def test_split_time_must_be_later(record, new_time):
    with pytest.raises(InvalidSplitTime):
        split(record, f"{DATE}-09:00", new_time)


def test_split_onto_existing_time(record):
    before = deepcopy(record)

    with pytest.raises(DuplicateTimePoint):
        split(record, f"{DATE}-09:00", "10:00")
    assert record == before


@pytest.mark.parametrize("new_time", ["9:30", "24:00", "09:60"])
def test_split_rejects_malformed_time(record, new_time):
    with pytest.raises(InvalidTime):
        split(record, f"{DATE}-09:00", new_time)


def test_split_unknown_block(record):
    with pytest.raises(BlockNotFound):
        split(record, f"{DATE}-08:00", "08:30")


def test_split_inside_merged_run_heads_rest_of_run(record):
    record["time_blocks"].append(make_record(DATE, ["11:00"])["time_blocks"][0])
    merged = set_span(record, f"{DATE}-09:00", "plan", "merge")

    new_record = split(merged, f"{DATE}-09:00", "09:30")

    assert spans(new_record, "plan") == [1, 2, 0, 1]
    assert spans(new_record, "do") == [1, 1, 1, 1]


def test_split_out_of_merged_do_cell_is_visible(record):
    record["time_blocks"].append(make_record(DATE, ["11:00"])["time_blocks"][0])
    merged = set_span(record, f"{DATE}-09:00", "do", "merge")
    do = merged["time_blocks"][0]["do"]
    do["actual_content"] = "Emails\n[09:40] Standup ran long"

    new_record = split(merged, f"{DATE}-09:00", "09:40")

    assert spans(new_record, "do") == [1, 2, 0, 1]
    new_block = block_at(new_record, "09:40")
    assert new_block["do"]["actual_content"] == "Standup ran long"
    assert is_visible(new_block, "do")
    assert is_visible(new_block, "check")
    assert block_at(new_record, "09:00")["do"]["actual_content"] == "Emails"

    edited = edit_do(new_record, f"{DATE}-09:40", status="completed")
    assert block_at(edited, "09:40")["do"]["status"] == "completed"


def test_split_of_locked_block_stays_locked(bio_config):
    record = create_daily_record(DATE, build_anchor_times(), bio_config)

    new_record = split(record, f"{DATE}-00:00", "00:30")

    new_block = block_at(new_record, "00:30")
    assert new_block["plan"]["is_bio_locked"] is True
    assert new_block["plan"]["content"] == SLEEP_LABEL
    assert reconcile(new_record) == new_record
