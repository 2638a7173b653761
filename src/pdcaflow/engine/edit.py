# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from pdcaflow.engine.block import find_block_index
from pdcaflow.engine.error import AbsorbedCell, BioLockedCell, InvalidTime
from pdcaflow.engine.preset import PRIMARY_TASK_COUNT
from pdcaflow.model.daily_record import DailyRecord
from pdcaflow.model.time_block import (
    EFFICIENCY_RATINGS,
    EXECUTION_STATUSES,
    EfficiencyRating,
    ExecutionStatus,
    TimeBlock,
)
from pdcaflow.time import is_time_of_day


def __validate_time_optional(time: Optional[str]) -> None:
    if time is not None and not is_time_of_day(time):
        raise InvalidTime(time)


def __editable_block(
    record: DailyRecord, block_id: str, column: str
) -> TimeBlock:
    block = record["time_blocks"][find_block_index(record["time_blocks"], block_id)]
    span_column = "do" if column == "check" else column
    if block[span_column]["span"] == 0:  # type: ignore[literal-required]
        raise AbsorbedCell(block_id, column)
    return block


def edit_plan(
    record: DailyRecord,
    block_id: str,
    content: Optional[str] = None,
    is_primary: Optional[bool] = None,
    start_time: Optional[str] = None,
    end_time: Optional[str] = None,
    remove_start_time: bool = False,
    remove_end_time: bool = False,
) -> DailyRecord:
    __validate_time_optional(start_time)
    __validate_time_optional(end_time)

    new_record = deepcopy(record)
    block = __editable_block(new_record, block_id, "plan")
    plan = block["plan"]
    if plan["is_bio_locked"]:
        raise BioLockedCell(block_id)

    if content is not None:
        plan["content"] = content
    if is_primary is not None:
        plan["is_primary"] = is_primary
    if start_time is not None:
        plan["start_time"] = start_time
    if end_time is not None:
        plan["end_time"] = end_time

    if remove_start_time:
        plan["start_time"] = None
    if remove_end_time:
        plan["end_time"] = None
    return new_record


def edit_do(
    record: DailyRecord,
    block_id: str,
    status: Optional[ExecutionStatus] = None,
    actual_content: Optional[str] = None,
    start_time: Optional[str] = None,
    end_time: Optional[str] = None,
    remove_start_time: bool = False,
    remove_end_time: bool = False,
) -> DailyRecord:
    if status is not None and status not in EXECUTION_STATUSES:
        raise ValueError(f"unknown execution status: {status}")
    __validate_time_optional(start_time)
    __validate_time_optional(end_time)

    new_record = deepcopy(record)
    do = __editable_block(new_record, block_id, "do")["do"]

    if status is not None:
        do["status"] = status
    if actual_content is not None:
        do["actual_content"] = actual_content
    if start_time is not None:
        do["start_time"] = start_time
    if end_time is not None:
        do["end_time"] = end_time

    if remove_start_time:
        do["start_time"] = None
    if remove_end_time:
        do["end_time"] = None
    return new_record


def edit_check(
    record: DailyRecord,
    block_id: str,
    efficiency: Optional[EfficiencyRating] = None,
    comment: Optional[str] = None,
    add_tags: Optional[list[str]] = None,
    remove_tags: Optional[list[str]] = None,
    remove_efficiency: bool = False,
) -> DailyRecord:
    if efficiency is not None and efficiency not in EFFICIENCY_RATINGS:
        raise ValueError(f"unknown efficiency rating: {efficiency}")

    new_record = deepcopy(record)
    check = __editable_block(new_record, block_id, "check")["check"]

    if efficiency is not None:
        check["efficiency"] = efficiency
    if comment is not None:
        check["comment"] = comment
    if add_tags is not None:
        # Deduplicate tags
        check["tags"] = list(dict.fromkeys(check["tags"] + add_tags))
    if remove_tags is not None:
        check["tags"] = [tag for tag in check["tags"] if tag not in remove_tags]

    if remove_efficiency:
        check["efficiency"] = None
    return new_record


def set_primary_tasks(record: DailyRecord, primary_tasks: list[str]) -> DailyRecord:
    if len(primary_tasks) != PRIMARY_TASK_COUNT:
        raise ValueError(
            f"a day has exactly {PRIMARY_TASK_COUNT} primary tasks, got {len(primary_tasks)}"
        )
    new_record = deepcopy(record)
    new_record["primary_tasks"] = list(primary_tasks)
    return new_record


def set_day_summary(record: DailyRecord, day_summary: str) -> DailyRecord:
    new_record = deepcopy(record)
    new_record["day_summary"] = day_summary
    return new_record
