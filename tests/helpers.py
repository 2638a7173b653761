# SPDX-License-Identifier: MIT

from pdcaflow.model.daily_record import DailyRecord
from pdcaflow.model.time_block import TimeBlock
from pdcaflow.template.daily_record import get_daily_record_template
from pdcaflow.template.time_block import get_time_block_template


def make_record(date: str, times: list[str]) -> DailyRecord:
    """A record with blank ordinary blocks and no pinned config."""
    record = get_daily_record_template(date)
    record["time_blocks"] = [get_time_block_template(date, time) for time in times]
    return record


def block_at(record: DailyRecord, time: str, wake_up: bool = False) -> TimeBlock:
    for block in record["time_blocks"]:
        if block["time"] == time and block["id"].endswith("-WAKEUP") == wake_up:
            return block
    raise KeyError(time)


def spans(record: DailyRecord, column: str) -> list[int]:
    return [block[column]["span"] for block in record["time_blocks"]]  # type: ignore[literal-required]
