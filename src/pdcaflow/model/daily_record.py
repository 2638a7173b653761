# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from pdcaflow.model.bio_clock import BioClockConfig
from pdcaflow.model.time_block import TimeBlock


class DailyRecord(TypedDict):
    date: str
    primary_tasks: list[str]
    day_summary: str
    time_blocks: list[TimeBlock]
    bio_config: Optional[BioClockConfig]
