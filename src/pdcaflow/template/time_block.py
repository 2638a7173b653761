# SPDX-License-Identifier: MIT

from pdcaflow.model.entity_id import block_id
from pdcaflow.model.time_block import TimeBlock


def get_time_block_template(date: str, time: str, wake_up: bool = False) -> TimeBlock:
    return {
        "id": block_id(date, time, wake_up),
        "time": time,
        "plan": {
            "content": "",
            "start_time": None,
            "end_time": None,
            "is_primary": False,
            "is_bio_locked": False,
            "span": 1,
        },
        "do": {
            "status": "none",
            "actual_content": "",
            "start_time": None,
            "end_time": None,
            "span": 1,
        },
        "check": {
            "efficiency": None,
            "tags": [],
            "comment": "",
        },
    }
