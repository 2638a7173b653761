# SPDX-License-Identifier: MIT

from pdcaflow.model.daily_record import DailyRecord


def get_daily_record_template(date: str) -> DailyRecord:
    return {
        "date": date,
        "primary_tasks": ["", ""],
        "day_summary": "",
        "time_blocks": [],
        "bio_config": None,
    }
