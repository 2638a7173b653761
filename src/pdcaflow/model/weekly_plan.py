# SPDX-License-Identifier: MIT

from typing import TypedDict


class WeeklyPlan(TypedDict):
    id: str
    week_id: str
    theme: str
    start_date: str
    daily_presets: dict[str, list[str]]
    weekly_summary: str
