# SPDX-License-Identifier: MIT

from pdcaflow.model.weekly_plan import WeeklyPlan


def get_weekly_plan_template(week_id: str, start_date: str) -> WeeklyPlan:
    return {
        "id": week_id,
        "week_id": week_id,
        "theme": "",
        "start_date": start_date,
        "daily_presets": {},
        "weekly_summary": "",
    }
