# SPDX-License-Identifier: MIT

from typing import Optional

from pdcaflow.model.weekly_plan import WeeklyPlan

PRIMARY_TASK_COUNT = 2


def resolve_primary_tasks(date: str, weekly_plan: Optional[WeeklyPlan]) -> list[str]:
    """Default primary tasks for a date, empty strings when the week has no preset."""
    if weekly_plan is None:
        return [""] * PRIMARY_TASK_COUNT
    presets = weekly_plan["daily_presets"].get(date)
    if presets is None:
        return [""] * PRIMARY_TASK_COUNT
    return (list(presets) + [""] * PRIMARY_TASK_COUNT)[:PRIMARY_TASK_COUNT]
