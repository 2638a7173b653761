# SPDX-License-Identifier: MIT

from typing import Optional

from pdcaflow.engine.preset import PRIMARY_TASK_COUNT
from pdcaflow.model.weekly_plan import WeeklyPlan
from pdcaflow.repository.weekly_plan import WEEKLY_PLAN_REPO
from pdcaflow.template.weekly_plan import get_weekly_plan_template
from pdcaflow.time import monday_of_week_date_str, week_id_for_date_str


def find_weekly_plan(date: str) -> Optional[WeeklyPlan]:
    """The stored plan for the ISO week containing date, if any."""
    return WEEKLY_PLAN_REPO.get_weekly_plan(week_id_for_date_str(date))


def get_weekly_plan(date: str) -> WeeklyPlan:
    """The plan for the week containing date, or an empty one for a new week."""
    weekly_plan = find_weekly_plan(date)
    if weekly_plan is None:
        return get_weekly_plan_template(
            week_id_for_date_str(date), monday_of_week_date_str(date)
        )
    if not weekly_plan["start_date"]:
        weekly_plan["start_date"] = monday_of_week_date_str(date)
    return weekly_plan


def set_theme(date: str, theme: str) -> WeeklyPlan:
    weekly_plan = get_weekly_plan(date)
    weekly_plan["theme"] = theme
    WEEKLY_PLAN_REPO.save_weekly_plan(weekly_plan)
    return weekly_plan


def set_weekly_summary(date: str, weekly_summary: str) -> WeeklyPlan:
    weekly_plan = get_weekly_plan(date)
    weekly_plan["weekly_summary"] = weekly_summary
    WEEKLY_PLAN_REPO.save_weekly_plan(weekly_plan)
    return weekly_plan


def set_daily_preset(date: str, primary_tasks: list[str]) -> WeeklyPlan:
    """
    Preset the primary tasks for a date in its week's plan.

    Only days created after this call pick the preset up; existing days keep
    their primary tasks.
    """
    if len(primary_tasks) != PRIMARY_TASK_COUNT:
        raise ValueError(
            f"a preset has exactly {PRIMARY_TASK_COUNT} tasks, got {len(primary_tasks)}"
        )
    weekly_plan = get_weekly_plan(date)
    weekly_plan["daily_presets"][date] = list(primary_tasks)
    WEEKLY_PLAN_REPO.save_weekly_plan(weekly_plan)
    return weekly_plan
