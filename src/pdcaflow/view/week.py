# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pdcaflow.model.daily_record import DailyRecord
from pdcaflow.model.weekly_plan import WeeklyPlan
from pdcaflow.time import date_to_display_str, week_date_strs
from pdcaflow.view.header import header


def week_view(
    weekly_plan: WeeklyPlan, daily_records: dict[str, Optional[DailyRecord]]
) -> None:
    """Show the week's theme and, per day, its presets or stored primary tasks."""
    header(weekly_plan["week_id"], weekly_plan["theme"] or None)

    week_table = Table(box=box.SIMPLE)
    week_table.add_column("day", no_wrap=True)
    week_table.add_column("preset")
    week_table.add_column("primary tasks")
    week_table.add_column("summary")

    for date in week_date_strs(weekly_plan["start_date"]):
        preset = weekly_plan["daily_presets"].get(date)
        daily_record = daily_records.get(date)
        primary_tasks = ""
        summary = ""
        if daily_record is not None:
            primary_tasks = " | ".join(
                escape(task) for task in daily_record["primary_tasks"] if task
            )
            summary = escape(daily_record["day_summary"])
        week_table.add_row(
            date_to_display_str(date),
            " | ".join(escape(task) for task in preset if task) if preset else "",
            primary_tasks,
            summary,
        )

    console = Console()
    console.print(week_table)
    if weekly_plan["weekly_summary"]:
        console.print(f" [bold]Summary[/bold] {escape(weekly_plan['weekly_summary'])}")
