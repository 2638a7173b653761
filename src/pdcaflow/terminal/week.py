# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from pdcaflow.model.weekly_plan import WeeklyPlan
from pdcaflow.repository.daily_record import DAILY_RECORD_REPO
from pdcaflow.service.week import (
    get_weekly_plan,
    set_daily_preset,
    set_theme,
    set_weekly_summary,
)
from pdcaflow.terminal.custom_typer import AliasedTyperGroup
from pdcaflow.terminal.error import exit_on_error
from pdcaflow.terminal.parse import parse_date
from pdcaflow.time import week_date_strs
from pdcaflow.view.week import week_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

DateOption = Annotated[
    Optional[str],
    typer.Option("--date", "-d", help="Any day of the week, defaults to today"),
]


def __show(weekly_plan: WeeklyPlan) -> None:
    week_view(
        weekly_plan,
        {
            date: DAILY_RECORD_REPO.get_daily_record(date)
            for date in week_date_strs(weekly_plan["start_date"])
        },
    )


@app.command("show, s")
def show(date: DateOption = None) -> None:
    """Show a week with its theme and daily presets."""
    __show(get_weekly_plan(parse_date(date)))


@app.command("theme, t", no_args_is_help=True)
def theme(text: str, date: DateOption = None) -> None:
    """Set the theme of a week."""
    __show(set_theme(parse_date(date), text))


@app.command("preset, p", no_args_is_help=True)
def preset(day: str, first: str, second: str) -> None:
    """
    Preset the two primary tasks for DAY.

    Days that already exist keep their primary tasks.
    """
    with exit_on_error():
        weekly_plan = set_daily_preset(parse_date(day), [first, second])
    __show(weekly_plan)


@app.command("summary, su", no_args_is_help=True)
def summary(text: str, date: DateOption = None) -> None:
    """Set the summary of a week."""
    __show(set_weekly_summary(parse_date(date), text))
