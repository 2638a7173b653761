# SPDX-License-Identifier: MIT

from typing import Annotated

import typer
from rich.console import Console

from pdcaflow.repository.bio_clock import BIO_CLOCK_REPO
from pdcaflow.service.bio_clock import (
    add_meal,
    remove_meal,
    set_sleep_fold,
    set_sleep_window,
)
from pdcaflow.terminal.custom_typer import AliasedTyperGroup
from pdcaflow.terminal.error import exit_on_error
from pdcaflow.terminal.parse import parse_time
from pdcaflow.view.bio_clock import bio_clock_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def __report(rebased_dates: list[str]) -> None:
    bio_clock_view(BIO_CLOCK_REPO.get_bio_clock())
    if len(rebased_dates) > 0:
        Console().print(
            f" [green]Rebased {len(rebased_dates)} days:[/green] "
            + ", ".join(rebased_dates)
        )


@app.command("show, s")
def show() -> None:
    """Show the sleep window and meals."""
    bio_clock_view(BIO_CLOCK_REPO.get_bio_clock())


@app.command("sleep, sl", no_args_is_help=True)
def sleep(start: str, end: str) -> None:
    """
    Set the sleep window, e.g. 23:00 07:00.

    The window may wrap midnight. END is the wake up time.
    """
    with exit_on_error():
        rebased_dates = set_sleep_window(parse_time(start), parse_time(end))
    __report(rebased_dates)


@app.command("meal-add, ma", no_args_is_help=True)
def meal_add(
    name: str,
    time: str,
    duration: Annotated[
        int, typer.Option("--duration", "-du", help="Minutes, defaults to 60")
    ] = 60,
) -> None:
    """Add a meal, or replace the meal with the same name."""
    with exit_on_error():
        rebased_dates = add_meal(name, parse_time(time), duration)
    __report(rebased_dates)


@app.command("meal-remove, mr", no_args_is_help=True)
def meal_remove(name: str) -> None:
    """Remove a meal by name."""
    with exit_on_error():
        rebased_dates = remove_meal(name)
    __report(rebased_dates)


@app.command("fold, f", no_args_is_help=True)
def fold(
    enabled: Annotated[bool, typer.Argument(help="true or false")],
) -> None:
    """Fold consecutive sleep blocks into one row in the day view."""
    set_sleep_fold(enabled)
    bio_clock_view(BIO_CLOCK_REPO.get_bio_clock())
