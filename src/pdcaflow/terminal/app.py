# SPDX-License-Identifier: MIT

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from pdcaflow.terminal import bio_clock, configuration, day, task_pool, week
from pdcaflow.terminal.custom_typer import OrderedAliasedTyperGroup
from pdcaflow.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="PDCAFlow - Plan, Do, Check, Act your day in the CLI",
    no_args_is_help=True,
)
app.add_typer(day.app, name="day, d", help="Plan, record and review a day")
app.add_typer(week.app, name="week, w", help="Weekly theme and presets")
app.add_typer(task_pool.app, name="pool, p", help="Tasks waiting for a day")
app.add_typer(bio_clock.app, name="bio, b", help="Sleep window and meals")
app.add_typer(configuration.app, name="config, c", help="Settings")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log engine decisions"),
    ] = False,
) -> None:
    """
    PDCAFlow - Plan, Do, Check, Act your day in the CLI

    Global options that apply to all commands.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=verbose)],
    )
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()
