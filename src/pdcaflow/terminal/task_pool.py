# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import click
import typer

from pdcaflow.model.entity_id import EntityId
from pdcaflow.model.task_item import TASK_SOURCES
from pdcaflow.repository.bio_clock import BIO_CLOCK_REPO
from pdcaflow.repository.task_pool import TASK_POOL_REPO
from pdcaflow.service.task_pool import (
    add_task_item,
    complete_task_item,
    schedule_task_item,
)
from pdcaflow.terminal.custom_typer import AliasedTyperGroup
from pdcaflow.terminal.error import exit_on_error
from pdcaflow.terminal.parse import parse_date
from pdcaflow.view.day import day_view
from pdcaflow.view.task_pool import task_pool_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def __task_item_id(index: int) -> EntityId:
    """Map the 1-based number shown by "pool list" to a task item id."""
    open_task_items = TASK_POOL_REPO.get_open_task_items()
    if index < 1 or index > len(open_task_items):
        raise typer.BadParameter(
            f"No open task numbered {index}, the pool has {len(open_task_items)}"
        )
    id = open_task_items[index - 1]["id"]
    if id is None:
        raise ValueError()
    return id


@app.command("add, a", no_args_is_help=True)
def add(
    title: str,
    source: Annotated[
        str,
        typer.Option("--source", "-s", click_type=click.Choice(TASK_SOURCES)),
    ] = "manual",
) -> None:
    """Add a task to the pool."""
    add_task_item(title, source)  # type: ignore[arg-type]
    task_pool_view(TASK_POOL_REPO.get_open_task_items())


@app.command("list, l")
def list_(
    show_all: Annotated[
        bool, typer.Option("--all", "-a", help="Include done tasks")
    ] = False,
) -> None:
    """List open tasks in the pool."""
    if show_all:
        task_pool_view(TASK_POOL_REPO.get_all_task_items())
    else:
        task_pool_view(TASK_POOL_REPO.get_open_task_items())


@app.command("done, d", no_args_is_help=True)
def done(index: int) -> None:
    """Mark the open task numbered INDEX as done."""
    complete_task_item(__task_item_id(index))
    task_pool_view(TASK_POOL_REPO.get_open_task_items())


@app.command("pick, p", no_args_is_help=True)
def pick(
    index: int,
    date: Annotated[
        Optional[str],
        typer.Option("--date", "-d", help="Defaults to tomorrow"),
    ] = "tomorrow",
) -> None:
    """Carry the open task numbered INDEX into a day's primary tasks."""
    id = __task_item_id(index)
    with exit_on_error():
        daily_record = schedule_task_item(id, parse_date(date))
    day_view(daily_record, BIO_CLOCK_REPO.get_bio_clock()["enable_sleep_fold"])
