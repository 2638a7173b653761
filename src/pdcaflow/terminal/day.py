# SPDX-License-Identifier: MIT

from typing import Annotated, Callable, Optional

import click
import typer

from pdcaflow.engine.block import find_block_id_by_time
from pdcaflow.engine.edit import (
    edit_check,
    edit_do,
    edit_plan,
    set_day_summary,
    set_primary_tasks,
)
from pdcaflow.engine.span import set_span
from pdcaflow.engine.split import split as split_block
from pdcaflow.engine.stats import day_stats
from pdcaflow.model.daily_record import DailyRecord
from pdcaflow.model.time_block import (
    EFFICIENCY_RATINGS,
    EXECUTION_STATUSES,
    SPAN_COLUMNS,
    SpanAction,
    SpanColumn,
)
from pdcaflow.repository.bio_clock import BIO_CLOCK_REPO
from pdcaflow.service.day import (
    close_day,
    get_daily_record,
    modify_daily_record,
    reset_day,
)
from pdcaflow.terminal.custom_typer import AliasedTyperGroup
from pdcaflow.terminal.error import exit_on_error
from pdcaflow.terminal.parse import parse_date, parse_time, parse_time_optional
from pdcaflow.view.day import day_view
from pdcaflow.view.stats import stats_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

DateOption = Annotated[
    Optional[str],
    typer.Option(
        "--date",
        "-d",
        help="YYYY-MM-DD, day offset, today (t), yesterday (y) or tomorrow (o)",
    ),
]
WakeOption = Annotated[
    bool,
    typer.Option("--wake", "-w", help="Address the wake up block at this time"),
]
ColumnOption = Annotated[
    str,
    typer.Option("--column", "-c", click_type=click.Choice(SPAN_COLUMNS)),
]


def __show(daily_record: DailyRecord) -> None:
    day_view(daily_record, BIO_CLOCK_REPO.get_bio_clock()["enable_sleep_fold"])


def __modify_block(
    date: Optional[str],
    time: str,
    wake: bool,
    transform: Callable[[DailyRecord, str], DailyRecord],
) -> None:
    block_time = parse_time(time)
    with exit_on_error():
        daily_record = modify_daily_record(
            parse_date(date),
            lambda record: transform(
                record,
                find_block_id_by_time(record["time_blocks"], block_time, wake),
            ),
        )
    __show(daily_record)


@app.command("show, s")
def show(date: DateOption = None) -> None:
    """Show a day as a Plan / Do / Check grid."""
    __show(get_daily_record(parse_date(date)))


@app.command("plan, p", no_args_is_help=True)
def plan(
    time: str,
    content: Annotated[Optional[str], typer.Option("--content", "-c")] = None,
    is_primary: Annotated[
        Optional[bool],
        typer.Option("--primary/--no-primary", help="Mark as primary task work"),
    ] = None,
    start_time: Annotated[Optional[str], typer.Option("--start", "-s")] = None,
    end_time: Annotated[Optional[str], typer.Option("--end", "-e")] = None,
    remove_start_time: Annotated[bool, typer.Option("--remove-start")] = False,
    remove_end_time: Annotated[bool, typer.Option("--remove-end")] = False,
    date: DateOption = None,
    wake: WakeOption = False,
) -> None:
    """Edit the Plan cell of the block at TIME."""
    start_time = parse_time_optional(start_time)
    end_time = parse_time_optional(end_time)
    __modify_block(
        date,
        time,
        wake,
        lambda record, block_id: edit_plan(
            record,
            block_id,
            content=content,
            is_primary=is_primary,
            start_time=start_time,
            end_time=end_time,
            remove_start_time=remove_start_time,
            remove_end_time=remove_end_time,
        ),
    )


@app.command("do", no_args_is_help=True)
def do(
    time: str,
    status: Annotated[
        Optional[str],
        typer.Option("--status", "-st", click_type=click.Choice(EXECUTION_STATUSES)),
    ] = None,
    actual_content: Annotated[
        Optional[str], typer.Option("--actual", "-a", help="What actually happened")
    ] = None,
    start_time: Annotated[Optional[str], typer.Option("--start", "-s")] = None,
    end_time: Annotated[Optional[str], typer.Option("--end", "-e")] = None,
    remove_start_time: Annotated[bool, typer.Option("--remove-start")] = False,
    remove_end_time: Annotated[bool, typer.Option("--remove-end")] = False,
    date: DateOption = None,
    wake: WakeOption = False,
) -> None:
    """Record what happened in the Do cell of the block at TIME."""
    start_time = parse_time_optional(start_time)
    end_time = parse_time_optional(end_time)
    __modify_block(
        date,
        time,
        wake,
        lambda record, block_id: edit_do(
            record,
            block_id,
            status=status,  # type: ignore[arg-type]
            actual_content=actual_content,
            start_time=start_time,
            end_time=end_time,
            remove_start_time=remove_start_time,
            remove_end_time=remove_end_time,
        ),
    )


@app.command("check, c", no_args_is_help=True)
def check(
    time: str,
    efficiency: Annotated[
        Optional[str],
        typer.Option(
            "--efficiency", "-ef", click_type=click.Choice(EFFICIENCY_RATINGS)
        ),
    ] = None,
    comment: Annotated[Optional[str], typer.Option("--comment", "-cm")] = None,
    tags: Annotated[
        Optional[list[str]],
        typer.Option("--tag", "-tg", help="accepts multiple tag options"),
    ] = None,
    remove_tags: Annotated[
        Optional[list[str]],
        typer.Option("--remove-tag", help="accepts multiple tag options"),
    ] = None,
    remove_efficiency: Annotated[
        bool, typer.Option("--remove-efficiency")
    ] = False,
    date: DateOption = None,
    wake: WakeOption = False,
) -> None:
    """Review the block at TIME in its Check cell."""
    __modify_block(
        date,
        time,
        wake,
        lambda record, block_id: edit_check(
            record,
            block_id,
            efficiency=efficiency,  # type: ignore[arg-type]
            comment=comment,
            add_tags=tags,
            remove_tags=remove_tags,
            remove_efficiency=remove_efficiency,
        ),
    )


@app.command("primary, pr", no_args_is_help=True)
def primary(first: str, second: str, date: DateOption = None) -> None:
    """Set the two primary tasks of a day."""
    with exit_on_error():
        daily_record = modify_daily_record(
            parse_date(date),
            lambda record: set_primary_tasks(record, [first, second]),
        )
    __show(daily_record)


@app.command("summary, su", no_args_is_help=True)
def summary(day_summary: str, date: DateOption = None) -> None:
    """Set the summary of a day."""
    daily_record = modify_daily_record(
        parse_date(date), lambda record: set_day_summary(record, day_summary)
    )
    __show(daily_record)


@app.command("split, sp", no_args_is_help=True)
def split(
    time: str,
    new_time: str,
    date: DateOption = None,
    wake: WakeOption = False,
) -> None:
    """
    Add a block at NEW_TIME inside the block at TIME.

    Text tagged "[NEW_TIME] ..." in the block's Plan or Do moves to the new
    block.
    """
    block_new_time = parse_time(new_time)
    __modify_block(
        date,
        time,
        wake,
        lambda record, block_id: split_block(record, block_id, block_new_time),
    )


def __set_span(
    date: Optional[str], time: str, wake: bool, column: str, action: SpanAction
) -> None:
    span_column: SpanColumn = "do" if column == "do" else "plan"
    __modify_block(
        date,
        time,
        wake,
        lambda record, block_id: set_span(record, block_id, span_column, action),
    )


@app.command("merge, m", no_args_is_help=True)
def merge(
    time: str,
    column: ColumnOption = "plan",
    date: DateOption = None,
    wake: WakeOption = False,
) -> None:
    """Merge the next block into the cell of the block at TIME."""
    __set_span(date, time, wake, column, "merge")


@app.command("unmerge, um", no_args_is_help=True)
def unmerge(
    time: str,
    column: ColumnOption = "plan",
    date: DateOption = None,
    wake: WakeOption = False,
) -> None:
    """Release the last block of the merged cell at TIME."""
    __set_span(date, time, wake, column, "split")


@app.command("reset")
def reset(
    date: DateOption = None,
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Skip confirmation")] = False,
) -> None:
    """Discard a day and create it again from the current settings."""
    reset_date = parse_date(date)
    if not yes:
        typer.confirm(f"Discard everything recorded for {reset_date}?", abort=True)
    __show(reset_day(reset_date))


@app.command("act, a", no_args_is_help=True)
def act(
    day_summary: str,
    next_primary_tasks: Annotated[
        list[str],
        typer.Option(
            "--next",
            "-n",
            help="Primary task for the next day, give it twice",
        ),
    ],
    date: DateOption = None,
) -> None:
    """Close a day with its summary and seed the next day's primary tasks."""
    with exit_on_error():
        next_record = close_day(parse_date(date), day_summary, next_primary_tasks)
    __show(next_record)


@app.command("stats, st")
def stats(date: DateOption = None) -> None:
    """Count statuses and ratings of a day."""
    daily_record = get_daily_record(parse_date(date))
    stats_view(daily_record["date"], day_stats(daily_record))
