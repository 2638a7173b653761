# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pdcaflow.engine.bio_lock import SLEEP_LABEL
from pdcaflow.engine.block import is_wake_up_block
from pdcaflow.engine.span import is_visible
from pdcaflow.model.daily_record import DailyRecord
from pdcaflow.model.time_block import TimeBlock
from pdcaflow.time import date_to_display_str, week_id_for_date_str
from pdcaflow.view.header import header

# Shown in place of a cell absorbed into the merged cell above it
ABSORBED_CELL = "│"

STATUS_SYMBOLS = {
    "none": " ",
    "completed": "X",
    "partial": "~",
    "changed": ">",
    "skipped": "/",
}

EFFICIENCY_STYLES = {
    "high": "green",
    "normal": "yellow",
    "low": "red",
}


def is_sleep_block(block: TimeBlock) -> bool:
    return block["plan"]["is_bio_locked"] and block["plan"]["content"] == SLEEP_LABEL


def fold_sleep_blocks(blocks: list[TimeBlock]) -> list[list[TimeBlock]]:
    """
    Group the blocks of a day into display rows.

    Consecutive sleep blocks share one row, every other block gets a row of
    its own.
    """
    rows: list[list[TimeBlock]] = []
    for block in blocks:
        if (
            is_sleep_block(block)
            and len(rows) > 0
            and is_sleep_block(rows[-1][-1])
        ):
            rows[-1].append(block)
        else:
            rows.append([block])
    return rows


def format_time_range(start_time: Optional[str], end_time: Optional[str]) -> str:
    if start_time is None and end_time is None:
        return ""
    return f"[dim]{start_time or ''}-{end_time or ''}[/dim] "


def format_plan(block: TimeBlock) -> str:
    plan = block["plan"]
    if not is_visible(block, "plan"):
        return ABSORBED_CELL
    if plan["is_bio_locked"]:
        return f"[grey50]{escape(plan['content'])}[/grey50]"
    content = format_time_range(
        plan.get("start_time"), plan.get("end_time")
    ) + escape(plan["content"])
    if plan["is_primary"]:
        content = f"[bold yellow]*[/bold yellow] {content}"
    return content


def format_do(block: TimeBlock) -> str:
    do = block["do"]
    if not is_visible(block, "do"):
        return ABSORBED_CELL
    time_range = format_time_range(do.get("start_time"), do.get("end_time"))
    status = escape(f"[{STATUS_SYMBOLS[do['status']]}]")
    return f"{status} {time_range}{escape(do['actual_content'])}"


def format_check(block: TimeBlock) -> str:
    check = block["check"]
    if not is_visible(block, "check"):
        return ABSORBED_CELL
    parts = []
    if check["efficiency"] is not None:
        style = EFFICIENCY_STYLES[check["efficiency"]]
        parts.append(f"[{style}]{check['efficiency']}[/{style}]")
    if len(check["tags"]) > 0:
        parts.append(" ".join(f"[cyan]#{escape(tag)}[/cyan]" for tag in check["tags"]))
    if check["comment"]:
        parts.append(escape(check["comment"]))
    return " ".join(parts)


def format_time(block: TimeBlock) -> str:
    if is_wake_up_block(block):
        return f"{block['time']} [bold green]wake[/bold green]"
    return block["time"]


def day_view(daily_record: DailyRecord, fold_sleep: bool = True) -> None:
    header(
        date_to_display_str(daily_record["date"]),
        week_id_for_date_str(daily_record["date"]),
    )

    console = Console()
    for position, task in enumerate(daily_record["primary_tasks"], start=1):
        console.print(f" [bold]P{position}[/bold] {escape(task) or '[dim]-[/dim]'}")

    day_table = Table(box=box.SIMPLE)
    day_table.add_column("time", no_wrap=True)
    day_table.add_column("plan")
    day_table.add_column("do")
    day_table.add_column("check")

    if fold_sleep:
        rows = fold_sleep_blocks(daily_record["time_blocks"])
    else:
        rows = [[block] for block in daily_record["time_blocks"]]

    for row in rows:
        first = row[0]
        if len(row) > 1:
            day_table.add_row(
                f"{first['time']}-{row[-1]['time']}",
                f"[grey50]{SLEEP_LABEL} ({len(row)} blocks)[/grey50]",
                "",
                "",
            )
            continue
        day_table.add_row(
            format_time(first),
            format_plan(first),
            format_do(first),
            format_check(first),
        )

    console.print(day_table)

    if daily_record["day_summary"]:
        console.print(f" [bold]Summary[/bold] {escape(daily_record['day_summary'])}")
    if daily_record["bio_config"] is None:
        console.print(
            " [dim]Created before the biological clock was pinned, shown as stored[/dim]"
        )
