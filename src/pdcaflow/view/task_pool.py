# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pdcaflow.model.task_item import TaskItem
from pdcaflow.time import datetime_to_display_local_datetime_str
from pdcaflow.view.header import header


def task_pool_view(task_items: list[TaskItem]) -> None:
    """List pooled tasks, numbered from 1 in the order they are shown."""
    header("task pool")

    pool_table = Table(box=box.SIMPLE)
    pool_table.add_column("#", justify="right")
    pool_table.add_column("title")
    pool_table.add_column("source")
    pool_table.add_column("status")
    pool_table.add_column("created")

    for index, task_item in enumerate(task_items, start=1):
        title = escape(task_item["title"])
        if task_item["status"] == "done":
            title = f"[strike dim]{title}[/strike dim]"
        pool_table.add_row(
            str(index),
            title,
            task_item["source"],
            task_item["status"],
            datetime_to_display_local_datetime_str(task_item["created"]),
        )

    console = Console()
    console.print(pool_table)
