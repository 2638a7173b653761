# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from pdcaflow.engine.stats import DayStats
from pdcaflow.time import date_to_display_str
from pdcaflow.view.header import header


def stats_view(date: str, stats: DayStats) -> None:
    header(date_to_display_str(date), "stats")

    stats_table = Table(box=box.SIMPLE)
    stats_table.add_column("measure")
    stats_table.add_column("count", justify="right")

    for status, count in stats["status_counts"].items():
        stats_table.add_row(f"do: {status}", str(count))
    for rating, count in stats["efficiency_counts"].items():
        stats_table.add_row(f"check: {rating}", str(count))

    completion_rate = stats["completion_rate"]
    stats_table.add_row(
        "completion rate",
        f"{completion_rate:.0%}" if completion_rate is not None else "-",
    )

    console = Console()
    console.print(stats_table)
