# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from pdcaflow.model.bio_clock import BioClockConfig
from pdcaflow.view.header import header


def bio_clock_view(config: BioClockConfig) -> None:
    header("biological clock")

    bio_table = Table(box=box.SIMPLE)
    bio_table.add_column("name")
    bio_table.add_column("from")
    bio_table.add_column("to / duration")

    sleep_start, sleep_end = config["sleep_window"]
    bio_table.add_row("Sleep", sleep_start, sleep_end)
    for meal in config["meals"]:
        bio_table.add_row(meal["name"], meal["time"], f"{meal['duration']} min")

    console = Console()
    console.print(bio_table)
    console.print(
        f" sleep fold: {'✓ Enabled' if config['enable_sleep_fold'] else '✗ Disabled'}"
    )
