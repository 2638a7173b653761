# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from pdcaflow import configuration
from pdcaflow.engine.grid import build_anchor_times
from pdcaflow.repository.configuration import CONFIGURATION_REPO
from pdcaflow.terminal.custom_typer import AliasedTyperGroup
from pdcaflow.terminal.parse import parse_time_optional

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def __config_table(title: Optional[str] = None) -> Table:
    config = CONFIGURATION_REPO.get_config()

    table = Table(title=title)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row("grid_start", config["grid_start"])
    table.add_row("grid_end", config["grid_end"])
    table.add_row("grid_interval_minutes", str(config["grid_interval_minutes"]))
    table.add_row(
        "rebase_future_on_bio_change",
        "✓ Enabled" if config["rebase_future_on_bio_change"] else "✗ Disabled",
    )
    return table


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    console = Console()
    console.print(__config_table())

    yaml_library_type = "untested"
    try:
        from yaml import CDumper as Dumper  # noqa: F401
        from yaml import CLoader as Loader  # noqa: F401

        yaml_library_type = "C"
    except ImportError:
        yaml_library_type = "Python"

    console.print()
    console.print(f"YAML Library Type: {yaml_library_type}")


@app.command("set, s")
def set(
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header",
            help="Enable/disable the report header",
        ),
    ] = None,
    data_path: Annotated[
        Optional[str],
        typer.Option(
            "--data-path",
            help="Directory path for storing data files",
        ),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option(
            "--remove-data-path",
            help="Reset data path to the platform default",
        ),
    ] = False,
    grid_start: Annotated[
        Optional[str],
        typer.Option("--grid-start", help="First block of a new day (HH:MM)"),
    ] = None,
    grid_end: Annotated[
        Optional[str],
        typer.Option("--grid-end", help="Last block of a new day (HH:MM)"),
    ] = None,
    grid_interval_minutes: Annotated[
        Optional[int],
        typer.Option("--grid-interval", help="Minutes between blocks of a new day"),
    ] = None,
    rebase_future_on_bio_change: Annotated[
        Optional[bool],
        typer.Option(
            "--rebase-future/--no-rebase-future",
            help="Re-lock today and later days when the bio clock changes",
        ),
    ] = None,
) -> None:
    """
    Update configuration settings.

    Grid settings only shape days created afterwards.
    """
    grid_start = parse_time_optional(grid_start)
    grid_end = parse_time_optional(grid_end)

    config = CONFIGURATION_REPO.get_config()
    try:
        build_anchor_times(
            grid_start if grid_start is not None else config["grid_start"],
            grid_end if grid_end is not None else config["grid_end"],
            grid_interval_minutes
            if grid_interval_minutes is not None
            else config["grid_interval_minutes"],
        )
    except ValueError as e:
        raise typer.BadParameter(str(e))

    CONFIGURATION_REPO.update_config(
        show_header=show_header,
        data_path=data_path,
        remove_data_path=remove_data_path,
        grid_start=grid_start,
        grid_end=grid_end,
        grid_interval_minutes=grid_interval_minutes,
        rebase_future_on_bio_change=rebase_future_on_bio_change,
    )

    console = Console()
    console.print("[green]Configuration updated successfully![/green]\n")
    console.print(__config_table("Updated Configuration"))
