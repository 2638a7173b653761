# SPDX-License-Identifier: MIT

import logging
from contextlib import contextmanager
from typing import Iterator

import typer
from rich.console import Console

from pdcaflow.engine.error import EngineError

logger = logging.getLogger(__name__)


@contextmanager
def exit_on_error() -> Iterator[None]:
    """Report a rejected operation in red and exit with status 1."""
    try:
        yield
    except (EngineError, ValueError) as e:
        logger.debug("operation rejected", exc_info=True)
        Console(stderr=True).print(f"[red]{e}[/red]")
        raise typer.Exit(1)
