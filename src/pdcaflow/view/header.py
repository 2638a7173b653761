# SPDX-License-Identifier: MIT

from typing import Optional

from rich import print
from rich.padding import Padding

from pdcaflow.view.state import get_show_header


def header(title: str, sub_header: Optional[str] = None) -> None:
    """Print the application header.

    Args:
        title: What the report is about, usually a date or a week id
        sub_header: Optional sub-header text to display
    """
    if not get_show_header():
        return

    print(Padding("[dark_orange]pdcaflow[/dark_orange]", (1, 0, 0, 1)))
    print(Padding(f"[plum1]{title}[/plum1]", (0, 1)))
    if sub_header is not None:
        print(Padding(f"[sandy_brown]{sub_header}[/sandy_brown]", (0, 1)))
