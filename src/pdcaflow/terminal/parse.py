# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from pdcaflow.time import date_to_str, is_time_of_day


def parse_date(date_param: Optional[str]) -> str:
    """
    Resolve a date argument to a 'YYYY-MM-DD' string.

    Accepts YYYY-MM-DD, a day offset from today (e.g. "1", "-1"), and the
    words today (t), yesterday (y) and tomorrow (o). None means today.
    """
    if date_param is None:
        return date_to_str(pendulum.today("local").date())

    date = date_param.strip()

    if re.match(r"^\d{4}-\d{2}-\d{2}$", date):
        try:
            return date_to_str(pendulum.from_format(date, "YYYY-MM-DD").date())
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date: {e}")

    if re.match(r"^-?\d+$", date):
        return date_to_str(pendulum.today("local").add(days=int(date)).date())

    if date == "today" or date == "t":
        return date_to_str(pendulum.today("local").date())
    if date == "yesterday" or date == "y":
        return date_to_str(pendulum.yesterday("local").date())
    if date == "tomorrow" or date == "o":
        return date_to_str(pendulum.tomorrow("local").date())
    raise typer.BadParameter("Incorrect date format")


def parse_time(time_str: str) -> str:
    """
    Normalise a time of day given as (H)H:mm to 'HH:MM'.

    Raises:
        typer.BadParameter: If the time format is invalid or values are out of range
    """
    time_match = re.match(r"^(\d{1,2}):(\d{2})$", time_str.strip())
    if not time_match:
        raise typer.BadParameter(
            f"Time must be in HH:mm format (e.g., 8:00 or 17:30), got '{time_str}'"
        )

    time = f"{int(time_match.group(1)):02d}:{time_match.group(2)}"
    if not is_time_of_day(time):
        raise typer.BadParameter(f"Time out of range: '{time_str}'")
    return time


def parse_time_optional(time_str: Optional[str]) -> Optional[str]:
    if time_str is None:
        return None
    return parse_time(time_str)
