# SPDX-License-Identifier: MIT

import re
from typing import cast

import pendulum

TIME_OF_DAY_PATTERN = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")
MINUTES_PER_DAY = 24 * 60


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime))


def datetime_to_display_local_datetime_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("MMM-DD ddd HH:mm")


def today_local_date_str() -> str:
    return pendulum.today("local").format("YYYY-MM-DD")


def date_from_str(date_str: str) -> pendulum.Date:
    """Parse a 'YYYY-MM-DD' string into a pendulum.Date."""
    return cast(pendulum.Date, pendulum.parse(date_str, exact=True))


def date_to_str(date: pendulum.Date) -> str:
    return date.format("YYYY-MM-DD")


def add_days_to_date_str(date_str: str, days: int) -> str:
    return date_to_str(date_from_str(date_str).add(days=days))


def date_to_display_str(date_str: str) -> str:
    return date_from_str(date_str).format("YYYY-MM-DD ddd")


def week_id_for_date_str(date_str: str) -> str:
    """ISO-8601 week id in 'YYYY-Www' form, e.g. '2024-W02'."""
    iso_year, iso_week, _ = date_from_str(date_str).isocalendar()
    return f"{iso_year}-W{iso_week:02d}"


def monday_of_week_date_str(date_str: str) -> str:
    date = date_from_str(date_str)
    return date_to_str(date.subtract(days=date.weekday()))


def week_date_strs(date_str: str) -> list[str]:
    monday = date_from_str(monday_of_week_date_str(date_str))
    return [date_to_str(monday.add(days=offset)) for offset in range(7)]


def is_time_of_day(time: str) -> bool:
    return TIME_OF_DAY_PATTERN.match(time) is not None


def time_to_minutes(time: str) -> int:
    """
    Convert an 'HH:MM' string to minutes since midnight.

    Malformed input is a caller error and is not validated here.
    """
    hours, minutes = time.split(":")
    return int(hours) * 60 + int(minutes)


def minutes_to_time(minutes: int) -> str:
    minutes = minutes % MINUTES_PER_DAY
    return f"{minutes // 60:02d}:{minutes % 60:02d}"
