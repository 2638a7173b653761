# SPDX-License-Identifier: MIT

import re
from typing import Optional

# "[HH:MM] text" runs until the next tag, a newline or the end of the content
TIME_TAG_PATTERN = re.compile(
    r"\[(?P<time>\d{2}:\d{2})\][ \t]*(?P<text>(?:(?!\[\d{2}:\d{2}\])[^\n])*)"
)


def find_time_tags(content: str) -> list[tuple[str, str]]:
    """Every (time, text) sub-entry tagged inline in a cell, in order of appearance."""
    return [
        (match.group("time"), match.group("text").strip())
        for match in TIME_TAG_PATTERN.finditer(content)
    ]


def extract_time_tag(content: str, time: str) -> tuple[Optional[str], str]:
    """
    Cut the sub-entry tagged with time out of content.

    When a time is tagged more than once the last tag wins and earlier ones
    stay in place as plain text. Malformed tags are never matched.

    Returns:
        (extracted text or None when no tag matches, remaining content)
    """
    matches = [
        match
        for match in TIME_TAG_PATTERN.finditer(content)
        if match.group("time") == time
    ]
    if len(matches) == 0:
        return None, content

    match = matches[-1]
    start, end = match.span()
    if content[end : end + 1] == "\n":
        end += 1
    elif start > 0 and content[start - 1] == "\n":
        start -= 1

    remaining = (content[:start] + content[end:]).strip()
    return match.group("text").strip(), remaining
