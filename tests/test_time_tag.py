# SPDX-License-Identifier: MIT

from pdcaflow.engine.time_tag import extract_time_tag, find_time_tags


def test_find_time_tags_in_order():
    content = "[09:15] first [09:30] second\n[10:00] third"

    assert find_time_tags(content) == [
        ("09:15", "first"),
        ("09:30", "second"),
        ("10:00", "third"),
    ]


def test_extract_segment_up_to_newline():
    assert extract_time_tag("[09:15] Write report\nOther stuff", "09:15") == (
        "Write report",
        "Other stuff",
    )


def test_extract_segment_up_to_next_tag():
    text, remaining = extract_time_tag("Intro [09:15] tagged [09:30] next", "09:15")

    assert text == "tagged"
    assert remaining == "Intro [09:30] next"


def test_extract_without_match_leaves_content():
    assert extract_time_tag("[09:30] other", "09:15") == (None, "[09:30] other")


def test_last_duplicate_tag_wins():
    text, remaining = extract_time_tag("[09:15] first\n[09:15] second", "09:15")

    assert text == "second"
    assert remaining == "[09:15] first"


def test_malformed_tags_are_ignored():
    assert find_time_tags("[9:15] x [09:5] y (09:15) z") == []
    assert extract_time_tag("[9:15] x", "09:15") == (None, "[9:15] x")
