# SPDX-License-Identifier: MIT

from pdcaflow.engine.error import BlockNotFound
from pdcaflow.model.entity_id import is_wake_up_id
from pdcaflow.model.time_block import TimeBlock
from pdcaflow.time import time_to_minutes


def is_wake_up_block(block: TimeBlock) -> bool:
    return is_wake_up_id(block["id"])


def block_sort_key(block: TimeBlock) -> tuple[int, int]:
    # wake up block first among blocks sharing a minute
    return (time_to_minutes(block["time"]), 0 if is_wake_up_block(block) else 1)


def sort_blocks(blocks: list[TimeBlock]) -> None:
    blocks.sort(key=block_sort_key)


def find_block_index(blocks: list[TimeBlock], id: str) -> int:
    for index, block in enumerate(blocks):
        if block["id"] == id:
            return index
    raise BlockNotFound(id)


def find_block_id_by_time(
    blocks: list[TimeBlock], time: str, wake_up: bool = False
) -> str:
    """
    Look up the id of the block anchored at a time.

    Ordinary blocks are preferred unless wake_up is set. Falls back to the
    other kind when only one block exists at that time.
    """
    matches = [block for block in blocks if block["time"] == time]
    preferred = [block for block in matches if is_wake_up_block(block) == wake_up]
    if len(preferred) > 0:
        return preferred[0]["id"]
    if len(matches) > 0:
        return matches[0]["id"]
    raise BlockNotFound(time)
