# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Literal, Optional

from pdcaflow.engine.block import find_block_index
from pdcaflow.engine.error import AbsorbedCell, NoMoreBlocks, NothingToSplit
from pdcaflow.model.daily_record import DailyRecord
from pdcaflow.model.time_block import SPAN_COLUMNS, SpanAction, SpanColumn, TimeBlock

logger = logging.getLogger(__name__)

# Check has no span of its own, it follows the Do grouping.
CHECK_SPAN_SOURCE: SpanColumn = "do"


def column_span(block: TimeBlock, column: Literal["plan", "do", "check"]) -> int:
    if column == "check":
        return block[CHECK_SPAN_SOURCE]["span"]
    return block[column]["span"]


def is_visible(block: TimeBlock, column: Literal["plan", "do", "check"]) -> bool:
    return column_span(block, column) >= 1


def set_span(
    record: DailyRecord, block_id: str, column: SpanColumn, action: SpanAction
) -> DailyRecord:
    """
    Merge the next run into a block's cell, or release the last block of its run.

    Only span counters change, never content. Merging into a block whose
    neighbour already heads a run absorbs that whole run so no absorbed block
    is left without a visible predecessor.

    Raises:
        AbsorbedCell: the block is itself hidden in this column
        NoMoreBlocks: merge requested past the last block of the day
        NothingToSplit: un-merge requested on a block with span <= 1
    """
    new_record = deepcopy(record)
    blocks = new_record["time_blocks"]
    index = find_block_index(blocks, block_id)
    span = blocks[index][column]["span"]
    if span == 0:
        raise AbsorbedCell(block_id, column)

    match action:
        case "merge":
            next_index = index + span
            if next_index >= len(blocks):
                raise NoMoreBlocks(block_id, column)
            absorbed_span = max(blocks[next_index][column]["span"], 1)
            blocks[index][column]["span"] = span + absorbed_span
            for offset in range(absorbed_span):
                blocks[next_index + offset][column]["span"] = 0
        case "split":
            if span <= 1:
                raise NothingToSplit(block_id, column)
            new_span = span - 1
            blocks[index][column]["span"] = new_span
            blocks[index + new_span][column]["span"] = 1
        case _:
            raise ValueError(f"unknown span action: {action}")

    logger.debug(
        "%s %s %s: span %d -> %d",
        action,
        block_id,
        column,
        span,
        blocks[index][column]["span"],
    )
    return new_record


def merge_extent(
    record: DailyRecord, block_id: str, column: Literal["plan", "do", "check"]
) -> list[str]:
    """Ids of every block covered by the visible cell that contains block_id."""
    blocks = record["time_blocks"]
    index = find_block_index(blocks, block_id)
    span_column: SpanColumn = CHECK_SPAN_SOURCE if column == "check" else column
    head = run_head_index(blocks, index, span_column)
    if head is None:
        return [block_id]
    span = column_span(blocks[head], column)
    return [block["id"] for block in blocks[head : head + span]]


def run_head_index(
    blocks: list[TimeBlock], index: int, column: SpanColumn
) -> Optional[int]:
    for head in range(index, -1, -1):
        if blocks[head][column]["span"] >= 1:
            return head
    return None


def __covering_head_index(
    blocks: list[TimeBlock], position: int, column: SpanColumn
) -> Optional[int]:
    # Head of the run that continues through position, if any
    if position == 0 or position >= len(blocks):
        return None
    if blocks[position][column]["span"] != 0:
        return None
    return run_head_index(blocks, position, column)


def insert_block(blocks: list[TimeBlock], position: int, block: TimeBlock) -> None:
    """
    Insert a block at a position, joining any run that continues through it.

    The new block is absorbed and the run grows by one, so a merged cell keeps
    covering the same stretch of the day.
    """
    for column in SPAN_COLUMNS:
        head = __covering_head_index(blocks, position, column)
        if head is None:
            continue
        blocks[head][column]["span"] += 1
        block[column]["span"] = 0
    blocks.insert(position, block)


def insert_run_head(
    blocks: list[TimeBlock], position: int, block: TimeBlock
) -> None:
    """
    Insert a visible block at a position, cutting any run that continues through it.

    The run before the new block ends just before it and the new block heads
    the rest of that run.
    """
    for column in SPAN_COLUMNS:
        head = __covering_head_index(blocks, position, column)
        if head is None:
            continue
        span = blocks[head][column]["span"]
        blocks[head][column]["span"] = position - head
        block[column]["span"] = max(span - (position - head) + 1, 1)
    blocks.insert(position, block)


def remove_block(blocks: list[TimeBlock], index: int) -> None:
    """Remove a block, handing its part of any run to its neighbours."""
    for column in SPAN_COLUMNS:
        span = blocks[index][column]["span"]
        if span == 0:
            head = run_head_index(blocks, index, column)
            if head is not None:
                blocks[head][column]["span"] -= 1
        elif span > 1 and index + 1 < len(blocks):
            blocks[index + 1][column]["span"] = span - 1
    del blocks[index]


def normalize_spans(blocks: list[TimeBlock]) -> None:
    """
    Repair span counters in place.

    Absorbed blocks with no run covering them are released, negative spans
    become 1, and runs are cut short at the next visible block or at the end
    of the day.
    """
    for column in SPAN_COLUMNS:
        head_index = 0
        remaining = 0
        for index, block in enumerate(blocks):
            track = block[column]
            if track["span"] < 0:
                track["span"] = 1
            if track["span"] == 0:
                if remaining > 0:
                    remaining -= 1
                    continue
                track["span"] = 1
            elif remaining > 0:
                blocks[head_index][column]["span"] = index - head_index
            head_index = index
            remaining = track["span"] - 1
        if remaining > 0:
            blocks[head_index][column]["span"] -= remaining
