# SPDX-License-Identifier: MIT

import logging
from bisect import bisect_right
from copy import deepcopy

from pdcaflow.engine.block import block_sort_key, find_block_index
from pdcaflow.engine.error import DuplicateTimePoint, InvalidSplitTime, InvalidTime
from pdcaflow.engine.span import insert_run_head, normalize_spans
from pdcaflow.engine.time_tag import extract_time_tag
from pdcaflow.model.daily_record import DailyRecord
from pdcaflow.template.time_block import get_time_block_template
from pdcaflow.time import is_time_of_day, time_to_minutes

logger = logging.getLogger(__name__)


def split(record: DailyRecord, target_block_id: str, new_time: str) -> DailyRecord:
    """
    Subdivide a block by adding a new block at new_time.

    Text tagged "[new_time] ..." in the target's plan or do content moves to
    the new block. Columns without such a tag start empty. The new block
    keeps the target's lock and is always visible: a merged cell running
    through new_time ends before it and the new block heads the rest.

    Raises:
        InvalidTime: new_time is not an HH:MM time
        InvalidSplitTime: new_time is not later than the target's time
        DuplicateTimePoint: a block already exists at new_time
    """
    if not is_time_of_day(new_time):
        raise InvalidTime(new_time)

    new_record = deepcopy(record)
    blocks = new_record["time_blocks"]
    target = blocks[find_block_index(blocks, target_block_id)]

    if time_to_minutes(new_time) <= time_to_minutes(target["time"]):
        raise InvalidSplitTime(target["time"], new_time)
    if any(block["time"] == new_time for block in blocks):
        raise DuplicateTimePoint(new_time)

    new_block = get_time_block_template(new_record["date"], new_time)
    if target["plan"]["is_bio_locked"]:
        new_block["plan"]["is_bio_locked"] = True
        new_block["plan"]["content"] = target["plan"]["content"]
    else:
        plan_text, plan_remaining = extract_time_tag(
            target["plan"]["content"], new_time
        )
        if plan_text is not None:
            new_block["plan"]["content"] = plan_text
            target["plan"]["content"] = plan_remaining

    do_text, do_remaining = extract_time_tag(target["do"]["actual_content"], new_time)
    if do_text is not None:
        new_block["do"]["actual_content"] = do_text
        target["do"]["actual_content"] = do_remaining

    position = bisect_right(blocks, block_sort_key(new_block), key=block_sort_key)
    insert_run_head(blocks, position, new_block)
    normalize_spans(blocks)

    logger.info("split %s at %s", target_block_id, new_time)
    return new_record
