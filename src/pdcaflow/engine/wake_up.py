# SPDX-License-Identifier: MIT

import logging
from bisect import bisect_right
from copy import deepcopy

from pdcaflow.engine.bio_lock import wake_up_time
from pdcaflow.engine.block import block_sort_key, is_wake_up_block, sort_blocks
from pdcaflow.engine.span import insert_block, normalize_spans, remove_block
from pdcaflow.model.bio_clock import BioClockConfig
from pdcaflow.model.daily_record import DailyRecord
from pdcaflow.template.time_block import get_time_block_template

logger = logging.getLogger(__name__)

WAKE_UP_LABEL = "Wake up"


def ensure_wake_up_block(record: DailyRecord, config: BioClockConfig) -> DailyRecord:
    """
    Keep exactly one wake up block, anchored at the end of the sleep window.

    An existing wake up block at the right time is kept as the user left it.
    Wake up blocks at any other time, and any duplicates, are removed and a
    fresh one carrying the default label is added.
    """
    new_record = deepcopy(record)
    blocks = new_record["time_blocks"]
    wake_time = wake_up_time(config)

    kept = False
    index = 0
    while index < len(blocks):
        block = blocks[index]
        if is_wake_up_block(block):
            if block["time"] == wake_time and not kept:
                kept = True
            else:
                logger.debug("removing stale wake up block %s", block["id"])
                remove_block(blocks, index)
                continue
        index += 1

    sort_blocks(blocks)
    if not kept:
        wake_up_block = get_time_block_template(
            new_record["date"], wake_time, wake_up=True
        )
        wake_up_block["plan"]["content"] = WAKE_UP_LABEL
        position = bisect_right(
            blocks, block_sort_key(wake_up_block), key=block_sort_key
        )
        insert_block(blocks, position, wake_up_block)
        logger.debug("added wake up block %s", wake_up_block["id"])

    normalize_spans(blocks)
    return new_record
