# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy

from pdcaflow.engine.bio_lock import lock, system_labels
from pdcaflow.engine.block import is_wake_up_block
from pdcaflow.engine.wake_up import ensure_wake_up_block
from pdcaflow.model.bio_clock import BioClockConfig
from pdcaflow.model.daily_record import DailyRecord

logger = logging.getLogger(__name__)


def reconcile(record: DailyRecord) -> DailyRecord:
    """
    Recompute locks and system labels against the record's pinned config.

    A record without a pinned config predates pinning and is returned as is,
    so a later change to the live biological clock never rewrites it.
    Reconciling an already reconciled record returns an equal record.
    """
    pinned = record["bio_config"]
    if pinned is None:
        logger.debug("%s has no pinned bio clock, leaving it untouched", record["date"])
        return deepcopy(record)
    return apply_bio_config(record, pinned)


def apply_bio_config(record: DailyRecord, config: BioClockConfig) -> DailyRecord:
    """
    Lock the plan column against a config and pin that config to the record.

    Locked cells take the meal name or the sleep label. A cell leaving its lock
    is cleared only when it still holds a system label, either from the new
    config or from the one previously pinned. Any other content is kept.
    """
    new_record = deepcopy(record)

    labels = system_labels(config)
    if new_record["bio_config"] is not None:
        labels |= system_labels(new_record["bio_config"])

    for block in new_record["time_blocks"]:
        if is_wake_up_block(block):
            continue
        plan = block["plan"]
        bio_lock = lock(block["time"], config)
        if bio_lock.locked:
            plan["content"] = bio_lock.label
            plan["is_bio_locked"] = True
            continue
        if plan["is_bio_locked"] and plan["content"] in labels:
            plan["content"] = ""
        plan["is_bio_locked"] = False

    new_record["bio_config"] = deepcopy(config)
    return ensure_wake_up_block(new_record, config)
