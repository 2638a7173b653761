# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from pdcaflow.model.daily_record import DailyRecord
from pdcaflow.model.time_block import EFFICIENCY_RATINGS, EXECUTION_STATUSES


class DayStats(TypedDict):
    status_counts: dict[str, int]
    efficiency_counts: dict[str, int]
    tracked_cells: int
    completion_rate: Optional[float]


def day_stats(record: DailyRecord) -> DayStats:
    """
    Summarise the Do and Check columns for the end of day review.

    Only visible Do cells of blocks that are not bio locked are counted. A
    merged cell counts once. The completion rate is completed cells over
    cells with any status other than "none", or None when nothing was tracked.
    """
    status_counts = {status: 0 for status in EXECUTION_STATUSES}
    efficiency_counts = {rating: 0 for rating in EFFICIENCY_RATINGS}
    efficiency_counts["unrated"] = 0

    for block in record["time_blocks"]:
        if block["plan"]["is_bio_locked"] or block["do"]["span"] == 0:
            continue
        status_counts[block["do"]["status"]] += 1
        efficiency = block["check"]["efficiency"]
        efficiency_counts[efficiency if efficiency is not None else "unrated"] += 1

    tracked_cells = sum(
        count for status, count in status_counts.items() if status != "none"
    )
    completion_rate = (
        status_counts["completed"] / tracked_cells if tracked_cells > 0 else None
    )
    return {
        "status_counts": status_counts,
        "efficiency_counts": efficiency_counts,
        "tracked_cells": tracked_cells,
        "completion_rate": completion_rate,
    }
