# SPDX-License-Identifier: MIT

from typing import Literal, NotRequired, Optional, TypedDict, get_args

ExecutionStatus = Literal["completed", "partial", "changed", "skipped", "none"]
EfficiencyRating = Literal["high", "normal", "low"]
SpanColumn = Literal["plan", "do"]
SpanAction = Literal["merge", "split"]

EXECUTION_STATUSES = get_args(ExecutionStatus)
EFFICIENCY_RATINGS = get_args(EfficiencyRating)
SPAN_COLUMNS = get_args(SpanColumn)


class PlanTrack(TypedDict):
    content: str
    start_time: NotRequired[Optional[str]]
    end_time: NotRequired[Optional[str]]
    is_primary: bool
    is_bio_locked: bool
    span: int


class DoTrack(TypedDict):
    status: ExecutionStatus
    actual_content: str
    start_time: NotRequired[Optional[str]]
    end_time: NotRequired[Optional[str]]
    span: int


class CheckTrack(TypedDict):
    efficiency: Optional[EfficiencyRating]
    tags: list[str]
    comment: str


class TimeBlock(TypedDict):
    id: str
    time: str
    plan: PlanTrack
    do: DoTrack
    check: CheckTrack
