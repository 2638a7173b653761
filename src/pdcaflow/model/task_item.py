# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict, get_args

import pendulum

from pdcaflow.model.entity_id import EntityId

TaskSource = Literal["manual", "carry_over", "weekly_preset"]
TaskStatus = Literal["pending", "scheduled", "done"]

TASK_SOURCES = get_args(TaskSource)


class TaskItem(TypedDict):
    id: Optional[EntityId]
    title: str
    created: pendulum.DateTime
    source: TaskSource
    status: TaskStatus
