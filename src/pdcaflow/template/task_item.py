# SPDX-License-Identifier: MIT

from pdcaflow.model.task_item import TaskItem
from pdcaflow.time import now_utc


def get_task_item_template() -> TaskItem:
    return {
        "id": None,
        "title": "",
        "created": now_utc(),
        "source": "manual",
        "status": "pending",
    }
