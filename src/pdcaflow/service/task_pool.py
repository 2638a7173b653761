# SPDX-License-Identifier: MIT

from pdcaflow.engine.edit import set_primary_tasks
from pdcaflow.model.daily_record import DailyRecord
from pdcaflow.model.entity_id import EntityId
from pdcaflow.model.task_item import TaskItem, TaskSource
from pdcaflow.repository.task_pool import TASK_POOL_REPO
from pdcaflow.service.day import modify_daily_record
from pdcaflow.template.task_item import get_task_item_template


def add_task_item(title: str, source: TaskSource = "manual") -> TaskItem:
    task_item = get_task_item_template()
    task_item["title"] = title
    task_item["source"] = source
    id = TASK_POOL_REPO.save_new_task_item(task_item)
    return TASK_POOL_REPO.get_task_item(id)


def complete_task_item(id: EntityId) -> None:
    TASK_POOL_REPO.set_task_item_status(id, "done")


def schedule_task_item(id: EntityId, date: str) -> DailyRecord:
    """
    Put a pooled task into the first empty primary task slot of a day.

    Raises:
        ValueError: if both primary tasks of the day are already set
    """
    task_item = TASK_POOL_REPO.get_task_item(id)

    def fill_primary_task(daily_record: DailyRecord) -> DailyRecord:
        primary_tasks = list(daily_record["primary_tasks"])
        if "" not in primary_tasks:
            raise ValueError(f"both primary tasks of {daily_record['date']} are set")
        primary_tasks[primary_tasks.index("")] = task_item["title"]
        return set_primary_tasks(daily_record, primary_tasks)

    daily_record = modify_daily_record(date, fill_primary_task)
    TASK_POOL_REPO.set_task_item_status(id, "scheduled")
    return daily_record
