# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional, cast

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from pdcaflow import configuration, time
from pdcaflow.model.entity_id import EntityId, generate_entity_id
from pdcaflow.model.task_item import TaskItem, TaskStatus


class TaskPoolRepository:
    def __init__(self) -> None:
        self._task_items: Optional[list[TaskItem]] = None
        self.is_dirty = False

    @property
    def task_items(self) -> list[TaskItem]:
        if self._task_items is None:
            self.__load_data()
        if self._task_items is None:
            raise ValueError()
        return self._task_items

    def __load_data(self) -> None:
        task_pool_data = load(
            configuration.DATA_TASK_POOL_PATH.read_text(), Loader=Loader
        )
        self._task_items = [
            self.__convert_task_item_for_deserialization(task_item)
            for task_item in task_pool_data["task_items"]
        ]

    def __save_data(self, task_items: list[TaskItem]) -> None:
        task_pool_data = {
            "task_items": [
                self.__convert_task_item_for_serialization(deepcopy(task_item))
                for task_item in task_items
            ]
        }
        configuration.DATA_TASK_POOL_PATH.write_text(
            dump(task_pool_data, Dumper=Dumper, allow_unicode=True)
        )

    def flush(self) -> bool:
        if self._task_items is not None and self.is_dirty:
            self.__save_data(self._task_items)
            self.is_dirty = False
            return True
        return False

    def __convert_task_item_for_serialization(
        self, task_item: TaskItem
    ) -> dict[str, Any]:
        serializable_task_item = cast(dict[str, Any], task_item)
        serializable_task_item["created"] = time.datetime_to_iso_str(
            serializable_task_item["created"]
        )
        return serializable_task_item

    def __convert_task_item_for_deserialization(
        self, task_item: dict[str, Any]
    ) -> TaskItem:
        deserializable_task_item = task_item
        deserializable_task_item["created"] = time.datetime_from_str(
            deserializable_task_item["created"]
        )
        return cast(TaskItem, deserializable_task_item)

    def save_new_task_item(self, task_item: TaskItem) -> EntityId:
        self.is_dirty = True
        task_item["id"] = generate_entity_id()
        self.task_items.append(task_item)
        return task_item["id"]

    def set_task_item_status(self, id: EntityId, status: TaskStatus) -> None:
        self.__find_task_item(id)["status"] = status
        self.is_dirty = True

    def get_all_task_items(self) -> list[TaskItem]:
        return deepcopy(self.task_items)

    def get_open_task_items(self) -> list[TaskItem]:
        return [
            task_item
            for task_item in deepcopy(self.task_items)
            if task_item["status"] != "done"
        ]

    def get_task_item(self, id: EntityId) -> TaskItem:
        return deepcopy(self.__find_task_item(id))

    def __find_task_item(self, id: EntityId) -> TaskItem:
        for task_item in self.task_items:
            if task_item["id"] == id:
                return task_item
        raise ValueError(f"no task item with id {id}")


TASK_POOL_REPO = TaskPoolRepository()
