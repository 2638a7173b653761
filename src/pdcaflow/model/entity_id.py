# SPDX-License-Identifier: MIT

import uuid

EntityId = str

WAKE_UP_ID_SUFFIX = "-WAKEUP"


def generate_entity_id() -> EntityId:
    return str(uuid.uuid4())


def block_id(date: str, time: str, wake_up: bool = False) -> str:
    """Deterministic block id scoped to (date, time, kind)."""
    if wake_up:
        return f"{date}-{time}{WAKE_UP_ID_SUFFIX}"
    return f"{date}-{time}"


def is_wake_up_id(id: str) -> bool:
    return id.endswith(WAKE_UP_ID_SUFFIX)
