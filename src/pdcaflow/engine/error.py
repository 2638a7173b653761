# SPDX-License-Identifier: MIT


class EngineError(Exception):
    """Base class for every failure raised by the day engine.

    Engine operations raise before producing a new record, so the caller's
    record is always left as it was.
    """


class InvalidSplitTime(EngineError):
    def __init__(self, block_time: str, new_time: str) -> None:
        super().__init__(
            f"split time {new_time} must be later than the block time {block_time}"
        )
        self.block_time = block_time
        self.new_time = new_time


class DuplicateTimePoint(EngineError):
    def __init__(self, time: str) -> None:
        super().__init__(f"a block already exists at {time}")
        self.time = time


class NoMoreBlocks(EngineError):
    def __init__(self, block_id: str, column: str) -> None:
        super().__init__(f"no block left to merge into {block_id} ({column})")
        self.block_id = block_id
        self.column = column


class NothingToSplit(EngineError):
    def __init__(self, block_id: str, column: str) -> None:
        super().__init__(f"{block_id} ({column}) is not merged with another block")
        self.block_id = block_id
        self.column = column


class BlockNotFound(EngineError):
    def __init__(self, block_id: str) -> None:
        super().__init__(f"no block with id {block_id}")
        self.block_id = block_id


class AbsorbedCell(EngineError):
    def __init__(self, block_id: str, column: str) -> None:
        super().__init__(
            f"{block_id} ({column}) is absorbed into an earlier block and cannot be edited"
        )
        self.block_id = block_id
        self.column = column


class BioLockedCell(EngineError):
    def __init__(self, block_id: str) -> None:
        super().__init__(f"the plan of {block_id} is locked by the biological clock")
        self.block_id = block_id


class InvalidTime(EngineError):
    def __init__(self, value: str) -> None:
        super().__init__(f"'{value}' is not a valid HH:MM time")
        self.value = value
