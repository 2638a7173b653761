# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional, cast

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from pdcaflow import configuration
from pdcaflow.model.daily_record import DailyRecord
from pdcaflow.model.time_block import TimeBlock


class DailyRecordRepository:
    def __init__(self) -> None:
        self._daily_records: Optional[dict[str, DailyRecord]] = None
        self.is_dirty = False
        self._dirty_dates: set[str] = set()
        self._deleted_dates: set[str] = set()

    @property
    def daily_records(self) -> dict[str, DailyRecord]:
        if self._daily_records is None:
            self.__load_data()
        if self._daily_records is None:
            raise ValueError()
        return self._daily_records

    def __load_data(self) -> None:
        self._daily_records = {}
        for file_path in configuration.DATA_DAYS_DIR.iterdir():
            if file_path.suffix != ".yaml" or file_path.name == ".gitkeep":
                continue
            raw_daily_record = load(file_path.read_text(), Loader=Loader)
            if raw_daily_record is not None:
                daily_record = self.__convert_daily_record_for_deserialization(
                    raw_daily_record
                )
                self._daily_records[daily_record["date"]] = daily_record

    def __save_data(self) -> None:
        # Write dirty records
        for date in self._dirty_dates:
            if date not in self.daily_records:
                continue
            file_path = configuration.DATA_DAYS_DIR / f"{date}.yaml"
            file_path.write_text(
                dump(
                    self.__convert_daily_record_for_serialization(
                        deepcopy(self.daily_records[date])
                    ),
                    Dumper=Dumper,
                    allow_unicode=True,
                    sort_keys=False,
                )
            )

        # Remove deleted record files
        for date in self._deleted_dates:
            file_path = configuration.DATA_DAYS_DIR / f"{date}.yaml"
            if file_path.exists():
                file_path.unlink()

        # Clear tracking sets
        self._dirty_dates.clear()
        self._deleted_dates.clear()

    def flush(self) -> bool:
        if self._daily_records is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def __convert_daily_record_for_serialization(
        self, daily_record: DailyRecord
    ) -> dict[str, Any]:
        return cast(dict[str, Any], daily_record)

    def __convert_daily_record_for_deserialization(
        self, daily_record: dict[str, Any]
    ) -> DailyRecord:
        deserializable_daily_record = daily_record
        # Migration: records written before the config was pinned
        deserializable_daily_record.setdefault("bio_config", None)
        deserializable_daily_record.setdefault("primary_tasks", ["", ""])
        deserializable_daily_record.setdefault("day_summary", "")
        deserializable_daily_record["time_blocks"] = [
            self.__convert_time_block_for_deserialization(time_block)
            for time_block in deserializable_daily_record.get("time_blocks") or []
        ]
        return cast(DailyRecord, deserializable_daily_record)

    def __convert_time_block_for_deserialization(
        self, time_block: dict[str, Any]
    ) -> TimeBlock:
        # Migration: blocks written before spans existed are all visible
        plan = time_block["plan"]
        plan.setdefault("span", 1)
        plan.setdefault("is_primary", False)
        plan.setdefault("is_bio_locked", False)
        do = time_block["do"]
        do.setdefault("span", 1)
        do.setdefault("status", "none")
        do.setdefault("actual_content", "")
        check = time_block.setdefault("check", {})
        check.setdefault("efficiency", None)
        check["tags"] = list(dict.fromkeys(check.get("tags") or []))
        check.setdefault("comment", "")
        return cast(TimeBlock, time_block)

    def save_daily_record(self, daily_record: DailyRecord) -> None:
        """Store a full replacement of the record for its date."""
        self.is_dirty = True
        date = daily_record["date"]
        self.daily_records[date] = deepcopy(daily_record)
        self._dirty_dates.add(date)
        self._deleted_dates.discard(date)

    def delete_daily_record(self, date: str) -> None:
        if date not in self.daily_records:
            return
        self.is_dirty = True
        del self.daily_records[date]
        self._dirty_dates.discard(date)
        self._deleted_dates.add(date)

    def get_daily_record(self, date: str) -> Optional[DailyRecord]:
        daily_record = self.daily_records.get(date)
        if daily_record is None:
            return None
        return deepcopy(daily_record)

    def get_daily_records_from(self, date: str) -> list[DailyRecord]:
        """Every stored record dated on or after date, oldest first."""
        return [
            deepcopy(self.daily_records[record_date])
            for record_date in sorted(self.daily_records)
            if record_date >= date
        ]

    def get_all_dates(self) -> list[str]:
        return sorted(self.daily_records)


DAILY_RECORD_REPO = DailyRecordRepository()
