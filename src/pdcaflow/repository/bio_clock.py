# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from pdcaflow import configuration
from pdcaflow.model.bio_clock import BioClockConfig


class BioClockRepository:
    def __init__(self) -> None:
        self._bio_clock: Optional[BioClockConfig] = None
        self.is_dirty = False

    @property
    def bio_clock(self) -> BioClockConfig:
        if self._bio_clock is None:
            self.__load_data()
        if self._bio_clock is None:
            raise ValueError()
        return self._bio_clock

    def __load_data(self) -> None:
        self._bio_clock = load(
            configuration.DATA_BIO_CLOCK_PATH.read_text(), Loader=Loader
        )
        if self._bio_clock is None:
            raise ValueError()
        # Migration: configs written before sleep folding existed
        if "enable_sleep_fold" not in self._bio_clock:
            self._bio_clock["enable_sleep_fold"] = True

    def __save_data(self, bio_clock: BioClockConfig) -> None:
        configuration.DATA_BIO_CLOCK_PATH.write_text(dump(bio_clock, Dumper=Dumper))

    def flush(self) -> bool:
        if self._bio_clock is not None and self.is_dirty:
            self.__save_data(self._bio_clock)
            self.is_dirty = False
            return True
        return False

    def get_bio_clock(self) -> BioClockConfig:
        return deepcopy(self.bio_clock)

    def set_bio_clock(self, bio_clock: BioClockConfig) -> None:
        self.is_dirty = True
        self._bio_clock = deepcopy(bio_clock)


BIO_CLOCK_REPO = BioClockRepository()
