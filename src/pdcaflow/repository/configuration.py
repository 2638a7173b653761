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


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        self._config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        if self._config is None:
            raise ValueError()

        # Migration: add any setting introduced after the file was written
        for key, value in configuration.get_default_configuration().items():
            if key not in self._config:
                self._config[key] = value  # type: ignore[literal-required]

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        show_header: Optional[bool] = None,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        grid_start: Optional[str] = None,
        grid_end: Optional[str] = None,
        grid_interval_minutes: Optional[int] = None,
        rebase_future_on_bio_change: Optional[bool] = None,
    ) -> None:
        self.is_dirty = True

        if show_header is not None:
            self.config["show_header"] = show_header
        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if grid_start is not None:
            self.config["grid_start"] = grid_start
        if grid_end is not None:
            self.config["grid_end"] = grid_end
        if grid_interval_minutes is not None:
            self.config["grid_interval_minutes"] = grid_interval_minutes
        if rebase_future_on_bio_change is not None:
            self.config["rebase_future_on_bio_change"] = rebase_future_on_bio_change


CONFIGURATION_REPO = ConfigurationRepository()
