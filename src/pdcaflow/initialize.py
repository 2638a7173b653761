# SPDX-License-Identifier: MIT

from typing import Any

from yaml import dump

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from pdcaflow import configuration
from pdcaflow.repository.configuration import CONFIGURATION_REPO
from pdcaflow.template.bio_clock import get_bio_clock_template
from pdcaflow.view import state as view_state


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    __ensure_config_files()

    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)
    __ensure_data_files()

    config = CONFIGURATION_REPO.get_config()
    view_state.set_show_header(config["show_header"])


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        configuration.APP_CONFIG_PATH.touch()
        config = configuration.get_default_configuration()
        configuration.APP_CONFIG_PATH.write_text(dump(config, Dumper=Dumper))


def __ensure_data_files() -> None:
    # Single-file data stores
    if not configuration.DATA_BIO_CLOCK_PATH.is_file():
        configuration.DATA_BIO_CLOCK_PATH.touch()
        configuration.DATA_BIO_CLOCK_PATH.write_text(
            dump(get_bio_clock_template(), Dumper=Dumper, sort_keys=False)
        )
    if not configuration.DATA_TASK_POOL_PATH.is_file():
        configuration.DATA_TASK_POOL_PATH.touch()
        task_pool: dict[str, Any] = {"task_items": []}
        configuration.DATA_TASK_POOL_PATH.write_text(dump(task_pool, Dumper=Dumper))

    # Directory-based stores (one file per day or week)
    if not configuration.DATA_DAYS_DIR.is_dir():
        configuration.DATA_DAYS_DIR.mkdir(parents=True, exist_ok=True)
        (configuration.DATA_DAYS_DIR / ".gitkeep").touch()
    if not configuration.DATA_WEEKS_DIR.is_dir():
        configuration.DATA_WEEKS_DIR.mkdir(parents=True, exist_ok=True)
        (configuration.DATA_WEEKS_DIR / ".gitkeep").touch()
