# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "pdcaflow"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_BIO_CLOCK_PATH: Path = DATA_PATH / "bio_clock.yaml"
DATA_TASK_POOL_PATH: Path = DATA_PATH / "task_pool.yaml"
DATA_DAYS_DIR: Path = DATA_PATH / "days"
DATA_WEEKS_DIR: Path = DATA_PATH / "weeks"


class Configuration(TypedDict):
    show_header: bool
    data_path: Optional[str]
    grid_start: str
    grid_end: str
    grid_interval_minutes: int
    rebase_future_on_bio_change: bool


def get_default_configuration() -> Configuration:
    return {
        "show_header": True,
        "data_path": None,
        "grid_start": "00:00",
        "grid_end": "23:00",
        "grid_interval_minutes": 60,
        "rebase_future_on_bio_change": True,
    }


def set_data_path(data_path: Path) -> None:
    global \
        DATA_PATH, \
        DATA_BIO_CLOCK_PATH, \
        DATA_TASK_POOL_PATH, \
        DATA_DAYS_DIR, \
        DATA_WEEKS_DIR

    DATA_PATH = data_path
    DATA_BIO_CLOCK_PATH = DATA_PATH / "bio_clock.yaml"
    DATA_TASK_POOL_PATH = DATA_PATH / "task_pool.yaml"
    DATA_DAYS_DIR = DATA_PATH / "days"
    DATA_WEEKS_DIR = DATA_PATH / "weeks"


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repositories are used.
    """
    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return
    data_path_setting = config.get("data_path")

    if data_path_setting is not None:
        set_data_path(Path(data_path_setting))
