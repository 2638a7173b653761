# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Iterator

import pytest

from pdcaflow import configuration
from pdcaflow.initialize import initialize
from pdcaflow.model.bio_clock import BioClockConfig
from pdcaflow.repository.bio_clock import BIO_CLOCK_REPO
from pdcaflow.repository.configuration import CONFIGURATION_REPO
from pdcaflow.repository.daily_record import DAILY_RECORD_REPO
from pdcaflow.repository.task_pool import TASK_POOL_REPO
from pdcaflow.repository.weekly_plan import WEEKLY_PLAN_REPO
from pdcaflow.template.bio_clock import get_bio_clock_template

REPOSITORIES = [
    CONFIGURATION_REPO,
    BIO_CLOCK_REPO,
    DAILY_RECORD_REPO,
    WEEKLY_PLAN_REPO,
    TASK_POOL_REPO,
]


@pytest.fixture
def bio_config() -> BioClockConfig:
    """Sleep 23:00-07:00, Lunch 12:00 and Dinner 18:00 for an hour each."""
    return get_bio_clock_template()


@pytest.fixture
def data_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point config and data files at a temp dir and start from empty stores."""
    monkeypatch.setattr(configuration, "CONFIG_PATH", tmp_path / "config")
    monkeypatch.setattr(
        configuration, "APP_CONFIG_PATH", tmp_path / "config" / "config.yaml"
    )
    for name in [
        "DATA_PATH",
        "DATA_BIO_CLOCK_PATH",
        "DATA_TASK_POOL_PATH",
        "DATA_DAYS_DIR",
        "DATA_WEEKS_DIR",
    ]:
        monkeypatch.setattr(configuration, name, getattr(configuration, name))
    configuration.set_data_path(tmp_path / "data")

    for repository in REPOSITORIES:
        repository.__init__()  # type: ignore[misc]
    initialize()
    yield tmp_path / "data"
    for repository in REPOSITORIES:
        repository.__init__()  # type: ignore[misc]
