# SPDX-License-Identifier: MIT

import atexit

from pdcaflow.repository.bio_clock import BIO_CLOCK_REPO
from pdcaflow.repository.configuration import CONFIGURATION_REPO
from pdcaflow.repository.daily_record import DAILY_RECORD_REPO
from pdcaflow.repository.task_pool import TASK_POOL_REPO
from pdcaflow.repository.weekly_plan import WEEKLY_PLAN_REPO


def flush_all() -> None:
    CONFIGURATION_REPO.flush()
    BIO_CLOCK_REPO.flush()
    DAILY_RECORD_REPO.flush()
    WEEKLY_PLAN_REPO.flush()
    TASK_POOL_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush_all)
