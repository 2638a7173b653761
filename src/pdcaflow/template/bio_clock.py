# SPDX-License-Identifier: MIT

from pdcaflow.model.bio_clock import BioClockConfig


def get_bio_clock_template() -> BioClockConfig:
    return {
        "sleep_window": ["23:00", "07:00"],
        "meals": [
            {"name": "Lunch", "time": "12:00", "duration": 60},
            {"name": "Dinner", "time": "18:00", "duration": 60},
        ],
        "enable_sleep_fold": True,
    }
