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
from pdcaflow.model.weekly_plan import WeeklyPlan


class WeeklyPlanRepository:
    def __init__(self) -> None:
        self._weekly_plans: Optional[dict[str, WeeklyPlan]] = None
        self.is_dirty = False
        self._dirty_ids: set[str] = set()

    @property
    def weekly_plans(self) -> dict[str, WeeklyPlan]:
        if self._weekly_plans is None:
            self.__load_data()
        if self._weekly_plans is None:
            raise ValueError()
        return self._weekly_plans

    def __load_data(self) -> None:
        self._weekly_plans = {}
        for file_path in configuration.DATA_WEEKS_DIR.iterdir():
            if file_path.suffix != ".yaml" or file_path.name == ".gitkeep":
                continue
            weekly_plan: Optional[WeeklyPlan] = load(
                file_path.read_text(), Loader=Loader
            )
            if weekly_plan is not None:
                weekly_plan["daily_presets"] = weekly_plan.get("daily_presets") or {}
                self._weekly_plans[weekly_plan["week_id"]] = weekly_plan

    def __save_data(self) -> None:
        for week_id in self._dirty_ids:
            file_path = configuration.DATA_WEEKS_DIR / f"{week_id}.yaml"
            file_path.write_text(
                dump(
                    self.weekly_plans[week_id],
                    Dumper=Dumper,
                    allow_unicode=True,
                    sort_keys=False,
                )
            )
        self._dirty_ids.clear()

    def flush(self) -> bool:
        if self._weekly_plans is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def save_weekly_plan(self, weekly_plan: WeeklyPlan) -> None:
        self.is_dirty = True
        self.weekly_plans[weekly_plan["week_id"]] = deepcopy(weekly_plan)
        self._dirty_ids.add(weekly_plan["week_id"])

    def get_weekly_plan(self, week_id: str) -> Optional[WeeklyPlan]:
        weekly_plan = self.weekly_plans.get(week_id)
        if weekly_plan is None:
            return None
        return deepcopy(weekly_plan)


WEEKLY_PLAN_REPO = WeeklyPlanRepository()
