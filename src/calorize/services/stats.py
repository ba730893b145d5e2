"""Daily nutrient statistics."""

from dataclasses import dataclass
from datetime import date

from calorize.domain.goals import DEFAULT_AGE
from calorize.domain.nutrition import sum_nutrients
from calorize.domain.stats import DailySummary, NutrientTable
from calorize.domain.users import UserProfile
from calorize.services.meals import MealLogService


@dataclass
class StatsService:
    """Service comparing what a user ate with their goals."""

    meals: MealLogService
    default_age: int = DEFAULT_AGE

    def daily_summary(
        self, user: UserProfile, day: date, age: int | None = None
    ) -> DailySummary:
        """Return a day's consumed totals next to freshly computed targets."""
        foods = self.meals.foods_for_day(user, day)
        targets = user.compute_goal_targets(
            age if age is not None else self.default_age
        )
        return DailySummary(day=day, consumed=sum_nutrients(foods), targets=targets)

    def nutrient_table(self, user: UserProfile, day: date) -> NutrientTable:
        foods = tuple(self.meals.foods_for_day(user, day))
        return NutrientTable(day=day, foods=foods, total=sum_nutrients(foods))
