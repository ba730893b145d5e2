"""Domain models for statistics."""

from dataclasses import dataclass
from datetime import date

from calorize.domain.goals import GoalTargets
from calorize.domain.nutrition import FoodItem, NutrientTotals


@dataclass(frozen=True)
class DailySummary:
    """Consumed nutrients for a day next to the user's targets."""

    day: date
    consumed: NutrientTotals
    targets: GoalTargets

    @property
    def calorie_progress(self) -> float:
        """Share of the calorie target eaten, capped at 1."""
        if self.targets.calories <= 0:
            return 0.0
        return min(self.consumed.energy_kcal / self.targets.calories, 1.0)


@dataclass(frozen=True)
class NutrientTable:
    """Every food logged on a day with a total row."""

    day: date
    foods: tuple[FoodItem, ...]
    total: NutrientTotals
