"""Daily goal targets and the calculator that derives them."""

import math
from dataclasses import dataclass
from enum import Enum

from calorize.domain.errors import InvalidArgumentError, MissingValueError

DEFAULT_AGE = 25

PROTEIN_GRAMS_PER_KG = 2.0
FAT_CALORIE_SHARE = 0.25
KCAL_PER_GRAM_PROTEIN = 4.0
KCAL_PER_GRAM_CARBOHYDRATE = 4.0
KCAL_PER_GRAM_FAT = 9.0


class Gender(Enum):
    """Gender used to pick the basal rate formula."""

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class GoalDirection(Enum):
    """What the user wants to do with their weight."""

    MAINTAIN = "maintain"
    LOSE = "lose"
    GAIN = "gain"


_GOAL_MULTIPLIERS = {
    GoalDirection.MAINTAIN: 1.0,
    GoalDirection.LOSE: 0.9,
    GoalDirection.GAIN: 1.06,
}


@dataclass(frozen=True)
class GoalTargets:
    """One day's calorie and macro targets."""

    calories: float
    protein: float
    carbohydrate: float
    fat: float

    def __post_init__(self) -> None:
        for label, value in (
            ("Calories", self.calories),
            ("Protein", self.protein),
            ("Carbohydrate", self.carbohydrate),
            ("Fat", self.fat),
        ):
            if value is None:
                raise MissingValueError(f"{label} target is required")
            if not math.isfinite(value) or value < 0:
                raise InvalidArgumentError(
                    f"{label} target must be a non-negative number"
                )


@dataclass
class GoalTargetsBuilder:
    """Named fields for goal targets, validated only when built."""

    calories: float = 0.0
    protein: float = 0.0
    carbohydrate: float = 0.0
    fat: float = 0.0

    def build(self) -> GoalTargets:
        """Return validated goal targets."""
        return GoalTargets(
            calories=self.calories,
            protein=self.protein,
            carbohydrate=self.carbohydrate,
            fat=self.fat,
        )


def basal_metabolic_rate(
    weight_kg: float, height_cm: float, age: int, gender: Gender
) -> float:
    """Harris-Benedict estimate; female and other share one formula."""
    _validate_age(age)
    if not (math.isfinite(weight_kg) and math.isfinite(height_cm)):
        raise InvalidArgumentError("Weight and height must be finite numbers")
    if gender is Gender.MALE:
        return 88.362 + (13.397 * weight_kg) + (4.799 * height_cm) - (5.677 * age)
    return 447.593 + (9.247 * weight_kg) + (3.098 * height_cm) - (4.330 * age)


def calorie_target(bmr: float, goal: GoalDirection) -> int:
    """Scale the basal rate by the goal direction and round up."""
    return math.ceil(bmr * _GOAL_MULTIPLIERS[goal])


def protein_target(weight_kg: float) -> float:
    return PROTEIN_GRAMS_PER_KG * weight_kg


def fat_target(calories: float) -> float:
    return float(math.floor((calories * FAT_CALORIE_SHARE) / KCAL_PER_GRAM_FAT))


def carbohydrate_target(calories: float, protein: float, fat: float) -> float:
    """Grams of carbohydrate left once protein and fat calories are taken."""
    remaining = calories - (
        protein * KCAL_PER_GRAM_PROTEIN + fat * KCAL_PER_GRAM_FAT
    )
    return float(max(math.floor(remaining / KCAL_PER_GRAM_CARBOHYDRATE), 0))


def compute_goal_targets(  # noqa: PLR0913
    weight_kg: float | None,
    height_cm: float,
    gender: Gender,
    goal: GoalDirection,
    age: int = DEFAULT_AGE,
    default_weight_kg: float = 0.0,
) -> GoalTargets:
    """Derive daily targets from body measurements and the stated goal."""
    weight = weight_kg if weight_kg is not None else default_weight_kg
    calories = calorie_target(
        basal_metabolic_rate(weight, height_cm, age, gender), goal
    )
    protein = protein_target(weight)
    fat = fat_target(calories)
    return GoalTargets(
        calories=float(calories),
        protein=protein,
        carbohydrate=carbohydrate_target(calories, protein, fat),
        fat=fat,
    )


def _validate_age(age: int) -> None:
    if age is None:
        raise MissingValueError("Age is required")
    if age <= 0:
        raise InvalidArgumentError("Age must be positive")
