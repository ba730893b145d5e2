"""Domain models for meal logging."""

import re
from enum import Enum

from calorize.domain.errors import InvalidArgumentError, MissingValueError
from calorize.domain.nutrition import FoodItem

MEAL_TIME_PATTERN = re.compile(r"^([0-1]?[0-9]|2[0-3]):[0-5][0-9]$")


class MealType(Enum):
    """Meals a food can be logged under."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


class Meal:
    """Foods eaten together at a time of day.

    Foods are only ever appended, so the nutrient totals are summed on each read.
    """

    def __init__(self, meal_type: MealType, time: str) -> None:
        if meal_type is None:
            raise MissingValueError("Meal type is required")
        self._meal_type = meal_type
        self._time = _validate_time(time)
        self._foods: list[FoodItem] = []

    @property
    def meal_type(self) -> MealType:
        return self._meal_type

    @property
    def time(self) -> str:
        return self._time

    @property
    def foods(self) -> tuple[FoodItem, ...]:
        """Foods in the order they were added."""
        return tuple(self._foods)

    @property
    def calories(self) -> float:
        return sum((food.energy_kcal for food in self._foods), 0.0)

    @property
    def protein(self) -> float:
        return sum((food.protein_g for food in self._foods), 0.0)

    @property
    def carbohydrate(self) -> float:
        return sum((food.carbohydrate_g for food in self._foods), 0.0)

    @property
    def fat(self) -> float:
        return sum((food.fat_g for food in self._foods), 0.0)

    def add_food(self, food: FoodItem) -> None:
        """Append a food to the meal."""
        if food is None:
            raise MissingValueError("Food is required")
        self._foods.append(food)

    def __repr__(self) -> str:
        return (
            f"Meal [{self._meal_type.name} - {self._time}] "
            f"Calories: {self.calories:.2f} kcal"
        )


def _validate_time(time: str) -> str:
    if time is None:
        raise MissingValueError("Meal time is required")
    if not MEAL_TIME_PATTERN.match(time):
        raise InvalidArgumentError("Invalid meal time, use the HH:MM format")
    return time
