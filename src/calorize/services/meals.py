"""Meal logging service."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol

from calorize.domain.errors import InvalidArgumentError
from calorize.domain.meals import Meal, MealType
from calorize.domain.nutrition import GRAMS_PER_PORTION_BASIS, FoodItem
from calorize.domain.users import UserProfile
from calorize.services.catalog import CatalogService

_logger = logging.getLogger(__name__)


class MealLogRepository(Protocol):
    """Persistence interface for logged meals."""

    def add_food_entry(  # noqa: PLR0913
        self,
        user_id: int,
        meal_type: MealType,
        food: FoodItem,
        day: date,
        time: str,
    ) -> None:
        """Append a food to the user's meal of that type on that day."""

    def list_foods(self, user_id: int, meal_type: MealType, day: date) -> list[FoodItem]:
        """Return the foods of one meal in the order they were added."""

    def list_meals(self, user_id: int, day: date) -> list[Meal]:
        """Return every meal logged on a day with its foods."""

    def list_recent_food_names(self, user_id: int, limit: int) -> list[str]:
        """Return distinct logged food names, most recently logged first."""


@dataclass
class MealLogService:
    """Service that sizes catalog foods and logs them into meals."""

    repository: MealLogRepository
    catalog: CatalogService

    def add_food(  # noqa: PLR0913
        self,
        user: UserProfile,
        meal_type: MealType,
        food_name: str,
        grams: float,
        day: date | None = None,
        time: str | None = None,
    ) -> FoodItem:
        """Log a portion of a catalog food and return the logged values."""
        portion = self.catalog.portion(food_name, grams)
        self._store(user, meal_type, [portion], day, time)
        return portion

    def add_catalog_foods(
        self,
        user: UserProfile,
        meal_type: MealType,
        names: Iterable[str],
        day: date | None = None,
    ) -> list[FoodItem]:
        """Log a 100 g portion of each named food.

        Every name is resolved before anything is stored, so an unknown name
        leaves the meal untouched.
        """
        foods = [self.catalog.get(name) for name in names]
        if not foods:
            raise InvalidArgumentError("Select at least one food")
        portions = [food.portion(GRAMS_PER_PORTION_BASIS) for food in foods]
        self._store(user, meal_type, portions, day, None)
        return portions

    def foods_for_meal(
        self, user: UserProfile, meal_type: MealType, day: date | None = None
    ) -> list[FoodItem]:
        return self.repository.list_foods(user.id, meal_type, day or date.today())

    def meals_for_day(self, user: UserProfile, day: date | None = None) -> list[Meal]:
        return self.repository.list_meals(user.id, day or date.today())

    def foods_for_day(self, user: UserProfile, day: date) -> list[FoodItem]:
        """Return every food logged on a day across meals."""
        return [food for meal in self.meals_for_day(user, day) for food in meal.foods]

    def recent_food_names(self, user: UserProfile, limit: int = 10) -> list[str]:
        """Return distinct names of recently logged foods, newest first."""
        return self.repository.list_recent_food_names(user.id, limit)

    def _store(
        self,
        user: UserProfile,
        meal_type: MealType,
        foods: list[FoodItem],
        day: date | None,
        time: str | None,
    ) -> None:
        eaten_on = day or date.today()
        eaten_at = time or datetime.now().strftime("%H:%M")
        meal = Meal(meal_type, eaten_at)
        for food in foods:
            meal.add_food(food)
        for food in meal.foods:
            self.repository.add_food_entry(
                user.id, meal.meal_type, food, eaten_on, meal.time
            )
        _logger.info(
            "Logged foods: user_id=%s meal=%s day=%s count=%s",
            user.id,
            meal.meal_type.value,
            eaten_on,
            len(foods),
        )
