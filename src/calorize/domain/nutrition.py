"""Nutrition domain models."""

import math
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Protocol

from calorize.domain.errors import InvalidArgumentError, MissingValueError

GRAMS_PER_PORTION_BASIS = 100.0


class FoodCategory(Enum):
    """Catalog categories for foods."""

    FRUIT = "fruit"
    VEGETABLE = "vegetable"
    MEAT = "meat"
    DAIRY = "dairy"
    GRAIN = "grain"
    OTHER = "other"


class Consumable(Protocol):
    """Anything that carries per-unit nutritional content."""

    @property
    def energy_kcal(self) -> float: ...

    @property
    def protein_g(self) -> float: ...

    @property
    def fat_g(self) -> float: ...

    @property
    def carbohydrate_g(self) -> float: ...

    @property
    def fiber_g(self) -> float: ...

    @property
    def calcium_mg(self) -> float: ...


@total_ordering
@dataclass(frozen=True, eq=False)
class FoodItem:
    """A food with its nutrient values.

    Catalog entries hold values per 100 g. Logged entries hold the values of the
    portion actually eaten. Two foods are equal when their ids match.
    """

    id: int
    name: str
    category: FoodCategory
    energy_kcal: float = 0.0
    protein_g: float = 0.0
    fat_g: float = 0.0
    carbohydrate_g: float = 0.0
    fiber_g: float = 0.0
    calcium_mg: float = 0.0

    def __post_init__(self) -> None:
        if self.name is None:
            raise MissingValueError("Food name is required")
        if self.category is None:
            raise MissingValueError("Food category is required")
        for label, value in (
            ("Energy", self.energy_kcal),
            ("Protein", self.protein_g),
            ("Fat", self.fat_g),
            ("Carbohydrate", self.carbohydrate_g),
            ("Fiber", self.fiber_g),
            ("Calcium", self.calcium_mg),
        ):
            if not math.isfinite(value) or value < 0:
                raise InvalidArgumentError(f"{label} must be a non-negative number")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FoodItem):
            return NotImplemented
        return self.id == other.id

    def __lt__(self, other: "FoodItem") -> bool:
        if not isinstance(other, FoodItem):
            return NotImplemented
        return self.id < other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return f"Food [{self.id} - {self.name}, {self.energy_kcal:.1f} kcal]"

    def portion(self, grams: float) -> "FoodItem":
        """Return this food scaled from its 100 g basis to the given grams."""
        if not math.isfinite(grams) or grams <= 0:
            raise InvalidArgumentError("Grams must be a positive number")
        factor = grams / GRAMS_PER_PORTION_BASIS
        return FoodItem(
            id=self.id,
            name=self.name,
            category=self.category,
            energy_kcal=self.energy_kcal * factor,
            protein_g=self.protein_g * factor,
            fat_g=self.fat_g * factor,
            carbohydrate_g=self.carbohydrate_g * factor,
            fiber_g=self.fiber_g * factor,
            calcium_mg=self.calcium_mg * factor,
        )


@dataclass(frozen=True)
class NutrientTotals:
    """Summed nutrients over a group of foods."""

    energy_kcal: float = 0.0
    protein_g: float = 0.0
    fat_g: float = 0.0
    carbohydrate_g: float = 0.0
    fiber_g: float = 0.0
    calcium_mg: float = 0.0


def sum_nutrients(foods: Iterable[Consumable]) -> NutrientTotals:
    """Fold nutrient values over foods; an empty input sums to zero."""
    total = NutrientTotals()
    for food in foods:
        total = NutrientTotals(
            energy_kcal=total.energy_kcal + food.energy_kcal,
            protein_g=total.protein_g + food.protein_g,
            fat_g=total.fat_g + food.fat_g,
            carbohydrate_g=total.carbohydrate_g + food.carbohydrate_g,
            fiber_g=total.fiber_g + food.fiber_g,
            calcium_mg=total.calcium_mg + food.calcium_mg,
        )
    return total
