"""SQLAlchemy-backed meal log repository."""

from dataclasses import dataclass
from datetime import date

from sqlalchemy import Engine, func, insert, select

from calorize.adapters.sqlalchemy_database import meal_foods, meals, transaction
from calorize.domain.meals import Meal, MealType
from calorize.domain.nutrition import FoodCategory, FoodItem
from calorize.services.meals import MealLogRepository


@dataclass
class SqlAlchemyMealLogRepository(MealLogRepository):
    """SQLAlchemy implementation for meal logs."""

    engine: Engine

    def add_food_entry(  # noqa: PLR0913
        self,
        user_id: int,
        meal_type: MealType,
        food: FoodItem,
        day: date,
        time: str,
    ) -> None:
        """Append a food, creating the day's meal row on first use."""
        with transaction(self.engine) as connection:
            meal_id = connection.execute(
                select(meals.c.id).where(
                    meals.c.user_id == user_id,
                    meals.c.meal_type == meal_type.value,
                    meals.c.eaten_on == day,
                )
            ).scalar_one_or_none()
            if meal_id is None:
                meal_id = connection.execute(
                    insert(meals).values(
                        user_id=user_id,
                        meal_type=meal_type.value,
                        eaten_on=day,
                        eaten_at=time,
                    )
                ).inserted_primary_key[0]
            connection.execute(
                insert(meal_foods).values(
                    meal_id=meal_id,
                    food_id=food.id,
                    name=food.name,
                    category=food.category.value,
                    energy_kcal=food.energy_kcal,
                    protein_g=food.protein_g,
                    fat_g=food.fat_g,
                    carbohydrate_g=food.carbohydrate_g,
                    fiber_g=food.fiber_g,
                    calcium_mg=food.calcium_mg,
                )
            )

    def list_foods(self, user_id: int, meal_type: MealType, day: date) -> list[FoodItem]:
        statement = (
            select(meal_foods)
            .join(meals, meals.c.id == meal_foods.c.meal_id)
            .where(
                meals.c.user_id == user_id,
                meals.c.meal_type == meal_type.value,
                meals.c.eaten_on == day,
            )
            .order_by(meal_foods.c.id)
        )
        with transaction(self.engine) as connection:
            return [_to_food(row) for row in connection.execute(statement)]

    def list_meals(self, user_id: int, day: date) -> list[Meal]:
        """Return the day's meals in meal type order."""
        statement = (
            select(meals.c.meal_type, meals.c.eaten_at, meal_foods)
            .join(meal_foods, meal_foods.c.meal_id == meals.c.id)
            .where(meals.c.user_id == user_id, meals.c.eaten_on == day)
            .order_by(meal_foods.c.id)
        )
        by_id: dict[int, Meal] = {}
        with transaction(self.engine) as connection:
            for row in connection.execute(statement):
                meal = by_id.get(row.meal_id)
                if meal is None:
                    meal = Meal(MealType(row.meal_type), row.eaten_at)
                    by_id[row.meal_id] = meal
                meal.add_food(_to_food(row))
        order = list(MealType)
        return sorted(by_id.values(), key=lambda meal: order.index(meal.meal_type))

    def list_recent_food_names(self, user_id: int, limit: int) -> list[str]:
        statement = (
            select(meal_foods.c.name)
            .join(meals, meals.c.id == meal_foods.c.meal_id)
            .where(meals.c.user_id == user_id)
            .group_by(meal_foods.c.name)
            .order_by(func.max(meal_foods.c.id).desc())
            .limit(limit)
        )
        with transaction(self.engine) as connection:
            return list(connection.execute(statement).scalars())


def _to_food(row) -> FoodItem:  # noqa: ANN001
    return FoodItem(
        id=row.food_id,
        name=row.name,
        category=FoodCategory(row.category),
        energy_kcal=row.energy_kcal,
        protein_g=row.protein_g,
        fat_g=row.fat_g,
        carbohydrate_g=row.carbohydrate_g,
        fiber_g=row.fiber_g,
        calcium_mg=row.calcium_mg,
    )
