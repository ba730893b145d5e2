"""SQLAlchemy-backed food catalog repository."""

from dataclasses import dataclass

from sqlalchemy import Engine, func, insert, select

from calorize.adapters.sqlalchemy_database import foods, transaction
from calorize.domain.nutrition import FoodCategory, FoodItem
from calorize.services.catalog import FoodCatalogRepository


@dataclass
class SqlAlchemyCatalogRepository(FoodCatalogRepository):
    """SQLAlchemy implementation for the food catalog."""

    engine: Engine

    def add_foods(self, items: list[FoodItem]) -> None:
        if not items:
            return
        with transaction(self.engine) as connection:
            connection.execute(
                insert(foods),
                [
                    {
                        "id": food.id,
                        "name": food.name,
                        "category": food.category.value,
                        "energy_kcal": food.energy_kcal,
                        "protein_g": food.protein_g,
                        "fat_g": food.fat_g,
                        "carbohydrate_g": food.carbohydrate_g,
                        "fiber_g": food.fiber_g,
                        "calcium_mg": food.calcium_mg,
                    }
                    for food in items
                ],
            )

    def count(self) -> int:
        with transaction(self.engine) as connection:
            return connection.execute(
                select(func.count()).select_from(foods)
            ).scalar_one()

    def search_by_name(self, query: str, limit: int) -> list[FoodItem]:
        statement = (
            select(foods)
            .where(foods.c.name.icontains(query, autoescape=True))
            .order_by(foods.c.name)
            .limit(limit)
        )
        with transaction(self.engine) as connection:
            return [_to_food(row) for row in connection.execute(statement)]

    def get_by_name(self, name: str) -> FoodItem | None:
        statement = (
            select(foods)
            .where(func.lower(foods.c.name) == name.lower())
            .order_by(foods.c.id)
            .limit(1)
        )
        with transaction(self.engine) as connection:
            row = connection.execute(statement).first()
        return _to_food(row) if row else None


def _to_food(row) -> FoodItem:  # noqa: ANN001
    return FoodItem(
        id=row.id,
        name=row.name,
        category=FoodCategory(row.category),
        energy_kcal=row.energy_kcal,
        protein_g=row.protein_g,
        fat_g=row.fat_g,
        carbohydrate_g=row.carbohydrate_g,
        fiber_g=row.fiber_g,
        calcium_mg=row.calcium_mg,
    )
