"""Food catalog loading and lookup."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from calorize.domain.errors import CatalogLoadError, NotFoundError
from calorize.domain.nutrition import FoodCategory, FoodItem
from calorize.services.cache import Cache

_logger = logging.getLogger(__name__)


class CatalogFoodRecord(BaseModel):
    """One entry of the catalog JSON file, with values per 100 g."""

    id: int
    name: str = Field(min_length=1)
    category: FoodCategory = FoodCategory.OTHER
    energy_kcal: float = Field(default=0.0, ge=0)
    protein_g: float = Field(default=0.0, ge=0)
    fat_g: float = Field(default=0.0, ge=0)
    carbohydrate_g: float = Field(default=0.0, ge=0)
    fiber_g: float = Field(default=0.0, ge=0)
    calcium_mg: float = Field(default=0.0, ge=0)

    def to_food(self) -> FoodItem:
        return FoodItem(**self.model_dump())


_CATALOG_ADAPTER = TypeAdapter(list[CatalogFoodRecord])


class FoodCatalogRepository(Protocol):
    """Persistence interface for the food catalog."""

    def add_foods(self, foods: list[FoodItem]) -> None:
        """Insert catalog foods."""

    def count(self) -> int:
        """Return how many foods the catalog holds."""

    def search_by_name(self, query: str, limit: int) -> list[FoodItem]:
        """Return foods whose name contains the query, ordered by name."""

    def get_by_name(self, name: str) -> FoodItem | None:
        """Return the food with an exact name, ignoring case."""


def load_food_catalog(path: str | Path) -> list[FoodItem]:
    """Read a JSON array of food records."""
    try:
        raw = Path(path).read_bytes()
    except OSError as exc:
        _logger.exception("Failed to read food catalog: path=%s", path)
        raise CatalogLoadError(f"Cannot read food catalog {path}") from exc
    try:
        records = _CATALOG_ADAPTER.validate_json(raw)
    except ValidationError as exc:
        _logger.exception("Malformed food catalog: path=%s", path)
        raise CatalogLoadError(f"Malformed food catalog {path}") from exc
    return [record.to_food() for record in records]


@dataclass
class CatalogService:
    """Service for searching the food catalog and sizing portions."""

    repository: FoodCatalogRepository
    cache: Cache
    search_ttl_seconds: int = 300

    def import_file(self, path: str | Path) -> int:
        """Load a catalog file into storage and return the number of foods."""
        foods = load_food_catalog(path)
        self.repository.add_foods(foods)
        _logger.info("Imported food catalog: path=%s foods=%s", path, len(foods))
        return len(foods)

    def seed_if_empty(self, path: str | Path) -> int:
        """Import the catalog file when storage holds no foods yet."""
        if self.repository.count() > 0:
            return 0
        if not Path(path).is_file():
            _logger.warning("Food catalog file not found: path=%s", path)
            return 0
        return self.import_file(path)

    def search(self, query: str, limit: int = 20) -> list[FoodItem]:
        """Search foods by name with caching."""
        cleaned = (query or "").strip()
        if not cleaned:
            return []
        cache_key = f"catalog:search:{cleaned.lower()}:{limit}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, list):
            return cached
        foods = self.repository.search_by_name(cleaned, limit)
        self.cache.set(cache_key, foods, ttl_seconds=self.search_ttl_seconds)
        return foods

    def get(self, name: str) -> FoodItem:
        food = self.repository.get_by_name(name)
        if food is None:
            raise NotFoundError(f"Food {name!r} not found")
        return food

    def portion(self, name: str, grams: float) -> FoodItem:
        """Return a catalog food scaled to the grams eaten."""
        return self.get(name).portion(grams)
