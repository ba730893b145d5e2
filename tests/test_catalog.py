"""Tests for the food catalog loader and service."""

import json

import pytest

from calorize.domain.errors import CatalogLoadError, NotFoundError
from calorize.domain.nutrition import FoodCategory
from calorize.services.cache import InMemoryCache
from calorize.services.catalog import CatalogService, load_food_catalog
from tests.conftest import InMemoryCatalogRepository


def _write_catalog(path, records) -> None:
    path.write_text(json.dumps(records), encoding="utf-8")


def test_load_food_catalog_parses_records(tmp_path) -> None:
    path = tmp_path / "foods.json"
    _write_catalog(
        path,
        [
            {
                "id": 10,
                "name": "Banana",
                "category": "fruit",
                "energy_kcal": 89,
                "protein_g": 1.1,
                "fat_g": 0.3,
                "carbohydrate_g": 22.8,
                "fiber_g": 2.6,
                "calcium_mg": 5,
            },
            {"id": 11, "name": "Water"},
        ],
    )

    foods = load_food_catalog(path)

    assert [food.name for food in foods] == ["Banana", "Water"]
    assert foods[0].category is FoodCategory.FRUIT
    assert foods[0].energy_kcal == 89.0
    assert foods[1].category is FoodCategory.OTHER


@pytest.mark.parametrize(
    "content",
    [
        "not json",
        json.dumps({"id": 1, "name": "Not a list"}),
        json.dumps([{"id": 1, "name": "Bad", "energy_kcal": -5}]),
        json.dumps([{"id": 1, "name": "Bad", "category": "candy"}]),
    ],
)
def test_malformed_catalog_raises(tmp_path, content: str) -> None:
    path = tmp_path / "foods.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(CatalogLoadError):
        load_food_catalog(path)


def test_missing_catalog_file_raises(tmp_path) -> None:
    with pytest.raises(CatalogLoadError):
        load_food_catalog(tmp_path / "missing.json")


def test_seed_if_empty_imports_only_once(tmp_path) -> None:
    path = tmp_path / "foods.json"
    _write_catalog(path, [{"id": 1, "name": "Oats", "category": "grain"}])
    repository = InMemoryCatalogRepository()
    service = CatalogService(repository=repository, cache=InMemoryCache())

    assert service.seed_if_empty(path) == 1
    assert service.seed_if_empty(path) == 0
    assert repository.count() == 1


def test_seed_if_empty_skips_missing_file(tmp_path) -> None:
    service = CatalogService(
        repository=InMemoryCatalogRepository(), cache=InMemoryCache()
    )

    assert service.seed_if_empty(tmp_path / "missing.json") == 0


def test_search_uses_cache(catalog_service: CatalogService, catalog_repository) -> None:
    first = catalog_service.search("ic", limit=5)
    second = catalog_service.search("IC", limit=5)

    assert [food.name for food in first] == ["Chicken Breast", "White Rice"]
    assert second == first
    assert catalog_repository.searches == ["ic"]
    assert catalog_service.search("  ") == []


def test_get_and_portion(catalog_service: CatalogService) -> None:
    assert catalog_service.get("apple").id == 1
    assert catalog_service.portion("Apple", 50).energy_kcal == pytest.approx(26.0)
    with pytest.raises(NotFoundError):
        catalog_service.get("Pizza")
