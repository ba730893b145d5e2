"""Meal logging and nutrient table endpoints."""

from datetime import date

from fastapi import APIRouter, Depends, status

from calorize.api.dependencies import get_container, require_session
from calorize.api.schemas import (
    AddFoodBody,
    CatalogFoodsBody,
    FoodOut,
    MealOut,
    TableOut,
)
from calorize.containers import AppContainer
from calorize.domain.meals import MealType
from calorize.domain.sessions import SessionContext

router = APIRouter(tags=["meals"])


@router.get("/meals")
def list_meals(
    day: date | None = None,
    session: SessionContext = Depends(require_session),
    container: AppContainer = Depends(get_container),
) -> list[MealOut]:
    meals = container.meal_log_service.meals_for_day(
        session.user, day or session.selected_day
    )
    return [MealOut.from_domain(meal) for meal in meals]


@router.post("/meals/{meal_type}/foods", status_code=status.HTTP_201_CREATED)
def add_food(
    meal_type: MealType,
    body: AddFoodBody,
    session: SessionContext = Depends(require_session),
    container: AppContainer = Depends(get_container),
) -> FoodOut:
    """Log grams of a catalog food into a meal."""
    container.session_service.select_meal_type(session.token, meal_type)
    food = container.meal_log_service.add_food(
        session.user,
        meal_type,
        body.food_name,
        body.grams,
        day=body.day or session.selected_day,
        time=body.time,
    )
    return FoodOut.from_domain(food)


@router.post("/meals/{meal_type}/catalog-foods", status_code=status.HTTP_201_CREATED)
def add_catalog_foods(
    meal_type: MealType,
    body: CatalogFoodsBody,
    session: SessionContext = Depends(require_session),
    container: AppContainer = Depends(get_container),
) -> list[FoodOut]:
    """Log 100 g of each named food, such as picks from the recent list."""
    container.session_service.select_meal_type(session.token, meal_type)
    foods = container.meal_log_service.add_catalog_foods(
        session.user, meal_type, body.names, day=body.day or session.selected_day
    )
    return [FoodOut.from_domain(food) for food in foods]


@router.get("/table")
def nutrient_table(
    session: SessionContext = Depends(require_session),
    container: AppContainer = Depends(get_container),
) -> TableOut:
    """All foods logged on the session's selected day with totals."""
    table = container.stats_service.nutrient_table(session.user, session.selected_day)
    return TableOut.from_domain(table)


@router.post("/table/previous-day")
def previous_day(
    session: SessionContext = Depends(require_session),
    container: AppContainer = Depends(get_container),
) -> TableOut:
    context = container.session_service.previous_day(session.token)
    table = container.stats_service.nutrient_table(context.user, context.selected_day)
    return TableOut.from_domain(table)


@router.post("/table/today")
def today(
    session: SessionContext = Depends(require_session),
    container: AppContainer = Depends(get_container),
) -> TableOut:
    context = container.session_service.select_day(session.token, date.today())
    table = container.stats_service.nutrient_table(context.user, context.selected_day)
    return TableOut.from_domain(table)
