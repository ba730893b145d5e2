"""Food catalog endpoints."""

from fastapi import APIRouter, Depends

from calorize.api.dependencies import get_container, require_session
from calorize.api.schemas import FoodOut
from calorize.containers import AppContainer
from calorize.domain.sessions import SessionContext

router = APIRouter(prefix="/foods", tags=["foods"])


@router.get("/search", dependencies=[Depends(require_session)])
def search_foods(
    q: str = "",
    limit: int = 20,
    container: AppContainer = Depends(get_container),
) -> list[FoodOut]:
    foods = container.catalog_service.search(q, limit)
    return [FoodOut.from_domain(food) for food in foods]


@router.get("/recent")
def recent_foods(
    session: SessionContext = Depends(require_session),
    container: AppContainer = Depends(get_container),
) -> list[str]:
    """Names of the foods the user logged most recently."""
    return container.meal_log_service.recent_food_names(
        session.user, container.settings.recent_foods_limit
    )


@router.get("/{name}")
def get_food(
    name: str,
    session: SessionContext = Depends(require_session),
    container: AppContainer = Depends(get_container),
) -> FoodOut:
    """Catalog values per 100 g; the food becomes the session's selection."""
    food = container.catalog_service.get(name)
    container.session_service.select_food(session.token, food.name)
    return FoodOut.from_domain(food)


@router.get("/{name}/portion", dependencies=[Depends(require_session)])
def get_portion(
    name: str,
    grams: float,
    container: AppContainer = Depends(get_container),
) -> FoodOut:
    return FoodOut.from_domain(container.catalog_service.portion(name, grams))
