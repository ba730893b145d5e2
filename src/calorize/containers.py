"""Dependency container wiring for the application."""

from collections.abc import Callable
from dataclasses import dataclass

from calorize.adapters.sqlalchemy_catalog_repository import SqlAlchemyCatalogRepository
from calorize.adapters.sqlalchemy_database import create_database_engine, init_schema
from calorize.adapters.sqlalchemy_friend_repository import SqlAlchemyFriendRepository
from calorize.adapters.sqlalchemy_meal_log_repository import (
    SqlAlchemyMealLogRepository,
)
from calorize.adapters.sqlalchemy_user_repository import SqlAlchemyUserRepository
from calorize.config import Settings
from calorize.services.cache import InMemoryCache
from calorize.services.catalog import CatalogService
from calorize.services.friends import FriendService
from calorize.services.meals import MealLogService
from calorize.services.sessions import SessionService
from calorize.services.sharing import DietSharingService
from calorize.services.stats import StatsService
from calorize.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    friend_service: FriendService
    catalog_service: CatalogService
    meal_log_service: MealLogService
    stats_service: StatsService
    sharing_service: DietSharingService
    session_service: SessionService
    close_resources: Callable[[], None]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    engine = create_database_engine(resolved_settings.database_url)
    init_schema(engine)
    user_repository = SqlAlchemyUserRepository(engine)
    cache = InMemoryCache()
    catalog_service = CatalogService(
        repository=SqlAlchemyCatalogRepository(engine),
        cache=cache,
        search_ttl_seconds=resolved_settings.catalog_search_ttl_seconds,
    )
    catalog_service.seed_if_empty(resolved_settings.food_catalog_path)
    meal_log_service = MealLogService(
        repository=SqlAlchemyMealLogRepository(engine),
        catalog=catalog_service,
    )

    return AppContainer(
        settings=resolved_settings,
        user_service=UserService(
            user_repository, default_age=resolved_settings.default_age
        ),
        friend_service=FriendService(
            repository=SqlAlchemyFriendRepository(engine),
            users=user_repository,
        ),
        catalog_service=catalog_service,
        meal_log_service=meal_log_service,
        stats_service=StatsService(
            meal_log_service, default_age=resolved_settings.default_age
        ),
        sharing_service=DietSharingService(
            users=user_repository, meals=meal_log_service
        ),
        session_service=SessionService(
            cache, ttl_seconds=resolved_settings.session_ttl_seconds
        ),
        close_resources=engine.dispose,
    )
