"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import date

import pytest

from calorize.config import Settings
from calorize.containers import AppContainer
from calorize.domain import users as users_module
from calorize.domain.errors import ConflictError, InvalidArgumentError
from calorize.domain.goals import Gender, GoalDirection
from calorize.domain.meals import Meal, MealType
from calorize.domain.nutrition import FoodCategory, FoodItem
from calorize.domain.users import UserProfile, UserRecord
from calorize.services.cache import InMemoryCache
from calorize.services.catalog import CatalogService, FoodCatalogRepository
from calorize.services.friends import FriendRepository, FriendService
from calorize.services.meals import MealLogRepository, MealLogService
from calorize.services.sessions import SessionService
from calorize.services.sharing import DietSharingService
from calorize.services.stats import StatsService
from calorize.services.users import UserRepository, UserService

APPLE = FoodItem(
    id=1,
    name="Apple",
    category=FoodCategory.FRUIT,
    energy_kcal=52.0,
    protein_g=0.3,
    fat_g=0.2,
    carbohydrate_g=14.0,
    fiber_g=2.4,
    calcium_mg=6.0,
)
CHICKEN = FoodItem(
    id=2,
    name="Chicken Breast",
    category=FoodCategory.MEAT,
    energy_kcal=165.0,
    protein_g=31.0,
    fat_g=3.6,
    carbohydrate_g=0.0,
    fiber_g=0.0,
    calcium_mg=15.0,
)
RICE = FoodItem(
    id=3,
    name="White Rice",
    category=FoodCategory.GRAIN,
    energy_kcal=130.0,
    protein_g=2.7,
    fat_g=0.3,
    carbohydrate_g=28.0,
    fiber_g=0.4,
    calcium_mg=10.0,
)
SAMPLE_FOODS = [APPLE, CHICKEN, RICE]


def make_profile(  # noqa: PLR0913
    name: str = "Ana",
    email: str = "ana@example.com",
    password: str = "secret123",
    weight_kg: float = 70.0,
    height_cm: int = 175,
    gender: Gender = Gender.MALE,
    goal: GoalDirection = GoalDirection.MAINTAIN,
    user_id: int = 0,
    today: date | None = None,
) -> UserProfile:
    return UserProfile(
        name=name,
        email=email,
        password=password,
        weight_kg=weight_kg,
        height_cm=height_cm,
        gender=gender,
        goal=goal,
        user_id=user_id,
        today=today,
    )


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    users: dict[int, UserProfile] = field(default_factory=dict)
    weights: dict[int, dict[date, float]] = field(default_factory=dict)
    updates: list[int] = field(default_factory=list)

    def create_user(self, profile: UserProfile) -> UserProfile:
        if self.get_by_email(profile.email) is not None:
            raise ConflictError("Email is already registered")
        profile.id = len(self.users) + 1
        self.users[profile.id] = profile
        self.weights[profile.id] = dict(profile.weight_history)
        return profile

    def update_user(self, profile: UserProfile) -> None:
        self.updates.append(profile.id)
        self.users[profile.id] = profile

    def get_by_id(self, user_id: int) -> UserProfile | None:
        return self.users.get(user_id)

    def get_by_email(self, email: str) -> UserProfile | None:
        return next((u for u in self.users.values() if u.email == email), None)

    def find_by_credentials(self, email: str, password: str) -> UserProfile | None:
        user = self.get_by_email(email)
        if user is None or not user.verify_password(password):
            return None
        return user

    def add_weight(self, user_id: int, weight_kg: float, recorded_on: date) -> None:
        self.weights.setdefault(user_id, {})[recorded_on] = weight_kg

    def list_weights(self, user_id: int) -> dict[date, float]:
        return dict(sorted(self.weights.get(user_id, {}).items()))


@dataclass
class InMemoryFriendRepository(FriendRepository):
    """In-memory friend links for tests."""

    users: InMemoryUserRepository
    links: set[tuple[int, int]] = field(default_factory=set)

    def list_friends(self, user_id: int) -> list[UserRecord]:
        return sorted(
            (
                self.users.users[friend_id].to_record()
                for owner, friend_id in self.links
                if owner == user_id
            ),
            key=lambda record: record.name,
        )

    def search_non_friends(self, user_id: int, name: str) -> list[UserRecord]:
        return [
            user.to_record()
            for user in self.users.users.values()
            if name.lower() in user.name.lower()
            and user.id != user_id
            and (user_id, user.id) not in self.links
        ]

    def add_friend(self, user_id: int, friend_id: int) -> None:
        if user_id == friend_id:
            raise InvalidArgumentError("A user cannot add themselves as a friend")
        if (user_id, friend_id) in self.links:
            raise ConflictError("Already friends")
        self.links.add((user_id, friend_id))

    def remove_friend(self, user_id: int, friend_id: int) -> bool:
        if (user_id, friend_id) not in self.links:
            return False
        self.links.remove((user_id, friend_id))
        return True


@dataclass
class InMemoryCatalogRepository(FoodCatalogRepository):
    """In-memory food catalog for tests."""

    foods: list[FoodItem] = field(default_factory=list)
    searches: list[str] = field(default_factory=list)

    def add_foods(self, foods: list[FoodItem]) -> None:
        self.foods.extend(foods)

    def count(self) -> int:
        return len(self.foods)

    def search_by_name(self, query: str, limit: int) -> list[FoodItem]:
        self.searches.append(query)
        matches = [food for food in self.foods if query.lower() in food.name.lower()]
        return sorted(matches, key=lambda food: food.name)[:limit]

    def get_by_name(self, name: str) -> FoodItem | None:
        return next(
            (food for food in self.foods if food.name.lower() == name.lower()), None
        )


@dataclass
class InMemoryMealLogRepository(MealLogRepository):
    """In-memory meal log for tests."""

    entries: list[tuple[int, MealType, date, str, FoodItem]] = field(
        default_factory=list
    )

    def add_food_entry(  # noqa: PLR0913
        self,
        user_id: int,
        meal_type: MealType,
        food: FoodItem,
        day: date,
        time: str,
    ) -> None:
        self.entries.append((user_id, meal_type, day, time, food))

    def list_foods(self, user_id: int, meal_type: MealType, day: date) -> list[FoodItem]:
        return [
            food
            for owner, kind, eaten_on, _, food in self.entries
            if owner == user_id and kind == meal_type and eaten_on == day
        ]

    def list_meals(self, user_id: int, day: date) -> list[Meal]:
        meals: dict[MealType, Meal] = {}
        for owner, kind, eaten_on, time, food in self.entries:
            if owner != user_id or eaten_on != day:
                continue
            meal = meals.setdefault(kind, Meal(kind, time))
            meal.add_food(food)
        return [meals[kind] for kind in MealType if kind in meals]

    def list_recent_food_names(self, user_id: int, limit: int) -> list[str]:
        names: list[str] = []
        for owner, *_, food in reversed(self.entries):
            if owner == user_id and food.name not in names:
                names.append(food.name)
        return names[:limit]


@pytest.fixture(autouse=True)
def fast_bcrypt(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(users_module, "BCRYPT_ROUNDS", 4)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'calorize.db'}",
        food_catalog_path=str(tmp_path / "foods.json"),
        environment="test",
    )


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def friend_repository(
    user_repository: InMemoryUserRepository,
) -> InMemoryFriendRepository:
    return InMemoryFriendRepository(users=user_repository)


@pytest.fixture
def catalog_repository() -> InMemoryCatalogRepository:
    return InMemoryCatalogRepository(foods=list(SAMPLE_FOODS))


@pytest.fixture
def meal_log_repository() -> InMemoryMealLogRepository:
    return InMemoryMealLogRepository()


@pytest.fixture
def catalog_service(catalog_repository: InMemoryCatalogRepository) -> CatalogService:
    return CatalogService(repository=catalog_repository, cache=InMemoryCache())


@pytest.fixture
def meal_log_service(
    meal_log_repository: InMemoryMealLogRepository,
    catalog_service: CatalogService,
) -> MealLogService:
    return MealLogService(repository=meal_log_repository, catalog=catalog_service)


@pytest.fixture
def container(  # noqa: PLR0913
    settings: Settings,
    user_repository: InMemoryUserRepository,
    friend_repository: InMemoryFriendRepository,
    catalog_service: CatalogService,
    meal_log_service: MealLogService,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        user_service=UserService(user_repository, default_age=settings.default_age),
        friend_service=FriendService(
            repository=friend_repository, users=user_repository
        ),
        catalog_service=catalog_service,
        meal_log_service=meal_log_service,
        stats_service=StatsService(meal_log_service, default_age=settings.default_age),
        sharing_service=DietSharingService(
            users=user_repository, meals=meal_log_service
        ),
        session_service=SessionService(InMemoryCache(), ttl_seconds=60),
        close_resources=lambda: None,
    )
