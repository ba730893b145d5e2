"""Domain models for login sessions."""

from dataclasses import dataclass, field
from datetime import date

from calorize.domain.meals import MealType
from calorize.domain.users import UserProfile


@dataclass
class SessionContext:
    """Per-login state: the user plus the day, meal and food being worked on."""

    token: str
    user: UserProfile
    selected_day: date = field(default_factory=date.today)
    meal_type: MealType | None = None
    selected_food: str | None = None
