"""User-related business logic."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol

from calorize.domain.errors import AuthenticationError, ConflictError, NotFoundError
from calorize.domain.goals import DEFAULT_AGE, Gender, GoalDirection, GoalTargets
from calorize.domain.users import UserProfile, validate_weight

_logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for user profiles."""

    def create_user(self, profile: UserProfile) -> UserProfile:
        """Store a new profile with its first weight entry and assign its id."""

    def update_user(self, profile: UserProfile) -> None:
        """Persist profile fields, including the current weight."""

    def get_by_id(self, user_id: int) -> UserProfile | None:
        """Return the profile for an id, if present."""

    def get_by_email(self, email: str) -> UserProfile | None:
        """Return the profile registered with an email, if present."""

    def find_by_credentials(self, email: str, password: str) -> UserProfile | None:
        """Return the profile when the email and password match."""

    def add_weight(self, user_id: int, weight_kg: float, recorded_on: date) -> None:
        """Record a weight entry, replacing one on the same date."""

    def list_weights(self, user_id: int) -> dict[date, float]:
        """Return the weight history ordered by date."""


@dataclass
class UserService:
    """Application service for registration, login and profile updates."""

    repository: UserRepository
    default_age: int = DEFAULT_AGE

    def register(  # noqa: PLR0913
        self,
        name: str,
        email: str,
        password: str,
        weight_kg: float,
        height_cm: int,
        gender: Gender = Gender.OTHER,
        goal: GoalDirection = GoalDirection.MAINTAIN,
        today: date | None = None,
    ) -> UserProfile:
        """Validate and store a new user."""
        profile = UserProfile(
            name=name,
            email=email,
            password=password,
            weight_kg=weight_kg,
            height_cm=height_cm,
            gender=gender,
            goal=goal,
            today=today,
        )
        if self.repository.get_by_email(email) is not None:
            raise ConflictError("Email is already registered")
        created = self.repository.create_user(profile)
        created.compute_goal_targets(self.default_age)
        _logger.info("Registered user: user_id=%s", created.id)
        return created

    def login(self, email: str, password: str) -> UserProfile:
        """Return the user for valid credentials."""
        user = self.repository.find_by_credentials(email, password)
        if user is None:
            raise AuthenticationError("Invalid email or password")
        user.compute_goal_targets(self.default_age)
        return user

    def get_profile(self, user_id: int) -> UserProfile:
        user = self.repository.get_by_id(user_id)
        if user is None:
            raise NotFoundError(f"User {user_id} not found")
        return user

    def update_profile(  # noqa: PLR0913
        self,
        user: UserProfile,
        *,
        name: str | None = None,
        email: str | None = None,
        password: str | None = None,
        height_cm: int | None = None,
        gender: Gender | None = None,
        goal: GoalDirection | None = None,
    ) -> UserProfile:
        """Validate all changes, apply them together and persist the profile."""
        if email is not None and email != user.email:
            existing = self.repository.get_by_email(email)
            if existing is not None and existing.id != user.id:
                raise ConflictError("Email is already registered")
        user.update(
            name=name,
            email=email,
            password=password,
            height_cm=height_cm,
            gender=gender,
            goal=goal,
        )
        self.repository.update_user(user)
        user.compute_goal_targets(self.default_age)
        return user

    def record_weight(
        self, user: UserProfile, weight_kg: float, on: date | None = None
    ) -> GoalTargets:
        """Add a weight entry and return goals recomputed from the latest weight."""
        recorded_on = on or date.today()
        validate_weight(weight_kg)
        self.repository.add_weight(user.id, weight_kg, recorded_on)
        user.add_weight(weight_kg, recorded_on)
        self.repository.update_user(user)
        return user.compute_goal_targets(self.default_age)

    def weight_history(self, user: UserProfile) -> dict[date, float]:
        return self.repository.list_weights(user.id)

    def goal_targets(self, user: UserProfile, age: int | None = None) -> GoalTargets:
        """Recompute targets for an age, falling back to the configured default."""
        return user.compute_goal_targets(age if age is not None else self.default_age)
