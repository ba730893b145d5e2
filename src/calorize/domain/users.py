"""User profile domain models."""

import math
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import date
from types import MappingProxyType

import bcrypt

from calorize.domain.errors import InvalidArgumentError, MissingValueError
from calorize.domain.goals import (
    DEFAULT_AGE,
    Gender,
    GoalDirection,
    GoalTargets,
    compute_goal_targets,
)
from calorize.domain.meals import Meal

EMAIL_PATTERN = re.compile(r"^[\w.-]+@[\w.-]+\.[a-z]{2,}$")
MIN_PASSWORD_LENGTH = 6
MAX_PASSWORD_BYTES = 72
BCRYPT_ROUNDS = 12


@dataclass(frozen=True)
class UserRecord:
    """Lightweight view of a stored user."""

    id: int
    name: str
    email: str


class UserProfile:
    """A registered user with body measurements, weight history and goals.

    The id stays 0 until a repository stores the profile. Two profiles are equal
    when their ids are equal.
    """

    def __init__(  # noqa: PLR0913
        self,
        name: str,
        email: str,
        password: str | None,
        weight_kg: float,
        height_cm: int,
        gender: Gender = Gender.OTHER,
        goal: GoalDirection = GoalDirection.MAINTAIN,
        *,
        user_id: int = 0,
        today: date | None = None,
        password_hash: str | None = None,
    ) -> None:
        self._name = _validate_name(name)
        self._email = _validate_email(email)
        if password_hash is not None and password is None:
            self._password_hash = password_hash
        else:
            self._password_hash = _hash_password(_validate_password(password))
        validate_weight(weight_kg)
        self._height_cm = _validate_height(height_cm)
        self._gender = _validate_gender(gender)
        self._goal = _validate_goal(goal)
        self.id = user_id
        self._weights: dict[date, float] = {today or date.today(): weight_kg}
        self._meals: list[Meal] = []
        self._friend_ids: list[int] = []
        self._goal_targets = self.compute_goal_targets(DEFAULT_AGE)

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = _validate_name(value)

    @property
    def email(self) -> str:
        return self._email

    @email.setter
    def email(self, value: str) -> None:
        self._email = _validate_email(value)

    @property
    def password_hash(self) -> str:
        return self._password_hash

    def set_password(self, password: str) -> None:
        """Validate and store a new password."""
        self._password_hash = _hash_password(_validate_password(password))

    def verify_password(self, password: str) -> bool:
        """Return True when the password matches the stored hash."""
        if not password:
            return False
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"), self._password_hash.encode("utf-8")
            )
        except ValueError:
            return False

    @property
    def height_cm(self) -> int:
        return self._height_cm

    @height_cm.setter
    def height_cm(self, value: int) -> None:
        self._height_cm = _validate_height(value)

    @property
    def gender(self) -> Gender:
        return self._gender

    @gender.setter
    def gender(self, value: Gender) -> None:
        self._gender = _validate_gender(value)

    @property
    def goal(self) -> GoalDirection:
        return self._goal

    @goal.setter
    def goal(self, value: GoalDirection) -> None:
        self._goal = _validate_goal(value)

    def update(  # noqa: PLR0913
        self,
        *,
        name: str | None = None,
        email: str | None = None,
        password: str | None = None,
        height_cm: int | None = None,
        gender: Gender | None = None,
        goal: GoalDirection | None = None,
    ) -> None:
        """Apply the given fields together; nothing changes if any is invalid."""
        new_name = _validate_name(name) if name is not None else self._name
        new_email = _validate_email(email) if email is not None else self._email
        new_height = (
            _validate_height(height_cm) if height_cm is not None else self._height_cm
        )
        new_hash = (
            _hash_password(_validate_password(password))
            if password is not None
            else self._password_hash
        )
        self._name = new_name
        self._email = new_email
        self._height_cm = new_height
        self._password_hash = new_hash
        self._gender = gender or self._gender
        self._goal = goal or self._goal

    @property
    def weight_history(self) -> Mapping[date, float]:
        """Read-only weight history ordered by date."""
        return MappingProxyType(dict(sorted(self._weights.items())))

    @property
    def current_weight(self) -> float:
        """Weight recorded on the most recent date."""
        return self._weights[max(self._weights)]

    def add_weight(self, weight_kg: float, on: date | None = None) -> None:
        """Record a weight, replacing any entry already on that date."""
        self._weights[on or date.today()] = validate_weight(weight_kg)

    def replace_weight_history(self, history: Mapping[date, float]) -> None:
        """Swap in a weight history loaded from storage."""
        if history is None:
            raise MissingValueError("Weight history is required")
        if not history:
            raise InvalidArgumentError("Weight history cannot be empty")
        for weight in history.values():
            validate_weight(weight)
        self._weights = dict(history)

    @property
    def meals(self) -> tuple[Meal, ...]:
        return tuple(self._meals)

    def add_meal(self, meal: Meal) -> None:
        if meal is None:
            raise MissingValueError("Meal is required")
        self._meals.append(meal)

    @property
    def friend_ids(self) -> tuple[int, ...]:
        return tuple(self._friend_ids)

    def add_friend(self, friend: "UserProfile") -> None:
        """Add another user as a friend; a user cannot befriend themselves."""
        if friend is None:
            raise MissingValueError("Friend is required")
        if friend == self:
            raise InvalidArgumentError("A user cannot add themselves as a friend")
        if friend.id not in self._friend_ids:
            self._friend_ids.append(friend.id)

    def replace_friend_ids(self, friend_ids: Iterable[int]) -> None:
        """Swap in friend ids loaded from storage."""
        self._friend_ids = [fid for fid in friend_ids if fid != self.id]

    def remove_friend(self, friend_id: int) -> None:
        if friend_id in self._friend_ids:
            self._friend_ids.remove(friend_id)

    @property
    def goal_targets(self) -> GoalTargets:
        """Targets from the last call to compute_goal_targets."""
        return self._goal_targets

    def compute_goal_targets(self, age: int = DEFAULT_AGE) -> GoalTargets:
        """Recompute daily targets from the most recent weight."""
        self._goal_targets = compute_goal_targets(
            weight_kg=self.current_weight,
            height_cm=self._height_cm,
            gender=self._gender,
            goal=self._goal,
            age=age,
        )
        return self._goal_targets

    def to_record(self) -> UserRecord:
        return UserRecord(id=self.id, name=self._name, email=self._email)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UserProfile):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"UserProfile(id={self.id}, name={self._name!r})"


def _validate_name(name: str) -> str:
    if name is None:
        raise MissingValueError("Name is required")
    if not name.strip():
        raise InvalidArgumentError("Name cannot be blank")
    return name


def _validate_email(email: str) -> str:
    if email is None:
        raise MissingValueError("Email is required")
    if not EMAIL_PATTERN.match(email):
        raise InvalidArgumentError("Invalid email")
    return email


def _validate_password(password: str | None) -> str:
    if password is None:
        raise MissingValueError("Password is required")
    if len(password) < MIN_PASSWORD_LENGTH:
        raise InvalidArgumentError(
            f"Password must have at least {MIN_PASSWORD_LENGTH} characters"
        )
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise InvalidArgumentError(
            f"Password cannot be longer than {MAX_PASSWORD_BYTES} bytes"
        )
    return password


def validate_weight(weight_kg: float) -> float:
    """Reject missing, non-finite and non-positive weights."""
    if weight_kg is None:
        raise MissingValueError("Weight is required")
    if not math.isfinite(weight_kg) or weight_kg <= 0:
        raise InvalidArgumentError("Weight must be positive")
    return weight_kg


def _validate_gender(gender: Gender) -> Gender:
    if gender is None:
        raise MissingValueError("Gender is required")
    return gender


def _validate_goal(goal: GoalDirection) -> GoalDirection:
    if goal is None:
        raise MissingValueError("Goal is required")
    return goal


def _validate_height(height_cm: int) -> int:
    if height_cm is None:
        raise MissingValueError("Height is required")
    if height_cm <= 0:
        raise InvalidArgumentError("Height must be positive")
    return height_cm


def _hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")
