"""Shared diet snapshots sent from one user to another."""

import re
from dataclasses import dataclass
from datetime import date

from calorize.domain.errors import InvalidArgumentError, MissingValueError
from calorize.domain.nutrition import FoodItem
from calorize.domain.users import UserProfile

SHARED_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


@dataclass(frozen=True)
class SharedDiet:
    """A day of foods one user shares with another."""

    sender: UserProfile
    recipient: UserProfile
    foods: tuple[FoodItem, ...]
    shared_on: date

    @property
    def total_calories(self) -> float:
        return sum((food.energy_kcal for food in self.foods), 0.0)

    def __str__(self) -> str:
        return (
            f"Diet shared by {self.sender.name} with {self.recipient.name} "
            f"on {self.shared_on.isoformat()}: {len(self.foods)} foods, "
            f"{self.total_calories:.1f} kcal"
        )


@dataclass
class SharedDietBuilder:
    """Collects shared diet fields and validates them on build."""

    sender: UserProfile | None = None
    recipient: UserProfile | None = None
    foods: list[FoodItem] | None = None
    date: str | None = None

    def build(self) -> SharedDiet:
        """Return a validated shared diet."""
        if self.sender is None:
            raise MissingValueError("Sender is required")
        if self.recipient is None:
            raise MissingValueError("Recipient is required")
        if self.sender == self.recipient:
            raise InvalidArgumentError("A diet cannot be shared with its sender")
        if self.foods is None:
            raise MissingValueError("Foods are required")
        if not self.foods:
            raise InvalidArgumentError("A shared diet needs at least one food")
        if any(food is None for food in self.foods):
            raise MissingValueError("Food is required")
        return SharedDiet(
            sender=self.sender,
            recipient=self.recipient,
            foods=tuple(self.foods),
            shared_on=parse_shared_date(self.date),
        )


def parse_shared_date(value: str | None) -> date:
    """Parse a yyyy-MM-dd date."""
    if value is None:
        raise MissingValueError("Date is required")
    if not SHARED_DATE_PATTERN.match(value):
        raise InvalidArgumentError("Invalid date, use the yyyy-MM-dd format")
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise InvalidArgumentError(f"Invalid date: {value}") from exc
