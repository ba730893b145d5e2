"""Sharing a day of meals with another user."""

import logging
from dataclasses import dataclass

from calorize.domain.errors import NotFoundError
from calorize.domain.sharing import SharedDiet, SharedDietBuilder, parse_shared_date
from calorize.domain.users import UserProfile
from calorize.services.meals import MealLogService
from calorize.services.users import UserRepository

_logger = logging.getLogger(__name__)


@dataclass
class DietSharingService:
    """Builds shared diet snapshots from logged meals."""

    users: UserRepository
    meals: MealLogService

    def share_day(self, sender: UserProfile, recipient_id: int, day: str) -> SharedDiet:
        """Bundle the foods the sender logged on a yyyy-MM-dd day."""
        shared_on = parse_shared_date(day)
        recipient = self.users.get_by_id(recipient_id)
        if recipient is None:
            raise NotFoundError(f"User {recipient_id} not found")
        diet = SharedDietBuilder(
            sender=sender,
            recipient=recipient,
            foods=self.meals.foods_for_day(sender, shared_on),
            date=day,
        ).build()
        _logger.info(
            "Shared diet: sender_id=%s recipient_id=%s day=%s",
            sender.id,
            recipient.id,
            day,
        )
        return diet
