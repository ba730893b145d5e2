"""Login sessions kept in a TTL cache."""

import logging
import secrets
from dataclasses import dataclass
from datetime import date, timedelta

from calorize.domain.errors import AuthenticationError
from calorize.domain.meals import MealType
from calorize.domain.sessions import SessionContext
from calorize.domain.users import UserProfile
from calorize.services.cache import Cache

_logger = logging.getLogger(__name__)


@dataclass
class SessionService:
    """Creates, looks up and updates the state of logged-in users."""

    cache: Cache
    ttl_seconds: int = 3600

    def start(self, user: UserProfile) -> SessionContext:
        """Open a session for a user and return it with a fresh token."""
        context = SessionContext(token=secrets.token_urlsafe(32), user=user)
        self._save(context)
        _logger.info("Session started: user_id=%s", user.id)
        return context

    def get(self, token: str | None) -> SessionContext:
        """Return the session for a token and extend its lifetime."""
        if not token:
            raise AuthenticationError("Missing session token")
        context = self.cache.get(_cache_key(token))
        if not isinstance(context, SessionContext):
            raise AuthenticationError("Session expired or unknown")
        self._save(context)
        return context

    def end(self, token: str) -> None:
        self.cache.delete(_cache_key(token))

    def select_meal_type(self, token: str, meal_type: MealType) -> SessionContext:
        context = self.get(token)
        context.meal_type = meal_type
        return self._save(context)

    def select_food(self, token: str, food_name: str | None) -> SessionContext:
        context = self.get(token)
        context.selected_food = food_name
        return self._save(context)

    def select_day(self, token: str, day: date) -> SessionContext:
        context = self.get(token)
        context.selected_day = day
        return self._save(context)

    def previous_day(self, token: str) -> SessionContext:
        """Move the selected day one day back."""
        context = self.get(token)
        context.selected_day = context.selected_day - timedelta(days=1)
        return self._save(context)

    def _save(self, context: SessionContext) -> SessionContext:
        self.cache.set(_cache_key(context.token), context, ttl_seconds=self.ttl_seconds)
        return context


def _cache_key(token: str) -> str:
    return f"session:{token}"
