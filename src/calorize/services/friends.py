"""Friend list management."""

import logging
from dataclasses import dataclass
from typing import Protocol

from calorize.domain.errors import NotFoundError
from calorize.domain.users import UserProfile, UserRecord
from calorize.services.users import UserRepository

_logger = logging.getLogger(__name__)


class FriendRepository(Protocol):
    """Persistence interface for one-way friend links."""

    def list_friends(self, user_id: int) -> list[UserRecord]:
        """Return the users a user has added as friends."""

    def search_non_friends(self, user_id: int, name: str) -> list[UserRecord]:
        """Return users whose name contains the text and who are not friends yet."""

    def add_friend(self, user_id: int, friend_id: int) -> None:
        """Store a friend link."""

    def remove_friend(self, user_id: int, friend_id: int) -> bool:
        """Delete a friend link and report whether one existed."""


@dataclass
class FriendService:
    """Service for finding, adding and removing friends."""

    repository: FriendRepository
    users: UserRepository

    def list_friends(self, user: UserProfile) -> list[UserRecord]:
        return self.repository.list_friends(user.id)

    def search(self, user: UserProfile, name: str) -> list[UserRecord]:
        """Search users that can still be added; blank text matches nobody."""
        if not name or not name.strip():
            return []
        return self.repository.search_non_friends(user.id, name.strip())

    def add_friend(self, user: UserProfile, friend_id: int) -> UserRecord:
        """Add a friend by id."""
        friend = self.users.get_by_id(friend_id)
        if friend is None:
            raise NotFoundError(f"User {friend_id} not found")
        user.add_friend(friend)
        self.repository.add_friend(user.id, friend.id)
        _logger.info("Added friend: user_id=%s friend_id=%s", user.id, friend.id)
        return friend.to_record()

    def remove_friend(self, user: UserProfile, friend_id: int) -> None:
        if not self.repository.remove_friend(user.id, friend_id):
            raise NotFoundError(f"User {friend_id} is not a friend")
        user.remove_friend(friend_id)
