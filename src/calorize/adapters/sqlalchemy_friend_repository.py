"""SQLAlchemy-backed friend repository."""

from dataclasses import dataclass

from sqlalchemy import Engine, delete, insert, select

from calorize.adapters.sqlalchemy_database import friends, transaction, users
from calorize.domain.errors import InvalidArgumentError
from calorize.domain.users import UserRecord
from calorize.services.friends import FriendRepository


@dataclass
class SqlAlchemyFriendRepository(FriendRepository):
    """SQLAlchemy implementation for one-way friend links."""

    engine: Engine

    def list_friends(self, user_id: int) -> list[UserRecord]:
        query = (
            select(users.c.id, users.c.name, users.c.email)
            .join(friends, friends.c.friend_id == users.c.id)
            .where(friends.c.user_id == user_id)
            .order_by(users.c.name)
        )
        with transaction(self.engine) as connection:
            return [_to_record(row) for row in connection.execute(query)]

    def search_non_friends(self, user_id: int, name: str) -> list[UserRecord]:
        """Return other users matching the name that are not friends yet."""
        already_friends = select(friends.c.friend_id).where(
            friends.c.user_id == user_id
        )
        query = (
            select(users.c.id, users.c.name, users.c.email)
            .where(
                users.c.name.contains(name, autoescape=True),
                users.c.id != user_id,
                users.c.id.not_in(already_friends),
            )
            .order_by(users.c.name)
        )
        with transaction(self.engine) as connection:
            return [_to_record(row) for row in connection.execute(query)]

    def add_friend(self, user_id: int, friend_id: int) -> None:
        if user_id == friend_id:
            raise InvalidArgumentError("A user cannot add themselves as a friend")
        with transaction(self.engine) as connection:
            connection.execute(
                insert(friends).values(user_id=user_id, friend_id=friend_id)
            )

    def remove_friend(self, user_id: int, friend_id: int) -> bool:
        with transaction(self.engine) as connection:
            result = connection.execute(
                delete(friends).where(
                    friends.c.user_id == user_id,
                    friends.c.friend_id == friend_id,
                )
            )
            return result.rowcount > 0


def _to_record(row) -> UserRecord:  # noqa: ANN001
    return UserRecord(id=row.id, name=row.name, email=row.email)
