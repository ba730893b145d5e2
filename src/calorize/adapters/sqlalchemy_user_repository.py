"""SQLAlchemy-backed user repository."""

from dataclasses import dataclass
from datetime import date

from sqlalchemy import Engine, delete, insert, select, update
from sqlalchemy.engine import Connection, RowMapping

from calorize.adapters.sqlalchemy_database import friends, transaction, users, weights
from calorize.domain.goals import Gender, GoalDirection
from calorize.domain.users import UserProfile
from calorize.services.users import UserRepository


@dataclass
class SqlAlchemyUserRepository(UserRepository):
    """SQLAlchemy implementation for user persistence."""

    engine: Engine

    def create_user(self, profile: UserProfile) -> UserProfile:
        """Insert the user row and its weight history, then assign the new id."""
        with transaction(self.engine) as connection:
            result = connection.execute(insert(users).values(**_user_values(profile)))
            profile.id = result.inserted_primary_key[0]
            connection.execute(
                insert(weights),
                [
                    {"user_id": profile.id, "weight": weight, "recorded_on": day}
                    for day, weight in profile.weight_history.items()
                ],
            )
        return profile

    def update_user(self, profile: UserProfile) -> None:
        with transaction(self.engine) as connection:
            connection.execute(
                update(users)
                .where(users.c.id == profile.id)
                .values(**_user_values(profile))
            )

    def get_by_id(self, user_id: int) -> UserProfile | None:
        with transaction(self.engine) as connection:
            row = (
                connection.execute(select(users).where(users.c.id == user_id))
                .mappings()
                .first()
            )
            return _load_profile(connection, row) if row else None

    def get_by_email(self, email: str) -> UserProfile | None:
        with transaction(self.engine) as connection:
            row = (
                connection.execute(select(users).where(users.c.email == email))
                .mappings()
                .first()
            )
            return _load_profile(connection, row) if row else None

    def find_by_credentials(self, email: str, password: str) -> UserProfile | None:
        """Return the user when the password matches the stored hash."""
        profile = self.get_by_email(email)
        if profile is None or not profile.verify_password(password):
            return None
        return profile

    def add_weight(self, user_id: int, weight_kg: float, recorded_on: date) -> None:
        with transaction(self.engine) as connection:
            connection.execute(
                delete(weights).where(
                    weights.c.user_id == user_id,
                    weights.c.recorded_on == recorded_on,
                )
            )
            connection.execute(
                insert(weights).values(
                    user_id=user_id, weight=weight_kg, recorded_on=recorded_on
                )
            )

    def list_weights(self, user_id: int) -> dict[date, float]:
        with transaction(self.engine) as connection:
            return _weight_history(connection, user_id)


def _user_values(profile: UserProfile) -> dict[str, object]:
    return {
        "name": profile.name,
        "email": profile.email,
        "password_hash": profile.password_hash,
        "weight": profile.current_weight,
        "height_cm": profile.height_cm,
        "gender": profile.gender.value,
        "goal": profile.goal.value,
    }


def _weight_history(connection: Connection, user_id: int) -> dict[date, float]:
    rows = connection.execute(
        select(weights.c.recorded_on, weights.c.weight)
        .where(weights.c.user_id == user_id)
        .order_by(weights.c.recorded_on)
    )
    return {row.recorded_on: row.weight for row in rows}


def _load_profile(connection: Connection, row: RowMapping) -> UserProfile:
    profile = UserProfile(
        name=row["name"],
        email=row["email"],
        password=None,
        weight_kg=row["weight"],
        height_cm=row["height_cm"],
        gender=Gender(row["gender"]),
        goal=GoalDirection(row["goal"]),
        user_id=row["id"],
        password_hash=row["password_hash"],
    )
    history = _weight_history(connection, row["id"])
    if history:
        profile.replace_weight_history(history)
    friend_ids = connection.execute(
        select(friends.c.friend_id).where(friends.c.user_id == row["id"])
    ).scalars()
    profile.replace_friend_ids(friend_ids)
    return profile
