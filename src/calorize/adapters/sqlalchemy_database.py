"""SQLAlchemy schema and connection handling for the SQLite store."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import (
    Column,
    Date,
    Engine,
    Float,
    ForeignKey,
    Integer,
    MetaData,
    String,
    Table,
    UniqueConstraint,
    create_engine,
    event,
)
from sqlalchemy.engine import Connection
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from calorize.domain.errors import ConflictError, DataAccessError

_logger = logging.getLogger(__name__)

metadata = MetaData()

users = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String, nullable=False),
    Column("email", String, nullable=False, unique=True),
    Column("password_hash", String, nullable=False),
    Column("weight", Float, nullable=False),
    Column("height_cm", Integer, nullable=False),
    Column("gender", String(16), nullable=False),
    Column("goal", String(16), nullable=False),
)

weights = Table(
    "weights",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "user_id",
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("weight", Float, nullable=False),
    Column("recorded_on", Date, nullable=False),
    UniqueConstraint("user_id", "recorded_on"),
)

friends = Table(
    "friends",
    metadata,
    Column(
        "user_id",
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "friend_id",
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)

foods = Table(
    "foods",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("name", String, nullable=False),
    Column("category", String(16), nullable=False),
    Column("energy_kcal", Float, nullable=False, default=0.0),
    Column("protein_g", Float, nullable=False, default=0.0),
    Column("fat_g", Float, nullable=False, default=0.0),
    Column("carbohydrate_g", Float, nullable=False, default=0.0),
    Column("fiber_g", Float, nullable=False, default=0.0),
    Column("calcium_mg", Float, nullable=False, default=0.0),
)

meals = Table(
    "meals",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "user_id",
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("meal_type", String(16), nullable=False),
    Column("eaten_on", Date, nullable=False),
    Column("eaten_at", String(5), nullable=False),
    UniqueConstraint("user_id", "meal_type", "eaten_on"),
)

meal_foods = Table(
    "meal_foods",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "meal_id",
        Integer,
        ForeignKey("meals.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("food_id", Integer, nullable=False),
    Column("name", String, nullable=False),
    Column("category", String(16), nullable=False),
    Column("energy_kcal", Float, nullable=False),
    Column("protein_g", Float, nullable=False),
    Column("fat_g", Float, nullable=False),
    Column("carbohydrate_g", Float, nullable=False),
    Column("fiber_g", Float, nullable=False),
    Column("calcium_mg", Float, nullable=False),
)


def create_database_engine(database_url: str) -> Engine:
    """Create an engine; SQLite connections get foreign keys switched on."""
    engine = create_engine(database_url)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def init_schema(engine: Engine) -> None:
    """Create any missing tables."""
    with transaction(engine) as connection:
        metadata.create_all(connection)


@contextmanager
def transaction(engine: Engine) -> Iterator[Connection]:
    """Yield a connection inside a transaction committed on success.

    Storage failures are logged and re-raised as data access errors.
    """
    try:
        with engine.begin() as connection:
            yield connection
    except IntegrityError as exc:
        _logger.exception("Constraint violation")
        raise ConflictError("The record conflicts with existing data") from exc
    except SQLAlchemyError as exc:
        _logger.exception("Database operation failed")
        raise DataAccessError("Database operation failed") from exc


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:  # noqa: ANN001, ARG001
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()
