"""Tests for the user profile model."""

from datetime import date

import pytest

from calorize.domain.errors import InvalidArgumentError, MissingValueError
from calorize.domain.goals import Gender, GoalDirection, GoalTargets
from calorize.domain.meals import Meal, MealType
from calorize.domain.users import UserProfile
from tests.conftest import make_profile


def test_new_profile_has_one_weight_entry_and_id_zero() -> None:
    profile = make_profile(today=date(2024, 3, 1))

    assert profile.id == 0
    assert dict(profile.weight_history) == {date(2024, 3, 1): 70.0}
    assert profile.current_weight == 70.0


def test_password_is_stored_hashed() -> None:
    profile = make_profile(password="secret123")

    assert profile.password_hash != "secret123"
    assert profile.verify_password("secret123")
    assert not profile.verify_password("wrong-password")
    assert not profile.verify_password("")


def test_profile_can_be_restored_from_a_hash() -> None:
    first = make_profile()

    restored = UserProfile(
        name="Ana",
        email="ana@example.com",
        password=None,
        weight_kg=70,
        height_cm=175,
        user_id=5,
        password_hash=first.password_hash,
    )

    assert restored.password_hash == first.password_hash
    assert restored.verify_password("secret123")


def test_password_is_required_without_a_hash() -> None:
    with pytest.raises(MissingValueError):
        make_profile(password=None)


@pytest.mark.parametrize(
    "overrides",
    [
        {"email": "not-an-email"},
        {"email": "ana@example"},
        {"password": "12345"},
        {"weight_kg": 0},
        {"height_cm": -170},
        {"name": "   "},
    ],
)
def test_invalid_fields_are_rejected(overrides: dict[str, object]) -> None:
    with pytest.raises(InvalidArgumentError):
        make_profile(**overrides)


@pytest.mark.parametrize("field", ["name", "email"])
def test_missing_fields_are_rejected(field: str) -> None:
    with pytest.raises(MissingValueError):
        make_profile(**{field: None})


def test_setters_validate_like_the_constructor() -> None:
    profile = make_profile()

    with pytest.raises(InvalidArgumentError):
        profile.email = "broken"
    with pytest.raises(InvalidArgumentError):
        profile.height_cm = 0
    with pytest.raises(InvalidArgumentError):
        profile.set_password("123")

    profile.name = "Ana Maria"
    profile.goal = GoalDirection.LOSE
    assert profile.name == "Ana Maria"
    assert profile.goal is GoalDirection.LOSE


def test_weight_history_stays_ordered_and_same_day_replaces() -> None:
    profile = make_profile(today=date(2024, 3, 10))
    profile.add_weight(71.0, date(2024, 3, 1))
    profile.add_weight(69.5, date(2024, 3, 20))
    profile.add_weight(69.0, date(2024, 3, 20))

    assert list(profile.weight_history.items()) == [
        (date(2024, 3, 1), 71.0),
        (date(2024, 3, 10), 70.0),
        (date(2024, 3, 20), 69.0),
    ]
    assert profile.current_weight == 69.0


def test_non_positive_weight_is_rejected() -> None:
    profile = make_profile()

    with pytest.raises(InvalidArgumentError):
        profile.add_weight(-2)
    with pytest.raises(InvalidArgumentError):
        profile.replace_weight_history({})


@pytest.mark.parametrize("weight", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_weight_is_rejected(weight: float) -> None:
    profile = make_profile(today=date(2024, 3, 1))

    with pytest.raises(InvalidArgumentError):
        make_profile(weight_kg=weight)
    with pytest.raises(InvalidArgumentError):
        profile.add_weight(weight, date(2024, 3, 2))
    with pytest.raises(InvalidArgumentError):
        profile.replace_weight_history({date(2024, 3, 2): weight})
    assert dict(profile.weight_history) == {date(2024, 3, 1): 70.0}
    assert profile.compute_goal_targets().calories == 1725.0


@pytest.mark.parametrize("field", ["gender", "goal"])
def test_constructor_rejects_missing_gender_or_goal(field: str) -> None:
    with pytest.raises(MissingValueError):
        make_profile(**{field: None})


def test_update_applies_nothing_when_one_field_is_invalid() -> None:
    profile = make_profile()

    with pytest.raises(InvalidArgumentError):
        profile.update(email="new@example.com", name="Bia", height_cm=0)

    assert profile.email == "ana@example.com"
    assert profile.name == "Ana"
    assert profile.height_cm == 175


def test_update_applies_all_valid_fields() -> None:
    profile = make_profile()

    profile.update(
        email="new@example.com",
        password="another-secret",
        height_cm=180,
        goal=GoalDirection.GAIN,
    )

    assert profile.email == "new@example.com"
    assert profile.height_cm == 180
    assert profile.goal is GoalDirection.GAIN
    assert profile.gender is Gender.MALE
    assert profile.verify_password("another-secret")


def test_goal_targets_use_the_latest_weight() -> None:
    profile = make_profile(today=date(2024, 3, 1))
    profile.add_weight(80.0, date(2024, 2, 1))

    targets = profile.compute_goal_targets()

    assert targets == GoalTargets(
        calories=1725.0, protein=140.0, carbohydrate=185.0, fat=47.0
    )
    assert profile.goal_targets is targets


def test_goal_targets_reject_non_positive_age() -> None:
    with pytest.raises(InvalidArgumentError):
        make_profile().compute_goal_targets(age=0)


def test_meals_are_append_only() -> None:
    profile = make_profile()
    meal = Meal(MealType.BREAKFAST, "08:00")

    profile.add_meal(meal)

    assert profile.meals == (meal,)
    with pytest.raises(MissingValueError):
        profile.add_meal(None)


def test_friends_are_held_by_id() -> None:
    profile = make_profile(user_id=1)
    friend = make_profile(name="Bia", email="bia@example.com", user_id=2)

    profile.add_friend(friend)
    profile.add_friend(friend)

    assert profile.friend_ids == (2,)


def test_cannot_befriend_yourself() -> None:
    profile = make_profile(user_id=1)

    with pytest.raises(InvalidArgumentError):
        profile.add_friend(profile)
    with pytest.raises(MissingValueError):
        profile.add_friend(None)


def test_equality_uses_id() -> None:
    first = make_profile(user_id=3)
    second = make_profile(name="Other", email="other@example.com", user_id=3)

    assert first == second
    assert hash(first) == hash(second)
    assert first != make_profile(user_id=4, gender=Gender.FEMALE)
