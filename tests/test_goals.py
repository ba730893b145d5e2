"""Tests for goal targets and the goal calculator."""

import pytest

from calorize.domain.errors import InvalidArgumentError, MissingValueError
from calorize.domain.goals import (
    Gender,
    GoalDirection,
    GoalTargets,
    GoalTargetsBuilder,
    basal_metabolic_rate,
    calorie_target,
    carbohydrate_target,
    compute_goal_targets,
    fat_target,
)


def test_male_basal_rate() -> None:
    assert basal_metabolic_rate(70, 175, 25, Gender.MALE) == pytest.approx(1724.052)


def test_female_and_other_share_a_formula() -> None:
    female = basal_metabolic_rate(60, 165, 30, Gender.FEMALE)

    assert female == pytest.approx(1383.683)
    assert basal_metabolic_rate(60, 165, 30, Gender.OTHER) == female


@pytest.mark.parametrize(
    ("goal", "expected"),
    [
        (GoalDirection.MAINTAIN, 1725),
        (GoalDirection.LOSE, 1552),
        (GoalDirection.GAIN, 1828),
    ],
)
def test_calorie_target_rounds_up(goal: GoalDirection, expected: int) -> None:
    bmr = basal_metabolic_rate(70, 175, 25, Gender.MALE)

    assert calorie_target(bmr, goal) == expected


def test_full_pipeline_for_reference_profile() -> None:
    targets = compute_goal_targets(70, 175, Gender.MALE, GoalDirection.MAINTAIN)

    assert targets == GoalTargets(
        calories=1725.0, protein=140.0, carbohydrate=185.0, fat=47.0
    )


def test_macro_calories_never_exceed_the_calorie_target() -> None:
    targets = compute_goal_targets(95, 190, Gender.FEMALE, GoalDirection.LOSE, age=40)
    macro_kcal = targets.protein * 4 + targets.carbohydrate * 4 + targets.fat * 9

    assert macro_kcal <= targets.calories


def test_carbohydrate_is_clamped_at_zero() -> None:
    assert carbohydrate_target(calories=500, protein=200, fat=fat_target(500)) == 0.0


def test_missing_weight_uses_default() -> None:
    targets = compute_goal_targets(
        None, 175, Gender.MALE, GoalDirection.MAINTAIN, default_weight_kg=0.0
    )

    assert targets.protein == 0.0
    assert targets.calories > 0


@pytest.mark.parametrize("age", [0, -3])
def test_non_positive_age_is_rejected(age: int) -> None:
    with pytest.raises(InvalidArgumentError):
        compute_goal_targets(70, 175, Gender.MALE, GoalDirection.MAINTAIN, age=age)


def test_goal_targets_reject_negative_values() -> None:
    with pytest.raises(InvalidArgumentError):
        GoalTargets(calories=-1, protein=0, carbohydrate=0, fat=0)
    with pytest.raises(MissingValueError):
        GoalTargets(calories=None, protein=0, carbohydrate=0, fat=0)
    with pytest.raises(InvalidArgumentError):
        GoalTargets(calories=2000, protein=float("nan"), carbohydrate=0, fat=0)
    with pytest.raises(InvalidArgumentError):
        GoalTargets(calories=float("inf"), protein=0, carbohydrate=0, fat=0)


def test_non_finite_measurements_are_rejected() -> None:
    with pytest.raises(InvalidArgumentError):
        compute_goal_targets(float("nan"), 175, Gender.MALE, GoalDirection.MAINTAIN)
    with pytest.raises(InvalidArgumentError):
        basal_metabolic_rate(70, float("inf"), 25, Gender.FEMALE)


def test_builder_validates_on_build() -> None:
    builder = GoalTargetsBuilder(calories=2000, protein=150)
    builder.fat = -5

    with pytest.raises(InvalidArgumentError):
        builder.build()

    builder.fat = 60
    assert builder.build() == GoalTargets(
        calories=2000, protein=150, carbohydrate=0, fat=60
    )
