"""Endpoints for the logged-in user's profile, weight and goals."""

from datetime import date

from fastapi import APIRouter, Depends, status

from calorize.api.dependencies import get_container, require_session
from calorize.api.schemas import (
    GoalsOut,
    ProfileOut,
    ProfileUpdateBody,
    SummaryOut,
    WeightBody,
    WeightHistoryOut,
)
from calorize.containers import AppContainer
from calorize.domain.sessions import SessionContext

router = APIRouter(prefix="/me", tags=["profile"])


@router.get("")
def get_profile(session: SessionContext = Depends(require_session)) -> ProfileOut:
    return ProfileOut.from_domain(session.user)


@router.patch("")
def update_profile(
    body: ProfileUpdateBody,
    session: SessionContext = Depends(require_session),
    container: AppContainer = Depends(get_container),
) -> ProfileOut:
    """Change profile fields and return the profile with recomputed goals."""
    user = container.user_service.update_profile(
        session.user, **body.model_dump(exclude_none=True)
    )
    return ProfileOut.from_domain(user)


@router.get("/goals")
def get_goals(
    age: int | None = None,
    session: SessionContext = Depends(require_session),
    container: AppContainer = Depends(get_container),
) -> GoalsOut:
    """Daily targets for an age, or the configured default age."""
    return GoalsOut.from_domain(container.user_service.goal_targets(session.user, age))


@router.get("/weights")
def list_weights(
    session: SessionContext = Depends(require_session),
    container: AppContainer = Depends(get_container),
) -> WeightHistoryOut:
    history = container.user_service.weight_history(session.user)
    return WeightHistoryOut.from_history(history, session.user.goal_targets)


@router.post("/weights", status_code=status.HTTP_201_CREATED)
def add_weight(
    body: WeightBody,
    session: SessionContext = Depends(require_session),
    container: AppContainer = Depends(get_container),
) -> WeightHistoryOut:
    """Record a weight and return the history with updated goals."""
    targets = container.user_service.record_weight(
        session.user, body.weight_kg, body.recorded_on
    )
    history = container.user_service.weight_history(session.user)
    return WeightHistoryOut.from_history(history, targets)


@router.get("/summary")
def daily_summary(
    day: date | None = None,
    session: SessionContext = Depends(require_session),
    container: AppContainer = Depends(get_container),
) -> SummaryOut:
    summary = container.stats_service.daily_summary(
        session.user, day or session.selected_day
    )
    return SummaryOut.from_domain(summary)
