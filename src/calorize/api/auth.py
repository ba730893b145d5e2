"""Registration, login and logout endpoints."""

from fastapi import APIRouter, Depends, status

from calorize.api.dependencies import get_container, require_session
from calorize.api.schemas import LoginBody, RegisterBody, SessionOut
from calorize.containers import AppContainer
from calorize.domain.sessions import SessionContext

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterBody, container: AppContainer = Depends(get_container)
) -> SessionOut:
    """Create an account and log it in."""
    user = container.user_service.register(
        name=body.name,
        email=body.email,
        password=body.password,
        weight_kg=body.weight_kg,
        height_cm=body.height_cm,
        gender=body.gender,
        goal=body.goal,
    )
    return SessionOut.from_domain(container.session_service.start(user))


@router.post("/login")
def login(
    body: LoginBody, container: AppContainer = Depends(get_container)
) -> SessionOut:
    user = container.user_service.login(body.email, body.password)
    return SessionOut.from_domain(container.session_service.start(user))


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def logout(
    session: SessionContext = Depends(require_session),
    container: AppContainer = Depends(get_container),
) -> None:
    container.session_service.end(session.token)
