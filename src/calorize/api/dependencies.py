"""Shared FastAPI dependencies."""

from fastapi import Depends, Header, Request

from calorize.containers import AppContainer
from calorize.domain.sessions import SessionContext


def get_container(request: Request) -> AppContainer:
    return request.app.state.container


def require_session(
    x_session_token: str | None = Header(default=None),
    container: AppContainer = Depends(get_container),
) -> SessionContext:
    """Resolve the session for the X-Session-Token header."""
    return container.session_service.get(x_session_token)
