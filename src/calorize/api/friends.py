"""Friend list endpoints."""

from fastapi import APIRouter, Depends, status

from calorize.api.dependencies import get_container, require_session
from calorize.api.schemas import UserOut
from calorize.containers import AppContainer
from calorize.domain.sessions import SessionContext

router = APIRouter(prefix="/friends", tags=["friends"])


@router.get("")
def list_friends(
    session: SessionContext = Depends(require_session),
    container: AppContainer = Depends(get_container),
) -> list[UserOut]:
    friends = container.friend_service.list_friends(session.user)
    return [UserOut.from_record(friend) for friend in friends]


@router.get("/search")
def search_users(
    name: str = "",
    session: SessionContext = Depends(require_session),
    container: AppContainer = Depends(get_container),
) -> list[UserOut]:
    """Users matching a name who are not friends yet."""
    users = container.friend_service.search(session.user, name)
    return [UserOut.from_record(user) for user in users]


@router.post("/{friend_id}", status_code=status.HTTP_201_CREATED)
def add_friend(
    friend_id: int,
    session: SessionContext = Depends(require_session),
    container: AppContainer = Depends(get_container),
) -> UserOut:
    return UserOut.from_record(
        container.friend_service.add_friend(session.user, friend_id)
    )


@router.delete("/{friend_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_friend(
    friend_id: int,
    session: SessionContext = Depends(require_session),
    container: AppContainer = Depends(get_container),
) -> None:
    container.friend_service.remove_friend(session.user, friend_id)
