"""Diet sharing endpoint."""

from fastapi import APIRouter, Depends

from calorize.api.dependencies import get_container, require_session
from calorize.api.schemas import SharedDietOut, ShareBody
from calorize.containers import AppContainer
from calorize.domain.sessions import SessionContext

router = APIRouter(prefix="/diets", tags=["diets"])


@router.post("/share")
def share_diet(
    body: ShareBody,
    session: SessionContext = Depends(require_session),
    container: AppContainer = Depends(get_container),
) -> SharedDietOut:
    """Send the foods logged on a yyyy-MM-dd day to another user."""
    diet = container.sharing_service.share_day(
        session.user, body.recipient_id, body.day
    )
    return SharedDietOut.from_domain(diet)
