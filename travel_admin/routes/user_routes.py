from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from travel_admin.database import get_db
from travel_admin.dependencies import get_current_actor
from travel_admin.models.actor import Actor
from travel_admin.services.user_service import UserService
from travel_admin.schemas.common import ErrorResponse
from travel_admin.schemas.user_schemas import CurrentUserEnvelope

router = APIRouter()


@router.get(
    "/me",
    response_model=CurrentUserEnvelope,
    responses={401: {"model": ErrorResponse, "description": "Unauthorized user"}},
)
def get_me(actor: Actor = Depends(get_current_actor), db: Session = Depends(get_db)):
    """
    Get the authenticated user's profile.

    Also reports the businessId requests are scoped to, or unrestricted=true
    for super admins.
    """
    service = UserService(db)
    return service.get_profile(actor)
