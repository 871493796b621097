import logging

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from travel_admin.core.exceptions import (
    InvalidIdentifierException,
    StoreException,
    UnauthorizedException,
)
from travel_admin.core.security import decode_jwt
from travel_admin.database import get_db
from travel_admin.models.actor import Actor
from travel_admin.repositories.filters import is_valid_record_id
from travel_admin.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

# auto_error=False so a missing header goes through our 401 handler
security = HTTPBearer(auto_error=False)


def get_current_actor(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    db: Session = Depends(get_db),
) -> Actor:
    """
    FastAPI dependency to validate JWT and build the request's Actor.

    Flow:
    1. Extract token from Authorization: Bearer <token>
    2. Validate JWT using shared SECRET_KEY
    3. Build Actor from 'sub', 'userType', 'businessId', 'businessInfo' claims
    4. Get or create the User record and refresh it from the claims
    5. Return Actor for use in endpoints

    Raises:
        UnauthorizedException: If header missing, token invalid or expired
    """
    if credentials is None:
        raise UnauthorizedException("Not authenticated")

    actor = Actor.from_claims(decode_jwt(credentials.credentials))

    try:
        UserRepository(db).sync_from_actor(actor)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Failed to sync user %s", actor.user_id)
        raise StoreException("Failed to load user", str(e))

    return actor


# Path id checks. Declared ahead of get_current_actor in each route so a
# malformed id is rejected before the user lookup touches the database.
def valid_bank_id(bank_id: str) -> str:
    if not is_valid_record_id(bank_id):
        raise InvalidIdentifierException("Invalid bank ID")
    return bank_id


def valid_traveller_id(traveller_id: str) -> str:
    if not is_valid_record_id(traveller_id):
        raise InvalidIdentifierException("Invalid traveller ID")
    return traveller_id
