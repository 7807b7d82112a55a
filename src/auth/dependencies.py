import logging
from functools import lru_cache
from typing import Optional

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.auth.constants import SESSION_USER_ID_KEY, ME_ALIAS
from src.auth.exceptions import NoUserLoggedInException
from src.auth.schemas import SessionProfile
from src.auth.service import AuthService
from src.database import get_db
from src.exceptions import InvalidIdentifierException
from src.users.models import User

logger = logging.getLogger(__name__)


@lru_cache()
def get_auth_service() -> AuthService:
    """Get the shared AuthService instance"""
    return AuthService()


async def get_session_profile(
    request: Request,
    db: AsyncSession = Depends(get_db)
) -> Optional[SessionProfile]:
    """
    Load the logged in user named by the session cookie once per request.
    The cookie only carries the user id; an id that is malformed or whose
    user is gone is dropped from the session.
    """
    user_id = request.session.get(SESSION_USER_ID_KEY)
    if user_id is None:
        return None
    user = await db.get(User, user_id) if isinstance(user_id, int) else None
    if user is None:
        logger.warning("Discarding session for unknown user id %r", user_id)
        request.session.pop(SESSION_USER_ID_KEY, None)
        return None
    return SessionProfile.model_validate(user)


def get_current_profile(
    profile: Optional[SessionProfile] = Depends(get_session_profile)
) -> SessionProfile:
    if profile is None:
        raise NoUserLoggedInException()
    return profile


def store_session_profile(request: Request, profile: SessionProfile) -> None:
    request.session[SESSION_USER_ID_KEY] = profile.id


def resolve_identity(field: str, value: str, profile: Optional[SessionProfile]) -> int:
    """
    Turn a user id path segment into an id.

    ``me`` means the logged in user and fails with NoUserLoggedInException
    when there is no session; anything else must be an integer id.
    """
    if value == ME_ALIAS:
        if profile is None:
            raise NoUserLoggedInException()
        return profile.id
    try:
        return int(value)
    except ValueError:
        raise InvalidIdentifierException(field, value)


def resolve_user_id(
    uid: str,
    profile: Optional[SessionProfile] = Depends(get_session_profile)
) -> int:
    return resolve_identity("uid", uid, profile)


def resolve_other_user_id(
    other_uid: str,
    profile: Optional[SessionProfile] = Depends(get_session_profile)
) -> int:
    return resolve_identity("other_uid", other_uid, profile)
