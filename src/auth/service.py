"""
Service layer for Auth module
"""
import logging
from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from src.auth.schemas import SessionProfile
from src.auth.exceptions import IncorrectCredentialException
from src.auth.utils import verify_password
from src.users.schemas import UserCreate
from src.users.service import UsersService
from src.users.exceptions import NoSuchUserException

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, users_service: Optional[UsersService] = None):
        self.users_service = users_service or UsersService()

    async def signup(self, user_data: UserCreate, db: AsyncSession) -> SessionProfile:
        """
        Register a new user

        Raises:
            DuplicateUserException: if the username is taken
        """
        db_user = await self.users_service.create_user(user_data, db)
        logger.info("New signup: %s", db_user.username)
        return SessionProfile.model_validate(db_user)

    async def login(self, username: str, password: str, db: AsyncSession) -> SessionProfile:
        """
        Check credentials and return the profile to store in the session

        Raises:
            NoSuchUserException: if nobody has this username
            IncorrectCredentialException: if the password does not match
        """
        user = await self.users_service.get_user_by_username(username, db)
        if not user:
            raise NoSuchUserException()
        if not verify_password(password, user.password):
            logger.warning("Failed login for %s", username)
            raise IncorrectCredentialException()
        return SessionProfile.model_validate(user)
