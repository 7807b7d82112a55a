"""
Service layer for Users management
"""
import logging
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete, or_, union

from src.users.models import User
from src.users.schemas import UserCreate, UserUpdate, UserResponse
from src.users.exceptions import NoSuchUserException, DuplicateUserException
from src.auth.utils import hash_password
from src.tuits.models import Tuit
from src.tuits.service import TuitService
from src.reactions.models import Like, Dislike
from src.bookmarks.models import Bookmark
from src.follows.models import Follow
from src.messages.models import Message
from src.models import DeleteResponse

logger = logging.getLogger(__name__)


class UsersService:
    def __init__(self, tuit_service: Optional[TuitService] = None):
        self.tuit_service = tuit_service or TuitService()

    async def get_user(self, user_id: int, db: AsyncSession) -> User:
        """Load the ORM user or raise NoSuchUserException"""
        user = await db.get(User, user_id)
        if user is None:
            raise NoSuchUserException()
        return user

    async def get_user_by_username(self, username: str, db: AsyncSession) -> Optional[User]:
        """Load the ORM user by username, None when absent"""
        result = await db.execute(
            select(User).where(User.username == username)
        )
        return result.scalar_one_or_none()

    async def find_all_users(self, db: AsyncSession) -> List[UserResponse]:
        result = await db.execute(select(User).order_by(User.id))
        return [UserResponse.model_validate(user) for user in result.scalars().all()]

    async def find_user_by_id(self, user_id: int, db: AsyncSession) -> UserResponse:
        user = await self.get_user(user_id, db)
        return UserResponse.model_validate(user)

    async def find_user_by_username(self, username: str, db: AsyncSession) -> UserResponse:
        user = await self.get_user_by_username(username, db)
        if user is None:
            raise NoSuchUserException()
        return UserResponse.model_validate(user)

    async def create_user(self, user_data: UserCreate, db: AsyncSession) -> User:
        """
        Persist a new user with a hashed password.

        Raises:
            DuplicateUserException: if the username is taken
        """
        if await self.get_user_by_username(user_data.username, db):
            raise DuplicateUserException()

        fields = user_data.model_dump(exclude={"password", "location"})
        db_user = User(
            **fields,
            password=hash_password(user_data.password),
            location=user_data.location.model_dump() if user_data.location else None,
        )
        db.add(db_user)
        try:
            await db.commit()
        except Exception:
            await db.rollback()
            raise
        await db.refresh(db_user)
        logger.info("Created user %s (id=%s)", db_user.username, db_user.id)
        return db_user

    async def update_user(self, user_id: int, user_data: UserUpdate, db: AsyncSession) -> UserResponse:
        user = await self.get_user(user_id, db)
        update_data = user_data.model_dump(exclude_unset=True)

        new_username = update_data.get("username")
        if new_username is not None and new_username != user.username:
            if await self.get_user_by_username(new_username, db):
                raise DuplicateUserException()

        if update_data.get("password") is not None:
            update_data["password"] = hash_password(update_data["password"])

        for field, value in update_data.items():
            setattr(user, field, value)

        try:
            await db.commit()
        except Exception:
            await db.rollback()
            raise
        await db.refresh(user)
        return UserResponse.model_validate(user)

    async def delete_user(self, user_id: int, db: AsyncSession) -> DeleteResponse:
        """
        Remove a user together with everything that references them:
        their tuits, reactions, bookmarks, follows and messages.
        Tuits of other users the deleted user had reacted to get their
        stats recomputed.
        """
        user = await db.get(User, user_id)
        if user is None:
            return DeleteResponse(deleted_count=0)

        reacted = await db.execute(
            union(
                select(Like.tuit_id).where(Like.liked_by_id == user_id),
                select(Dislike.tuit_id).where(Dislike.disliked_by_id == user_id),
            )
        )
        reacted_tuit_ids = set(reacted.scalars().all())

        own = await db.execute(select(Tuit.id).where(Tuit.posted_by_id == user_id))
        own_tuit_ids = list(own.scalars().all())

        try:
            await self.tuit_service.purge_tuits(own_tuit_ids, db)
            await db.execute(delete(Like).where(Like.liked_by_id == user_id))
            await db.execute(delete(Dislike).where(Dislike.disliked_by_id == user_id))
            await db.execute(delete(Bookmark).where(Bookmark.bookmarked_by_id == user_id))
            await db.execute(delete(Follow).where(
                or_(Follow.user_following_id == user_id, Follow.user_followed_id == user_id)
            ))
            await db.execute(delete(Message).where(
                or_(Message.from_user_id == user_id, Message.to_user_id == user_id)
            ))
            await db.execute(delete(User).where(User.id == user_id))

            for tuit_id in reacted_tuit_ids.difference(own_tuit_ids):
                await self.tuit_service.refresh_stats(tuit_id, db)

            await db.commit()
        except Exception:
            await db.rollback()
            raise

        logger.info("Deleted user id=%s with %d tuits", user_id, len(own_tuit_ids))
        return DeleteResponse(deleted_count=1)

    async def delete_user_by_username(self, username: str, db: AsyncSession) -> DeleteResponse:
        user = await self.get_user_by_username(username, db)
        if user is None:
            return DeleteResponse(deleted_count=0)
        return await self.delete_user(user.id, db)
