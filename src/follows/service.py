"""
Service layer for Follows module
"""
import logging
from typing import List
from sqlalchemy.ext.asyncio import AsyncSession

from src.relations import RelationService
from src.follows.models import Follow
from src.follows.schemas import FollowResponse
from src.follows.exceptions import SelfFollowException
from src.users.models import User
from src.users.schemas import UserResponse
from src.users.exceptions import NoSuchUserException
from src.models import DeleteResponse

logger = logging.getLogger(__name__)


class FollowService:
    def __init__(self):
        self.follows = RelationService(Follow, "user_following_id", "user_followed_id", User, User)

    async def follow_user(self, follower_id: int, followee_id: int, db: AsyncSession) -> FollowResponse:
        """
        Make one user follow another. Following twice keeps the single
        existing record.

        Raises:
            SelfFollowException: if both ids are the same user
            NoSuchUserException: if either user does not exist
        """
        if follower_id == followee_id:
            raise SelfFollowException()
        for user_id in (follower_id, followee_id):
            if await db.get(User, user_id) is None:
                raise NoSuchUserException()

        try:
            follow = await self.follows.find(follower_id, followee_id, db)
            if follow is None:
                follow = await self.follows.create(follower_id, followee_id, db)
                logger.info("User %s now follows user %s", follower_id, followee_id)
            await db.commit()
        except Exception:
            await db.rollback()
            raise
        await db.refresh(follow)
        return FollowResponse.model_validate(follow)

    async def unfollow_user(self, follower_id: int, followee_id: int, db: AsyncSession) -> DeleteResponse:
        try:
            deleted = await self.follows.delete(follower_id, followee_id, db)
            await db.commit()
        except Exception:
            await db.rollback()
            raise
        return DeleteResponse(deleted_count=deleted)

    async def find_users_followed_by(self, user_id: int, db: AsyncSession) -> List[UserResponse]:
        users = await self.follows.find_targets_of_owner(user_id, db)
        return [UserResponse.model_validate(u) for u in users]

    async def find_followers(self, user_id: int, db: AsyncSession) -> List[UserResponse]:
        users = await self.follows.find_owners_of_target(user_id, db)
        return [UserResponse.model_validate(u) for u in users]

    async def find_all_follows(self, db: AsyncSession) -> List[FollowResponse]:
        return [FollowResponse.model_validate(f) for f in await self.follows.find_all(db)]
