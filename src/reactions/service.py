"""
Service layer for likes and dislikes
"""
import logging
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from src.relations import RelationService
from src.reactions.models import Like, Dislike
from src.reactions.schemas import LikeResponse, DislikeResponse, ReactionResult
from src.reactions.constants import ReactionMode
from src.tuits.models import Tuit
from src.tuits.schemas import TuitResponse, TuitStats
from src.tuits.service import TuitService
from src.users.models import User
from src.users.schemas import UserResponse
from src.users.exceptions import NoSuchUserException

logger = logging.getLogger(__name__)


class ReactionService:
    def __init__(self, tuit_service: Optional[TuitService] = None):
        self.tuit_service = tuit_service or TuitService()
        self.likes = RelationService(Like, "liked_by_id", "tuit_id", User, Tuit)
        self.dislikes = RelationService(Dislike, "disliked_by_id", "tuit_id", User, Tuit)

    async def _react(
        self,
        relation: RelationService,
        opposite: RelationService,
        mode: ReactionMode,
        user_id: int,
        tuit_id: int,
        db: AsyncSession,
    ) -> ReactionResult:
        """
        Apply one reaction change for a (user, tuit) pair.

        The tuit row stays locked from the existence check through the stats
        update, so concurrent requests on the same tuit run one after another
        where the backend supports row locks. The unique constraint on the
        pair rejects any duplicate that still gets through.

        Raises:
            NoSuchUserException: if the user does not exist
            NoSuchTuitException: if the tuit does not exist
        """
        if await db.get(User, user_id) is None:
            raise NoSuchUserException()

        try:
            await self.tuit_service.get_tuit(tuit_id, db, for_update=True)
            present = await relation.exists(user_id, tuit_id, db)
            wanted = (not present) if mode == ReactionMode.TOGGLE else mode == ReactionMode.SET

            if wanted and not present:
                await relation.create(user_id, tuit_id, db)
                # Liking and disliking the same tuit are mutually exclusive
                await opposite.delete(user_id, tuit_id, db)
            elif present and not wanted:
                await relation.delete(user_id, tuit_id, db)

            await self.tuit_service.refresh_stats(tuit_id, db)
            await db.commit()
        except Exception:
            await db.rollback()
            raise

        logger.debug("%s %s: user=%s tuit=%s", relation.model.__name__, mode.value, user_id, tuit_id)
        return await self.get_reaction_state(user_id, tuit_id, db)

    async def get_reaction_state(self, user_id: int, tuit_id: int, db: AsyncSession) -> ReactionResult:
        tuit = await self.tuit_service.get_tuit(tuit_id, db)
        return ReactionResult(
            tuit_id=tuit_id,
            liked=await self.likes.exists(user_id, tuit_id, db),
            disliked=await self.dislikes.exists(user_id, tuit_id, db),
            stats=TuitStats(likes=tuit.likes_count, dislikes=tuit.dislikes_count),
        )

    async def like(self, user_id: int, tuit_id: int, db: AsyncSession) -> ReactionResult:
        return await self._react(self.likes, self.dislikes, ReactionMode.SET, user_id, tuit_id, db)

    async def unlike(self, user_id: int, tuit_id: int, db: AsyncSession) -> ReactionResult:
        return await self._react(self.likes, self.dislikes, ReactionMode.UNSET, user_id, tuit_id, db)

    async def toggle_like(self, user_id: int, tuit_id: int, db: AsyncSession) -> ReactionResult:
        """Like the tuit if the user has not, otherwise take the like back"""
        return await self._react(self.likes, self.dislikes, ReactionMode.TOGGLE, user_id, tuit_id, db)

    async def dislike(self, user_id: int, tuit_id: int, db: AsyncSession) -> ReactionResult:
        return await self._react(self.dislikes, self.likes, ReactionMode.SET, user_id, tuit_id, db)

    async def undislike(self, user_id: int, tuit_id: int, db: AsyncSession) -> ReactionResult:
        return await self._react(self.dislikes, self.likes, ReactionMode.UNSET, user_id, tuit_id, db)

    async def toggle_dislike(self, user_id: int, tuit_id: int, db: AsyncSession) -> ReactionResult:
        return await self._react(self.dislikes, self.likes, ReactionMode.TOGGLE, user_id, tuit_id, db)

    # ----- Queries -----
    async def find_tuits_liked_by_user(self, user_id: int, db: AsyncSession) -> List[TuitResponse]:
        tuits = await self.likes.find_targets_of_owner(user_id, db, selectinload(Tuit.author))
        return [TuitResponse.model_validate(t) for t in tuits]

    async def find_tuits_disliked_by_user(self, user_id: int, db: AsyncSession) -> List[TuitResponse]:
        tuits = await self.dislikes.find_targets_of_owner(user_id, db, selectinload(Tuit.author))
        return [TuitResponse.model_validate(t) for t in tuits]

    async def find_users_that_liked_tuit(self, tuit_id: int, db: AsyncSession) -> List[UserResponse]:
        users = await self.likes.find_owners_of_target(tuit_id, db)
        return [UserResponse.model_validate(u) for u in users]

    async def find_users_that_disliked_tuit(self, tuit_id: int, db: AsyncSession) -> List[UserResponse]:
        users = await self.dislikes.find_owners_of_target(tuit_id, db)
        return [UserResponse.model_validate(u) for u in users]

    async def find_all_likes(self, db: AsyncSession) -> List[LikeResponse]:
        return [LikeResponse.model_validate(like) for like in await self.likes.find_all(db)]

    async def find_all_dislikes(self, db: AsyncSession) -> List[DislikeResponse]:
        return [DislikeResponse.model_validate(d) for d in await self.dislikes.find_all(db)]

    async def find_like(self, user_id: int, tuit_id: int, db: AsyncSession) -> Optional[LikeResponse]:
        like = await self.likes.find(user_id, tuit_id, db)
        return LikeResponse.model_validate(like) if like else None

    async def find_dislike(self, user_id: int, tuit_id: int, db: AsyncSession) -> Optional[DislikeResponse]:
        dislike = await self.dislikes.find(user_id, tuit_id, db)
        return DislikeResponse.model_validate(dislike) if dislike else None
