"""
Service layer for Tuits module
"""
import logging
from typing import List, Iterable
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, delete, func
from sqlalchemy.orm import selectinload

from src.tuits.models import Tuit
from src.tuits.schemas import TuitCreate, TuitUpdate, TuitResponse
from src.tuits.exceptions import NoSuchTuitException, EmptyTuitContentException
from src.users.models import User
from src.users.exceptions import NoSuchUserException
from src.reactions.models import Like, Dislike
from src.bookmarks.models import Bookmark
from src.models import DeleteResponse

logger = logging.getLogger(__name__)


class TuitService:
    async def get_tuit(self, tuit_id: int, db: AsyncSession, for_update: bool = False) -> Tuit:
        """
        Load a tuit with its author.

        Args:
            tuit_id: id of the tuit
            db: Database session
            for_update: lock the row until the surrounding transaction ends

        Raises:
            NoSuchTuitException: if no tuit has this id
        """
        query = (
            select(Tuit)
            .options(selectinload(Tuit.author))
            .where(Tuit.id == tuit_id)
            .execution_options(populate_existing=True)
        )
        if for_update:
            query = query.with_for_update()
        result = await db.execute(query)
        tuit = result.scalar_one_or_none()
        if tuit is None:
            raise NoSuchTuitException()
        return tuit

    async def find_all_tuits(self, db: AsyncSession) -> List[TuitResponse]:
        result = await db.execute(
            select(Tuit)
            .options(selectinload(Tuit.author))
            .order_by(Tuit.posted_on.desc(), Tuit.id.desc())
        )
        return [TuitResponse.model_validate(t) for t in result.scalars().all()]

    async def find_tuits_by_user(self, user_id: int, db: AsyncSession) -> List[TuitResponse]:
        result = await db.execute(
            select(Tuit)
            .options(selectinload(Tuit.author))
            .where(Tuit.posted_by_id == user_id)
            .order_by(Tuit.posted_on.desc(), Tuit.id.desc())
        )
        return [TuitResponse.model_validate(t) for t in result.scalars().all()]

    async def find_tuit_by_id(self, tuit_id: int, db: AsyncSession) -> TuitResponse:
        tuit = await self.get_tuit(tuit_id, db)
        return TuitResponse.model_validate(tuit)

    async def create_tuit_by_user(self, user_id: int, tuit_data: TuitCreate, db: AsyncSession) -> TuitResponse:
        """
        Post a new tuit on behalf of a user.

        Raises:
            NoSuchUserException: if the author does not exist
            EmptyTuitContentException: if the text is blank
        """
        if await db.get(User, user_id) is None:
            raise NoSuchUserException()
        text = (tuit_data.tuit or "").strip()
        if not text:
            raise EmptyTuitContentException()

        db_tuit = Tuit(tuit=text, posted_by_id=user_id, likes_count=0, dislikes_count=0)
        db.add(db_tuit)
        try:
            await db.commit()
        except Exception:
            await db.rollback()
            raise
        logger.info("User %s posted tuit %s", user_id, db_tuit.id)
        return TuitResponse.model_validate(await self.get_tuit(db_tuit.id, db))

    async def update_tuit(self, tuit_id: int, tuit_data: TuitUpdate, db: AsyncSession) -> TuitResponse:
        tuit = await self.get_tuit(tuit_id, db)
        if tuit_data.tuit is not None:
            text = tuit_data.tuit.strip()
            if not text:
                raise EmptyTuitContentException()
            tuit.tuit = text
        try:
            await db.commit()
        except Exception:
            await db.rollback()
            raise
        return TuitResponse.model_validate(await self.get_tuit(tuit_id, db))

    async def delete_tuit(self, tuit_id: int, db: AsyncSession) -> DeleteResponse:
        """Delete a tuit and the likes, dislikes and bookmarks pointing at it"""
        try:
            deleted = await self.purge_tuits([tuit_id], db)
            await db.commit()
        except Exception:
            await db.rollback()
            raise
        return DeleteResponse(deleted_count=deleted)

    async def purge_tuits(self, tuit_ids: Iterable[int], db: AsyncSession) -> int:
        """Delete tuits with their dependent rows. The caller commits."""
        tuit_ids = list(tuit_ids)
        if not tuit_ids:
            return 0
        await db.execute(delete(Like).where(Like.tuit_id.in_(tuit_ids)))
        await db.execute(delete(Dislike).where(Dislike.tuit_id.in_(tuit_ids)))
        await db.execute(delete(Bookmark).where(Bookmark.bookmarked_tuit_id.in_(tuit_ids)))
        result = await db.execute(delete(Tuit).where(Tuit.id.in_(tuit_ids)))
        return result.rowcount

    async def refresh_stats(self, tuit_id: int, db: AsyncSession) -> None:
        """
        Recompute both counters of a tuit from the live likes/dislikes rows
        in a single UPDATE. The caller commits.
        """
        likes = (
            select(func.count(Like.id))
            .where(Like.tuit_id == tuit_id)
            .scalar_subquery()
        )
        dislikes = (
            select(func.count(Dislike.id))
            .where(Dislike.tuit_id == tuit_id)
            .scalar_subquery()
        )
        await db.execute(
            update(Tuit)
            .where(Tuit.id == tuit_id)
            .values(likes_count=likes, dislikes_count=dislikes)
            .execution_options(synchronize_session=False)
        )
