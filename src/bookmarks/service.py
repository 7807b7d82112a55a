"""
Service layer for Bookmarks module
"""
from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from src.relations import RelationService
from src.bookmarks.models import Bookmark
from src.bookmarks.schemas import BookmarkResponse
from src.tuits.models import Tuit
from src.tuits.schemas import TuitResponse
from src.tuits.exceptions import NoSuchTuitException
from src.users.models import User
from src.users.exceptions import NoSuchUserException
from src.models import DeleteResponse


class BookmarkService:
    def __init__(self):
        self.bookmarks = RelationService(Bookmark, "bookmarked_by_id", "bookmarked_tuit_id", User, Tuit)

    async def bookmark_tuit(self, user_id: int, tuit_id: int, db: AsyncSession) -> BookmarkResponse:
        """Save a tuit for a user; saving it again keeps the existing bookmark"""
        if await db.get(User, user_id) is None:
            raise NoSuchUserException()
        if await db.get(Tuit, tuit_id) is None:
            raise NoSuchTuitException()

        try:
            bookmark = await self.bookmarks.find(user_id, tuit_id, db)
            if bookmark is None:
                bookmark = await self.bookmarks.create(user_id, tuit_id, db)
            await db.commit()
        except Exception:
            await db.rollback()
            raise
        await db.refresh(bookmark)
        return BookmarkResponse.model_validate(bookmark)

    async def unbookmark_tuit(self, user_id: int, tuit_id: int, db: AsyncSession) -> DeleteResponse:
        try:
            deleted = await self.bookmarks.delete(user_id, tuit_id, db)
            await db.commit()
        except Exception:
            await db.rollback()
            raise
        return DeleteResponse(deleted_count=deleted)

    async def find_tuits_bookmarked_by_user(self, user_id: int, db: AsyncSession) -> List[TuitResponse]:
        tuits = await self.bookmarks.find_targets_of_owner(user_id, db, selectinload(Tuit.author))
        return [TuitResponse.model_validate(t) for t in tuits]

    async def find_all_bookmarks(self, db: AsyncSession) -> List[BookmarkResponse]:
        return [BookmarkResponse.model_validate(b) for b in await self.bookmarks.find_all(db)]
