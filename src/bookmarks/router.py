from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.database import get_db
from src.models import DeleteResponse
from src.bookmarks.schemas import BookmarkResponse
from src.bookmarks.service import BookmarkService
from src.bookmarks.dependencies import get_bookmark_service
from src.tuits.schemas import TuitResponse
from src.auth.dependencies import resolve_user_id

router = APIRouter(tags=["Bookmarks"])


@router.post("/users/{uid}/bookmarks/{tid}", response_model=BookmarkResponse)
async def bookmark_tuit(
    tid: int,
    user_id: int = Depends(resolve_user_id),
    service: BookmarkService = Depends(get_bookmark_service),
    db: AsyncSession = Depends(get_db)
):
    return await service.bookmark_tuit(user_id, tid, db)


@router.delete("/users/{uid}/bookmarks/{tid}", response_model=DeleteResponse)
async def unbookmark_tuit(
    tid: int,
    user_id: int = Depends(resolve_user_id),
    service: BookmarkService = Depends(get_bookmark_service),
    db: AsyncSession = Depends(get_db)
):
    return await service.unbookmark_tuit(user_id, tid, db)


@router.get("/users/{uid}/bookmarks", response_model=List[TuitResponse])
async def find_tuits_bookmarked_by_user(
    user_id: int = Depends(resolve_user_id),
    service: BookmarkService = Depends(get_bookmark_service),
    db: AsyncSession = Depends(get_db)
):
    """Tuits saved by **uid**, most recently bookmarked first"""
    return await service.find_tuits_bookmarked_by_user(user_id, db)


@router.get("/bookmarks", response_model=List[BookmarkResponse])
async def find_all_bookmarks(
    service: BookmarkService = Depends(get_bookmark_service),
    db: AsyncSession = Depends(get_db)
):
    return await service.find_all_bookmarks(db)
