from typing import List, Optional
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.database import get_db
from src.reactions.schemas import LikeResponse, DislikeResponse, ReactionResult
from src.reactions.service import ReactionService
from src.reactions.dependencies import get_reaction_service
from src.tuits.schemas import TuitResponse
from src.users.schemas import UserResponse
from src.auth.dependencies import resolve_user_id

router = APIRouter(tags=["Likes & Dislikes"])


# ----- Likes -----
@router.post("/users/{uid}/likes/{tid}", response_model=ReactionResult)
async def like_tuit(
    tid: int,
    user_id: int = Depends(resolve_user_id),
    service: ReactionService = Depends(get_reaction_service),
    db: AsyncSession = Depends(get_db)
):
    """Like a tuit. Liking again changes nothing; an existing dislike is removed."""
    return await service.like(user_id, tid, db)


@router.delete("/users/{uid}/likes/{tid}", response_model=ReactionResult)
async def unlike_tuit(
    tid: int,
    user_id: int = Depends(resolve_user_id),
    service: ReactionService = Depends(get_reaction_service),
    db: AsyncSession = Depends(get_db)
):
    return await service.unlike(user_id, tid, db)


@router.put("/users/{uid}/likes/{tid}", response_model=ReactionResult)
async def toggle_like(
    tid: int,
    user_id: int = Depends(resolve_user_id),
    service: ReactionService = Depends(get_reaction_service),
    db: AsyncSession = Depends(get_db)
):
    """
    Flip the like of a tuit

    - not liked yet: like it and drop any dislike
    - already liked: remove the like
    """
    return await service.toggle_like(user_id, tid, db)


@router.get("/users/{uid}/likes", response_model=List[TuitResponse])
async def find_tuits_liked_by_user(
    user_id: int = Depends(resolve_user_id),
    service: ReactionService = Depends(get_reaction_service),
    db: AsyncSession = Depends(get_db)
):
    return await service.find_tuits_liked_by_user(user_id, db)


@router.get("/users/{uid}/likes/{tid}", response_model=Optional[LikeResponse])
async def find_like(
    tid: int,
    user_id: int = Depends(resolve_user_id),
    service: ReactionService = Depends(get_reaction_service),
    db: AsyncSession = Depends(get_db)
):
    """The like record of a user on a tuit, or null"""
    return await service.find_like(user_id, tid, db)


@router.get("/tuits/likes/{tid}", response_model=List[UserResponse])
async def find_users_that_liked_tuit(
    tid: int,
    service: ReactionService = Depends(get_reaction_service),
    db: AsyncSession = Depends(get_db)
):
    return await service.find_users_that_liked_tuit(tid, db)


@router.get("/likes", response_model=List[LikeResponse])
async def find_all_likes(
    service: ReactionService = Depends(get_reaction_service),
    db: AsyncSession = Depends(get_db)
):
    return await service.find_all_likes(db)


# ----- Dislikes -----
@router.post("/users/{uid}/dislikes/{tid}", response_model=ReactionResult)
async def dislike_tuit(
    tid: int,
    user_id: int = Depends(resolve_user_id),
    service: ReactionService = Depends(get_reaction_service),
    db: AsyncSession = Depends(get_db)
):
    return await service.dislike(user_id, tid, db)


@router.delete("/users/{uid}/dislikes/{tid}", response_model=ReactionResult)
async def undislike_tuit(
    tid: int,
    user_id: int = Depends(resolve_user_id),
    service: ReactionService = Depends(get_reaction_service),
    db: AsyncSession = Depends(get_db)
):
    return await service.undislike(user_id, tid, db)


@router.put("/users/{uid}/dislikes/{tid}", response_model=ReactionResult)
async def toggle_dislike(
    tid: int,
    user_id: int = Depends(resolve_user_id),
    service: ReactionService = Depends(get_reaction_service),
    db: AsyncSession = Depends(get_db)
):
    return await service.toggle_dislike(user_id, tid, db)


@router.get("/users/{uid}/dislikes", response_model=List[TuitResponse])
async def find_tuits_disliked_by_user(
    user_id: int = Depends(resolve_user_id),
    service: ReactionService = Depends(get_reaction_service),
    db: AsyncSession = Depends(get_db)
):
    return await service.find_tuits_disliked_by_user(user_id, db)


@router.get("/users/{uid}/dislikes/{tid}", response_model=Optional[DislikeResponse])
async def find_dislike(
    tid: int,
    user_id: int = Depends(resolve_user_id),
    service: ReactionService = Depends(get_reaction_service),
    db: AsyncSession = Depends(get_db)
):
    return await service.find_dislike(user_id, tid, db)


@router.get("/tuits/dislikes/{tid}", response_model=List[UserResponse])
async def find_users_that_disliked_tuit(
    tid: int,
    service: ReactionService = Depends(get_reaction_service),
    db: AsyncSession = Depends(get_db)
):
    return await service.find_users_that_disliked_tuit(tid, db)


@router.get("/dislikes", response_model=List[DislikeResponse])
async def find_all_dislikes(
    service: ReactionService = Depends(get_reaction_service),
    db: AsyncSession = Depends(get_db)
):
    return await service.find_all_dislikes(db)
