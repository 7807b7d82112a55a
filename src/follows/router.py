from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.database import get_db
from src.models import DeleteResponse
from src.follows.schemas import FollowResponse
from src.follows.service import FollowService
from src.follows.dependencies import get_follow_service
from src.users.schemas import UserResponse
from src.auth.dependencies import resolve_user_id, resolve_other_user_id

router = APIRouter(tags=["Follows"])


@router.post("/users/{uid}/follows/{other_uid}", response_model=FollowResponse)
async def follow_user(
    user_id: int = Depends(resolve_user_id),
    other_user_id: int = Depends(resolve_other_user_id),
    service: FollowService = Depends(get_follow_service),
    db: AsyncSession = Depends(get_db)
):
    """
    **uid** starts following **other_uid**. Either may be `me`.
    """
    return await service.follow_user(user_id, other_user_id, db)


@router.delete("/users/{uid}/follows/{other_uid}", response_model=DeleteResponse)
async def unfollow_user(
    user_id: int = Depends(resolve_user_id),
    other_user_id: int = Depends(resolve_other_user_id),
    service: FollowService = Depends(get_follow_service),
    db: AsyncSession = Depends(get_db)
):
    return await service.unfollow_user(user_id, other_user_id, db)


@router.get("/users/{uid}/follows", response_model=List[UserResponse])
async def find_users_followed_by(
    user_id: int = Depends(resolve_user_id),
    service: FollowService = Depends(get_follow_service),
    db: AsyncSession = Depends(get_db)
):
    """Users that **uid** follows"""
    return await service.find_users_followed_by(user_id, db)


@router.get("/users/{uid}/followers", response_model=List[UserResponse])
async def find_followers(
    user_id: int = Depends(resolve_user_id),
    service: FollowService = Depends(get_follow_service),
    db: AsyncSession = Depends(get_db)
):
    """Users following **uid**"""
    return await service.find_followers(user_id, db)


@router.get("/follows", response_model=List[FollowResponse])
async def find_all_follows(
    service: FollowService = Depends(get_follow_service),
    db: AsyncSession = Depends(get_db)
):
    return await service.find_all_follows(db)
