"""
Router for Users module
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.database import get_db
from src.models import DeleteResponse
from src.users.service import UsersService
from src.users.schemas import UserCreate, UserUpdate, UserResponse
from src.users.dependencies import get_users_service
from src.auth.schemas import SessionProfile
from src.auth.dependencies import get_session_profile, resolve_user_id

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("", response_model=List[UserResponse])
async def find_all_users(
    service: UsersService = Depends(get_users_service),
    db: AsyncSession = Depends(get_db)
):
    return await service.find_all_users(db)


@router.get("/username/{username}", response_model=UserResponse)
async def find_user_by_username(
    username: str,
    service: UsersService = Depends(get_users_service),
    db: AsyncSession = Depends(get_db)
):
    return await service.find_user_by_username(username, db)


@router.delete("/username/{username}", response_model=DeleteResponse)
async def delete_user_by_username(
    username: str,
    service: UsersService = Depends(get_users_service),
    db: AsyncSession = Depends(get_db)
):
    return await service.delete_user_by_username(username, db)


@router.get("/{uid}", response_model=UserResponse)
async def find_user_by_id(
    user_id: int = Depends(resolve_user_id),
    service: UsersService = Depends(get_users_service),
    db: AsyncSession = Depends(get_db)
):
    """
    Get one user

    - **uid**: user id, or `me` for the logged in user
    """
    return await service.find_user_by_id(user_id, db)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    user_data: UserCreate,
    service: UsersService = Depends(get_users_service),
    db: AsyncSession = Depends(get_db)
):
    """
    Create a user without logging in as them

    - **username**: unique handle
    - **password**: stored as a salted hash
    """
    db_user = await service.create_user(user_data, db)
    return UserResponse.model_validate(db_user)


@router.put("/{uid}", response_model=UserResponse)
async def update_user(
    user_data: UserUpdate,
    user_id: int = Depends(resolve_user_id),
    service: UsersService = Depends(get_users_service),
    db: AsyncSession = Depends(get_db)
):
    return await service.update_user(user_id, user_data, db)


@router.delete("/{uid}", response_model=DeleteResponse)
async def delete_user(
    request: Request,
    user_id: int = Depends(resolve_user_id),
    profile: Optional[SessionProfile] = Depends(get_session_profile),
    service: UsersService = Depends(get_users_service),
    db: AsyncSession = Depends(get_db)
):
    """Delete a user with their tuits, reactions, bookmarks, follows and messages"""
    result = await service.delete_user(user_id, db)
    if profile is not None and profile.id == user_id:
        request.session.clear()
    return result
