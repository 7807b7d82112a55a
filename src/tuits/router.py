from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.database import get_db
from src.models import DeleteResponse
from src.tuits.schemas import TuitCreate, TuitUpdate, TuitResponse
from src.tuits.service import TuitService
from src.tuits.dependencies import get_tuit_service
from src.auth.dependencies import resolve_user_id

router = APIRouter(tags=["Tuits"])


@router.get("/tuits", response_model=List[TuitResponse])
async def find_all_tuits(
    service: TuitService = Depends(get_tuit_service),
    db: AsyncSession = Depends(get_db)
):
    """All tuits, newest first"""
    return await service.find_all_tuits(db)


@router.get("/tuits/{tid}", response_model=TuitResponse)
async def find_tuit_by_id(
    tid: int,
    service: TuitService = Depends(get_tuit_service),
    db: AsyncSession = Depends(get_db)
):
    return await service.find_tuit_by_id(tid, db)


@router.get("/users/{uid}/tuits", response_model=List[TuitResponse])
async def find_tuits_by_user(
    user_id: int = Depends(resolve_user_id),
    service: TuitService = Depends(get_tuit_service),
    db: AsyncSession = Depends(get_db)
):
    return await service.find_tuits_by_user(user_id, db)


@router.post("/users/{uid}/tuits", response_model=TuitResponse, status_code=status.HTTP_201_CREATED)
async def create_tuit_by_user(
    tuit_data: TuitCreate,
    user_id: int = Depends(resolve_user_id),
    service: TuitService = Depends(get_tuit_service),
    db: AsyncSession = Depends(get_db)
):
    """
    Post a tuit as the given user

    - **uid**: user id, or `me` for the logged in user
    - **tuit**: text of the tuit, must not be blank
    """
    return await service.create_tuit_by_user(user_id, tuit_data, db)


@router.put("/tuits/{tid}", response_model=TuitResponse)
async def update_tuit(
    tid: int,
    tuit_data: TuitUpdate,
    service: TuitService = Depends(get_tuit_service),
    db: AsyncSession = Depends(get_db)
):
    return await service.update_tuit(tid, tuit_data, db)


@router.delete("/tuits/{tid}", response_model=DeleteResponse)
async def delete_tuit(
    tid: int,
    service: TuitService = Depends(get_tuit_service),
    db: AsyncSession = Depends(get_db)
):
    return await service.delete_tuit(tid, db)
