from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.database import get_db
from src.models import DeleteResponse
from src.messages.schemas import MessageCreate, MessageResponse
from src.messages.service import MessageService
from src.messages.dependencies import get_message_service
from src.auth.dependencies import resolve_user_id, resolve_other_user_id

router = APIRouter(tags=["Messages"])


@router.post(
    "/users/{uid}/messages/{other_uid}",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def send_message(
    message_data: MessageCreate,
    user_id: int = Depends(resolve_user_id),
    other_user_id: int = Depends(resolve_other_user_id),
    service: MessageService = Depends(get_message_service),
    db: AsyncSession = Depends(get_db)
):
    """
    **uid** sends a message to **other_uid**

    - **message**: text, must not be blank
    """
    return await service.send_message(user_id, other_user_id, message_data, db)


@router.get("/users/{uid}/messages/sent", response_model=List[MessageResponse])
async def find_sent_messages(
    user_id: int = Depends(resolve_user_id),
    service: MessageService = Depends(get_message_service),
    db: AsyncSession = Depends(get_db)
):
    return await service.find_sent_messages(user_id, db)


@router.get("/users/{uid}/messages/received", response_model=List[MessageResponse])
async def find_received_messages(
    user_id: int = Depends(resolve_user_id),
    service: MessageService = Depends(get_message_service),
    db: AsyncSession = Depends(get_db)
):
    return await service.find_received_messages(user_id, db)


@router.delete("/messages/{mid}", response_model=DeleteResponse)
async def delete_message(
    mid: int,
    service: MessageService = Depends(get_message_service),
    db: AsyncSession = Depends(get_db)
):
    return await service.delete_message(mid, db)
