"""
Service layer for Messages module
"""
import logging
from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete
from sqlalchemy.orm import selectinload

from src.messages.models import Message
from src.messages.schemas import MessageCreate, MessageResponse
from src.messages.exceptions import NoSuchMessageException, EmptyMessageException
from src.users.models import User
from src.users.exceptions import NoSuchUserException
from src.models import DeleteResponse

logger = logging.getLogger(__name__)


class MessageService:
    def _query(self):
        return select(Message).options(
            selectinload(Message.from_user),
            selectinload(Message.to_user),
        )

    async def send_message(
        self, from_user_id: int, to_user_id: int, message_data: MessageCreate, db: AsyncSession
    ) -> MessageResponse:
        """
        Send a direct message.

        Raises:
            NoSuchUserException: if sender or recipient does not exist
            EmptyMessageException: if the text is blank
        """
        for user_id in (from_user_id, to_user_id):
            if await db.get(User, user_id) is None:
                raise NoSuchUserException()
        text = message_data.message.strip()
        if not text:
            raise EmptyMessageException()

        db_message = Message(message=text, from_user_id=from_user_id, to_user_id=to_user_id)
        db.add(db_message)
        try:
            await db.commit()
        except Exception:
            await db.rollback()
            raise
        logger.info("User %s sent message %s to user %s", from_user_id, db_message.id, to_user_id)

        result = await db.execute(self._query().where(Message.id == db_message.id))
        return MessageResponse.model_validate(result.scalar_one())

    async def find_sent_messages(self, user_id: int, db: AsyncSession) -> List[MessageResponse]:
        result = await db.execute(
            self._query()
            .where(Message.from_user_id == user_id)
            .order_by(Message.sent_on.desc(), Message.id.desc())
        )
        return [MessageResponse.model_validate(m) for m in result.scalars().all()]

    async def find_received_messages(self, user_id: int, db: AsyncSession) -> List[MessageResponse]:
        result = await db.execute(
            self._query()
            .where(Message.to_user_id == user_id)
            .order_by(Message.sent_on.desc(), Message.id.desc())
        )
        return [MessageResponse.model_validate(m) for m in result.scalars().all()]

    async def delete_message(self, message_id: int, db: AsyncSession) -> DeleteResponse:
        try:
            result = await db.execute(delete(Message).where(Message.id == message_id))
            if result.rowcount == 0:
                raise NoSuchMessageException()
            await db.commit()
        except Exception:
            await db.rollback()
            raise
        return DeleteResponse(deleted_count=result.rowcount)
