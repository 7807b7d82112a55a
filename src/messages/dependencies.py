from functools import lru_cache

from src.messages.service import MessageService


@lru_cache()
def get_message_service() -> MessageService:
    return MessageService()
