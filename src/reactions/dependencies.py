from functools import lru_cache

from src.reactions.service import ReactionService


@lru_cache()
def get_reaction_service() -> ReactionService:
    """Shared ReactionService instance"""
    return ReactionService()
