from functools import lru_cache

from src.follows.service import FollowService


@lru_cache()
def get_follow_service() -> FollowService:
    return FollowService()
