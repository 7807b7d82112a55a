from functools import lru_cache

from src.tuits.service import TuitService


@lru_cache()
def get_tuit_service() -> TuitService:
    return TuitService()
