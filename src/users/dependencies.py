"""
Dependencies for Users module
"""
from functools import lru_cache

from src.users.service import UsersService


@lru_cache()
def get_users_service() -> UsersService:
    """Dependency to get the shared UsersService instance"""
    return UsersService()
