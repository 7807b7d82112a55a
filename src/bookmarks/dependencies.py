from functools import lru_cache

from src.bookmarks.service import BookmarkService


@lru_cache()
def get_bookmark_service() -> BookmarkService:
    return BookmarkService()
