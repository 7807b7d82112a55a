from datetime import datetime
from typing import Optional
from pydantic import Field
from src.models import CustomModel


class BookmarkResponse(CustomModel):
    id: int
    bookmarked_tuit_id: int = Field(..., description="Bookmarked tuit")
    bookmarked_by_id: int = Field(..., description="User who saved the tuit")
    created_at: Optional[datetime] = None
