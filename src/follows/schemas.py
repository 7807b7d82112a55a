from datetime import datetime
from typing import Optional
from pydantic import Field
from src.models import CustomModel


class FollowResponse(CustomModel):
    id: int
    user_following_id: int = Field(..., description="The follower")
    user_followed_id: int = Field(..., description="The user being followed")
    created_at: Optional[datetime] = None
