from pydantic import Field
from src.models import CustomModel
from src.tuits.schemas import TuitStats


class LikeResponse(CustomModel):
    id: int
    tuit_id: int = Field(..., description="Liked tuit")
    liked_by_id: int = Field(..., description="User who liked the tuit")


class DislikeResponse(CustomModel):
    id: int
    tuit_id: int = Field(..., description="Disliked tuit")
    disliked_by_id: int = Field(..., description="User who disliked the tuit")


class ReactionResult(CustomModel):
    """State of a (user, tuit) pair after a like/dislike request"""
    tuit_id: int
    liked: bool
    disliked: bool
    stats: TuitStats
