from pydantic import Field, model_validator
from typing import Optional, Any
from datetime import datetime
from src.models import CustomModel
from src.config import settings
from src.tuits.constants import TUIT_DESCRIPTION
from src.users.schemas import UserSummary


class TuitStats(CustomModel):
    likes: int = Field(0, ge=0, description="Number of likes")
    dislikes: int = Field(0, ge=0, description="Number of dislikes")


class TuitCreate(CustomModel):
    """Blank text is rejected by the service with EmptyTuitContent"""
    tuit: str = Field("", max_length=settings.MAX_TUIT_LENGTH, description=TUIT_DESCRIPTION)


class TuitUpdate(CustomModel):
    tuit: Optional[str] = Field(None, max_length=settings.MAX_TUIT_LENGTH, description=TUIT_DESCRIPTION)


class TuitResponse(CustomModel):
    id: int = Field(..., description="Tuit id")
    tuit: str = Field(..., description=TUIT_DESCRIPTION)
    posted_by: UserSummary = Field(..., validation_alias="author", description="Author of the tuit")
    posted_on: datetime = Field(..., description="When the tuit was posted")
    stats: TuitStats = Field(default_factory=TuitStats)

    @model_validator(mode="before")
    @classmethod
    def collect_stats(cls, data: Any) -> Any:
        # ORM rows keep the counters in two columns
        if hasattr(data, "likes_count"):
            return {
                "id": data.id,
                "tuit": data.tuit,
                "author": UserSummary.model_validate(data.author),
                "posted_on": data.posted_on,
                "stats": {"likes": data.likes_count, "dislikes": data.dislikes_count},
            }
        return data
