from datetime import datetime
from pydantic import Field
from src.models import CustomModel
from src.messages.constants import MAX_MESSAGE_LENGTH
from src.users.schemas import UserSummary


class MessageCreate(CustomModel):
    message: str = Field("", max_length=MAX_MESSAGE_LENGTH, description="Text of the message")


class MessageResponse(CustomModel):
    id: int
    message: str
    from_user: UserSummary = Field(..., description="Sender")
    to_user: UserSummary = Field(..., description="Recipient")
    sent_on: datetime
