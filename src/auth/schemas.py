from pydantic import validator

from src.models import CustomModel
from src.users.schemas import UserResponse, normalize_username
from src.users.constants import BLANK_PASSWORD


class LoginRequest(CustomModel):
    username: str
    password: str

    @validator('username')
    def validate_username(cls, v):
        return normalize_username(v)


class SessionProfile(UserResponse):
    """Public-safe record of the logged in user, rebuilt from the database per request"""


class ProfileResponse(UserResponse):
    """User returned by auth routes; the password is never the stored hash"""
    password: str = BLANK_PASSWORD


class LogoutResponse(CustomModel):
    message: str
