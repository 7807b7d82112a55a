"""
Schemas for Users module
"""
from datetime import date, datetime
from typing import Optional
from pydantic import EmailStr, Field, validator

from src.models import CustomModel
from src.users.models import AccountType, MaritalStatus

# Constants for field descriptions
USERNAME_DESC = "Unique handle of the user"
PASSWORD_DESC = "Plain-text password, stored as a salted bcrypt hash"


def normalize_username(v: str) -> str:
    """Usernames are compared without surrounding whitespace and may not be blank"""
    if not v.strip():
        raise ValueError('username must not be blank')
    return v.strip()


class Location(CustomModel):
    latitude: float = Field(0.0, ge=-90, le=90)
    longitude: float = Field(0.0, ge=-180, le=180)


class UserCreate(CustomModel):
    username: str = Field(..., min_length=1, max_length=100, description=USERNAME_DESC)
    password: str = Field(..., min_length=1, max_length=72, description=PASSWORD_DESC)
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[EmailStr] = None
    profile_photo: Optional[str] = None
    header_image: Optional[str] = None
    account_type: AccountType = AccountType.PERSONAL
    marital_status: MaritalStatus = MaritalStatus.SINGLE
    biography: Optional[str] = None
    date_of_birth: Optional[date] = None
    location: Optional[Location] = None

    @validator('username')
    def validate_username(cls, v):
        return normalize_username(v)


class UserUpdate(CustomModel):
    """Every field is optional; only the ones sent are changed"""
    username: Optional[str] = Field(None, min_length=1, max_length=100, description=USERNAME_DESC)
    password: Optional[str] = Field(None, min_length=1, max_length=72, description=PASSWORD_DESC)
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[EmailStr] = None
    profile_photo: Optional[str] = None
    header_image: Optional[str] = None
    account_type: Optional[AccountType] = None
    marital_status: Optional[MaritalStatus] = None
    biography: Optional[str] = None
    date_of_birth: Optional[date] = None
    location: Optional[Location] = None

    @validator('username', 'password', 'account_type', 'marital_status')
    def reject_null(cls, v):
        # These columns are NOT NULL; leave the field out to keep its value
        if v is None:
            raise ValueError('must not be null')
        return v

    @validator('username')
    def validate_username(cls, v):
        return normalize_username(v)


class UserResponse(CustomModel):
    id: int
    username: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    profile_photo: Optional[str] = None
    header_image: Optional[str] = None
    account_type: AccountType
    marital_status: MaritalStatus
    biography: Optional[str] = None
    date_of_birth: Optional[date] = None
    joined: datetime
    location: Optional[Location] = None


class UserSummary(CustomModel):
    """Compact user shape used when a user is embedded in another resource"""
    id: int
    username: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_photo: Optional[str] = None

