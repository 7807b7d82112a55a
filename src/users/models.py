"""
Models for Users module
"""
from sqlalchemy import Column, Integer, String, Text, Date, DateTime, Enum, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from src.database import Base
from src.orm_mixins import TimestampMixin
import enum


class AccountType(str, enum.Enum):
    PERSONAL = "PERSONAL"
    ACADEMIC = "ACADEMIC"
    PROFESSIONAL = "PROFESSIONAL"


class MaritalStatus(str, enum.Enum):
    MARRIED = "MARRIED"
    SINGLE = "SINGLE"
    WIDOWED = "WIDOWED"


class User(Base, TimestampMixin):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(100), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)
    first_name = Column(String(100), nullable=True)
    last_name = Column(String(100), nullable=True)
    email = Column(String(255), nullable=True)
    profile_photo = Column(String(500), nullable=True)
    header_image = Column(String(500), nullable=True)
    account_type = Column(Enum(AccountType), default=AccountType.PERSONAL, nullable=False)
    marital_status = Column(Enum(MaritalStatus), default=MaritalStatus.SINGLE, nullable=False)
    biography = Column(Text, nullable=True)
    date_of_birth = Column(Date, nullable=True)
    joined = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    # {"latitude": float, "longitude": float}
    location = Column(JSON, nullable=True)

    # Relationships
    tuits = relationship("Tuit", back_populates="author")
