from sqlalchemy import Column, Integer, Text, DateTime, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from src.database import Base
from src.orm_mixins import TimestampMixin


class Tuit(Base, TimestampMixin):
    __tablename__ = "tuits"

    id = Column(Integer, primary_key=True, index=True)
    tuit = Column(Text, nullable=False)
    posted_by_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    posted_on = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    # Denormalized counters, recomputed from likes/dislikes rows
    likes_count = Column(Integer, default=0, nullable=False)
    dislikes_count = Column(Integer, default=0, nullable=False)

    # Relationship
    author = relationship("User", back_populates="tuits")
