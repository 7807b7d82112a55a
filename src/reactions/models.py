from sqlalchemy import Column, Integer, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from src.database import Base
from src.orm_mixins import TimestampMixin


class Like(Base, TimestampMixin):
    __tablename__ = "likes"

    id = Column(Integer, primary_key=True, index=True)
    tuit_id = Column(Integer, ForeignKey("tuits.id"), nullable=False, index=True)
    liked_by_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    # Relationships
    tuit = relationship("Tuit")
    liked_by = relationship("User")

    # A user likes a tuit at most once
    __table_args__ = (UniqueConstraint('tuit_id', 'liked_by_id', name='likes_tuit_id_liked_by_id_key'),)


class Dislike(Base, TimestampMixin):
    __tablename__ = "dislikes"

    id = Column(Integer, primary_key=True, index=True)
    tuit_id = Column(Integer, ForeignKey("tuits.id"), nullable=False, index=True)
    disliked_by_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    # Relationships
    tuit = relationship("Tuit")
    disliked_by = relationship("User")

    __table_args__ = (UniqueConstraint('tuit_id', 'disliked_by_id', name='dislikes_tuit_id_disliked_by_id_key'),)
