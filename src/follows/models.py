from sqlalchemy import Column, Integer, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from src.database import Base
from src.orm_mixins import TimestampMixin


class Follow(Base, TimestampMixin):
    __tablename__ = "follows"

    id = Column(Integer, primary_key=True, index=True)
    # follower
    user_following_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    # followee
    user_followed_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    # Relationships
    user_following = relationship("User", foreign_keys=[user_following_id])
    user_followed = relationship("User", foreign_keys=[user_followed_id])

    __table_args__ = (
        UniqueConstraint('user_following_id', 'user_followed_id', name='follows_user_following_id_user_followed_id_key'),
    )
