from sqlalchemy import Column, Integer, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from src.database import Base
from src.orm_mixins import TimestampMixin


class Bookmark(Base, TimestampMixin):
    __tablename__ = "bookmarks"

    id = Column(Integer, primary_key=True, index=True)
    bookmarked_tuit_id = Column(Integer, ForeignKey("tuits.id"), nullable=False, index=True)
    bookmarked_by_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    # Relationships
    bookmarked_tuit = relationship("Tuit")
    bookmarked_by = relationship("User")

    __table_args__ = (
        UniqueConstraint('bookmarked_tuit_id', 'bookmarked_by_id', name='bookmarks_bookmarked_tuit_id_bookmarked_by_id_key'),
    )
