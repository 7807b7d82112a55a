"""
Generic owner -> target relationship rows (likes, dislikes, bookmarks, follows).

Each relation is a table with two foreign keys: the owner (the user doing
the liking, bookmarking or following) and the target (the tuit or user it
points at). Column names end in ``_id`` and the matching ORM relationship
carries the same name without the suffix, e.g. ``liked_by_id`` / ``liked_by``.

Methods never commit; the calling service owns the transaction.
"""
from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy import select, delete, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from src.database import Base

RelationType = TypeVar("RelationType", bound=Base)


class RelationService(Generic[RelationType]):
    def __init__(
        self,
        model: Type[RelationType],
        owner_field: str,
        target_field: str,
        owner_model: Type[Base],
        target_model: Type[Base],
    ):
        self.model = model
        self.owner_field = owner_field
        self.target_field = target_field
        self.owner_model = owner_model
        self.target_model = target_model

    @property
    def owner_column(self):
        return getattr(self.model, self.owner_field)

    @property
    def target_column(self):
        return getattr(self.model, self.target_field)

    @property
    def owner_relation(self):
        return getattr(self.model, self.owner_field[:-len("_id")])

    @property
    def target_relation(self):
        return getattr(self.model, self.target_field[:-len("_id")])

    def _pair(self, owner_id: Any, target_id: Any):
        return (self.owner_column == owner_id, self.target_column == target_id)

    async def find(self, owner_id: Any, target_id: Any, db: AsyncSession) -> Optional[RelationType]:
        result = await db.execute(
            select(self.model).where(*self._pair(owner_id, target_id))
        )
        return result.scalars().first()

    async def exists(self, owner_id: Any, target_id: Any, db: AsyncSession) -> bool:
        return await self.find(owner_id, target_id, db) is not None

    async def create(self, owner_id: Any, target_id: Any, db: AsyncSession) -> RelationType:
        """Add the row and flush so a duplicate pair fails right here"""
        db_obj = self.model(**{self.owner_field: owner_id, self.target_field: target_id})
        db.add(db_obj)
        await db.flush()
        return db_obj

    async def delete(self, owner_id: Any, target_id: Any, db: AsyncSession) -> int:
        result = await db.execute(
            delete(self.model).where(*self._pair(owner_id, target_id))
        )
        return result.rowcount

    async def count_for_target(self, target_id: Any, db: AsyncSession) -> int:
        result = await db.execute(
            select(func.count()).select_from(self.model).where(self.target_column == target_id)
        )
        return result.scalar_one()

    async def count_for_owner(self, owner_id: Any, db: AsyncSession) -> int:
        result = await db.execute(
            select(func.count()).select_from(self.model).where(self.owner_column == owner_id)
        )
        return result.scalar_one()

    async def find_all(self, db: AsyncSession) -> List[RelationType]:
        result = await db.execute(
            select(self.model)
            .options(selectinload(self.owner_relation), selectinload(self.target_relation))
            .order_by(self.model.id)
        )
        return list(result.scalars().all())

    async def find_targets_of_owner(self, owner_id: Any, db: AsyncSession, *options) -> List[Any]:
        """
        Targets the owner points at, most recent relation first.

        Args:
            owner_id: id of the owner
            db: Database session
            options: loader options applied to the target rows
        """
        result = await db.execute(
            select(self.target_model)
            .join(self.model, self.target_column == self.target_model.id)
            .where(self.owner_column == owner_id)
            .options(*options)
            .order_by(self.model.id.desc())
        )
        return list(result.scalars().all())

    async def find_owners_of_target(self, target_id: Any, db: AsyncSession, *options) -> List[Any]:
        result = await db.execute(
            select(self.owner_model)
            .join(self.model, self.owner_column == self.owner_model.id)
            .where(self.target_column == target_id)
            .options(*options)
            .order_by(self.model.id.desc())
        )
        return list(result.scalars().all())
