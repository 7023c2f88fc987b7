# workout_log/repositories/base.py
from __future__ import annotations
from enum import Enum
from typing import Generic, Optional, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

T = TypeVar("T")  # SQLAlchemy model type

class WriteResult(str, Enum):
    """Outcome of a keyed update/delete. A missing target is not an error."""
    applied = "applied"
    not_found = "not_found"

    @classmethod
    def from_rowcount(cls, rowcount: int) -> "WriteResult":
        return cls.applied if rowcount else cls.not_found

class BaseRepository(Generic[T]):
    """Lightweight base for repositories using SQLAlchemy 2.0 asyncio style.

    Repositories never commit; the caller owns the transaction.
    """
    model: type[T]

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, entity_id: int) -> Optional[T]:
        return await self.db.get(self.model, entity_id)

    async def add_and_flush(self, entity: T) -> T:
        self.db.add(entity)
        await self.db.flush()  # assigns the autoincrement id
        return entity
