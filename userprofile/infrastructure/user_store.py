"""SQL User Store — UserStore protocol over an AsyncSession.

Invariants:
    - Every mutating call commits before returning (one store call = one transaction)
    - save() is insert-or-replace: a transient User gets its id on commit,
      a persistent one is updated in place
    - find_by_birth_date_range is inclusive on both ends, ordered by id

Design Decisions:
    - Existence checks use SELECT 1 ... LIMIT 1 instead of loading rows
    - delete() issues a bulk DELETE by id; callers check existence first
"""

from datetime import date
from typing import Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from userprofile.core.domain_types import UserId
from userprofile.models.user import User


class SqlUserStore:
    """Data-access layer for users."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, user_id: UserId) -> User | None:
        return await self.db.get(User, user_id)

    async def save(self, user: User) -> User:
        self.db.add(user)
        await self.db.commit()
        await self.db.refresh(user)
        return user

    async def delete(self, user_id: UserId) -> None:
        await self.db.execute(delete(User).where(User.id == user_id))
        await self.db.commit()

    async def exists_by_email(self, email: str) -> bool:
        result = await self.db.execute(
            select(User.id).where(User.email == email).limit(1),
        )
        return result.first() is not None

    async def exists_by_id(self, user_id: UserId) -> bool:
        result = await self.db.execute(
            select(User.id).where(User.id == user_id).limit(1),
        )
        return result.first() is not None

    async def find_by_birth_date_range(
        self, start: date, end: date,
    ) -> Sequence[User]:
        result = await self.db.execute(
            select(User)
            .where(User.birth_date.between(start, end))
            .order_by(User.id),
        )
        return result.scalars().all()
