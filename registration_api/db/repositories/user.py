from typing import Protocol
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from registration_api.db.models.user import User

class UserStore(Protocol):
    """What the registration routes need from user persistence."""

    async def find_one(self, **filters) -> User | None: ...

    async def save(self, user: User) -> User: ...

class SqlUserStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_one(self, **filters) -> User | None:
        """
        Exact-match lookup on the given columns, e.g. find_one(username="alice").
        """
        result = await self.db.execute(select(User).filter_by(**filters))
        return result.scalars().first()

    async def save(self, user: User) -> User:
        # Uniqueness is checked by the caller; the unique columns are the last line of defence
        self.db.add(user)
        await self.db.commit()
        await self.db.refresh(user)
        return user
