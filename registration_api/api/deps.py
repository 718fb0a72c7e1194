from typing import Callable
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from registration_api.core.security import get_password_hash
from registration_api.db.repositories.user import SqlUserStore, UserStore
from registration_api.db.session import get_db

# Routes take their collaborators from here; tests swap them via app.dependency_overrides

async def get_user_store(db: AsyncSession = Depends(get_db)) -> UserStore:
    return SqlUserStore(db)

def get_password_hasher() -> Callable[[str], str]:
    return get_password_hash
