import logging
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from registration_api.core.config import settings

logger = logging.getLogger(__name__)

Base = declarative_base()

def _connect_args(database_url: str) -> dict:
    # aiosqlite hands the connection between threads
    if database_url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}

engine = create_async_engine(
    settings.DATABASE_URL,
    connect_args=_connect_args(settings.DATABASE_URL),
    echo=settings.DATABASE_ECHO,
    pool_pre_ping=True,
)
session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

async def create_tables() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

async def get_db():
    """One session per request, rolled back if the request fails mid-transaction."""
    async with session_factory() as session:
        try:
            yield session
        except Exception:
            logger.warning("Rolling back database session after error")
            await session.rollback()
            raise
