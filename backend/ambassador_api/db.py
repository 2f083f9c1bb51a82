from __future__ import annotations
from typing import AsyncGenerator
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession, AsyncEngine
from sqlalchemy.orm import DeclarativeBase
from ambassador_api.config import settings

class Base(DeclarativeBase):
    pass

engine = create_async_engine(settings.database_url, future=True, echo=False)
SessionLocal = async_sessionmaker(engine, expire_on_commit=False)

async def get_session() -> AsyncGenerator[AsyncSession, None]:
    async with SessionLocal() as session:
        yield session

async def init_models(bind: AsyncEngine = engine) -> None:
    """Create the four collections (and the event membership table) if missing."""
    # models must be imported so their tables are registered on Base.metadata
    import ambassador_api.models.admin  # noqa: F401
    import ambassador_api.models.ambassador  # noqa: F401
    import ambassador_api.models.event  # noqa: F401
    import ambassador_api.models.submission  # noqa: F401
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
