# app/core/database.py
from sqlalchemy.ext.asyncio import (
    create_async_engine,
    async_sessionmaker,
    AsyncSession,
    AsyncEngine,
)
from sqlalchemy.orm import declarative_base
from app.core.config import settings

Base = declarative_base()


class Database:
    def __init__(self, url: str | None = None, **engine_kwargs):
        self._engine: AsyncEngine = create_async_engine(
            url or settings.ASYNC_DATABASE_URI,
            echo=False,
            future=True,
            **engine_kwargs,
        )
        self._SessionLocal = async_sessionmaker(
            bind=self._engine, class_=AsyncSession, expire_on_commit=False
        )

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @property
    def sync_engine(self):
        # The SQLAlchemy OTel instrumentor expects a sync Engine
        return self._engine.sync_engine

    async def create_all(self) -> None:
        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def get_db(self):
        async with self._SessionLocal() as session:
            yield session


database = Database()
get_db = database.get_db
