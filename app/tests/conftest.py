"""Pytest fixtures: a throwaway SQLite database wired into the FastAPI app."""
from __future__ import annotations

import asyncio
import os
from datetime import datetime, timedelta, timezone
from typing import Any, Awaitable, Callable
from uuid import uuid4

import pytest

# Set test environment variables before importing modules
os.environ.setdefault("POSTGRES_USER", "test")
os.environ.setdefault("POSTGRES_PASSWORD", "test")
os.environ.setdefault("POSTGRES_DB", "test")
os.environ.setdefault("POSTGRES_HOST", "localhost")
os.environ.setdefault("POSTGRES_PORT", "5432")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ANALYZE_RATE_LIMIT", "1000/minute")

from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.pool import NullPool

from app.core.database import Database, get_db
from app.main import app
from app.models.db.sector import Sector
from app.models.db.sentiment_data import SentimentData
from app.seed import seed_database


@pytest.fixture
def test_db(tmp_path) -> Database:
    """File-backed SQLite with NullPool so every event loop gets its own connection."""
    db = Database(url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", poolclass=NullPool)
    asyncio.run(seed_database(db))
    yield db
    asyncio.run(db.engine.dispose())


@pytest.fixture
def run_db(test_db: Database) -> Callable[[Callable[[AsyncSession], Awaitable[Any]]], Any]:
    """Run an async callback against a fresh session and return its result."""

    def _run(fn: Callable[[AsyncSession], Awaitable[Any]]) -> Any:
        async def go():
            async with test_db._SessionLocal() as session:
                return await fn(session)

        return asyncio.run(go())

    return _run


@pytest.fixture
def client(test_db: Database) -> TestClient:
    app.dependency_overrides[get_db] = test_db.get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def add_rows(run_db):
    """Insert ORM rows and commit."""

    def _add(*rows):
        async def go(session: AsyncSession):
            session.add_all(rows)
            await session.commit()

        run_db(go)

    return _add


@pytest.fixture
def get_row(run_db):
    def _get(model, pk):
        async def go(session: AsyncSession):
            return await session.get(model, pk)

        return run_db(go)

    return _get


def _sentiment_row(
    sector_id: str = "sector-finance",
    *,
    positive: float = 50.0,
    neutral: float = 30.0,
    negative: float = 20.0,
    overall: float = 0.1,
    days_ago: int = 0,
) -> SentimentData:
    return SentimentData(
        id=str(uuid4()),
        sector_id=sector_id,
        date=datetime.now(timezone.utc) - timedelta(days=days_ago),
        positive_percent=positive,
        neutral_percent=neutral,
        negative_percent=negative,
        overall_score=overall,
        total_articles=10,
    )


@pytest.fixture
def sentiment_row():
    """Factory for SentimentData rows dated `days_ago` days back."""
    return _sentiment_row


@pytest.fixture
def finance_sector(get_row) -> Sector:
    return get_row(Sector, "sector-finance")
