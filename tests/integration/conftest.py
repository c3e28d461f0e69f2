"""Fixtures for SQLite-backed integration tests."""

import pytest
import pytest_asyncio

from hof.config import DatabaseConfig
from hof.infrastructure.persistence.database import create_db_engine
from hof.infrastructure.persistence.seed import ensure_schema
from hof.infrastructure.persistence.store.report import SQLAlchemyReportStore


@pytest.fixture
def db_config(tmp_path) -> DatabaseConfig:
    return DatabaseConfig(url=f"sqlite+aiosqlite:///{tmp_path}/records.db")


@pytest_asyncio.fixture
async def engine(db_config: DatabaseConfig):
    """Per-test engine on a fresh database file."""
    engine = create_db_engine(db_config)
    await ensure_schema(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def store(engine) -> SQLAlchemyReportStore:
    return SQLAlchemyReportStore(engine)
