"""Fixtures backed by a throwaway SQLite file per test."""

import pytest

from stockorders.infrastructure.bootstrap import request_scope
from stockorders.infrastructure.persistence.schema import create_engine, ensure_schema
from stockorders.infrastructure.persistence.session import DbSession


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'test.db'}"


@pytest.fixture
async def engine(database_url):
    db_engine = create_engine(database_url)
    await ensure_schema(db_engine)
    yield db_engine
    await db_engine.dispose()


@pytest.fixture
async def session(engine):
    db_session = await DbSession(engine).open()
    yield db_session
    await db_session.close()


@pytest.fixture
async def services(engine):
    async with request_scope(engine) as scoped:
        yield scoped
