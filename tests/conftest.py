import asyncio
import os
import tempfile
from pathlib import Path

import pytest

# Point the app at a throwaway SQLite file before anything from src is imported
_db_dir = tempfile.mkdtemp(prefix="tuiter-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{Path(_db_dir) / 'test.db'}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["LOG_CONFIG_FILE"] = "logging.missing.ini"

from fastapi.testclient import TestClient  # noqa: E402

import src.models  # noqa: E402,F401
from src.database import Base, engine, AsyncSessionLocal  # noqa: E402
from src.main import app  # noqa: E402


async def _reset_schema():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)


@pytest.fixture(autouse=True)
def fresh_database():
    asyncio.run(_reset_schema())
    yield


@pytest.fixture()
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def run_db():
    """Run a coroutine function against a fresh AsyncSession: run_db(lambda db: ...)"""
    def runner(fn):
        async def _go():
            async with AsyncSessionLocal() as db:
                return await fn(db)
        return asyncio.run(_go())
    return runner
