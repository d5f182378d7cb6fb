"""
Core pytest configuration for the whole test suite.

Only the database setup and logging installation live here. Domain fixtures
(repositories, seeded reference rows, record factories, the HTTP client) are
defined in tests/test_fixtures/ and imported at the bottom of this module so
every test module can use them without importing.
"""

from __future__ import annotations

# -------------------------------
# Early logging tuning
# -------------------------------
# Quiet noisy third-party loggers before anything imports them.
import logging

NOISY_LOGGERS = (
    "faker",
    "faker.factory",
    "sqlalchemy",
    "sqlalchemy.engine",
    "sqlalchemy.engine.Engine",
    "asyncio",
    "httpx",
    "aiosqlite",
)
for _name in NOISY_LOGGERS:
    logging.getLogger(_name).setLevel(logging.WARNING)

import os
from typing import AsyncGenerator

import pytest
from pytest import FixtureRequest
from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from hrms.config.settings import get_settings
from hrms.core.logging.builder import setup_logging
from hrms.database.base import Base
from hrms.database.session import Database
import hrms.models  # noqa: F401  registers every table on Base.metadata

settings = get_settings()
logger = logging.getLogger(__name__)


@pytest.fixture(scope="session", autouse=True)
def configure_logging(request: FixtureRequest):
    """
    Install the application's dictConfig once for the session, then re-attach
    pytest's capture handler (dictConfig removes it) so `caplog` keeps working.
    """
    setup_logging(settings)

    caplog_plugin = request.config.pluginmanager.getplugin("logging-plugin")
    handler = getattr(caplog_plugin, "caplog_handler", None)
    if handler is not None:
        logging.getLogger().addHandler(handler)

    yield


@pytest.fixture
def restore_logging():
    """Re-install the session logging config after a test that replaced it."""
    yield
    setup_logging(settings)


# ------------------------------------------------------------------------------------------------
# Test database URL
# ------------------------------------------------------------------------------------------------


def safe_log_db_url(db_url: str) -> str:
    return make_url(db_url).render_as_string(hide_password=True)


def get_test_database_url() -> str:
    """
    `TEST_DATABASE_URL` when set (CI runs against Postgres), otherwise an
    in-memory SQLite database.
    """
    return os.getenv("TEST_DATABASE_URL") or "sqlite+aiosqlite://"


TEST_DATABASE_URL = get_test_database_url()
logger.info("tests.database", extra={"url": safe_log_db_url(TEST_DATABASE_URL)})


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


# ------------------------------------------------------------------------------------------------
# Database fixtures
# ------------------------------------------------------------------------------------------------


@pytest.fixture()
async def async_engine() -> AsyncGenerator[AsyncEngine, None]:
    """
    A fresh schema per test.

    In-memory SQLite lives as long as its connection, so the engine holds a
    single shared connection (StaticPool). Foreign keys are switched on so
    deletes of referenced rows fail the way they do on Postgres.
    """
    if TEST_DATABASE_URL.startswith("sqlite"):
        engine = create_async_engine(
            TEST_DATABASE_URL,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    else:
        engine = create_async_engine(TEST_DATABASE_URL, pool_pre_ping=True)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture()
def database(async_engine: AsyncEngine) -> Database:
    """The application's Database object bound to the test engine."""
    return Database(engine=async_engine)


@pytest.fixture()
async def db_session(database: Database) -> AsyncGenerator[AsyncSession, None]:
    """
    A session for direct repository tests. Repositories commit their own
    writes; isolation comes from the per-test schema.
    """
    async with database.session_factory() as session:
        yield session


# Shared fixtures
from .test_fixtures.repository_fixtures import (  # noqa: E402,F401
    faker_seeded,
    branch_repository,
    module_repository,
    candidate_repository,
    employee_repository,
    contract_repository,
    appraisal_repository,
    statutory_rate_repository,
    candidate,
    employee,
    make_candidate,
    make_employee,
    sample_branch_data,
    create_branch,
    multiple_branches,
    create_module,
    create_contract,
    create_appraisal,
    create_statutory_rate,
)
from .test_fixtures.api_fixtures import app, client  # noqa: E402,F401
