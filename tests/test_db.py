from __future__ import annotations

import logging

import pytest

from core import db
from core.log import configure_logging, log_level

DB_ENV = (
    "DATABASE_URL",
    "DB_HOST",
    "DB_PORT",
    "DB_USER",
    "DB_PASSWORD",
    "DB_NAME",
    "DB_POOL_MAX_SIZE",
    "DB_POOL_MIN_SIZE",
    "DB_COMMAND_TIMEOUT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in DB_ENV:
        monkeypatch.delenv(name, raising=False)


def test_defaults_point_at_local_sample_database() -> None:
    assert db.connection_options() == {
        "host": "localhost",
        "port": 5432,
        "user": "root",
        "password": "root",
        "database": "sample",
    }
    assert db.pool_options() == {"min_size": 1, "max_size": 15, "command_timeout": 30}


def test_database_url_wins_and_drops_sslmode(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "postgresql://app:secret@db:5432/sample?sslmode=require&application_name=api")
    monkeypatch.setenv("DB_HOST", "ignored")

    assert db.connection_options() == {"dsn": "postgresql://app:secret@db:5432/sample?application_name=api"}


def test_discrete_settings_are_read(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DB_HOST", "db.internal")
    monkeypatch.setenv("DB_PORT", "6543")
    monkeypatch.setenv("DB_NAME", "sales")

    options = db.connection_options()

    assert options["host"] == "db.internal"
    assert options["port"] == 6543
    assert options["database"] == "sales"


def test_pool_size_is_configurable_and_min_is_clamped(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DB_POOL_MAX_SIZE", "4")
    monkeypatch.setenv("DB_POOL_MIN_SIZE", "10")

    assert db.pool_options()["max_size"] == 4
    assert db.pool_options()["min_size"] == 4


def test_invalid_numbers_fall_back_to_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DB_POOL_MAX_SIZE", "lots")
    monkeypatch.setenv("DB_PORT", "")

    assert db.pool_options()["max_size"] == db.DEFAULT_POOL_MAX_SIZE
    assert db.connection_options()["port"] == 5432


def test_get_pool_before_init_is_none() -> None:
    assert db.get_pool() is None


@pytest.mark.asyncio
async def test_init_and_close_pool(monkeypatch: pytest.MonkeyPatch) -> None:
    created: list[dict] = []

    class _Pool:
        closed = False

        async def close(self) -> None:
            self.closed = True

    async def fake_create_pool(**kwargs):
        created.append(kwargs)
        return _Pool()

    monkeypatch.setattr(db.asyncpg, "create_pool", fake_create_pool)
    monkeypatch.setenv("DB_POOL_MAX_SIZE", "7")

    await db.init_pool()
    await db.init_pool()
    opened = db.get_pool()

    assert len(created) == 1
    assert created[0]["max_size"] == 7
    assert created[0]["host"] == "localhost"

    await db.close_pool()
    await db.close_pool()

    assert opened.closed is True
    assert db.get_pool() is None


@pytest.mark.asyncio
async def test_fetch_all_returns_plain_dicts() -> None:
    class _Conn:
        async def fetch(self, sql: str, *args):
            return [(("AGENT_CODE", "A001"),), (("AGENT_CODE", "A002"),)]

    rows = await db.fetch_all(_Conn(), "SELECT AGENT_CODE FROM agents")

    assert rows == [{"AGENT_CODE": "A001"}, {"AGENT_CODE": "A002"}]


def test_log_level_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert log_level() == logging.DEBUG

    monkeypatch.setenv("LOG_LEVEL", "chatty")
    assert log_level() == logging.INFO


def test_configure_logging_installs_one_handler(monkeypatch: pytest.MonkeyPatch) -> None:
    root = logging.getLogger()
    before = list(root.handlers)
    level_before = root.level
    monkeypatch.setattr("core.log._configured", False)

    configure_logging()
    configure_logging()

    added = [h for h in root.handlers if h not in before]
    assert len(added) == 1
    root.removeHandler(added[0])
    root.setLevel(level_before)
