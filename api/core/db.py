"""
Async database access helpers (raw SQL) using asyncpg.

This module owns the connection pool. FastAPI initializes it on startup and
closes it on shutdown (see `api/main.py`). Routes never reach for the pool
directly; they receive it through the `get_pool` dependency so tests can
swap in a fake.

Configuration (environment):
- DATABASE_URL wins when set.
- Otherwise DB_HOST, DB_PORT, DB_USER, DB_PASSWORD, DB_NAME.
- DB_POOL_MAX_SIZE (15), DB_POOL_MIN_SIZE (1), DB_COMMAND_TIMEOUT (30 seconds).
"""

from __future__ import annotations

import logging
import os
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg

logger = logging.getLogger(__name__)

DEFAULT_POOL_MAX_SIZE = 15
DEFAULT_POOL_MIN_SIZE = 1
DEFAULT_COMMAND_TIMEOUT_S = 30

_pool: asyncpg.Pool | None = None


def _env_str(name: str, default: str) -> str:
    return os.environ.get(name, "").strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url() -> str | None:
    url = os.environ.get("DATABASE_URL", "").strip()
    if not url:
        return None
    return _sanitize_database_url(url)


def connection_options() -> dict[str, Any]:
    """
    Connection target for asyncpg: a DSN if DATABASE_URL is set,
    discrete host/credentials otherwise.
    """
    dsn = database_url()
    if dsn is not None:
        return {"dsn": dsn}
    return {
        "host": _env_str("DB_HOST", "localhost"),
        "port": _env_int("DB_PORT", 5432),
        "user": _env_str("DB_USER", "root"),
        "password": _env_str("DB_PASSWORD", "root"),
        "database": _env_str("DB_NAME", "sample"),
    }


def pool_options() -> dict[str, Any]:
    max_size = max(1, _env_int("DB_POOL_MAX_SIZE", DEFAULT_POOL_MAX_SIZE))
    min_size = min(max(0, _env_int("DB_POOL_MIN_SIZE", DEFAULT_POOL_MIN_SIZE)), max_size)
    return {
        "min_size": min_size,
        "max_size": max_size,
        "command_timeout": _env_int("DB_COMMAND_TIMEOUT", DEFAULT_COMMAND_TIMEOUT_S),
    }


async def init_pool() -> None:
    global _pool
    if _pool is not None:
        return None
    options = pool_options()
    _pool = await asyncpg.create_pool(**connection_options(), **options)
    logger.info("db_pool_opened min_size=%s max_size=%s", options["min_size"], options["max_size"])


async def close_pool() -> None:
    global _pool
    if _pool is None:
        return None
    await _pool.close()
    _pool = None
    logger.info("db_pool_closed")


def get_pool() -> asyncpg.Pool | None:
    """
    FastAPI dependency handing the process-wide pool to a route.

    Returns None before startup; the pipeline reports that as an operation
    failure so the response still passes through the CORS middleware.
    """
    return _pool


def _record_to_dict(record: Any) -> dict[str, Any]:
    return dict(record)


async def fetch_all(conn: Any, sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query on an acquired connection and return all rows as a list of dicts.
    """
    rows = await conn.fetch(sql, *args)
    return [_record_to_dict(r) for r in rows]
