"""Unit tests for the engine factory."""

import pytest
from sqlalchemy import text

from ormassert.adapters.db.engine import is_memory_sqlite, is_sqlite, make_engine


@pytest.mark.parametrize(
    "url,expected",
    [
        ("sqlite://", True),
        ("sqlite+pysqlite:///:memory:", True),
        ("sqlite:///tmp/x.db", True),
        ("postgresql+psycopg://u@h/db", False),
    ],
)
def test_is_sqlite(url, expected):
    """SQLite URLs are recognised with or without a driver."""
    assert is_sqlite(url) is expected


@pytest.mark.parametrize(
    "url,expected",
    [
        ("sqlite://", True),
        ("sqlite+pysqlite:///:memory:", True),
        ("sqlite:///tmp/x.db", False),
        ("postgresql+psycopg://u@h/db", False),
    ],
)
def test_is_memory_sqlite(url, expected):
    """Only database-less or :memory: SQLite URLs are in-memory."""
    assert is_memory_sqlite(url) is expected


def test_sqlite_foreign_keys_enabled():
    """Connections have foreign key enforcement switched on."""
    engine = make_engine("sqlite+pysqlite:///:memory:")
    try:
        with engine.connect() as conn:
            assert conn.execute(text("PRAGMA foreign_keys")).scalar() == 1
    finally:
        engine.dispose()


def test_memory_sqlite_shares_one_connection():
    """Tables created on one connection are visible from the next."""
    engine = make_engine("sqlite://")
    try:
        with engine.begin() as conn:
            conn.execute(text("CREATE TABLE t (x INTEGER)"))
        with engine.connect() as conn:
            assert conn.execute(text("SELECT count(*) FROM t")).scalar() == 0
    finally:
        engine.dispose()
