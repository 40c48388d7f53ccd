"""
Tests for the SQLite connection pool and migrations.
"""
from __future__ import annotations

import os
import sqlite3

import pytest

from record_api.app.core.config import Settings
from record_api.app.core.db import MIGRATIONS, ConnectionPool, get_database_path, init_db
from record_api.app.core.errors import StoreUnavailableError


def test_get_database_path_keeps_absolute(tmp_path):
    path = str(tmp_path / "x.db")
    assert get_database_path(Settings(database_url=path)) == path


def test_get_database_path_resolves_relative():
    path = get_database_path(Settings(database_url="relative.db"))
    assert os.path.isabs(path)
    assert path.endswith(os.path.join("record_api", "relative.db"))


def test_init_db_creates_users_table_and_records_versions(pool):
    with pool.cursor() as cursor:
        tables = {r["name"] for r in cursor.execute("SELECT name FROM sqlite_master WHERE type = 'table'")}
        versions = [r["version"] for r in cursor.execute("SELECT version FROM migrations ORDER BY version")]
    assert "users" in tables
    assert versions == [v for v, _ in MIGRATIONS]


def test_init_db_is_idempotent(pool):
    init_db(pool)
    with pool.cursor() as cursor:
        count = cursor.execute("SELECT COUNT(*) AS n FROM migrations").fetchone()["n"]
    assert count == len(MIGRATIONS)


def test_connection_is_reused_after_release(tmp_path):
    pool = ConnectionPool(str(tmp_path / "p.db"), size=1, timeout=0.1)
    first = pool.acquire()
    pool.release(first)
    second = pool.acquire()
    assert second is first
    pool.release(second)
    pool.close()


def test_acquire_times_out_when_pool_exhausted(tmp_path):
    pool = ConnectionPool(str(tmp_path / "p.db"), size=1, timeout=0.05)
    held = pool.acquire()
    with pytest.raises(StoreUnavailableError):
        pool.acquire()
    pool.release(held)
    pool.close()


def test_connection_rolls_back_and_releases_on_error(pool):
    with pytest.raises(RuntimeError):
        with pool.connection() as conn:
            conn.execute("INSERT INTO users (name, email) VALUES (?, ?)", ("Bob", "b@x.com"))
            raise RuntimeError("boom")
    with pool.cursor() as cursor:
        count = cursor.execute("SELECT COUNT(*) AS n FROM users").fetchone()["n"]
    assert count == 0
    assert pool._idle.qsize() == pool._created


def test_operational_error_becomes_store_unavailable(pool):
    with pytest.raises(StoreUnavailableError):
        with pool.cursor() as cursor:
            cursor.execute("SELECT * FROM no_such_table")


def test_integrity_error_propagates(pool):
    with pool.cursor() as cursor:
        cursor.execute("INSERT INTO users (name, email) VALUES (?, ?)", ("A", "a@x.com"))
    with pytest.raises(sqlite3.IntegrityError):
        with pool.cursor() as cursor:
            cursor.execute("INSERT INTO users (name, email) VALUES (?, ?)", ("B", "a@x.com"))


def test_closed_pool_refuses_connections(tmp_path):
    pool = ConnectionPool(str(tmp_path / "p.db"))
    pool.close()
    with pytest.raises(StoreUnavailableError):
        pool.acquire()


def test_pool_size_must_be_positive(tmp_path):
    with pytest.raises(ValueError):
        ConnectionPool(str(tmp_path / "p.db"), size=0)


def _hold_read_lock(path):
    # A reader inside an open transaction keeps a SHARED lock, so a writer
    # can insert but cannot commit until the reader finishes.
    reader = sqlite3.connect(path, isolation_level=None)
    reader.execute("BEGIN")
    reader.execute("SELECT * FROM users").fetchall()
    return reader


def test_commit_blocked_by_reader_becomes_store_unavailable(tmp_path):
    pool = ConnectionPool(str(tmp_path / "locked.db"), size=1, timeout=0.2)
    init_db(pool)
    reader = _hold_read_lock(pool.path)
    try:
        with pytest.raises(StoreUnavailableError):
            with pool.cursor() as cursor:
                cursor.execute("INSERT INTO users (name, email) VALUES (?, ?)", ("A", "a@x.com"))
    finally:
        reader.execute("ROLLBACK")
        reader.close()
    # The connection was rolled back and returned, so the pool still works.
    with pool.cursor() as cursor:
        assert cursor.execute("SELECT COUNT(*) AS n FROM users").fetchone()["n"] == 0
    pool.close()


def test_unreadable_database_becomes_store_unavailable(tmp_path):
    path = tmp_path / "garbage.db"
    path.write_bytes(b"this is not an sqlite database" * 100)
    pool = ConnectionPool(str(path), size=1, timeout=0.1)
    with pytest.raises(StoreUnavailableError):
        with pool.cursor() as cursor:
            cursor.execute("SELECT * FROM users")
    pool.close()


def test_failed_connection_setup_does_not_shrink_pool(tmp_path, monkeypatch):
    class BrokenConnection:
        row_factory = None
        closed = False

        def execute(self, sql, *args):
            raise sqlite3.OperationalError("disk I/O error")

        def close(self):
            self.closed = True

    broken = BrokenConnection()
    monkeypatch.setattr(sqlite3, "connect", lambda *args, **kwargs: broken)
    pool = ConnectionPool(str(tmp_path / "p.db"), size=1, timeout=0.05)
    with pytest.raises(StoreUnavailableError):
        pool.acquire()
    assert broken.closed
    assert pool._created == 0


def test_users_schema_only_indexes_unique_email(pool):
    with pool.cursor() as cursor:
        rows = cursor.execute(
            "SELECT name, sql FROM sqlite_master WHERE type = 'index' AND tbl_name = 'users'"
        ).fetchall()
    # Only the automatic index backing UNIQUE(email); lookups are by id or email.
    assert len(rows) == 1
    assert rows[0]["sql"] is None
