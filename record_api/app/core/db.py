"""
SQLite database integration, connection pooling and migrations.

This module provides a small bounded connection pool
(``ConnectionPool``), a helper to resolve the database path from the
settings (``get_database_path``) and the migration routine run on
application start (``init_db``).  Repositories never open connections
themselves; they borrow one from the pool through the ``connection``
or ``cursor`` context managers, which release every handle on all
exit paths.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import queue
import sqlite3
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .config import Settings
from .errors import StoreUnavailableError

logger = logging.getLogger(__name__)


def get_database_path(settings: Settings) -> str:
    """Compute the path to the SQLite database file.

    If ``settings.database_url`` is an absolute path, use it directly.
    Otherwise resolve it relative to the package root.
    """
    db_url = settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # record_api/
    return str((base_dir / db_url).resolve())


class ConnectionPool:
    """A bounded pool of SQLite connections.

    Connections are created lazily up to ``size``.  When every
    connection is in use, ``acquire`` waits up to ``timeout`` seconds
    for one to be released and raises ``StoreUnavailableError``
    otherwise.  The same timeout is passed to ``sqlite3.connect`` as
    the busy timeout so that no store access blocks without bound.
    """

    def __init__(self, path: str, size: int = 5, timeout: float = 5.0) -> None:
        if size < 1:
            raise ValueError("pool size must be at least 1")
        self.path = path
        self.size = size
        self.timeout = timeout
        self._idle: "queue.LifoQueue[sqlite3.Connection]" = queue.LifoQueue(maxsize=size)
        self._created = 0
        self._lock = threading.Lock()
        self._closed = False

    @classmethod
    def from_settings(cls, settings: Settings) -> "ConnectionPool":
        path = get_database_path(settings)
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        return cls(path, size=settings.db_pool_size, timeout=settings.db_timeout)

    def _connect(self) -> sqlite3.Connection:
        try:
            # Pooled connections migrate between the server's worker threads.
            conn = sqlite3.connect(self.path, timeout=self.timeout, check_same_thread=False)
        except sqlite3.Error as exc:
            logger.error("Cannot open database %s: %s", self.path, exc)
            raise StoreUnavailableError("Database is unavailable") from exc
        try:
            # Return rows as dict-like objects keyed by column name
            conn.row_factory = sqlite3.Row
            conn.execute("PRAGMA foreign_keys = ON")
        except sqlite3.Error as exc:
            conn.close()
            logger.error("Cannot configure connection to %s: %s", self.path, exc)
            raise StoreUnavailableError("Database is unavailable") from exc
        return conn

    def acquire(self) -> sqlite3.Connection:
        """Borrow a connection, opening a new one if the pool is not full."""
        if self._closed:
            raise StoreUnavailableError("Connection pool is closed")
        try:
            return self._idle.get_nowait()
        except queue.Empty:
            pass
        with self._lock:
            can_create = self._created < self.size
            if can_create:
                self._created += 1
        if can_create:
            try:
                return self._connect()
            except StoreUnavailableError:
                with self._lock:
                    self._created -= 1
                raise
        try:
            return self._idle.get(timeout=self.timeout)
        except queue.Empty:
            logger.error("Timed out after %.1fs waiting for a database connection", self.timeout)
            raise StoreUnavailableError("Timed out waiting for a database connection") from None

    def release(self, conn: sqlite3.Connection) -> None:
        """Return a borrowed connection to the pool."""
        if self._closed:
            conn.close()
            with self._lock:
                self._created -= 1
            return
        self._idle.put_nowait(conn)

    @contextmanager
    def connection(self) -> Iterator[sqlite3.Connection]:
        """Yield a pooled connection inside a transaction.

        Commits when the block succeeds, rolls back when it raises and
        always hands the connection back to the pool.  Database failures
        in the block or in the commit (locked or unreadable database)
        surface as ``StoreUnavailableError``; constraint violations
        propagate as ``sqlite3.IntegrityError`` for the repository to
        interpret.
        """
        conn = self.acquire()
        try:
            yield conn
            conn.commit()
        except sqlite3.IntegrityError:
            self._rollback(conn)
            raise
        except sqlite3.DatabaseError as exc:
            self._rollback(conn)
            logger.error("Database operation failed: %s", exc)
            raise StoreUnavailableError("Database is unavailable") from exc
        except BaseException:
            self._rollback(conn)
            raise
        finally:
            self.release(conn)

    @staticmethod
    def _rollback(conn: sqlite3.Connection) -> None:
        # The original failure is the one worth reporting.
        try:
            conn.rollback()
        except sqlite3.Error as exc:
            logger.warning("Rollback failed: %s", exc)

    @contextmanager
    def cursor(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor on a pooled connection and close it on exit."""
        with self.connection() as conn:
            cur = conn.cursor()
            try:
                yield cur
            finally:
                cur.close()

    def close(self) -> None:
        """Close idle connections and refuse further acquisitions.

        Connections still borrowed are closed when they are released.
        """
        self._closed = True
        while True:
            try:
                conn = self._idle.get_nowait()
            except queue.Empty:
                break
            conn.close()
            with self._lock:
                self._created -= 1


MIGRATIONS: list[tuple[int, str]] = [
    (
        1,
        """
        -- Base schema (version 1)
        CREATE TABLE IF NOT EXISTS users (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            email TEXT NOT NULL UNIQUE,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );
        """,
    ),
]


def init_db(pool: ConnectionPool) -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any new migrations defined in
    ``MIGRATIONS``.  If you add a new migration, append it with an
    incremented version number.
    """
    with pool.cursor() as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) as version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                logger.info("Applied migration %s", version)
                current_version = version
