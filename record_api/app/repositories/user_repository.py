"""
User repository backed by SQLite.

All queries use parameterized statements to avoid SQL injection.
Connections and cursors are borrowed from the ``ConnectionPool`` and
released on every exit path, including errors.  Uniqueness of the
email column is enforced by the database; a violation surfaces as
``DuplicateRecordError``.
"""

from __future__ import annotations

import logging
import sqlite3
from abc import ABC, abstractmethod
from typing import List, Optional

from ..core.db import ConnectionPool
from ..core.errors import DuplicateRecordError, RecordNotFoundError
from ..schemas.user import User, UserCreate

logger = logging.getLogger(__name__)


class UserRepository(ABC):
    """Repository interface for users."""

    @abstractmethod
    def find_by_id(self, user_id: int) -> Optional[User]: ...

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[User]: ...

    @abstractmethod
    def find_all(self) -> List[User]: ...

    @abstractmethod
    def insert(self, data: UserCreate) -> User: ...

    @abstractmethod
    def update(self, user: User) -> User: ...

    @abstractmethod
    def update_by_email(self, email: str, name: str) -> User: ...

    @abstractmethod
    def delete_by_id(self, user_id: int) -> bool: ...

    @abstractmethod
    def delete_by_email(self, email: str) -> bool: ...


class SQLiteUserRepository(UserRepository):
    """CRUD for users stored in the ``users`` table."""

    def __init__(self, pool: ConnectionPool) -> None:
        self.pool = pool

    def find_by_id(self, user_id: int) -> Optional[User]:
        with self.pool.cursor() as cursor:
            row = cursor.execute(
                "SELECT id, name, email FROM users WHERE id = ?",
                (user_id,),
            ).fetchone()
        return self._row_to_user(row) if row else None

    def find_by_email(self, email: str) -> Optional[User]:
        with self.pool.cursor() as cursor:
            row = cursor.execute(
                "SELECT id, name, email FROM users WHERE email = ?",
                (email,),
            ).fetchone()
        return self._row_to_user(row) if row else None

    def find_all(self) -> List[User]:
        with self.pool.cursor() as cursor:
            rows = cursor.execute("SELECT id, name, email FROM users ORDER BY id").fetchall()
        return [self._row_to_user(row) for row in rows]

    def insert(self, data: UserCreate) -> User:
        """Insert a new user and return it with its assigned id.

        Raises ``DuplicateRecordError`` if the email is already taken.
        """
        try:
            with self.pool.cursor() as cursor:
                cursor.execute(
                    "INSERT INTO users (name, email) VALUES (?, ?)",
                    (data.name, data.email),
                )
                user_id = cursor.lastrowid
        except sqlite3.IntegrityError as exc:
            raise DuplicateRecordError(f"User with email {data.email!r} already exists") from exc
        logger.info("Created user %s", user_id)
        return User(id=user_id, name=data.name, email=data.email)

    def update(self, user: User) -> User:
        """Replace name and email of the user with ``user.id``.

        Raises ``RecordNotFoundError`` if no such user exists and
        ``DuplicateRecordError`` if the new email belongs to another user.
        """
        try:
            with self.pool.cursor() as cursor:
                cursor.execute(
                    "UPDATE users SET name = ?, email = ?, updated_at = CURRENT_TIMESTAMP WHERE id = ?",
                    (user.name, user.email, user.id),
                )
                affected = cursor.rowcount
        except sqlite3.IntegrityError as exc:
            raise DuplicateRecordError(f"User with email {user.email!r} already exists") from exc
        if not affected:
            raise RecordNotFoundError(f"User {user.id} not found")
        logger.info("Updated user %s", user.id)
        return User(id=user.id, name=user.name, email=user.email)

    def update_by_email(self, email: str, name: str) -> User:
        """Replace the name of the user identified by ``email``."""
        with self.pool.cursor() as cursor:
            cursor.execute(
                "UPDATE users SET name = ?, updated_at = CURRENT_TIMESTAMP WHERE email = ?",
                (name, email),
            )
            if not cursor.rowcount:
                raise RecordNotFoundError(f"User {email!r} not found")
            row = cursor.execute(
                "SELECT id, name, email FROM users WHERE email = ?",
                (email,),
            ).fetchone()
        logger.info("Updated user %s", row["id"])
        return self._row_to_user(row)

    def delete_by_id(self, user_id: int) -> bool:
        """Delete a user by id.  Returns ``False`` if nothing was deleted."""
        with self.pool.cursor() as cursor:
            cursor.execute("DELETE FROM users WHERE id = ?", (user_id,))
            affected = cursor.rowcount
        if affected:
            logger.info("Deleted user %s", user_id)
        return affected > 0

    def delete_by_email(self, email: str) -> bool:
        """Delete a user by email.  Returns ``False`` if nothing was deleted."""
        with self.pool.cursor() as cursor:
            cursor.execute("DELETE FROM users WHERE email = ?", (email,))
            affected = cursor.rowcount
        if affected:
            logger.info("Deleted user with email %s", email)
        return affected > 0

    @staticmethod
    def _row_to_user(row: sqlite3.Row) -> User:
        return User(id=row["id"], name=row["name"], email=row["email"])
