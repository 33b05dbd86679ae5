#!/usr/bin/env python3
"""
Chirpy queries - database access for users and chirps

ChirpyQueries talks to PostgreSQL through the shared asyncpg pool.
MemoryQueries keeps the same interface in process memory and is used when
no DB_URL is configured.
"""

import logging
import threading
import uuid
from datetime import datetime, timezone
from typing import Dict, Any

from .database import get_db_connection, get_db_transaction

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ChirpyQueries:
    """PostgreSQL-backed queries. Errors propagate to the caller."""

    @staticmethod
    async def create_user(email: str) -> Dict[str, Any]:
        """
        Insert a new user and return the stored row.

        Args:
            email: User email address

        Returns:
            Dict with id, created_at, updated_at and email
        """
        now = _utcnow()
        async with get_db_connection() as conn:
            row = await conn.fetchrow(
                """
                INSERT INTO users (id, created_at, updated_at, email)
                VALUES ($1, $2, $3, $4)
                RETURNING id, created_at, updated_at, email
                """,
                uuid.uuid4(),
                now,
                now,
                email,
            )

        logger.debug(f"Inserted user {row['id']}")
        return dict(row)

    @staticmethod
    async def create_chirp(body: str, user_id: uuid.UUID) -> Dict[str, Any]:
        """
        Insert a new chirp and return the stored row.

        Args:
            body: Already cleaned chirp text
            user_id: Owning user

        Returns:
            Dict with id, created_at, updated_at, body and user_id
        """
        now = _utcnow()
        async with get_db_connection() as conn:
            row = await conn.fetchrow(
                """
                INSERT INTO chirps (id, created_at, updated_at, body, user_id)
                VALUES ($1, $2, $3, $4, $5)
                RETURNING id, created_at, updated_at, body, user_id
                """,
                uuid.uuid4(),
                now,
                now,
                body,
                user_id,
            )

        logger.debug(f"Inserted chirp {row['id']} for user {user_id}")
        return dict(row)

    @staticmethod
    async def delete_all_users() -> int:
        """Delete every user and their chirps. Returns the number of users removed."""
        async with get_db_transaction() as tx:
            await tx.execute("DELETE FROM chirps")
            result = await tx.execute("DELETE FROM users")

        # PostgreSQL returns "DELETE N" where N is number of rows affected
        deleted = int(result.split()[-1])
        logger.info(f"Deleted {deleted} users")
        return deleted


class MemoryQueries:
    """In-process store with the same interface as ChirpyQueries."""

    def __init__(self):
        self.users: Dict[uuid.UUID, Dict[str, Any]] = {}
        self.chirps: Dict[uuid.UUID, Dict[str, Any]] = {}
        self.lock = threading.RLock()

    async def create_user(self, email: str) -> Dict[str, Any]:
        now = _utcnow()
        user = {"id": uuid.uuid4(), "created_at": now, "updated_at": now, "email": email}
        with self.lock:
            if any(u["email"] == email for u in self.users.values()):
                raise ValueError(f"User with email {email} already exists")
            self.users[user["id"]] = user
        return dict(user)

    async def create_chirp(self, body: str, user_id: uuid.UUID) -> Dict[str, Any]:
        now = _utcnow()
        chirp = {
            "id": uuid.uuid4(),
            "created_at": now,
            "updated_at": now,
            "body": body,
            "user_id": user_id,
        }
        with self.lock:
            if user_id not in self.users:
                raise LookupError(f"User {user_id} does not exist")
            self.chirps[chirp["id"]] = chirp
        return dict(chirp)

    async def delete_all_users(self) -> int:
        with self.lock:
            deleted = len(self.users)
            self.users.clear()
            self.chirps.clear()
        return deleted
