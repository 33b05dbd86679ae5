import os
import asyncpg
from dotenv import load_dotenv
from typing import Optional
from contextlib import asynccontextmanager

load_dotenv()

### CHIRPY ###

# Async database connection pool for users and chirps
_connection_pool: Optional[asyncpg.Pool] = None


async def init_db_pool(dsn: Optional[str] = None):
    """Initialize the async database connection pool"""
    global _connection_pool
    if _connection_pool is None:
        _connection_pool = await asyncpg.create_pool(
            dsn=dsn or os.getenv("DB_URL"),
            min_size=1,
            max_size=10,
            statement_cache_size=0,  # Disable prepared statements for pgbouncer compatibility
            command_timeout=30,
            server_settings={"application_name": "chirpy"},
        )
    return _connection_pool


async def close_db_pool():
    """Close the async database connection pool"""
    global _connection_pool
    if _connection_pool:
        await _connection_pool.close()
        _connection_pool = None


async def get_db_pool() -> asyncpg.Pool:
    """Get the async database connection pool"""
    if _connection_pool is None:
        await init_db_pool()
    return _connection_pool


@asynccontextmanager
async def get_db_connection():
    """Get an async database connection from the pool"""
    pool = await get_db_pool()
    async with pool.acquire() as connection:
        yield connection


@asynccontextmanager
async def get_db_transaction():
    """Get an async database transaction"""
    pool = await get_db_pool()
    async with pool.acquire() as connection:
        async with connection.transaction():
            yield connection
