import logging
import asyncpg
from asyncpg.pool import Pool
from asyncpg import Connection
from typing import AsyncGenerator
from user_registry.core.config import settings

logger = logging.getLogger(__name__)

db_pool: Pool | None = None

async def get_pool() -> Pool:
    global db_pool
    if db_pool is None:
        await connect_db_pool()
    return db_pool

async def connect_db_pool():
    global db_pool
    if db_pool is None:
        try:
            db_pool = await asyncpg.create_pool(
                dsn=settings.asyncpg_url,
                min_size=settings.DB_POOL_MIN_SIZE,
                max_size=settings.DB_POOL_MAX_SIZE,
                timeout=settings.DB_TIMEOUT,
            )
            logger.info("AsyncPG connection pool created (%s:%s/%s)",
                        settings.DB_HOST, settings.DB_PORT, settings.DB_NAME)
        except Exception as e:
            logger.error(f"Error connecting to database: {e}")
            raise

async def close_db_pool():
    global db_pool
    if db_pool:
        await db_pool.close()
        db_pool = None
        logger.info("AsyncPG connection pool closed.")

async def get_db_connection() -> AsyncGenerator[Connection, None]:
    if db_pool is None:
        raise Exception("Database pool is not initialized.")
    async with db_pool.acquire() as connection:
        yield connection
