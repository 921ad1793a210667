import logging
import asyncpg
from asyncpg.pool import Pool
from asyncpg import Connection
from typing import AsyncGenerator
from app.core.config import settings

logger = logging.getLogger(__name__)

db_pool: Pool | None = None

async def connect_db_pool():
    global db_pool
    if db_pool is None:
        try:
            db_pool = await asyncpg.create_pool(
                dsn=settings.asyncpg_url,
                min_size=5,
                max_size=20,
                timeout=30,
            )
            logger.info("AsyncPG connection pool created.")
        except Exception:
            logger.exception("Error connecting to database")
            raise

async def close_db_pool():
    global db_pool
    if db_pool:
        await db_pool.close()
        db_pool = None
        logger.info("AsyncPG connection pool closed.")

async def get_db_connection() -> AsyncGenerator[Connection, None]:
    if db_pool is None:
        raise RuntimeError("Database pool is not initialized.")
    async with db_pool.acquire() as connection:
        yield connection
