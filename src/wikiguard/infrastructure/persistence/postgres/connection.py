"""PostgreSQL async connection pool."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from psycopg_pool import AsyncConnectionPool

logger = logging.getLogger(__name__)


def create_pool(conninfo: str, min_size: int = 2, max_size: int = 10) -> AsyncConnectionPool:
    """Create an unopened pool; see ``pool_opened``."""
    return AsyncConnectionPool(
        conninfo=conninfo,
        min_size=min_size,
        max_size=max_size,
        name="wikiguard",
        open=False,
    )


@asynccontextmanager
async def pool_opened(pool: AsyncConnectionPool) -> AsyncIterator[AsyncConnectionPool]:
    """Keep pool open for the duration of the block."""
    await pool.open(wait=True)
    logger.info("Database pool opened (min=%d, max=%d)", pool.min_size, pool.max_size)
    try:
        yield pool
    finally:
        await pool.close()
        logger.info("Database pool closed")
