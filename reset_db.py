import asyncio

import structlog

from app.core.database import create_tables, drop_tables
from testing_setup import setup_demo_environment

logger = structlog.get_logger(__name__)


async def reset_database(seed: bool = True):
    """
    Drop and recreate all tables, then seed demo data.
    :param seed: Create demo users and rooms afterwards
    """
    await drop_tables()
    await create_tables()

    if seed:
        await setup_demo_environment()

    logger.info("database_reset_complete", seeded=seed)


if __name__ == "__main__":
    asyncio.run(reset_database())
