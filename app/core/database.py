import structlog
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from app.core.config import settings

logger = structlog.get_logger(__name__)

engine = create_async_engine(settings.database_url, pool_pre_ping=True, echo=settings.debug)

AsyncSessionLocal = async_sessionmaker(engine, class_=AsyncSession, autoflush=False, expire_on_commit=False)

Base = declarative_base()


async def get_db():
    """Database session dependency"""
    async with AsyncSessionLocal() as db:
        yield db


async def create_tables():
    """Create all database tables"""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("tables_created")


async def drop_tables():
    """Drop all database tables"""
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
    except (IntegrityError, OperationalError) as e:
        logger.warning("drop_tables_retry_with_reflect", error=str(e))
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.reflect)
            await conn.run_sync(Base.metadata.drop_all)

    logger.info("tables_dropped")
