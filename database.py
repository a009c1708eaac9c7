"""
Database configuration and session management
Uses SQLite through aiosqlite by default and PostgreSQL through asyncpg
"""

import os
from collections.abc import AsyncGenerator

from sqlalchemy import event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from shared.utils import config, setup_logging

logger = setup_logging("database")

DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///./slidesmith.db"


def build_database_url() -> str:
    """
    Build an async database URL from DATABASE_URL or the individual DB_* variables.
    Falls back to a local SQLite file when nothing is configured.
    """
    database_url = config.get("database_url")
    if database_url:
        if database_url.startswith("postgres://"):
            database_url = database_url.replace("postgres://", "postgresql://", 1)
        if database_url.startswith("postgresql://"):
            database_url = database_url.replace("postgresql://", "postgresql+asyncpg://", 1)
        elif database_url.startswith("sqlite:///"):
            database_url = database_url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
        return database_url

    db_host = os.getenv("DB_HOST")
    if not db_host:
        return DEFAULT_DATABASE_URL

    db_port = os.getenv("DB_PORT", "5432")
    db_user = os.getenv("DB_USER", "postgres")
    db_password = os.getenv("DB_PASSWORD", "postgres")
    db_name = os.getenv("DB_NAME", "slidesmith")

    logger.info(f"Built database URL from components: postgresql+asyncpg://{db_user}:***@{db_host}:{db_port}/{db_name}")
    return f"postgresql+asyncpg://{db_user}:{db_password}@{db_host}:{db_port}/{db_name}"


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_database_engine(database_url: str | None = None, **engine_kwargs) -> AsyncEngine:
    """Create the async SQLAlchemy engine with appropriate configuration"""
    database_url = database_url or build_database_url()
    echo = config.get("database_echo", False)

    if database_url.startswith("sqlite"):
        engine = create_async_engine(database_url, echo=echo, **engine_kwargs)
        # SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        logger.info("Using SQLite database engine")
    else:
        engine = create_async_engine(
            database_url,
            echo=echo,
            pool_pre_ping=True,
            pool_recycle=3600,
            pool_size=10,
            max_overflow=20,
            **engine_kwargs,
        )
        logger.info("Using PostgreSQL database engine with connection pooling")
    return engine


def create_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=bind, expire_on_commit=False, autoflush=False)


engine = create_database_engine()
AsyncSessionLocal = create_session_factory(engine)
Base = declarative_base()


async def get_async_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency for FastAPI to get an async database session"""
    async with AsyncSessionLocal() as session:
        yield session


async def init_database(bind: AsyncEngine | None = None) -> None:
    """Create all tables that do not exist yet"""
    # Importing the models registers their tables on Base.metadata
    import models.database  # noqa: F401

    target = bind or engine
    try:
        async with target.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables initialized successfully")
    except SQLAlchemyError as e:
        logger.error(f"Failed to initialize database tables: {e}")
        raise
