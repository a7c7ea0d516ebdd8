"""
Database connection and session management.

This module handles:
- Database engine creation with connection pooling
- Session factory setup
- Connection health checks
- Retry logic for database initialization
"""

import time
from typing import Generator, Dict, Any
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import QueuePool
import logging

from core.config import get_settings
from core.exceptions import DatabaseException

logger = logging.getLogger('CORE_DATABASE')

# Get settings
settings = get_settings()

# Optimized retry logic with exponential backoff
RETRY_DELAYS = [1, 2, 3, 5, 8]


def _engine_config() -> Dict[str, Any]:
    if settings.is_sqlite():
        # SQLite has no server-side pool to tune
        return {'echo': settings.db_echo, 'connect_args': {'check_same_thread': False}}
    return {
        'poolclass': QueuePool,
        'pool_size': settings.db_pool_size,
        'max_overflow': settings.db_max_overflow,
        'pool_timeout': settings.db_pool_timeout,
        'pool_recycle': settings.db_pool_recycle,
        'pool_pre_ping': settings.db_pool_pre_ping,
        'echo': settings.db_echo,
    }


def create_db_engine(database_url: str) -> Engine:
    """
    Create the engine and wait for the database to accept connections.

    Raises:
        DatabaseException: If the database is still unreachable after all retries
    """
    logger.info(f"Initializing database connection to: {make_url(database_url).render_as_string(hide_password=True)}")

    for i, delay in enumerate(RETRY_DELAYS):
        try:
            db_engine = create_engine(database_url, **_engine_config())
            # Test connection with health check
            with db_engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            logger.info(f"Database connection established successfully on attempt {i+1}")
            return db_engine
        except OperationalError as e:
            logger.error(f"Database not ready (attempt {i+1}/{len(RETRY_DELAYS)}): {e}")
            if i < len(RETRY_DELAYS) - 1:
                logger.info(f"Retrying in {delay} seconds...")
                time.sleep(delay)
            else:
                raise DatabaseException(
                    f"Could not connect to the database after {len(RETRY_DELAYS)} attempts"
                ) from e


DATABASE_URL = settings.get_database_url()
engine = create_db_engine(DATABASE_URL)

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """
    Dependency function to get database session.

    Yields:
        Session: SQLAlchemy database session

    Example:
        @app.get("/tasks")
        def list_tasks(db: Session = Depends(get_db)):
            ...
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_database_health() -> Dict[str, Any]:
    """
    Check database connection health and return status.

    Returns:
        dict: Health status with connection pool information
    """
    database = make_url(DATABASE_URL).database
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1")).fetchone()
            return {
                "status": "healthy",
                "connection_pool": engine.pool.status(),
                "database": database,
            }
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        return {
            "status": "unhealthy",
            "error": str(e),
            "database": database,
        }


def init_db(bind: Engine = None) -> None:
    """
    Create all tables. Safe to call on every startup.
    """
    from models import Base

    try:
        Base.metadata.create_all(bind=bind or engine)
        logger.info("Database tables ensured")
    except Exception as e:
        logger.error(f"Error during database initialization: {e}")
        # Re-raise to prevent app startup if critical initialization fails
        raise
