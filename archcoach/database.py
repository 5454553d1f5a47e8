"""
Database connection and session management.
Provides SQLAlchemy engine, session factory, and base model class.
"""

from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from archcoach.config import get_settings
from archcoach.errors import ConfigurationError

# Base class for all ORM models
Base = declarative_base()


@lru_cache()
def get_engine() -> Engine:
    """
    Create the SQLAlchemy engine on first use.

    Raises:
        ConfigurationError: If DATABASE_URL is not set
    """
    settings = get_settings()
    if not settings.database_url:
        raise ConfigurationError("DATABASE_URL must be set when persistence is enabled")

    if settings.database_url.startswith("sqlite"):
        return create_engine(settings.database_url, connect_args={"check_same_thread": False})

    # Connection pooling for Postgres
    return create_engine(
        settings.database_url,
        pool_pre_ping=True,  # Verify connections before use
        pool_size=10,
        max_overflow=20,
    )


@lru_cache()
def get_session_factory() -> sessionmaker:
    """Session factory bound to the application engine."""
    return sessionmaker(autocommit=False, autoflush=False, bind=get_engine())


def init_db(engine: Engine = None):
    """
    Initialize database by creating all tables.
    Safe to call multiple times - only creates tables that don't exist.
    """
    # Import all models to register them with Base.metadata
    from archcoach.models import project  # noqa
    Base.metadata.create_all(bind=engine or get_engine())
