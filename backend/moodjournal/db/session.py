"""
Database session management.
"""
from functools import lru_cache
from fastapi import Depends
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from moodjournal.core.config import Settings, get_settings
from moodjournal.db.base import Base


@lru_cache
def _engine_for(database_url: str, echo: bool) -> Engine:
    connect_args = {}
    if database_url.startswith("sqlite"):
        # Sync handlers run on FastAPI's thread pool
        connect_args["check_same_thread"] = False
    return create_engine(
        database_url,
        echo=echo,
        pool_pre_ping=True,
        connect_args=connect_args
    )


@lru_cache
def _session_factory_for(database_url: str, echo: bool) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=_engine_for(database_url, echo))


def get_engine(settings: Settings) -> Engine:
    """Engine for the configured database URL, created once per URL."""
    return _engine_for(settings.DATABASE_URL, settings.DB_ECHO)


def get_db(settings: Settings = Depends(get_settings)) -> Session:
    """Dependency for getting database session."""
    db = _session_factory_for(settings.DATABASE_URL, settings.DB_ECHO)()
    try:
        yield db
    finally:
        db.close()


def init_db(settings: Settings = None):
    """Initialize database tables."""
    # Import models so they register with Base.metadata
    import moodjournal.models  # noqa: F401
    Base.metadata.create_all(bind=get_engine(settings or get_settings()))
