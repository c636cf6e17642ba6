"""
Database session management.

The engine is process-wide: it is created on first use, shared by every
request through ``get_db`` and disposed once at shutdown.
"""
import logging
from typing import Iterator, Optional
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from app.core.config import settings
from app.db.base import Base

logger = logging.getLogger(__name__)

_engine: Optional[Engine] = None
SessionLocal = sessionmaker(autocommit=False, autoflush=False)


def get_engine() -> Engine:
    """Return the process-wide engine, creating it on first call."""
    global _engine
    if _engine is None:
        connect_args = {}
        if settings.DATABASE_URL.startswith("sqlite"):
            connect_args["check_same_thread"] = False
        _engine = create_engine(
            settings.DATABASE_URL,
            echo=settings.DB_ECHO,
            pool_pre_ping=True,
            pool_recycle=3600,
            connect_args=connect_args,
        )
        SessionLocal.configure(bind=_engine)
        logger.info("Database engine created for %s", _engine.url.render_as_string(hide_password=True))
    return _engine


def dispose_engine() -> None:
    """Release pooled connections at process shutdown."""
    global _engine
    if _engine is not None:
        _engine.dispose()
        _engine = None


def get_db() -> Iterator[Session]:
    """Dependency for getting database session."""
    get_engine()
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """Initialize database tables."""
    import app.models  # noqa: F401  registers the mappers

    Base.metadata.create_all(bind=get_engine())
