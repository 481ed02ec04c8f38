# mentorhub/database.py - Database Configuration
import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import declarative_base, sessionmaker

from mentorhub.config import settings

logger = logging.getLogger(__name__)

_engine = None


def _create_engine(url: str):
    if str(url).startswith("sqlite"):
        return create_engine(url, connect_args={"check_same_thread": False})
    return create_engine(url, pool_pre_ping=True)


def get_engine():
    """Return the process-wide engine, creating it on first use."""
    global _engine
    if _engine is None:
        _engine = _create_engine(settings.DATABASE_URL)
        logger.info(
            "Database engine created for %s",
            make_url(settings.DATABASE_URL).render_as_string(hide_password=True),
        )
    return _engine


# Session maker (bound per session to the lazily created engine)
SessionLocal = sessionmaker(autocommit=False, autoflush=False)

# Base class for models
Base = declarative_base()


def init_db() -> None:
    # Import models so every table is registered on Base.metadata
    from mentorhub import models  # noqa: F401

    Base.metadata.create_all(bind=get_engine())


# Dependency to get database session
def get_db():
    db = SessionLocal(bind=get_engine())
    try:
        yield db
    finally:
        db.close()
