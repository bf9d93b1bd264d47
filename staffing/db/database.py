"""
Database connection and session utilities.
"""

import logging
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from staffing.config import DATABASE_URL, DB_ECHO

logger = logging.getLogger(__name__)

engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False} if "sqlite" in DATABASE_URL else {},
    echo=DB_ECHO  # Set DB_ECHO=true for SQL logging
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind=None):
    """Create all tables."""
    from staffing.db.models import Base
    Base.metadata.create_all(bind=bind or engine)
    logger.info(f"Database initialized at: {DATABASE_URL if bind is None else bind.url}")


def get_session() -> Session:
    """Get a new database session."""
    return SessionLocal()

