"""Database engine and session management."""

from collections.abc import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from jobboard.core.config import settings


def build_engine(database_url: str):
    """Create an engine with a bounded wait on locked or busy connections."""
    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            connect_args={
                "check_same_thread": False,
                "timeout": settings.DATABASE_TIMEOUT_SECONDS,
            },
        )

    return create_engine(
        database_url,
        pool_pre_ping=True,  # Test connections before use
        pool_timeout=settings.DATABASE_TIMEOUT_SECONDS,
    )


engine = build_engine(settings.DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """FastAPI dependency for database sessions."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
