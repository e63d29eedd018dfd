"""SQLAlchemy engine, session factory and declarative base."""

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from learnledger.core.config import get_settings

settings = get_settings()

# SQLite connections are handed between threads by the FastAPI threadpool
connect_args = {"check_same_thread": False} if settings.database_url.startswith("sqlite") else {}

engine = create_engine(settings.database_url, echo=settings.sql_echo, connect_args=connect_args)
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)

Base = declarative_base()


def get_db():
    """FastAPI dependency yielding a request-scoped session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None) -> None:
    """Create all ledger tables if they do not already exist.

    Safe to call multiple times. Does not drop or migrate existing tables.
    """
    # Import models so Base.metadata is complete
    import learnledger.models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
