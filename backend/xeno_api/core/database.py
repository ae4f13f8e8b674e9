"""
Database configuration and session management
"""

from contextlib import contextmanager
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from typing import Generator
from fastapi import Request
import logging

from xeno_api.core.config import Settings
from xeno_api.models.base import Base

logger = logging.getLogger(__name__)


def build_engine(database_url: str, debug: bool = False) -> Engine:
    """
    Create SQLAlchemy engine with settings suited to the backend
    """
    if database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in database_url or database_url in ("sqlite://", "sqlite:///"):
            # One shared connection so every session sees the same in-memory database
            kwargs["poolclass"] = StaticPool
        engine = create_engine(database_url, echo=debug, **kwargs)

        @event.listens_for(engine, "connect")
        def set_sqlite_pragma(dbapi_connection, connection_record):
            """Enforce foreign keys on SQLite connections"""
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return engine

    return create_engine(
        database_url,
        pool_pre_ping=True,
        pool_recycle=300,
        pool_size=10,
        max_overflow=20,
        echo=debug,  # Log SQL queries in debug mode
    )


class Database:
    """
    Storage adapter: owns the engine and the session factory.
    Built once at process start from explicit settings.
    """

    def __init__(self, database_url: str, debug: bool = False):
        self.engine = build_engine(database_url, debug=debug)
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine,
            expire_on_commit=False  # Keep objects accessible after commit
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(settings.database_url, debug=settings.DEBUG)

    def session(self) -> Session:
        return self.SessionLocal()

    @contextmanager
    def session_scope(self) -> Generator[Session, None, None]:
        """
        Context manager for database sessions with commit/rollback and cleanup
        """
        db = self.SessionLocal()
        try:
            yield db
            db.commit()
        except SQLAlchemyError as e:
            logger.error(f"Database error: {e}")
            db.rollback()
            raise
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def create_all(self) -> None:
        """
        Create all database tables
        Note: In production, use migrations instead
        """
        Base.metadata.create_all(bind=self.engine)
        logger.info("Database tables created/verified successfully")

    def dispose(self) -> None:
        self.engine.dispose()


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Dependency to get a database session for the current request
    """
    database: Database = request.app.state.database
    db = database.session()
    try:
        yield db
    except Exception as e:
        logger.debug(f"Rolling back session after error: {e}")
        db.rollback()
        raise
    finally:
        db.close()
