"""Database setup and session management.

One Database object per app: it owns the engine (and its pool) and hands
out sessions. SQLite by default, Postgres when DATABASE_URL says so.
"""
import logging
from contextlib import contextmanager
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import DataError, IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from ab_tester.errors import ConstraintViolationError, DatastoreError

logger = logging.getLogger(__name__)

Base = declarative_base()


def _connect_args(database_url: str, statement_timeout_ms: int) -> dict:
    """Driver specific options, mostly the per-statement deadline."""
    if database_url.startswith("sqlite"):
        # sqlite3 timeout is in seconds and only covers waiting on locks
        return {"check_same_thread": False, "timeout": statement_timeout_ms / 1000}
    if database_url.startswith("postgresql"):
        return {"options": f"-c statement_timeout={statement_timeout_ms}"}
    return {}


def enable_sqlite_foreign_keys(engine: Engine):
    """SQLite ignores FOREIGN KEY clauses unless asked per connection."""
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


class Database:
    """Long-lived datastore handle shared by every request."""

    def __init__(self, database_url: str, statement_timeout_ms: int = 5000):
        self.database_url = database_url
        self.engine = create_engine(
            database_url,
            connect_args=_connect_args(database_url, statement_timeout_ms),
            pool_pre_ping=True,
        )
        enable_sqlite_foreign_keys(self.engine)
        self.session_factory = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def new_session(self) -> Session:
        return self.session_factory()

    def init_db(self):
        """Create tables if they are missing (create_all, no migrations)."""
        # models must be imported so they register on Base.metadata
        from ab_tester import models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def drop_all(self):
        Base.metadata.drop_all(bind=self.engine)

    def health_check(self) -> bool:
        """SELECT 1 against the datastore (for /health)."""
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.error(f"DB health check failed: {e}")
            return False

    def dispose(self):
        self.engine.dispose()


def get_db(request: Request) -> Iterator[Session]:
    """Dependency for getting DB session (FastAPI Depends)."""
    db = request.app.state.database.new_session()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def translate_errors(db: Session, operation: str):
    """
    Wrap one datastore round trip.

    Rolls the session back on failure and turns SQLAlchemy errors into
    service errors: constraint problems are the caller's fault (400),
    anything else is ours (500).
    """
    try:
        yield
    except (IntegrityError, DataError) as e:
        db.rollback()
        logger.warning(f"{operation} rejected by datastore: {e.orig}")
        raise ConstraintViolationError(f"{operation} violates a datastore constraint: {e.orig}") from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"{operation} failed", exc_info=True)
        raise DatastoreError(f"{operation} failed, datastore unavailable") from e
