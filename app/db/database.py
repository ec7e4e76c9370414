"""
app/db/database.py

Purpose: Relational database connection setup

- Builds the SQLAlchemy engine with a small bounded connection pool
- Hands out scoped sessions (commit or rollback, always released)
- Creates the contact table if it is missing
- Health checks and proper connection lifecycle management
"""

from contextlib import contextmanager
from typing import Iterator, Optional, Union

from sqlalchemy import create_engine, text
from sqlalchemy.engine import URL, Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from app.core.config import Settings
from app.core.logging import get_logger
from app.models.submission import Base

logger = get_logger(__name__)


def build_engine(url: Union[str, URL], pool_size: int = 5, pool_timeout: int = 30) -> Engine:
    """
    Creates an engine whose pool never grows past `pool_size` connections.

    Callers beyond the limit wait up to `pool_timeout` seconds for a
    connection to come back.
    """
    url = make_url(url)
    connect_args = {}
    if url.get_backend_name() == "sqlite":
        # Pooled connections move between threadpool workers
        connect_args["check_same_thread"] = False

    return create_engine(
        url,
        pool_size=pool_size,
        max_overflow=0,
        pool_timeout=pool_timeout,
        pool_pre_ping=True,
        connect_args=connect_args,
    )


class Database:
    """
    Owns the connection pool for one application instance.

    Created at startup and passed to whatever needs database access;
    nothing reaches for a module-level client.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self._session_factory = sessionmaker(bind=engine, expire_on_commit=False)

    @classmethod
    def from_settings(cls, config: Settings) -> "Database":
        engine = build_engine(
            config.database_url,
            pool_size=config.DB_POOL_SIZE,
            pool_timeout=config.DB_POOL_TIMEOUT,
        )
        logger.info(
            f"Database engine created: {engine.url.render_as_string(hide_password=True)} "
            f"(pool_size={config.DB_POOL_SIZE})"
        )
        return cls(engine)

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Plain session for reads; the connection goes back to the pool on exit."""
        with self._session_factory() as session:
            yield session

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        """
        Session wrapped in a transaction.

        Commits when the block finishes, rolls back if it raises,
        and releases the connection either way.
        """
        with self._session_factory() as session:
            with session.begin():
                yield session

    def create_tables(self):
        """Creates missing tables. Existing tables are left untouched."""
        Base.metadata.create_all(self.engine)
        logger.info("Database tables ensured")

    def check_health(self) -> bool:
        """
        Checks if the database connection is healthy.

        Returns:
            True if a trivial query succeeds, False otherwise
        """
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.error(f"Database health check failed: {str(e)}")
            return False

    def dispose(self):
        """Closes every pooled connection. Called during application shutdown."""
        logger.info("Closing database connection pool")
        self.engine.dispose()


def connect_database(config: Settings, create_tables: bool = True) -> Database:
    """
    Builds the Database for the given settings and verifies it is reachable.

    A failed health check is logged, not raised: requests will surface
    the database error themselves.
    """
    database = Database.from_settings(config)

    if create_tables:
        try:
            database.create_tables()
        except SQLAlchemyError as e:
            logger.error(f"Could not create tables: {e}")

    if database.check_health():
        logger.info("✅ Database health check passed")
    else:
        logger.warning("⚠️ Database health check failed during startup")

    return database


def close_database(database: Optional[Database]):
    if database is not None:
        database.dispose()
