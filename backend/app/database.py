"""Database engine and helpers.

This module configures the SQLModel/SQLAlchemy engine from
`settings.DATABASE_URL` (a local SQLite file next to the `app` package
by default) and provides the per-request session dependency used by
the HTTP controllers.
"""

from sqlmodel import SQLModel, create_engine, Session

from .config import settings


def make_engine(url: str, **kwargs):
    """Build an engine for `url`.

    SQLite connections are shared across the request worker threads, so
    the same-thread check is disabled for them.
    """
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, echo=settings.DB_ECHO, connect_args=connect_args, **kwargs)


engine = make_engine(settings.DATABASE_URL)


def create_db_and_tables(bind=None):
    """Create the `tutorials` table from SQLModel metadata if it is missing."""
    # registers the table on SQLModel.metadata
    from . import models  # noqa: F401

    SQLModel.metadata.create_all(bind or engine)


def get_session():
    """Yield a database `Session` for FastAPI dependency injection.

    The generator yields a session and ensures it is closed when the
    request scope finishes.
    """
    with Session(engine) as session:
        yield session
