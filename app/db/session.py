"""
Engine and session management.

In-memory SQLite gets a StaticPool so every session sees the same database.
"""
import logging

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.base import Base

logger = logging.getLogger("app.db.session")


def _is_sqlite_memory(url: str) -> bool:
    return url.startswith("sqlite") and (":memory:" in url or url.rstrip("/").endswith("sqlite:"))


def build_engine(url: str, echo: bool = False) -> Engine:
    kwargs = {}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if _is_sqlite_memory(url):
            kwargs["poolclass"] = StaticPool
    return create_engine(url, echo=echo, **kwargs)


def build_session_factory(bind: Engine) -> sessionmaker:
    # records handed back to callers stay readable after their session closes
    return sessionmaker(bind=bind, autoflush=False, expire_on_commit=False)


def init_db(bind: Engine) -> None:
    """Create every table registered on Base if it does not exist yet."""
    # register models on the metadata
    from app.db import models  # noqa: F401

    Base.metadata.create_all(bind=bind)
    logger.info("Database schema ready (%s)", bind.url.render_as_string(hide_password=True))


def drop_db(bind: Engine) -> None:
    from app.db import models  # noqa: F401

    Base.metadata.drop_all(bind=bind)


def check_connection(bind: Engine) -> bool:
    """Return True when ``SELECT 1`` succeeds against the database."""
    try:
        with bind.connect() as conn:
            return conn.execute(text("SELECT 1")).scalar() == 1
    except SQLAlchemyError:
        logger.exception("Database connection check failed")
        return False
