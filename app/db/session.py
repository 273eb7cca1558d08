# app/db/session.py
"""Engine factory and per-request session dependency."""
from __future__ import annotations

import threading
from typing import Callable, Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import ArgumentError
from sqlalchemy.orm import Session, sessionmaker

from app.config import get_settings
from app.utils.logger import get_logger

logger = get_logger(__name__)

SessionLocal = sessionmaker(autoflush=False, expire_on_commit=False)

_engine: Engine | None = None
_engine_lock = threading.Lock()


def _describe(url: str | None) -> str:
    """Loggable form of a connection string (password masked)."""
    if url is None:
        return "<unset>"
    if url == "":
        return "<empty>"
    try:
        return make_url(url).render_as_string(hide_password=True)
    except (ArgumentError, ValueError):
        return "<unparseable>"


def create_db_engine(url: str | None, *, factory: Callable[..., Engine] | None = None, **options) -> Engine:
    """
    Build the database client handle for `url`.

    The url is handed to `factory` exactly as given, including None or "".
    Parsing, connecting and every failure mode belong to SQLAlchemy.
    """
    logger.info("Creating database engine for %s", _describe(url))
    factory = factory or create_engine
    return factory(url, **options)


def get_engine() -> Engine:
    """Process-wide engine, created from DATABASE_URL on first use."""
    global _engine
    if _engine is None:
        # get_db runs in the threadpool; first requests may race here
        with _engine_lock:
            if _engine is None:
                settings = get_settings()
                engine = create_db_engine(
                    settings.DATABASE_URL,
                    echo=settings.SQL_ECHO,
                    pool_pre_ping=True,
                )
                SessionLocal.configure(bind=engine)
                _engine = engine
    return _engine


def dispose_engine() -> None:
    """Close pooled connections and forget the engine."""
    global _engine
    with _engine_lock:
        engine, _engine = _engine, None
    if engine is not None:
        engine.dispose()
        logger.info("Database engine disposed.")


def get_db() -> Iterator[Session]:
    get_engine()
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
