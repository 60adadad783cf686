"""Database reachability check."""

from __future__ import annotations

import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.pool import NullPool

from preflight.core.config import Config
from preflight.core.exceptions import DatabaseUnreachable

logger = logging.getLogger(__name__)


def normalize_database_url(database_url: str) -> str:
    """Rewrite the legacy ``postgres://`` scheme that SQLAlchemy rejects."""
    if database_url.startswith("postgres://"):
        return "postgresql://" + database_url[len("postgres://"):]
    return database_url


def _build_engine(database_url: str, connect_timeout: int):
    url = make_url(normalize_database_url(database_url))
    connect_args = {}
    if url.get_backend_name() == "postgresql":
        connect_args["connect_timeout"] = connect_timeout
    return create_engine(url, poolclass=NullPool, connect_args=connect_args)


def verify_database_connection(database_url: str, connect_timeout: int = 10) -> None:
    """Open one connection and release it immediately.

    Raises DatabaseUnreachable on any failure. The cause is only logged.
    """
    engine = None
    try:
        engine = _build_engine(database_url, connect_timeout)
        with engine.connect():
            pass
    except Exception as exc:
        logger.debug(
            "database.connection_failed",
            exc_info=True,
            extra={"event": "database.connection_failed", "error": str(exc)},
        )
        raise DatabaseUnreachable() from exc
    finally:
        if engine is not None:
            engine.dispose()

    logger.info(
        "database.connection_ok",
        extra={"event": "database.connection_ok"},
    )


def check_database(config: Config) -> str:
    """Pipeline step: confirm DATABASE_URL is reachable."""
    verify_database_connection(config.DATABASE_URL or "", config.DATABASE_CONNECT_TIMEOUT_SECONDS)
    return "PostgreSQL is reachable."
