"""
Throwaway SQLite sessions for probing query syntax.

Every probe gets its own empty in-memory database; nothing is pooled or
shared between calls.
"""

from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Connection
from sqlalchemy.exc import DBAPIError
from sqlalchemy.pool import NullPool

from sqlite_validator.logger_config import get_logger

logger = get_logger("engine")

IN_MEMORY_URL = "sqlite://"


@contextmanager
def probe_database() -> Iterator[Connection]:
    """Open an empty in-memory database; always disposed on exit."""
    engine = create_engine(IN_MEMORY_URL, poolclass=NullPool)
    try:
        with engine.connect() as conn:
            yield conn
    finally:
        engine.dispose()


def run_probe(probe: str) -> Optional[str]:
    """Execute ``probe`` against a fresh database.

    Returns:
        The engine's error text verbatim (or the driver's, for text it cannot
        encode), or None when it ran cleanly.
    """
    with probe_database() as conn:
        try:
            conn.exec_driver_sql(probe)
        except DBAPIError as exc:
            error = str(exc.orig)
            logger.debug("Engine rejected %r: %s", probe, error)
            return error
        except UnicodeEncodeError as exc:
            # Lone surrogates never reach the engine
            error = str(exc)
            logger.debug("Driver could not encode %r: %s", probe, error)
            return error
    return None
