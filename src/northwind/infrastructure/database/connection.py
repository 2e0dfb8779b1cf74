"""Connection provider.

Hands out fresh SQLAlchemy connections built from a configured URL.  Pooling
is left to the engine; callers own each connection for exactly one operation
and release it through the context managers below.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import Connection, Engine, create_engine, event

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_conn, connection_record) -> None:
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class ConnectionProvider:

    def __init__(self, database_url: str, echo: bool = False) -> None:
        self._engine = create_engine(database_url, echo=echo)
        if self._engine.dialect.name == "sqlite":
            event.listen(self._engine, "connect", _enable_sqlite_foreign_keys)
        logger.debug("Connection provider ready for %s", self._engine.url)

    @property
    def engine(self) -> Engine:
        return self._engine

    def connect(self) -> Connection:
        """Return a new connection; use it as a context manager."""
        return self._engine.connect()

    @contextmanager
    def transaction(self) -> Iterator[Connection]:
        """Yield a connection inside a transaction.

        Commits when the block exits normally; rolls back and re-raises on
        any exception (including KeyboardInterrupt), and always returns the
        connection to the pool.
        """
        with self._engine.begin() as conn:
            yield conn

    def dispose(self) -> None:
        self._engine.dispose()
