"""Shared plumbing for the SQL repositories.

Every repository call is one unit of work on its own connection.  Driver
errors are logged and re-raised as PersistenceError; the transaction has
already been rolled back by the time the caller sees it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import Connection
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from northwind.domain.exceptions import PersistenceError
from northwind.infrastructure.database.connection import ConnectionProvider

logger = logging.getLogger(__name__)


class SqlRepository:

    def __init__(self, provider: ConnectionProvider) -> None:
        self._provider = provider

    @contextmanager
    def _reading(self, action: str) -> Iterator[Connection]:
        """Connection for read-only statements; no transaction is committed."""
        try:
            with self._provider.connect() as conn:
                yield conn
        except SQLAlchemyError as exc:
            logger.error("%s failed: %s", action, exc)
            raise PersistenceError(f"{action} failed: {exc.__class__.__name__}") from exc

    @contextmanager
    def _unit_of_work(self, action: str) -> Iterator[Connection]:
        """Connection inside a transaction, committed only if the block succeeds."""
        try:
            with self._provider.transaction() as conn:
                yield conn
        except SQLAlchemyError as exc:
            logger.error("%s rolled back: %s", action, exc)
            raise PersistenceError(f"{action} failed: {exc.__class__.__name__}") from exc


def caused_by_constraint(exc: PersistenceError) -> bool:
    """True when the store rejected the statement on an integrity constraint."""
    return isinstance(exc.__cause__, IntegrityError)
