"""
Copyright (c) Microsoft Corporation.
Licensed under the MIT license.
This module contains the low-level stub driver objects: Driver, Conn, Statement,
Transaction and ExecResult.

A Conn answers prepared queries from its stub registry, or from a query function
chosen when the Conn is built. Writes and transactions always succeed and are
not recorded.
"""
from typing import Any, Callable, Optional, Sequence

from testdb_python.exceptions import QueryNotStubbedError
from testdb_python.helpers import log, shorten_query
from testdb_python.rows import Rows
from testdb_python.stubs import StubbedOutcome, StubRegistry

QueryFunc = Callable[[str], Rows]


class ExecResult:
    """Result of a write. Writes are not modeled, so nothing was affected."""

    def last_insert_id(self) -> int:
        return 0

    def rows_affected(self) -> int:
        return 0


class Transaction:
    """A transaction that always commits and rolls back cleanly."""

    def commit(self) -> None:
        log('debug', "Transaction committed")

    def rollback(self) -> None:
        log('debug', "Transaction rolled back")


class Statement:
    """
    A prepared statement wrapping the outcome its query matched.
    """

    def __init__(self, outcome: StubbedOutcome) -> None:
        self._outcome = outcome

    def num_input(self) -> int:
        """
        Number of placeholders. -1 means unknown, so callers do not check the
        argument count; arguments are never matched anyway.
        """
        return -1

    def query(self, args: Optional[Sequence[Any]] = None) -> Rows:
        """
        Return the stubbed rows, ignoring args.

        Raises:
            The exact exception object registered for this query, if any.
        """
        if self._outcome.is_error:
            raise self._outcome.error
        return self._outcome.rows

    def exec(self, args: Optional[Sequence[Any]] = None) -> ExecResult:
        return ExecResult()

    def close(self) -> None:
        pass


class Conn:
    """
    A stub driver connection.

    Args:
        query_func: Optional callable taking the raw query text and returning Rows
            (or raising). When given it answers every prepare() and the stub
            registry is never consulted. Returning None means the query is
            not stubbed.
    """

    def __init__(self, query_func: Optional[QueryFunc] = None) -> None:
        self._query_func = query_func
        self._stubs = StubRegistry()

    @property
    def stubs(self) -> StubRegistry:
        return self._stubs

    def register_result(self, query: str, rows: Rows) -> None:
        """Answer query with rows, replacing any earlier stub for it."""
        self._stubs.register_result(query, rows)

    def register_error(self, query: str, error: BaseException) -> None:
        """Answer query by raising error, replacing any earlier stub for it."""
        self._stubs.register_error(query, error)

    def prepare(self, query: str) -> Statement:
        """
        Match query and wrap its outcome in a Statement.

        Raises:
            QueryNotStubbedError: If nothing was registered for query, or the
                query function returned None for it.
        """
        if self._query_func is not None:
            log('debug', "Query function answering: %s", shorten_query(query))
            try:
                rows = self._query_func(query)
            except Exception as e:
                return Statement(StubbedOutcome.failure(e))
            if rows is None:
                raise QueryNotStubbedError(query)
            return Statement(StubbedOutcome.result(rows))

        outcome = self._stubs.lookup(query)
        if outcome is None:
            raise QueryNotStubbedError(query)
        return Statement(outcome)

    def exec(self, query: str, args: Optional[Sequence[Any]] = None) -> ExecResult:
        log('debug', "Ignoring write: %s", shorten_query(query))
        return ExecResult()

    def begin(self) -> Transaction:
        log('debug', "Transaction started")
        return Transaction()

    def close(self) -> None:
        """Nothing to release; the stub registry outlives close() so a shared Conn can be reopened."""
        log('debug', "Stub connection closed")


class Driver:
    """
    Factory handing out stub connections.

    Two modes, chosen at construction:
        - open_func: called for every open(dsn) and fully replaces connection construction.
        - shared connection: the given Conn, or one created on the first open(),
          is returned by every open().

    Raises:
        ValueError: If both open_func and connection are given.
    """

    def __init__(
        self,
        open_func: Optional[Callable[[str], Conn]] = None,
        connection: Optional[Conn] = None,
    ) -> None:
        if open_func is not None and connection is not None:
            raise ValueError("open_func and connection are mutually exclusive")
        self._open_func = open_func
        self._conn = connection

    @property
    def connection(self) -> Optional[Conn]:
        """The shared connection, or None until the first open()."""
        return self._conn

    def open(self, dsn: str = "") -> Conn:
        log('debug', "Opening stub connection for DSN: %s", dsn)
        if self._open_func is not None:
            return self._open_func(dsn)

        if self._conn is None:
            self._conn = Conn()
        return self._conn
