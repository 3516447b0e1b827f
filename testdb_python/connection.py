"""
Copyright (c) Microsoft Corporation.
Licensed under the MIT license.
This module defines the Connection class, the DB-API 2.0 facade over a stub
driver connection. The class provides methods to create cursors, commit
transactions, roll back transactions, and close the connection.
Resource Management:
- All cursors created from this connection are tracked internally.
- When close() is called on the connection, all open cursors are automatically closed.
- Do not use any cursor after the connection is closed; doing so will raise an exception.
"""
import weakref
from typing import Any, Optional

from testdb_python.constants import ConstantsTestDB
from testdb_python.cursor import Cursor
from testdb_python.driver import Conn, Transaction
from testdb_python.exceptions import raise_exception
from testdb_python.helpers import log
from testdb_python.logging import logger


class Connection:
    """
    A DB-API 2.0 connection backed by a stub driver Conn.

    When autocommit is off, the first statement after connect, commit() or
    rollback() begins a driver transaction; commit() and rollback() finish it.

    Methods:
        cursor() -> Cursor:
        execute(sql, *args) -> Cursor:
        commit() -> None:
        rollback() -> None:
        close() -> None:
    """

    def __init__(self, driver_conn: Conn, autocommit: bool = False) -> None:
        """
        Args:
            driver_conn (Conn): The stub driver connection answering queries.
            autocommit (bool): If True, no driver transaction is ever started.
        """
        self._conn = driver_conn
        self._autocommit = autocommit
        self._transaction: Optional[Transaction] = None
        self._closed = False
        # Cursors are dropped from the set once garbage collected
        self._cursors = weakref.WeakSet()
        self._trace_id = logger.generate_trace_id("CONN")
        logger.set_trace_id(self._trace_id)
        log('debug', "Connection %s opened (autocommit=%s)", self._trace_id, autocommit)

    @property
    def driver_connection(self) -> Conn:
        """The stub driver Conn, used to register stubs for this connection."""
        return self._conn

    @property
    def trace_id(self) -> str:
        """Trace id stamped on log lines for work done through this connection."""
        return self._trace_id

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def autocommit(self) -> bool:
        """
        Return the current autocommit mode of the connection.
        """
        return self._autocommit

    @autocommit.setter
    def autocommit(self, value: bool) -> None:
        self.setautocommit(value)

    def setautocommit(self, value: bool = False) -> None:
        """
        Set the autocommit mode of the connection. Turning it on commits an
        open transaction first.
        """
        self._check_closed()
        if value and self._transaction is not None:
            self.commit()
        self._autocommit = value
        log('debug', "Autocommit mode set to %s.", value)

    def _check_closed(self) -> None:
        if self._closed:
            raise_exception(
                ConstantsTestDB.SQLSTATE_CONNECTION_NOT_OPEN.value,
                "Operation cannot be performed: the connection is closed.",
            )

    def _begin_if_needed(self) -> None:
        if not self._autocommit and self._transaction is None:
            self._transaction = self._conn.begin()

    @property
    def in_transaction(self) -> bool:
        return self._transaction is not None

    def cursor(self) -> Cursor:
        """
        Return a new Cursor object using the connection.

        Raises:
            InterfaceError: If the connection is closed.
        """
        self._check_closed()

        cursor = Cursor(self)
        self._cursors.add(cursor)
        return cursor

    def execute(self, sql: str, *args: Any) -> Cursor:
        """
        Creates a new Cursor object, calls its execute method, and returns the new cursor.

        This is a convenience method that is not part of the DB API.

        Example:
            row = connection.execute("SELECT name FROM users WHERE id = ?", 123).fetchone()
        """
        cursor = self.cursor()
        cursor.execute(sql, *args)
        return cursor

    def commit(self) -> None:
        """
        Commit the current transaction.

        Raises:
            InterfaceError: If the connection is closed.
        """
        self._check_closed()
        if self._transaction is not None:
            self._transaction.commit()
            self._transaction = None
        log('debug', "Connection %s committed", self._trace_id)

    def rollback(self) -> None:
        """
        Roll back the current transaction.

        Raises:
            InterfaceError: If the connection is closed.
        """
        self._check_closed()
        if self._transaction is not None:
            self._transaction.rollback()
            self._transaction = None
        log('debug', "Connection %s rolled back", self._trace_id)

    def close(self) -> None:
        """
        Close the connection and every cursor created from it. An open
        transaction is rolled back. Closing twice is a no-op.
        """
        if self._closed:
            return

        for cursor in list(self._cursors):
            cursor.close()
        self._cursors.clear()

        if self._transaction is not None:
            self._transaction.rollback()
            self._transaction = None

        self._conn.close()
        self._closed = True
        log('debug', "Connection %s closed", self._trace_id)

    def __enter__(self) -> "Connection":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        """
        Commit on a clean exit, roll back when the block raised, then close.
        """
        if not self._closed:
            if exc_type is None:
                self.commit()
            else:
                self.rollback()
            self.close()
