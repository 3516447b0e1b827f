"""
Copyright (c) Microsoft Corporation.
Licensed under the MIT license.
This module contains the Cursor class, which represents a database cursor.
Resource Management:
- Cursors are tracked by their parent connection.
- Closing the connection will automatically close all open cursors.
- Do not use a cursor after it is closed, or after its parent connection is closed.
"""
from typing import Any, List, Optional, Union

from testdb_python.constants import ConstantsTestDB, SQL_NO_DATA
from testdb_python.exceptions import raise_exception
from testdb_python.helpers import get_settings, log, shorten_query
from testdb_python.logging import logger
from testdb_python.row import Row


class Cursor:
    """
    Represents a database cursor, which is used to manage the context of a fetch operation.

    Attributes:
        connection: Database connection object.
        description: Sequence of 7-item sequences describing one result column.
        rowcount: Number of rows produced or affected by the last execute operation.
        arraysize: Number of rows to fetch at a time with fetchmany().

    Methods:
        close() -> None.
        execute(operation, *parameters) -> Cursor.
        executemany(operation, seq_of_parameters) -> None.
        fetchone() -> Single Row or None if no more data is available.
        fetchmany(size=None) -> List of Rows.
        fetchall() -> List of Rows.
        nextset() -> None, a stubbed query has a single result set.
        setinputsizes(sizes) -> None.
        setoutputsize(size, column=None) -> None.
    """

    def __init__(self, connection) -> None:
        """
        Initialize the cursor with a database connection.

        Args:
            connection: Database connection object.
        """
        self.connection = connection
        self.description = None
        self.rowcount = -1
        self.arraysize = 1
        self.closed = False
        self.last_executed_stmt = ""
        self._rows = None
        self._column_map = {}
        self.lowercase = get_settings().lowercase

    def _reset_cursor(self) -> None:
        """Drop the current result set."""
        if self._rows is not None:
            self._rows.close()
        self._rows = None
        self._column_map = {}
        self.description = None
        self.rowcount = -1

    def close(self) -> None:
        """
        Close the cursor now. Closing an already closed cursor is a no-op.
        """
        if self.closed:
            return
        self._reset_cursor()
        self.closed = True
        log('debug', "Cursor closed")

    def _check_closed(self):
        """
        Check if the cursor or its connection is closed and raise an exception if it is.

        Raises:
            InterfaceError: If the cursor or its connection is closed.
        """
        if self.closed:
            raise_exception(
                ConstantsTestDB.SQLSTATE_CONNECTION_NOT_OPEN.value,
                "Operation cannot be performed: the cursor is closed.",
            )
        if self.connection.closed:
            raise_exception(
                ConstantsTestDB.SQLSTATE_CONNECTION_NOT_OPEN.value,
                "Operation cannot be performed: the connection is closed.",
            )

    def _check_result_set(self):
        if self._rows is None:
            raise_exception(
                ConstantsTestDB.SQLSTATE_INVALID_CURSOR_STATE.value,
                "No result set; call execute() with a query first.",
            )

    def _initialize_description(self, columns: List[str]) -> None:
        """
        Build the 7-item description tuples and the name lookup for Row objects.
        Stubbed rows carry no type information, so only names are filled in.
        """
        if self.lowercase:
            columns = [name.lower() for name in columns]
        self.description = [
            (name, None, None, None, None, None, True) for name in columns
        ]
        self._column_map = {name: i for i, name in enumerate(columns)}

    @staticmethod
    def _flatten_parameters(parameters: tuple) -> tuple:
        # execute(sql, (1, 2)) and execute(sql, 1, 2) are the same call
        if len(parameters) == 1 and isinstance(parameters[0], (tuple, list)):
            return tuple(parameters[0])
        return parameters

    def setinputsizes(self, sizes) -> None:
        """Accepted for DB-API compatibility; parameters are never bound."""

    def setoutputsize(self, size: int, column: Optional[int] = None) -> None:
        """Accepted for DB-API compatibility."""

    def execute(self, operation: str, *parameters: Any) -> "Cursor":
        """
        Run a query against the stub driver.

        Parameters are accepted and ignored: a stub matches on query text only.

        Args:
            operation: SQL query.
            *parameters: Query parameters, either positional or one sequence.

        Returns:
            Cursor: self, so fetches can be chained.

        Raises:
            QueryNotStubbedError: If nothing answers the query.
            Exception: Whatever exception was registered for the query.
        """
        self._check_closed()
        self._reset_cursor()

        logger.set_trace_id(self.connection.trace_id)
        parameters = self._flatten_parameters(parameters)
        log('debug', "Executing query: %s", shorten_query(operation))

        self.connection._begin_if_needed()
        statement = self.connection.driver_connection.prepare(operation)
        try:
            rows = statement.query(parameters)
        finally:
            statement.close()

        self._rows = rows
        self.last_executed_stmt = operation
        self._initialize_description(rows.columns())
        return self

    def executemany(self, operation: str, seq_of_parameters: list) -> None:
        """
        Run a write once per parameter set. Writes are not modeled: each one
        succeeds and affects no rows.

        Args:
            operation: SQL command.
            seq_of_parameters: Sequence of parameter sequences.
        """
        self._check_closed()
        self._reset_cursor()
        logger.set_trace_id(self.connection.trace_id)

        self.connection._begin_if_needed()
        driver_conn = self.connection.driver_connection
        affected = 0
        for parameters in seq_of_parameters:
            affected += driver_conn.exec(operation, parameters).rows_affected()

        self.rowcount = affected
        self.last_executed_stmt = operation

    def fetchone(self) -> Union[None, Row]:
        """
        Fetch the next row of a query result set.

        Returns:
            Single Row object or None if no more data is available.
        """
        self._check_closed()
        self._check_result_set()

        buffer = [None] * len(self.description)
        if self._rows.next(buffer) == SQL_NO_DATA:
            return None
        return Row(buffer, self._column_map, self.lowercase)

    def fetchmany(self, size: int = None) -> List[Row]:
        """
        Fetch the next set of rows of a query result.

        Args:
            size: Number of rows to fetch; defaults to arraysize.

        Returns:
            List of Row objects.
        """
        self._check_closed()
        self._check_result_set()

        if size is None:
            size = self.arraysize

        rows = []
        while len(rows) < size:
            row = self.fetchone()
            if row is None:
                break
            rows.append(row)
        return rows

    def fetchall(self) -> List[Row]:
        """
        Fetch all (remaining) rows of a query result.

        Returns:
            List of Row objects.
        """
        self._check_closed()
        self._check_result_set()

        rows = []
        row = self.fetchone()
        while row is not None:
            rows.append(row)
            row = self.fetchone()
        return rows

    def nextset(self) -> None:
        """
        Skip to the next available result set. Stubbed queries produce a single
        result set, so there never is one.
        """
        self._check_closed()
        return None

    def __iter__(self):
        return self

    def __next__(self) -> Row:
        row = self.fetchone()
        if row is None:
            raise StopIteration
        return row

    def __enter__(self) -> "Cursor":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
