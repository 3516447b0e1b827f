"""
Copyright (c) Microsoft Corporation.
Licensed under the MIT license.
This module contains the Rows class, the row source handed back for a stubbed query.
Rows are advanced one at a time into a caller-supplied buffer, the same way a
driver fills a fetch buffer. End of data is reported with the SQL_NO_DATA return
code, never with an exception.
"""
from enum import Enum
from typing import Any, Iterable, List, MutableSequence, Sequence, Tuple

from testdb_python.constants import ConstantsTestDB, SQL_NO_DATA, SQL_SUCCESS
from testdb_python.exceptions import raise_exception
from testdb_python.helpers import log


class RowsState(Enum):
    OPEN = "open"
    EXHAUSTED = "exhausted"


class Rows:
    """
    A fixed result set with a forward-only cursor.

    Attributes:
        state: OPEN while rows may remain, EXHAUSTED once the cursor passed the last row.
        closed: True once the rows are exhausted.
        position: Number of advances made so far, including the one that hit the end.

    Methods:
        next(dest) -> SQL_SUCCESS or SQL_NO_DATA.
        columns() -> Column names given at construction.
        close() -> None.
        err() -> None.
    """

    def __init__(self, columns: Sequence[str], rows: Iterable[Sequence[Any]] = ()) -> None:
        """
        Initialize the row source.

        Args:
            columns: Column names, one per cell.
            rows: Row values; every row must have exactly len(columns) cells.

        Raises:
            DataError: If a row does not have exactly one cell per column.
        """
        self._columns: Tuple[str, ...] = tuple(columns)
        self._rows: List[Tuple[Any, ...]] = []
        for index, row in enumerate(rows):
            row = tuple(row)
            if len(row) != len(self._columns):
                raise_exception(
                    ConstantsTestDB.SQLSTATE_STRING_LENGTH_MISMATCH.value,
                    f"row {index} has {len(row)} values for {len(self._columns)} columns",
                )
            self._rows.append(row)
        self._pos = 0
        self._closed = False

    @property
    def state(self) -> RowsState:
        return RowsState.EXHAUSTED if self._closed else RowsState.OPEN

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def position(self) -> int:
        return self._pos

    def next(self, dest: MutableSequence[Any]) -> int:
        """
        Advance to the next row and copy its values into dest.

        Args:
            dest: Mutable buffer with one slot per column.

        Returns:
            SQL_SUCCESS if a row was copied, SQL_NO_DATA once the rows are exhausted.
            Every call after exhaustion returns SQL_NO_DATA again.

        Raises:
            ProgrammingError: If dest does not have one slot per column.
        """
        if len(dest) != len(self._columns):
            raise_exception(
                ConstantsTestDB.SQLSTATE_INVALID_DESCRIPTOR_INDEX.value,
                f"buffer has {len(dest)} slots for {len(self._columns)} columns",
            )

        if self._closed:
            return SQL_NO_DATA

        self._pos += 1
        if self._pos > len(self._rows):
            self._closed = True
            log('debug', "Rows exhausted after %d rows", len(self._rows))
            return SQL_NO_DATA

        for i, value in enumerate(self._rows[self._pos - 1]):
            dest[i] = value
        return SQL_SUCCESS

    def columns(self) -> List[str]:
        """Return the column names given at construction."""
        return list(self._columns)

    def close(self) -> None:
        """
        Close the row source. Nothing is held, so this only exists to satisfy
        the driver contract; it may be called any number of times.
        """

    def err(self):
        """Rows never fail mid-iteration; the only terminal signal is SQL_NO_DATA."""
        return None

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self):
        return self

    def __next__(self) -> Tuple[Any, ...]:
        buffer = [None] * len(self._columns)
        if self.next(buffer) == SQL_NO_DATA:
            raise StopIteration
        return tuple(buffer)

    def __repr__(self) -> str:
        return (
            f"Rows(columns={list(self._columns)!r}, rows={len(self._rows)}, "
            f"state={self.state.value})"
        )
