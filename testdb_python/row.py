"""
Copyright (c) Microsoft Corporation.
Licensed under the MIT license.
This module contains the Row class, which represents a single row of data
from a cursor fetch operation.
"""
from typing import Any, Dict, Sequence


class Row:
    """
    A row of data from a cursor fetch operation. Provides both tuple-like indexing
    and attribute access to column values.

    Example:
        row = cursor.fetchone()
        print(row[0])           # Access by index
        print(row.column_name)  # Access by column name
    """

    def __init__(self, values: Sequence[Any], column_map: Dict[str, int], lowercase: bool = False) -> None:
        """
        Initialize a Row object with values and a column map.

        Args:
            values: Values for this row, in column order.
            column_map: Column name to index mapping (shared across rows of a result set).
            lowercase: Match attribute names case-insensitively.
        """
        self._values = tuple(values)
        self._column_map = column_map
        self._lowercase = lowercase

    def __getitem__(self, index: int) -> Any:
        """Allow accessing by numeric index: row[0]"""
        return self._values[index]

    def __getattr__(self, name: str) -> Any:
        """
        Allow accessing by column name as attribute: row.column_name
        """
        # Guard against lookups before __init__ finished (copy, pickle)
        if name.startswith("_"):
            raise AttributeError(name)

        if name in self._column_map:
            return self._values[self._column_map[name]]

        if self._lowercase and name.lower() in self._column_map:
            return self._values[self._column_map[name.lower()]]

        raise AttributeError(f"Row has no attribute '{name}'")

    def __eq__(self, other: Any) -> bool:
        """
        Rows compare equal to lists and tuples holding the same values.
        """
        if isinstance(other, Row):
            return self._values == other._values
        if isinstance(other, (list, tuple)):
            return list(self._values) == list(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._values)

    def __len__(self) -> int:
        """Return the number of values in the row"""
        return len(self._values)

    def __iter__(self):
        """Allow iteration through values"""
        return iter(self._values)

    def __str__(self) -> str:
        return "(" + ", ".join(repr(value) for value in self._values) + ")"

    def __repr__(self) -> str:
        return repr(self._values)
