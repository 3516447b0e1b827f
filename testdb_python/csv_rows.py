"""
Copyright (c) Microsoft Corporation.
Licensed under the MIT license.
This module builds Rows from literal CSV text, so stub results can be written
as small tables inside a test.
"""
import csv
import datetime
import io
import re
import threading
from typing import Any, List, Optional, Sequence

from testdb_python.constants import ConstantsTestDB
from testdb_python.exceptions import raise_exception
from testdb_python.helpers import get_settings, log
from testdb_python.rows import Rows

TIMESTAMP_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}(\s\d{2}:\d{2}:\d{2})?$")
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
DATE_FORMAT = "%Y-%m-%d"

# Large enough for any cell a test writes, and valid as a C long on every platform
FIELD_SIZE_LIMIT = 2**31 - 1

# csv.field_size_limit is process-wide
_field_size_lock = threading.Lock()


class _MalformedRecord(ValueError):
    pass


def _parse_timestamp(value: str) -> datetime.datetime:
    """
    Parse a cell already known to match TIMESTAMP_PATTERN.
    Date-only cells become midnight of that day.
    """
    if len(value) == 10:
        return datetime.datetime.strptime(value, DATE_FORMAT)
    # The pattern allows any whitespace between date and time
    return datetime.datetime.strptime(value[:10] + " " + value[11:], TIMESTAMP_FORMAT)


def _convert_cell(value: str) -> Any:
    value = value.strip()
    if TIMESTAMP_PATTERN.match(value):
        try:
            return _parse_timestamp(value)
        except ValueError as e:
            raise _MalformedRecord(f"invalid timestamp {value!r}: {e}") from e
    return value


def _convert_record(record: List[str], width: int) -> List[Any]:
    if len(record) != width:
        raise _MalformedRecord(f"{len(record)} values for {width} columns")
    return [_convert_cell(cell) for cell in record]


def rows_from_csv(columns: Sequence[str], text: str, strict: Optional[bool] = None) -> Rows:
    """
    Build a Rows object from comma-separated text.

    The whole text is stripped, then parsed with standard CSV quoting rules.
    Empty and whitespace-only lines are skipped, while a line such as `,` or
    `""` is a record of empty cells. Each cell is stripped; cells
    shaped like YYYY-MM-DD or YYYY-MM-DD HH:MM:SS become datetime.datetime
    values, every other cell stays a string.

    A record is malformed when the csv module rejects it, when its width differs
    from len(columns), or when a date-shaped cell is not a real date. In lenient
    mode row production stops at the first malformed record and the rows read so
    far are kept. In strict mode a DataError is raised instead.

    Args:
        columns: Column names for the resulting rows.
        text: CSV text, one record per line.
        strict: Override Settings.strict_csv for this call.

    Returns:
        Rows: A fresh row source positioned before the first row.

    Raises:
        DataError: In strict mode, on the first malformed record.

    Example:
        rows = rows_from_csv(["name", "created_at"], '''
            alice, 2023-01-02 03:04:05
            bob, 2023-01-03
        ''')
    """
    if strict is None:
        strict = get_settings().strict_csv

    with _field_size_lock:
        previous_limit = csv.field_size_limit(FIELD_SIZE_LIMIT)
        try:
            converted = _convert_text(text, len(columns), strict)
        finally:
            csv.field_size_limit(previous_limit)
    return Rows(columns, converted)


def _convert_text(text: str, width: int, strict: bool) -> List[List[Any]]:
    lines = io.StringIO(text.strip()).readlines()
    reader = csv.reader(lines, skipinitialspace=True, strict=True)
    converted = []
    consumed = 0
    while True:
        try:
            record = next(reader)
        except StopIteration:
            break
        except csv.Error as e:
            problem = str(e)
        else:
            first_line, consumed = consumed, reader.line_num
            if not record or (consumed - first_line == 1 and not lines[first_line].strip()):
                # Blank or whitespace-only line, not a record
                continue
            try:
                converted.append(_convert_record(record, width))
                continue
            except _MalformedRecord as e:
                problem = str(e)

        if strict:
            raise_exception(
                ConstantsTestDB.SQLSTATE_INVALID_DATETIME_FORMAT.value
                if problem.startswith("invalid timestamp")
                else ConstantsTestDB.SQLSTATE_STRING_LENGTH_MISMATCH.value,
                f"CSV record {reader.line_num}: {problem}",
            )
        log('warning', "CSV record %d is malformed (%s); keeping %d rows",
            reader.line_num, problem, len(converted))
        break

    return converted


build_rows_from_table = rows_from_csv
