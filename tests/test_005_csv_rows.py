"""
This file contains tests for building Rows from CSV text.
Functions:
- test_timestamp_inference: Date-time cells become datetime values, others stay text.
- test_plain_text_passthrough: Numbers are not converted.
- test_date_only_cell_is_midnight: YYYY-MM-DD cells become midnight datetimes.
- test_quoted_cells: Standard CSV quoting is honored.
- test_surrounding_whitespace_and_blank_lines: Indented multi-line tables parse cleanly.
- test_records_of_empty_cells_are_kept: Lines like "," are records, not blank lines.
- test_cells_larger_than_the_csv_default_limit: Long cells are not treated as malformed.
- test_lenient_mode_stops_at_first_malformed_record: Rows before the bad record are kept.
- test_strict_mode_raises: strict=True raises DataError instead of truncating.
- test_strict_setting_is_the_default: Settings.strict_csv applies when strict is not given.
"""

import csv
import datetime
import pytest
from testdb_python import build_rows_from_table, rows_from_csv, SQL_SUCCESS
from testdb_python.exceptions import DataError


def test_timestamp_inference():
    rows = rows_from_csv(["name", "created_at"], "alice, 2023-01-02 03:04:05")
    buffer = [None, None]
    assert rows.next(buffer) == SQL_SUCCESS
    assert buffer[0] == "alice"
    assert buffer[1] == datetime.datetime(2023, 1, 2, 3, 4, 5)
    assert isinstance(buffer[1], datetime.datetime)


def test_plain_text_passthrough():
    rows = rows_from_csv(["answer"], "42")
    assert list(rows) == [("42",)]


def test_date_only_cell_is_midnight():
    rows = rows_from_csv(["day"], "2023-01-02")
    assert list(rows) == [(datetime.datetime(2023, 1, 2),)]


@pytest.mark.parametrize(
    "cell",
    ["2023-01-02T03:04:05", "2023-1-2", "02/01/2023", "2023-01-02 03:04", "x2023-01-02"],
)
def test_non_matching_date_shapes_stay_text(cell):
    rows = rows_from_csv(["value"], cell)
    assert list(rows) == [(cell,)]


def test_quoted_cells():
    rows = rows_from_csv(
        ["name", "note"],
        '"smith, john", "said ""hi"""',
    )
    assert list(rows) == [("smith, john", 'said "hi"')]


def test_surrounding_whitespace_and_blank_lines():
    rows = rows_from_csv(
        ["id", "name", "created_at"],
        """
            1, alice, 2023-01-02 03:04:05

            2, bob, 2023-01-03
        """,
    )
    assert list(rows) == [
        ("1", "alice", datetime.datetime(2023, 1, 2, 3, 4, 5)),
        ("2", "bob", datetime.datetime(2023, 1, 3)),
    ]


def test_records_of_empty_cells_are_kept():
    rows = rows_from_csv(["a", "b"], "1,x\n,\n3,z")
    assert list(rows) == [("1", "x"), ("", ""), ("3", "z")]


def test_quoted_empty_cell_is_a_record():
    rows = rows_from_csv(["a"], 'x\n""\ny')
    assert list(rows) == [("x",), ("",), ("y",)]


def test_cells_larger_than_the_csv_default_limit():
    limit = csv.field_size_limit()
    big = "x" * (limit + 1000)
    rows = rows_from_csv(["value"], "1\n" + big + "\n3", strict=True)
    assert [row[0] for row in rows] == ["1", big, "3"]
    # The process-wide limit is restored afterwards
    assert csv.field_size_limit() == limit


def test_columns_are_kept():
    rows = rows_from_csv(["id", "name"], "1,alice")
    assert rows.columns() == ["id", "name"]


@pytest.mark.parametrize(
    "text",
    [
        "1,alice\n2\n3,carol",            # too few cells
        "1,alice\n2,bob,extra\n3,carol",  # too many cells
        "1,alice\n2,2023-13-45\n3,carol", # date-shaped but not a date
        '1,alice\n"2"x,bob\n3,carol',     # bad quoting
    ],
)
def test_lenient_mode_stops_at_first_malformed_record(text):
    rows = rows_from_csv(["id", "name"], text, strict=False)
    assert list(rows) == [("1", "alice")]


def test_lenient_mode_with_malformed_first_record():
    rows = rows_from_csv(["id", "name"], "1\n2,bob", strict=False)
    assert len(rows) == 0


@pytest.mark.parametrize(
    "text, message",
    [
        ("1,alice\n2", "1 values for 2 columns"),
        ("1,2023-02-30", "invalid timestamp"),
    ],
)
def test_strict_mode_raises(text, message):
    with pytest.raises(DataError) as excinfo:
        rows_from_csv(["id", "name"], text, strict=True)
    assert message in str(excinfo.value)


def test_strict_setting_is_the_default(settings):
    settings.strict_csv = True
    with pytest.raises(DataError):
        rows_from_csv(["id", "name"], "1,alice\n2")
    # An explicit argument wins over the setting
    assert len(rows_from_csv(["id", "name"], "1,alice\n2", strict=False)) == 1


def test_empty_text_gives_no_rows():
    rows = rows_from_csv(["id"], "   \n  ")
    assert len(rows) == 0


def test_build_rows_from_table_alias():
    assert build_rows_from_table is rows_from_csv
