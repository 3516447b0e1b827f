import pytest
import datetime
import time
from testdb_python.type import (
    STRING,
    BINARY,
    NUMBER,
    DATETIME,
    ROWID,
    Date,
    Time,
    Timestamp,
    DateFromTicks,
    TimeFromTicks,
    TimestampFromTicks,
    Binary,
)


def test_string_type():
    assert STRING == str, "STRING type mismatch"
    assert STRING != datetime.datetime


def test_binary_type():
    assert BINARY == bytes and BINARY == bytearray, "BINARY type mismatch"


def test_number_type():
    assert NUMBER == int and NUMBER == float, "NUMBER type mismatch"


def test_datetime_type():
    assert DATETIME == datetime.datetime, "DATETIME type mismatch"
    assert DATETIME == datetime.date


def test_rowid_type():
    assert ROWID == int, "ROWID type mismatch"


def test_type_objects_are_distinct():
    assert STRING != DATETIME
    assert STRING == STRING


def test_date_constructor():
    date = Date(2023, 10, 5)
    assert isinstance(date, datetime.date), "Date constructor did not return a date object"
    assert (date.year, date.month, date.day) == (2023, 10, 5)


def test_time_constructor():
    value = Time(12, 30, 45)
    assert isinstance(value, datetime.time), "Time constructor did not return a time object"
    assert (value.hour, value.minute, value.second) == (12, 30, 45)


def test_timestamp_constructor():
    timestamp = Timestamp(2023, 1, 2, 3, 4, 5)
    assert timestamp == datetime.datetime(2023, 1, 2, 3, 4, 5)


def test_timestamp_constructor_defaults_to_midnight():
    assert Timestamp(2023, 1, 2) == datetime.datetime(2023, 1, 2)


def test_date_from_ticks():
    ticks = 1696500000
    assert DateFromTicks(ticks) == datetime.date.fromtimestamp(ticks)


def test_time_from_ticks():
    ticks = 1696500000
    assert TimeFromTicks(ticks) == datetime.time(*time.localtime(ticks)[3:6])


def test_timestamp_from_ticks():
    ticks = 1696500000
    assert TimestampFromTicks(ticks) == datetime.datetime.fromtimestamp(ticks)


@pytest.mark.parametrize(
    "value, expected",
    [
        (b"raw", b"raw"),
        ("text", b"text"),
        (42, b"42"),
    ],
)
def test_binary_constructor(value, expected):
    assert Binary(value) == expected
