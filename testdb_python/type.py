"""
Copyright (c) Microsoft Corporation.
Licensed under the MIT license.
This module contains type objects and constructors for the testdb_python package.
Stub rows only ever hold strings and datetimes, but application code written
against a DB-API driver imports these names, so they are all provided.
"""

import datetime
import time


class DBAPITypeObject:
    """
    Type object comparing equal to each of the Python types it describes.
    """

    def __init__(self, name: str, *python_types: type) -> None:
        self.name = name
        self.python_types = python_types

    def __eq__(self, other) -> bool:
        if isinstance(other, DBAPITypeObject):
            return self.name == other.name
        return other in self.python_types

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"<DBAPITypeObject {self.name}>"


# Type Objects
STRING = DBAPITypeObject("STRING", str)
BINARY = DBAPITypeObject("BINARY", bytes, bytearray)
NUMBER = DBAPITypeObject("NUMBER", int, float)
DATETIME = DBAPITypeObject("DATETIME", datetime.datetime, datetime.date, datetime.time)
ROWID = DBAPITypeObject("ROWID", int)


# Type Constructors
def Date(year: int, month: int, day: int) -> datetime.date:
    """
    Generates a date object.
    """
    return datetime.date(year, month, day)


def Time(hour: int, minute: int, second: int) -> datetime.time:
    """
    Generates a time object.
    """
    return datetime.time(hour, minute, second)


def Timestamp(
    year: int, month: int, day: int, hour: int = 0, minute: int = 0, second: int = 0, microsecond: int = 0
) -> datetime.datetime:
    """
    Generates a timestamp object.
    """
    return datetime.datetime(year, month, day, hour, minute, second, microsecond)


def DateFromTicks(ticks: int) -> datetime.date:
    return datetime.date.fromtimestamp(ticks)


def TimeFromTicks(ticks: int) -> datetime.time:
    return datetime.time(*time.localtime(ticks)[3:6])


def TimestampFromTicks(ticks: int) -> datetime.datetime:
    return datetime.datetime.fromtimestamp(ticks)


def Binary(value) -> bytes:
    """
    Converts a string or bytes to bytes using UTF-8 encoding.
    """
    if isinstance(value, bytes):
        return value
    if isinstance(value, str):
        return bytes(value, "utf-8")
    return bytes(str(value), "utf-8")
