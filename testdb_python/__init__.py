"""
Copyright (c) Microsoft Corporation.
Licensed under the MIT license.
This module initializes the testdb_python package.
"""

# Driver version
__version__ = "0.1.0"

# Settings
from .helpers import Settings, get_settings

# Exceptions
# https://www.python.org/dev/peps/pep-0249/#exceptions
from .exceptions import (
    Warning,
    Error,
    InterfaceError,
    DatabaseError,
    DataError,
    OperationalError,
    IntegrityError,
    InternalError,
    ProgrammingError,
    NotSupportedError,
    QueryNotStubbedError,
)

# Type Objects
from .type import (
    Date,
    Time,
    Timestamp,
    DateFromTicks,
    TimeFromTicks,
    TimestampFromTicks,
    Binary,
    STRING,
    BINARY,
    NUMBER,
    DATETIME,
    ROWID,
)

# Return codes
from .constants import ConstantsTestDB, SQL_SUCCESS, SQL_NO_DATA

# Stub driver
from .query_key import normalize_query, query_key
from .rows import Rows, RowsState
from .csv_rows import rows_from_csv, build_rows_from_table
from .stubs import StubbedOutcome, StubRegistry
from .driver import Driver, Conn, Statement, Transaction, ExecResult

# Connection Objects
from .db_connection import connect, register, unregister, drivers
from .connection import Connection

# Cursor Objects
from .cursor import Cursor
from .row import Row

# Logging Configuration
from .logging import logger, setup_logging

# GLOBALS
# Read-Only
apilevel: str = "2.0"
paramstyle: str = "qmark"
threadsafety: int = 1
