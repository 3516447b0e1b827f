"""
Copyright (c) Microsoft Corporation.
Licensed under the MIT license.
This module contains the constants used by the testdb_python package.
"""

from enum import Enum


class ConstantsTestDB(Enum):
    """
    Return codes and SQLSTATE values produced by the stub driver.
    Values mirror their ODBC counterparts so code written against a real
    driver reads the same.
    """

    SQL_SUCCESS = 0
    SQL_NO_DATA = 100

    # SQLSTATE codes
    SQLSTATE_CONNECTION_NOT_OPEN = "08003"
    SQLSTATE_INVALID_DESCRIPTOR_INDEX = "07009"
    SQLSTATE_INVALID_CURSOR_STATE = "24000"
    SQLSTATE_STRING_LENGTH_MISMATCH = "22026"
    SQLSTATE_INVALID_DATETIME_FORMAT = "22007"
    SQLSTATE_SYNTAX_OR_ACCESS = "42000"
    SQLSTATE_FUNCTION_SEQUENCE = "HY010"
    SQLSTATE_NOT_SUPPORTED = "IM001"


SQL_SUCCESS = ConstantsTestDB.SQL_SUCCESS.value
SQL_NO_DATA = ConstantsTestDB.SQL_NO_DATA.value
