"""
Copyright (c) Microsoft Corporation.
Licensed under the MIT license.
This module contains custom exception classes for the testdb_python package.
These classes are used to raise exceptions when an error occurs while executing a query
against the stub driver.
"""

from typing import Optional


class Exception(Exception):
    """
    Base class for all exceptions.
    This is the base class for all custom exceptions in this module.
    It can be used to catch any exception raised by the stub driver.
    """

    def __init__(self, driver_error: str, detail: str = "") -> None:
        self.driver_error = driver_error
        self.detail = detail
        self.message = f"Driver Error: {driver_error}"
        if detail:
            self.message += f"; Details: {detail}"
        super().__init__(self.message)


class Warning(Exception):
    """
    Exception raised for important warnings like data truncations while inserting, etc.
    """


class Error(Exception):
    """
    Base class for errors.
    Exception that is the base class of all other error exceptions.
    """


class InterfaceError(Error):
    """
    Exception raised for errors that are related to the database interface rather than
    the database itself, such as using a closed connection or an unknown driver name.
    """


class DatabaseError(Error):
    """
    Exception raised for errors that are related to the database.
    """


class DataError(DatabaseError):
    """
    Exception raised for errors that are due to problems with the processed data,
    such as a row whose width does not match its declared columns.
    """


class OperationalError(DatabaseError):
    """
    Exception raised for errors that are related to the database's operation.
    """


class IntegrityError(DatabaseError):
    """
    Exception raised when the relational integrity of the database is affected.
    """


class InternalError(DatabaseError):
    """
    Exception raised when the database encounters an internal error.
    """


class ProgrammingError(DatabaseError):
    """
    Exception raised for programming errors, e.g. fetching before a query was executed
    or querying text nobody stubbed.
    """


class NotSupportedError(DatabaseError):
    """
    Exception raised in case a method or database API was used which is not supported.
    """


class QueryNotStubbedError(ProgrammingError):
    """
    Raised when a query reaches the stub driver and no stub or override callback
    answers it. The original, non-normalized query text is kept on ``query``.
    """

    def __init__(self, query: str) -> None:
        self.query = query
        super().__init__("Query not stubbed", query)
        # Keep the plain form so a missing stub is readable in test output
        self.message = f"Query not stubbed: {query}"
        self.args = (self.message,)

    def __str__(self) -> str:
        return self.message


# Mapping SQLSTATE codes to exception classes and default messages
sqlstate_to_exception = {
    "01000": (Warning, "General warning"),
    "07009": (ProgrammingError, "Invalid descriptor index"),
    "08003": (InterfaceError, "Connection not open"),
    "22007": (DataError, "Invalid datetime format"),
    "22026": (DataError, "String data, length mismatch"),
    "24000": (ProgrammingError, "Invalid cursor state"),
    "42000": (ProgrammingError, "Syntax error or access violation"),
    "HY010": (ProgrammingError, "Function sequence error"),
    "HYC00": (NotSupportedError, "Optional feature not implemented"),
    "IM001": (NotSupportedError, "Driver does not support this function"),
}


def raise_exception(sqlstate: str, detail: Optional[str] = "") -> None:
    """
    Raise a custom exception based on the given SQLSTATE code.

    Args:
        sqlstate (str): The SQLSTATE code to map to a custom exception.
        detail (str): Additional context appended to the message.

    Raises:
        DatabaseError: If the SQLSTATE code is not found in the mapping.
    """
    if sqlstate in sqlstate_to_exception:
        exception_class, driver_error = sqlstate_to_exception[sqlstate]
        raise exception_class(driver_error, detail or "")
    raise DatabaseError(f"An error occurred with SQLSTATE code {sqlstate}", detail or "")
