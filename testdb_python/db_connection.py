"""
Copyright (c) Microsoft Corporation.
Licensed under the MIT license.
This module keeps the named driver registry and the connect() entry point.
Application code opens a stub driver by name, the same way it would open a
real database, while test code decides which Driver sits behind the name.
"""
import threading
from typing import Dict, List

from testdb_python.connection import Connection
from testdb_python.exceptions import InterfaceError, ProgrammingError
from testdb_python.helpers import log

_drivers: Dict[str, object] = {}
_drivers_lock = threading.Lock()


def register(name: str, driver) -> None:
    """
    Make driver available to connect() under name.

    Args:
        name (str): Name application code passes to connect().
        driver: Object with an open(dsn) method returning a stub Conn.

    Raises:
        ProgrammingError: If name is already registered.
        TypeError: If driver has no open() method.
    """
    if not callable(getattr(driver, "open", None)):
        raise TypeError(f"driver must provide open(dsn), got {type(driver).__name__}")
    with _drivers_lock:
        if name in _drivers:
            raise ProgrammingError("Driver already registered", name)
        _drivers[name] = driver
    log('debug', "Registered driver %s", name)


def unregister(name: str) -> None:
    """Remove name from the registry. Unknown names are ignored."""
    with _drivers_lock:
        _drivers.pop(name, None)
    log('debug', "Unregistered driver %s", name)


def drivers() -> List[str]:
    """Return the registered driver names, sorted."""
    with _drivers_lock:
        return sorted(_drivers)


def connect(name: str, dsn: str = "", autocommit: bool = False) -> Connection:
    """
    Open a connection through the driver registered under name.

    Args:
        name (str): Registered driver name.
        dsn (str): Passed through to Driver.open(); stub drivers ignore it.
        autocommit (bool): Autocommit mode of the new connection.

    Returns:
        Connection: A new connection object to interact with the stub driver.

    Raises:
        InterfaceError: If no driver is registered under name.
    """
    with _drivers_lock:
        driver = _drivers.get(name)
    if driver is None:
        raise InterfaceError("Unknown driver", f"{name!r}; registered: {drivers()}")

    return Connection(driver.open(dsn), autocommit=autocommit)
