"""
This file contains fixtures for the tests in the testdb_python package.
Functions:
- pytest_addoption: Register the enable_logging ini option.
- pytest_configure: Turn on package logging when enable_logging is set.
- driver_conn: Fixture creating a fresh stub driver connection.
- registered_driver: Fixture registering a Driver around driver_conn under a unique name.
- db_connection: Fixture to create and yield a DB-API connection through the registered name.
- cursor: Fixture to create and yield a cursor from the database connection.
"""

import pytest
from testdb_python import Conn, Driver, connect, register, unregister, get_settings


def pytest_addoption(parser):
    parser.addini(
        "enable_logging",
        "Enable testdb_python DEBUG logging to stdout",
        default="false",
    )


def pytest_configure(config):
    enable_log = config.getini("enable_logging")
    if enable_log and str(enable_log).lower() in ("true", "1", "yes"):
        from testdb_python import setup_logging
        setup_logging(output="stdout")
        print("[pytest] testdb_python logging enabled")


@pytest.fixture
def driver_conn():
    return Conn()


@pytest.fixture
def registered_driver(driver_conn, request):
    name = f"testdb-{request.node.name}"
    register(name, Driver(connection=driver_conn))
    yield name
    unregister(name)


@pytest.fixture
def db_connection(registered_driver):
    conn = connect(registered_driver)
    yield conn
    conn.close()


@pytest.fixture
def cursor(db_connection):
    cur = db_connection.cursor()
    yield cur
    cur.close()


@pytest.fixture
def settings():
    """Yield the global settings and restore them afterwards."""
    current = get_settings()
    saved = (current.lowercase, current.strict_csv)
    yield current
    current.lowercase, current.strict_csv = saved
