"""
This file contains tests for the global variables in the testdb_python package.
Functions:
- test_apilevel: Check if apilevel has the expected value.
- test_threadsafety: Check if threadsafety has the expected value.
- test_paramstyle: Check if paramstyle has the expected value.
- test_version: Check that a version string is exposed.
- test_settings_defaults: Check the default settings values.
- test_get_settings_returns_singleton: Check that get_settings always returns the same object.
"""

import testdb_python
from testdb_python import apilevel, threadsafety, paramstyle, get_settings


def test_apilevel():
    assert apilevel == "2.0", "apilevel should be '2.0'"


def test_threadsafety():
    assert threadsafety == 1, "threadsafety should be 1"


def test_paramstyle():
    assert paramstyle == "qmark", "paramstyle should be 'qmark'"


def test_version():
    assert isinstance(testdb_python.__version__, str)
    assert testdb_python.__version__.count(".") == 2


def test_settings_defaults():
    settings = testdb_python.Settings()
    assert settings.lowercase is False
    assert settings.strict_csv is False


def test_get_settings_returns_singleton():
    assert get_settings() is get_settings()
