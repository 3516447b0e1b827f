"""
Copyright (c) Microsoft Corporation.
Licensed under the MIT license.
This module provides helper functions for the testdb_python package.
"""

import re
import threading

from testdb_python.logging import logger


def log(level: str, message: str, *args) -> None:
    """
    Universal logging helper.

    Args:
        level: Log level ('debug', 'info', 'warning', 'error')
        message: Log message with optional format placeholders
        *args: Arguments for message formatting
    """
    getattr(logger, level)(message, *args)


def shorten_query(query: str, max_length: int = 120) -> str:
    """
    Collapse whitespace runs and cut long SQL so it fits on one log line.

    Args:
        query (str): The query text to shorten.
        max_length (int): Maximum length of the returned text.

    Returns:
        str: The shortened query.
    """
    if not isinstance(query, str):
        return "<non-string>"

    shortened = re.sub(r"\s+", " ", query).strip()
    if len(shortened) > max_length:
        shortened = shortened[:max_length] + "..."
    return shortened


class Settings:
    """
    Settings class for testdb_python package configuration.

    Attributes:
        lowercase: Lowercase column names in cursor descriptions and row attribute lookup.
        strict_csv: Raise DataError on malformed CSV records instead of truncating.
    """
    def __init__(self) -> None:
        self.lowercase: bool = False
        self.strict_csv: bool = False


# Global settings instance
_settings: Settings = Settings()
_settings_lock: threading.Lock = threading.Lock()


def get_settings() -> Settings:
    """Return the global settings object"""
    with _settings_lock:
        return _settings
