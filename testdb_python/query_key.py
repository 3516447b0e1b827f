"""
Copyright (c) Microsoft Corporation.
Licensed under the MIT license.
This module turns query text into the lookup key used by the stub registry.
"""

import hashlib
import re

_WHITESPACE = re.compile(r"\s")


def normalize_query(query: str) -> str:
    """
    Remove every whitespace character and lowercase the rest.

    Formatting differences between call sites (indentation, line breaks,
    keyword case) therefore do not affect matching. Queries that differ only
    in whitespace or case are indistinguishable.
    """
    return _WHITESPACE.sub("", query).lower()


def query_key(query: str) -> bytes:
    """
    Return the SHA-1 digest of the normalized query.

    Args:
        query (str): Query text as issued by application or test code.

    Returns:
        bytes: 20 raw digest bytes.
    """
    return hashlib.sha1(normalize_query(query).encode("utf-8")).digest()
