"""
Copyright (c) Microsoft Corporation.
Licensed under the MIT license.
This module contains the stub registry: the outcomes test code registered for
query texts, keyed by their normalized digest.
"""
from dataclasses import dataclass
from typing import Dict, Optional

from testdb_python.helpers import log, shorten_query
from testdb_python.query_key import query_key
from testdb_python.rows import Rows


@dataclass(frozen=True)
class StubbedOutcome:
    """
    What a stubbed query produces: either rows or an error, never both.
    Use StubbedOutcome.result() or StubbedOutcome.failure() to build one.
    """

    rows: Optional[Rows] = None
    error: Optional[BaseException] = None

    def __post_init__(self) -> None:
        if (self.rows is None) == (self.error is None):
            raise ValueError("A stubbed outcome needs exactly one of rows or error")
        if self.error is not None and not isinstance(self.error, BaseException):
            raise TypeError(
                f"error must be an exception instance, got {type(self.error).__name__}"
            )

    @classmethod
    def result(cls, rows: Rows) -> "StubbedOutcome":
        return cls(rows=rows)

    @classmethod
    def failure(cls, error: BaseException) -> "StubbedOutcome":
        return cls(error=error)

    @property
    def is_error(self) -> bool:
        return self.error is not None


class StubRegistry:
    """
    Mapping from query key to stubbed outcome.

    Registering the same query text twice (modulo whitespace and case) replaces
    the earlier outcome. Entries are never removed except by clear().
    """

    def __init__(self) -> None:
        self._outcomes: Dict[bytes, StubbedOutcome] = {}

    def register_result(self, query: str, rows: Rows) -> None:
        self._outcomes[query_key(query)] = StubbedOutcome.result(rows)
        log('debug', "Stubbed result for query: %s", shorten_query(query))

    def register_error(self, query: str, error: BaseException) -> None:
        self._outcomes[query_key(query)] = StubbedOutcome.failure(error)
        log('debug', "Stubbed %s for query: %s", type(error).__name__, shorten_query(query))

    def lookup(self, query: str) -> Optional[StubbedOutcome]:
        """
        Return the outcome registered for query, or None if it was never stubbed.
        """
        outcome = self._outcomes.get(query_key(query))
        log('debug', "Stub %s for query: %s", "hit" if outcome is not None else "miss", shorten_query(query))
        return outcome

    def clear(self) -> None:
        self._outcomes.clear()

    def __contains__(self, query: str) -> bool:
        return query_key(query) in self._outcomes

    def __len__(self) -> int:
        return len(self._outcomes)
