"""Where-clause objects handed to the query functions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class WhereQuery(ABC):
    """Anything that can supply a where clause and its parameters."""

    @abstractmethod
    def get_where(self) -> tuple[str, list[Any]]:
        """Return the where SQL and its parameters."""


class Where(WhereQuery):
    """A fixed where clause with positional parameters."""

    def __init__(self, where_sql: str, *args: Any) -> None:
        self.where_sql = where_sql
        self.params = list(args)

    def get_where(self) -> tuple[str, list[Any]]:
        return self.where_sql, list(self.params)

    def __repr__(self) -> str:
        return f"Where({self.where_sql!r}, params={self.params!r})"