"""A growable list of SQL parameters that flattens sequences."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


def _flatten(args: tuple[Any, ...]) -> Iterator[Any]:
    for arg in args:
        if isinstance(arg, (list, tuple)):
            yield from arg
        else:
            yield arg


class Params:
    """SQL parameters; list and tuple arguments are spread into their items."""

    def __init__(self, *args: Any) -> None:
        self._params: list[Any] = list(_flatten(args))

    def add(self, *args: Any) -> None:
        """Append more parameters, spreading lists and tuples."""
        self._params.extend(_flatten(args))

    def get(self) -> list[Any]:
        """Return the parameters collected so far."""
        return list(self._params)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._params)

    def __len__(self) -> int:
        return len(self._params)

    def __repr__(self) -> str:
        return f"Params({self._params!r})"