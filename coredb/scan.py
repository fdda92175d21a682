"""Filling row objects from database result rows."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, TypeVar

from .columns import Table, columns_of
from .errors import CoreDBError, InvalidScanError

T = TypeVar("T", bound=Table)


def _model_class(model: Any) -> type[Table]:
    if model is None:
        raise InvalidScanError(None)
    if not (isinstance(model, type) and issubclass(model, Table)):
        raise InvalidScanError(model if isinstance(model, type) else type(model))
    return model


def scan_into(obj: T, row: Sequence[Any]) -> T:
    """Assign the values of ``row`` to the columns of ``obj`` in order."""
    columns = columns_of(obj)
    values = list(row)
    if len(values) != len(columns):
        raise CoreDBError(
            f"coredb: row has {len(values)} values but "
            f"{type(obj).__name__} has {len(columns)} columns"
        )
    for column, value in zip(columns, values):
        column.value = value
    return obj


def row_to_object(model: type[T], row: Sequence[Any] | None) -> T:
    """Build a ``model`` from one row; with no row, the model's defaults."""
    cls = _model_class(model)
    obj = cls()
    if row is None:
        return obj  # type: ignore[return-value]
    return scan_into(obj, row)  # type: ignore[return-value]


def rows_to_objects(model: type[T], rows: Iterable[Sequence[Any]]) -> list[T]:
    """Build one ``model`` per row of ``rows``."""
    cls = _model_class(model)
    return [scan_into(cls(), row) for row in rows]  # type: ignore[misc]