"""Column and table base classes and column-name lookup."""

from __future__ import annotations

import copy
import threading
from typing import Any, ClassVar

from .errors import InvalidScanError

_MISSING: Any = object()


class Column:
    """One column value of a row.

    Subclasses set ``column_name`` to the database name of the column and
    may set ``default`` to the value a fresh column starts with.
    """

    column_name: ClassVar[str | None] = None
    default: ClassVar[Any] = None

    def __init__(self, value: Any = _MISSING) -> None:
        self.value = copy.copy(self.default) if value is _MISSING else value

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value == other.value  # type: ignore[attr-defined]

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"


class Table:
    """A row type made of columns.

    Column classes assigned as class attributes become the row's columns,
    in definition order, inherited ones first.
    """

    table_name: ClassVar[str | None] = None
    __columns__: ClassVar[tuple[tuple[str, type[Column]], ...]] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        fields: dict[str, type[Column]] = {}
        for klass in reversed(cls.__mro__):
            for name, attr in vars(klass).items():
                if isinstance(attr, type) and issubclass(attr, Column):
                    fields[name] = attr
                elif name in fields:
                    del fields[name]
        cls.__columns__ = tuple(fields.items())

    def __init__(self, **values: Any) -> None:
        for name, column_type in type(self).__columns__:
            if name in values:
                setattr(self, name, column_type(values.pop(name)))
            else:
                setattr(self, name, column_type())
        if values:
            unknown = ", ".join(sorted(values))
            raise TypeError(f"{type(self).__name__} has no column(s): {unknown}")

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return columns_of(self) == columns_of(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        body = ", ".join(
            f"{name}={getattr(self, name).value!r}" for name, _ in type(self).__columns__
        )
        return f"{type(self).__name__}({body})"


_names_cache: dict[type, str] = {}
_names_lock = threading.Lock()


def _table_class(model: Any) -> type[Table]:
    if model is None:
        raise InvalidScanError(None)
    cls = model if isinstance(model, type) else type(model)
    if not issubclass(cls, Table):
        raise InvalidScanError(cls)
    return cls


def column_names(model: Any) -> str:
    """Return the back-quoted column names of a model, joined by commas."""
    cls = _table_class(model)
    with _names_lock:
        cached = _names_cache.get(cls)
    if cached is not None:
        return cached
    joined = ",".join(
        f"`{column_type.column_name}`"
        for _, column_type in cls.__columns__
        if column_type.column_name is not None
    )
    with _names_lock:
        _names_cache[cls] = joined
    return joined


def columns_of(obj: Any) -> list[Column]:
    """Return the column objects of a row, in column order."""
    if obj is None:
        raise InvalidScanError(None)
    if not isinstance(obj, Table):
        raise InvalidScanError(type(obj))
    return [getattr(obj, name) for name, _ in type(obj).__columns__]