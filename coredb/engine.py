"""Query and execute helpers that route through a configurable DB provider.

A provider is a callable ``provider(dbname, mode)`` that returns a DB-API
connection using ``?`` placeholders, or ``None`` when it has none for the
given database and mode.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Sequence
from contextlib import closing
from enum import IntEnum
from typing import Any, TypeVar

from .columns import Table, column_names
from .errors import CoreDBError
from .helpers import param_placeholders
from .query import Where, WhereQuery
from .scan import rows_to_objects, scan_into

T = TypeVar("T", bound=Table)


class DBMode(IntEnum):
    """Which database a statement should go to."""

    READ = 0
    """Reading may go to a replica."""
    WRITE = 1
    """Writing goes to the master."""
    READ_FROM_WRITE = 2
    """Reading forced to the master."""


DBProvider = Callable[[str, DBMode], Any]

_provider: DBProvider | None = None
_provider_lock = threading.Lock()


def setup(provider: DBProvider | None) -> None:
    """Install the provider used by every database operation."""
    global _provider
    with _provider_lock:
        _provider = provider


def get_db(dbname: str, mode: DBMode) -> Any:
    """Return the connection the provider gives for ``dbname`` and ``mode``."""
    with _provider_lock:
        provider = _provider
    if provider is None:
        raise CoreDBError("coredb DBProvider hasn't setup")
    db = provider(dbname, mode)
    if db is None:
        raise CoreDBError(f"Can't get db for {dbname} {DBMode(mode).name}")
    return db


def _pk_where(pk_names: Sequence[str], args: tuple[Any, ...]) -> Where:
    if not pk_names:
        raise ValueError("at least one primary key column name is required")
    first, *rest = pk_names
    sql = f"WHERE `{first}` = ?" + "".join(f" AND `{name}` = ?" for name in rest)
    return Where(sql, *args)


def _pks_where(pk_name: str, values: Sequence[Any]) -> Where:
    sql = f"WHERE `{pk_name}` IN ({param_placeholders(len(values))})"
    return Where(sql, *values)


def _select_sql(model: type[Table], table_name: str, where: WhereQuery) -> tuple[str, list[Any]]:
    where_sql, params = where.get_where()
    return f"SELECT {column_names(model)} FROM `{table_name}` {where_sql}", params


def execute(dbname: str, query: str, *args: Any) -> Any:
    """Run a statement on the write database and return its cursor.

    The cursor carries ``rowcount`` and ``lastrowid``; the statement is
    committed straight away.
    """
    db = get_db(dbname, DBMode.WRITE)
    cursor = db.cursor()
    cursor.execute(query, args)
    commit = getattr(db, "commit", None)
    if commit is not None:
        commit()
    return cursor


def _query_rows(mode: DBMode, dbname: str, query: str, args: Sequence[Any]) -> list[Sequence[Any]]:
    db = get_db(dbname, mode)
    with closing(db.cursor()) as cursor:
        cursor.execute(query, tuple(args))
        return list(cursor.fetchall())


def _query_first(mode: DBMode, dbname: str, query: str, args: Sequence[Any]) -> Sequence[Any] | None:
    db = get_db(dbname, mode)
    with closing(db.cursor()) as cursor:
        cursor.execute(query, tuple(args))
        return cursor.fetchone()


def _find_one(mode: DBMode, model: type[T], dbname: str, table_name: str, where: WhereQuery) -> T | None:
    query_sql, params = _select_sql(model, table_name, where)
    row = _query_first(mode, dbname, query_sql, params)
    if row is None:
        return None
    return scan_into(model(), row)


def _find(mode: DBMode, model: type[T], dbname: str, table_name: str, where: WhereQuery) -> list[T]:
    query_sql, params = _select_sql(model, table_name, where)
    return rows_to_objects(model, _query_rows(mode, dbname, query_sql, params))


def _query_int(mode: DBMode, dbname: str, query: str, args: Sequence[Any]) -> int:
    row = _query_first(mode, dbname, query, args)
    if row is None:
        raise CoreDBError("sql: no rows in result set")
    value = row[0]
    if value is None:
        raise CoreDBError("coredb: converting NULL to int is unsupported")
    return int(value)


def find_one(model: type[T], dbname: str, table_name: str, where: WhereQuery) -> T | None:
    """Return the first matching row as a ``model``, or ``None`` if none match."""
    return _find_one(DBMode.READ, model, dbname, table_name, where)


def find(model: type[T], dbname: str, table_name: str, where: WhereQuery) -> list[T]:
    """Return every matching row as a ``model``."""
    return _find(DBMode.READ, model, dbname, table_name, where)


def find_one_from_master(model: type[T], dbname: str, table_name: str, where: WhereQuery) -> T | None:
    """Like :func:`find_one`, reading from the master database."""
    return _find_one(DBMode.READ_FROM_WRITE, model, dbname, table_name, where)


def find_from_master(model: type[T], dbname: str, table_name: str, where: WhereQuery) -> list[T]:
    """Like :func:`find`, reading from the master database."""
    return _find(DBMode.READ_FROM_WRITE, model, dbname, table_name, where)


def fetch_by_pk(model: type[T], dbname: str, table_name: str, pk_names: Sequence[str], *args: Any) -> T | None:
    """Return the row whose primary key columns equal ``args``, or ``None``."""
    return find_one(model, dbname, table_name, _pk_where(pk_names, args))


def fetch_by_pks(model: type[T], dbname: str, table_name: str, pk_name: str, values: Sequence[Any]) -> list[T]:
    """Return the rows whose primary key is one of ``values``."""
    if not values:
        return []
    return find(model, dbname, table_name, _pks_where(pk_name, values))


def fetch_by_pk_from_master(
    model: type[T], dbname: str, table_name: str, pk_names: Sequence[str], *args: Any
) -> T | None:
    """Like :func:`fetch_by_pk`, reading from the master database."""
    return find_one_from_master(model, dbname, table_name, _pk_where(pk_names, args))


def fetch_by_pks_from_master(
    model: type[T], dbname: str, table_name: str, pk_name: str, values: Sequence[Any]
) -> list[T]:
    """Like :func:`fetch_by_pks`, reading from the master database."""
    if not values:
        return []
    return find_from_master(model, dbname, table_name, _pks_where(pk_name, values))


def query_int(dbname: str, query: str, *args: Any) -> int:
    """Return the single integer a query yields, handy for ``COUNT(*)``."""
    return _query_int(DBMode.READ, dbname, query, args)


def query_int_from_master(dbname: str, query: str, *args: Any) -> int:
    """Like :func:`query_int`, reading from the master database."""
    return _query_int(DBMode.READ_FROM_WRITE, dbname, query, args)


def query(model: type[T], dbname: str, query: str, *args: Any) -> list[T]:
    """Run a full query and return its rows as ``model`` objects."""
    return rows_to_objects(model, _query_rows(DBMode.READ, dbname, query, args))


def query_from_master(model: type[T], dbname: str, query: str, *args: Any) -> list[T]:
    """Like :func:`query`, reading from the master database."""
    return rows_to_objects(model, _query_rows(DBMode.READ_FROM_WRITE, dbname, query, args))