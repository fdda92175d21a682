# coredb

`coredb` is a small layer between your code and a SQL database. It maps
result rows onto model objects made of columns, builds `SELECT` statements
from those models, and sends every statement to the right connection: a
read replica for plain reads, the master for writes and for reads that must
see the latest data.

It uses only the standard library. It works with any DB-API connection whose
parameter style is `?` (for example `sqlite3`).

## Installing

From a checkout of the package:

```
pip install .
```

## Connecting

Tell `coredb` once how to get a connection, with `coredb.engine.setup`. The
provider is a callable that takes a database name and a `DBMode` and returns
a connection, or `None` when it has none:

```python
import sqlite3

from coredb.engine import DBMode, setup

connection = sqlite3.connect("app.db")


def provider(dbname, mode):
    # One connection serves every mode here; a real deployment would
    # hand out a replica for DBMode.READ and the master otherwise.
    return connection


setup(provider)
```

`DBMode` has three members:

- `DBMode.READ` – reading, may go to a replica;
- `DBMode.WRITE` – writing, goes to the master;
- `DBMode.READ_FROM_WRITE` – reading forced to the master.

`get_db(dbname, mode)` asks the provider for a connection. It raises
`CoreDBError` if no provider has been set up or the provider returns `None`.
`setup(None)` removes the provider again.

## Models

A model subclasses `coredb.columns.Table`. Its columns are `Column`
subclasses assigned as class attributes; each sets `column_name` to the
database column name and may set `default`, the value a fresh column starts
with (copied for each instance). Columns come in definition order, inherited
ones first, and that is the order they are selected and scanned in.

```python
from coredb.columns import Column, Table


class Blog(Table):
    table_name = "blogs"

    class Id(Column):
        column_name = "id"
        default = 0

    class Title(Column):
        column_name = "title"
        default = ""


blog = Blog(Title="foo")     # keyword arguments by attribute name
blog.Title.value             # "foo"
blog.Id.value                # 0
Blog(Colour="red")           # TypeError: no such column
```

Models and columns compare by value; a model's `repr` lists its column
values.

- `column_names(model)` returns the back-quoted column names of a model
  class or instance, joined by commas (``"`id`,`title`"``), ready for a
  `SELECT` list. Columns without a `column_name` are left out. The result is
  cached per model class.
- `columns_of(obj)` returns the column objects of a model instance in order.

Both raise `InvalidScanError` for `None` or for anything that is not a
`Table`.

## Scanning rows

In `coredb.scan`:

- `scan_into(obj, row)` assigns the values of one row to the columns of
  `obj` in order and returns `obj`. It raises `CoreDBError` when the number
  of values differs from the number of columns.
- `row_to_object(model, row)` builds a new `model` from one row; given
  `None` instead of a row it returns a `model` holding its defaults.
- `rows_to_objects(model, rows)` builds one `model` per row and returns the
  list.

`model` must be a `Table` subclass, otherwise `InvalidScanError` is raised.

## Querying

All in `coredb.engine`:

```python
from coredb.engine import (
    execute,
    fetch_by_pk,
    fetch_by_pks,
    find,
    find_one,
    query,
    query_int,
)
from coredb.query import Where

blog = fetch_by_pk(Blog, "blogdb", "blogs", ["id"], 1)          # a Blog or None
blogs = fetch_by_pks(Blog, "blogdb", "blogs", "id", [2, 3])     # [] for no keys

bar = find_one(Blog, "blogdb", "blogs", Where("where title = ?", "bar"))
recent = find(Blog, "blogdb", "blogs", Where("where id > ? order by id", 10))
rows = query(Blog, "blogdb", "SELECT `id`,`title` FROM `blogs` WHERE id < ?", 5)

count = query_int("blogdb", "SELECT COUNT(*) FROM `blogs` where title = ?", "bar")
cursor = execute("blogdb", "DELETE FROM `blogs` WHERE `id` = ?", 1)
cursor.rowcount
```

- `find` and `find_one` build `SELECT <columns> FROM `<table>` <where>` from
  the model's column names and the where clause. `find_one` returns `None`
  when nothing matches.
- `fetch_by_pk` matches every named key column against the given values
  (`WHERE `a` = ? AND `b` = ?`); an empty list of names raises `ValueError`.
  `fetch_by_pks` uses `WHERE `<pk>` IN (...)` and returns `[]` straight away
  for an empty list of values.
- `query(model, dbname, sql, *args)` runs any `SELECT` whose columns match
  the model, in order.
- `query_int` returns the first value of the first row as an `int`. It
  raises `CoreDBError` when there is no row or the value is `NULL`.
- `execute` runs a statement on the `DBMode.WRITE` connection, commits it if
  the connection has `commit`, and returns the cursor, with its `rowcount`
  and `lastrowid`.

Every read has a `_from_master` twin that uses `DBMode.READ_FROM_WRITE`:
`find_from_master`, `find_one_from_master`, `fetch_by_pk_from_master`,
`fetch_by_pks_from_master`, `query_from_master` and `query_int_from_master`.

A composite primary key is passed as several names and values:

```python
fetch_by_pk(SongUserFavourite, "music", "song_user_favourites",
            ["user_id", "song_id"], 7, 42)
```

## Where clauses and parameters

`coredb.query.Where(where_sql, *args)` pairs a clause with its parameters.
Any subclass of the abstract `WhereQuery` whose `get_where()` returns
`(sql, params)` can stand in for it, for example a query builder that adds
`order by` and `limit` parts.

`coredb.params.Params` collects parameters and spreads list and tuple
arguments into their items:

```python
from coredb.params import Params

p = Params(1, 2, [3, 4, 5], "Mary", ["Wilson", "Mandy"])
p.get()      # [1, 2, 3, 4, 5, "Mary", "Wilson", "Mandy"]
p.add(0.6, (88, 99))
len(p)       # 11
```

`get()` returns a copy; a `Params` can also be iterated directly.

## Helpers

In `coredb.helpers`:

- `param_placeholders(3)` returns `"?,?,?"`; `param_placeholders(0)` returns
  `""`.
- `value_in_set(values, s)` tells whether `s` is among `values`, ignoring
  case, as for MySQL `SET` columns.
- `must_parse_time("2019-01-01 00:00:01.000000")` parses
  `YYYY-MM-DD HH:MM:SS` with an optional fraction of up to nine digits into
  a UTC `datetime`, truncating below microseconds. Bad input raises
  `ValueError`.

## Errors

In `coredb.errors`, all deriving from `CoreDBError`:

- `AvoidInsertError` (message `ErrAvoidInsertion`) and `AvoidUpdateError`
  (message `ErrAvoidUpdate`), for code that finds an insert or update
  affected no row;
- `InvalidScanError`, also a `TypeError`, for a target that rows cannot be
  scanned into; its `target_type` attribute holds what was given.

## What it does not do

`coredb` does not create tables, generate model classes from a schema, or
write `INSERT` and `UPDATE` statements for models; writes are plain SQL
through `execute`. It has no transactions beyond the commit `execute` makes,
no connection pooling, and ships no database driver: connections come from
the provider you install.

## Running the tests

```
pip install -e ".[test]"
pytest
```