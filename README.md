# imsql

`imsql` opens an SQLite database read-only and loads its tables, columns and
foreign keys into models. On top of those models it builds a *design graph*.
Every table becomes a node, every column becomes a vertex, and every foreign
key becomes an edge. A spreadsheet node gets its columns from whatever
vertices you connect to it.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Loading a database

```python
from imsql.db_model import DbModel

with DbModel("example.db") as db:
    users = db.table_by_name("users")
    name = users.column_by_name("name")
    print(name.get_rows())      # every value in the column, in table order
    print(name.get_value(1))    # the value in the row whose id is 1, or None
    for referenced, referencing in db.relationships():
        print(referenced.table.name, referenced.name, "<-", referencing.table.name, referencing.name)
```

`DbModel` opens the file in read-only mode. It loads the schema straight away.
Call `close()` when you are done, or use the model as a context manager.
`table_by_name` and `column_by_name` raise `LookupError` when the name is not
found.

Declared column types map onto value types as follows:

- `INTEGER` and `BOOLEAN` become `Int64Value`.
- `TEXT`, `VARCHAR`, `CHAR`, `CLOB`, `BLOB` and `JSON` become `StringValue`.
- Any other declared type raises `ValueError` while the database is loading.
  This includes a column with no declared type.

Reading a `NULL` gives `NullValue` when the column is nullable. In a column
declared `NOT NULL` it raises `ValueError`. `get_value` looks rows up by a
column called `id`.

## The design graph

```python
import sqlite3

from imsql.db_model import DbModel
from imsql.design_graph import DesignGraphModel
from imsql.values import format_value

with sqlite3.connect("example.db") as conn:
    conn.executescript(
        "CREATE TABLE users (id INTEGER PRIMARY KEY, name TEXT NOT NULL);"
        "INSERT INTO users (name) VALUES ('ada'), ('grace');"
    )

with DbModel("example.db") as db:
    graph = DesignGraphModel(db)
    sheet = graph.spreadsheet_node
    sheet_id = graph.vertices(sheet)[0]              # the spreadsheet's "id" column

    users_node = graph.nodes()[1]                    # nodes()[0] is the spreadsheet
    users_id, users_name = graph.vertices(users_node)

    graph.add_edge(users_id, sheet_id)
    sheet_name = graph.add_spreadsheet_column("name")
    graph.add_edge(users_name, sheet_name)

    for row_id in graph.get_row_ids():               # [1, 2]
        print([format_value(v) if v is not None else "" for v in sheet.get_row_values(row_id)])
```

Vertices are plain integer indices. These methods ask the graph about them:
`vertex`, `vertex_name`, `get_vertex_direction` and `input_vertex`. Use
`nodes`, `vertices`, `edges`, `edge_source`, `edge_target`, `node_id` and
`edge_id` to walk the structure.

The spreadsheet node always starts with one input column called `id`.
`get_row_ids()` returns the integer values that flow into that column. It
returns an empty list when nothing is connected. It raises `RuntimeError` when
a value is not an `Int64Value`.

Table column vertices start out as outputs. The referencing column of a
foreign key becomes bidirectional. An edge runs to it from the column it
references.

A vertex can have at most one incoming edge. When it has more than one,
`input_vertex` raises `RuntimeError`. A spreadsheet column with nothing
connected yields `None` for every row.

`add_transform_node()` adds a node with `key` and `value` inputs and an
`output`. For a given row, the output reads the key input:

- an integer key is used as the row id to look up in the value input;
- a `NULL` key gives `NullValue`;
- a missing key gives `None`;
- a string key raises `RuntimeError`.

## Utilities

- `imsql.values`: `Int64Value`, `StringValue`, `NullValue`, `ValueTypeTag`
  and `format_value`. `format_value` renders `NULL` as `[NULL]`.
- `imsql.interval`: `Interval` with open or closed bounds (`BoundType`). It
  also provides `make_interval`, `make_starting_interval` and
  `make_ending_interval`.
- `imsql.lpf`: `AlphaLpf`, a first-order low-pass filter. Its durations are
  `timedelta` objects or numbers of seconds.
- `imsql.views`: `dedup` drops items equal to the one just before them.
  `intersperse` places a separator between adjacent items.
- `imsql.base_types`: `Vec2`, which is ordered by length, and `Color`.
  `Color.from_hex("#2b4f82")` parses `#rrggbb` and gives a fully opaque
  colour. `to_hex()` renders `#rrggbbaa`.
- `imsql.theme_model`: `ThemeModel`, which holds the default title-bar colours
  for database, operator and spreadsheet nodes.
- `imsql.render_ctx`: `RenderCtx` tracks nesting depth and whether the first
  frame has been painted. `Component` is a context manager. On entry and exit
  it writes an indented `<Label>` / `</Label>` trace to the context's debug
  stream.

## What this package does not do

This package holds models only. It does not draw a window, a spreadsheet table
or a node editor. It provides no command to run. It never writes to the
database: tables, columns and relationships are read once when `DbModel` is
created.