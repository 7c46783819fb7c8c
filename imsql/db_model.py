"""Read-only view of an SQLite database: its tables, columns and foreign keys."""

from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, TypeVar, Union

from imsql.values import Int64Value, NullValue, StringValue, Value, ValueTypeTag

_INTEGER_TYPES = frozenset({"INTEGER", "BOOLEAN"})
_STRING_TYPES = frozenset({"TEXT", "VARCHAR", "CHAR", "CLOB", "BLOB", "JSON"})

_Named = TypeVar("_Named", "DbColumnModel", "DbTableModel")


def value_type_tag_from_string(type_name: str) -> ValueTypeTag:
    """Map a declared SQLite column type to the kind of value it holds."""
    if type_name in _INTEGER_TYPES:
        return ValueTypeTag.INT64
    if type_name in _STRING_TYPES:
        return ValueTypeTag.STRING
    raise ValueError(f"Unsupported column type: '{type_name}'")


def _quote(identifier: str) -> str:
    return '"' + identifier.replace('"', '""') + '"'


def _find_by_name(items: Iterable[_Named], name: str, container: str) -> _Named:
    for item in items:
        if item.name == name:
            return item
    raise LookupError(f"Item '{name}' not found in '{container}'")


class DbRelationshipEnforcement:
    """How a foreign-key relationship is enforced; carries no settings yet."""


class DbColumnModel:
    """A column in a database table."""

    def __init__(self, table: DbTableModel, name: str, type_name: str, nullable: bool) -> None:
        self.table = table
        self.name = name
        self.type = value_type_tag_from_string(type_name)
        self.nullable = nullable

    def __repr__(self) -> str:
        return f"DbColumnModel({self.table.name}.{self.name})"

    def _select_expression(self) -> str:
        sql_type = "INTEGER" if self.type is ValueTypeTag.INT64 else "TEXT"
        return f"CAST({_quote(self.name)} AS {sql_type})"

    def _convert(self, raw: Union[int, str, None]) -> Value:
        if raw is None:
            if not self.nullable:
                raise ValueError(
                    f"Column '{self.name}' in table '{self.table.name}' is not nullable, "
                    "but a NULL value was found."
                )
            return NullValue()
        if self.type is ValueTypeTag.INT64:
            return Int64Value(int(raw))
        return StringValue(str(raw))

    def get_rows(self) -> List[Value]:
        """Every value in this column, in table order."""
        query = f"SELECT {self._select_expression()} FROM {_quote(self.table.name)};"
        cursor = self.table.db.connection.execute(query)
        return [self._convert(raw) for (raw,) in cursor]

    def get_value(self, primary_key: int) -> Optional[Value]:
        """The value in the row whose ``id`` is ``primary_key``, or None if there is none."""
        query = (
            f"SELECT {self._select_expression()} FROM {_quote(self.table.name)} "
            "WHERE id = ?;"
        )
        row = self.table.db.connection.execute(query, (primary_key,)).fetchone()
        if row is None:
            return None
        return self._convert(row[0])


class DbTableModel:
    """A table in a database, holding its columns."""

    def __init__(self, db: DbModel, name: str) -> None:
        self.db = db
        self.name = name
        self.columns: List[DbColumnModel] = []

    def __repr__(self) -> str:
        return f"DbTableModel({self.name!r})"

    def column_by_name(self, name: str) -> DbColumnModel:
        """The column called ``name``; raises LookupError if absent."""
        return _find_by_name(self.columns, name, self.name)


class DbModel:
    """An SQLite database opened read-only, with its schema loaded."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = str(path)
        uri = Path(path).absolute().as_uri() + "?mode=ro"
        self.connection = sqlite3.connect(uri, uri=True)
        self.tables: List[DbTableModel] = []
        self._relationships: Dict[
            Tuple[DbColumnModel, DbColumnModel], DbRelationshipEnforcement
        ] = {}
        try:
            self._load_tables()
            self._load_relationships()
        except BaseException:
            self.connection.close()
            raise

    def __enter__(self) -> DbModel:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying connection."""
        self.connection.close()

    def table_by_name(self, name: str) -> DbTableModel:
        """The table called ``name``; raises LookupError if absent."""
        return _find_by_name(self.tables, name, self.path)

    def relationships(self) -> List[Tuple[DbColumnModel, DbColumnModel]]:
        """Foreign keys as ``(referenced column, referencing column)`` pairs."""
        return list(self._relationships)

    def _load_tables(self) -> None:
        names = [
            name
            for (name,) in self.connection.execute(
                "SELECT name FROM sqlite_master WHERE type='table';"
            )
        ]
        for table_name in names:
            table = DbTableModel(self, table_name)
            self.tables.append(table)
            info = self.connection.execute(f"PRAGMA table_info({_quote(table_name)});")
            for _cid, column_name, column_type, not_null, *_rest in info:
                table.columns.append(
                    DbColumnModel(table, column_name, column_type or "", not not_null)
                )

    def _load_relationships(self) -> None:
        for table in self.tables:
            rows = self.connection.execute(f"PRAGMA foreign_key_list({_quote(table.name)});")
            for row in rows:
                # SQLite's "from" is the referencing column in this table and "to" the
                # referenced one; here the referenced column is the source.
                from_table_name = row[2]
                to_column_name = row[3] or ""
                from_column_name = row[4] or ""
                from_column = self.table_by_name(from_table_name).column_by_name(from_column_name)
                to_column = table.column_by_name(to_column_name)
                self._relationships[(from_column, to_column)] = DbRelationshipEnforcement()