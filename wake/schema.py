"""Table schemas: named, typed columns with a key index."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from wake.data_type import DataType


class SchemaError(LookupError):
    """Raised for unknown tables or column names."""


@dataclass(frozen=True)
class Column:
    """A named, typed column; ``key`` marks it as part of the primary key."""

    name: str
    dtype: DataType
    key: bool = False

    @classmethod
    def from_field(cls, name: str, dtype: DataType) -> Column:
        """A plain (non-key) column."""
        return cls(name, dtype, False)

    @classmethod
    def from_key_field(cls, name: str, dtype: DataType) -> Column:
        """A column that is part of the key."""
        return cls(name, dtype, True)


@dataclass(frozen=True)
class Schema:
    """The table name and its ordered columns."""

    table: str
    columns: tuple[Column, ...]
    _column_index: dict[str, int] = field(init=False, repr=False, compare=False)
    _key_index: tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        columns = tuple(self.columns)
        object.__setattr__(self, "columns", columns)
        object.__setattr__(
            self, "_column_index", {col.name: i for i, col in enumerate(columns)}
        )
        object.__setattr__(
            self, "_key_index", tuple(i for i, col in enumerate(columns) if col.key)
        )

    @classmethod
    def from_columns(cls, columns: Iterable[Column]) -> Schema:
        """A schema for an unnamed table."""
        return cls("unnamed", tuple(columns))

    def col_count(self) -> int:
        """Number of columns."""
        return len(self.columns)

    def keys(self) -> list[int]:
        """Positions of the key columns, in column order."""
        return list(self._key_index)

    def index(self, column: str) -> int:
        """Position of the named column."""
        try:
            return self._column_index[column]
        except KeyError:
            raise SchemaError(f"Invalid column name: {column!r}") from None

    def dtype(self, column: str) -> DataType:
        """Type of the named column."""
        return self.columns[self.index(column)].dtype

    def get_column(self, column: str) -> Column:
        """The named column."""
        return self.columns[self.index(column)]

    def get_column_from_index(self, index: int) -> Column:
        """The column at the given position."""
        if not 0 <= index < len(self.columns):
            raise IndexError(f"column index {index} out of range")
        return self.columns[index]

    @classmethod
    def from_example(cls, table: str) -> Schema:
        """One of the built-in example schemas."""
        columns = _EXAMPLES.get(table)
        if columns is None:
            raise SchemaError("Schema Not Defined")
        return cls(table, tuple(Column.from_field(name, dtype) for name, dtype in columns))


_I, _F, _T = DataType.INTEGER, DataType.FLOAT, DataType.TEXT

_EXAMPLES: dict[str, list[tuple[str, DataType]]] = {
    "lineitem": [
        ("l_orderkey", _I),
        ("l_partkey", _I),
        ("l_suppkey", _I),
        ("l_linenumber", _I),
        ("l_quantity", _I),
        ("l_extendedprice", _F),
        ("l_discount", _F),
        ("l_tax", _F),
        ("l_returnflag", _T),
        ("l_linestatus", _T),
        ("l_shipdate", _T),
        ("l_commitdate", _T),
        ("l_receiptdate", _T),
        ("l_shipinstruct", _T),
        ("l_shipmode", _T),
        ("l_comment", _T),
    ],
    "orders": [
        ("o_orderkey", _I),
        ("o_custkey", _I),
        ("o_orderstatus", _T),
        ("o_totalprice", _F),
        ("o_orderdate", _T),
        ("o_orderpriority", _T),
        ("o_clerk", _T),
        ("o_shippriority", _I),
        ("o_comment", _T),
    ],
    "test_arraydata": [
        ("col1", _I),
        ("col2", _T),
        ("col3", _T),
        ("col4", _I),
    ],
}