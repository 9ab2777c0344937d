"""Typed cell values with arithmetic, comparison, hashing and aggregation."""

from __future__ import annotations

import enum
import hashlib
import math
import operator
import re
import struct
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable, Iterable


class DataType(enum.Enum):
    """The kinds of value a cell can hold, in their ordering rank."""

    BOOLEAN = "boolean"
    UNSIGNED_INT = "unsigned_int"
    INTEGER = "integer"
    FLOAT = "float"
    TEXT = "text"
    TUPLE = "tuple"
    NULL = "null"


_RANK = {dtype: rank for rank, dtype in enumerate(DataType)}
_NUMERIC = frozenset({DataType.INTEGER, DataType.FLOAT})

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_USIZE_MAX = 2**64 - 1

_INT_RE = re.compile(r"[+-]?[0-9]+")
_UINT_RE = re.compile(r"\+?[0-9]+")


def _check_i32(value: int, what: str) -> int:
    if not _I32_MIN <= value <= _I32_MAX:
        raise OverflowError(f"{what} overflowed a 32-bit integer")
    return value


def _float_div(a: float, b: float) -> float:
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _parse_float(text: str) -> float:
    if any(ch.isspace() or ch == "_" for ch in text):
        raise ValueError(f"invalid float literal: {text!r}")
    return float(text)


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _digest(data: bytes) -> int:
    return int.from_bytes(hashlib.blake2b(data, digest_size=8).digest(), "little")


@dataclass(frozen=True, eq=False)
class DataCell:
    """A single typed value: the cell's kind and its Python value."""

    dtype: DataType
    value: Any = None

    @classmethod
    def of(cls, value: Any) -> DataCell:
        """Build a cell from a plain Python value, inferring its kind."""
        if isinstance(value, DataCell):
            return value
        if value is None:
            return cls.null()
        if isinstance(value, bool):
            return cls(DataType.BOOLEAN, value)
        if isinstance(value, int):
            return cls(DataType.INTEGER, _check_i32(value, "integer conversion"))
        if isinstance(value, float):
            return cls(DataType.FLOAT, value)
        if isinstance(value, str):
            return cls(DataType.TEXT, value)
        if isinstance(value, tuple) and len(value) == 2:
            return cls(DataType.TUPLE, (cls.of(value[0]), cls.of(value[1])))
        raise TypeError(f"cannot build a DataCell from {type(value).__name__}")

    @classmethod
    def null(cls) -> DataCell:
        """The null cell."""
        return cls(DataType.NULL, None)

    @classmethod
    def parse(cls, value: str, dtype: DataType) -> DataCell:
        """Parse text into a cell of the given kind; empty text is null."""
        if value == "":
            return cls.null()
        if dtype is DataType.BOOLEAN:
            if value == "true":
                return cls(DataType.BOOLEAN, True)
            if value == "false":
                return cls(DataType.BOOLEAN, False)
            raise ValueError(f"invalid boolean literal: {value!r}")
        if dtype is DataType.UNSIGNED_INT:
            if not _UINT_RE.fullmatch(value) or int(value) > _USIZE_MAX:
                raise ValueError(f"invalid unsigned integer literal: {value!r}")
            return cls(DataType.UNSIGNED_INT, int(value))
        if dtype is DataType.INTEGER:
            if not _INT_RE.fullmatch(value):
                raise ValueError(f"invalid integer literal: {value!r}")
            number = int(value)
            if not _I32_MIN <= number <= _I32_MAX:
                raise ValueError(f"integer literal out of range: {value!r}")
            return cls(DataType.INTEGER, number)
        if dtype is DataType.FLOAT:
            return cls(DataType.FLOAT, _parse_float(value))
        if dtype is DataType.TEXT:
            return cls(DataType.TEXT, value)
        raise ValueError("Invalid Conversion Method")

    @classmethod
    def parse_bytes(cls, value: bytes, dtype: DataType) -> DataCell:
        """Parse UTF-8 bytes into a cell of the given kind; empty input is null."""
        if not value:
            return cls.null()
        return cls.parse(bytes(value).decode("utf-8"), dtype)

    def _hash_bytes(self) -> bytes:
        if self.dtype is DataType.BOOLEAN:
            return bytes([int(self.value)])
        if self.dtype is DataType.UNSIGNED_INT:
            return struct.pack("<Q", self.value)
        if self.dtype is DataType.INTEGER:
            return struct.pack("<i", self.value)
        if self.dtype is DataType.TEXT:
            return self.value.encode("utf-8")
        if self.dtype is DataType.TUPLE:
            first, second = self.value
            return struct.pack("<QQ", first.hash_value(), second.hash_value())
        # Floats and nulls contribute nothing to the hash.
        return b""

    def hash_value(self) -> int:
        """A stable 64-bit hash of the cell; floats are not hashed."""
        return _digest(self._hash_bytes())

    @classmethod
    def vector_hash(cls, cells: Iterable[DataCell]) -> int:
        """A stable 64-bit hash of a sequence of cells."""
        return _digest(b"".join(cell._hash_bytes() for cell in cells))

    @classmethod
    def sum(cls, cells: Iterable[DataCell]) -> DataCell:
        """Sum of the cells, typed after the first one; null when empty."""
        cells = list(cells)
        if not cells:
            return cls.null()
        first, rest = cells[0], cells[1:]
        if first.dtype is DataType.INTEGER:
            total = first.value
            for cell in rest:
                total = _check_i32(total + int(cell), "SUM")
            return cls(DataType.INTEGER, total)
        if first.dtype is DataType.FLOAT:
            total = first.value
            for cell in rest:
                total += float(cell)
            return cls(DataType.FLOAT, total)
        raise TypeError("SUM not implemented")

    @classmethod
    def _extreme(cls, cells: Iterable[DataCell], pick: Callable, name: str) -> DataCell:
        cells = list(cells)
        if not cells:
            return cls.null()
        first, rest = cells[0], cells[1:]
        if first.dtype is DataType.INTEGER:
            return cls(DataType.INTEGER, pick([first.value, *(int(c) for c in rest)]))
        if first.dtype is DataType.FLOAT:
            return cls(DataType.FLOAT, pick([first.value, *(float(c) for c in rest)]))
        raise TypeError(f"{name} not implemented")

    @classmethod
    def min(cls, cells: Iterable[DataCell]) -> DataCell:
        """Smallest cell, typed after the first one; null when empty."""
        return cls._extreme(cells, min, "MIN")

    @classmethod
    def max(cls, cells: Iterable[DataCell]) -> DataCell:
        """Largest cell, typed after the first one; null when empty."""
        return cls._extreme(cells, max, "MAX")

    @classmethod
    def count(cls, cells: Iterable[DataCell]) -> DataCell:
        """Number of non-null cells."""
        return cls(
            DataType.INTEGER,
            sum(1 for cell in cells if cell.dtype is not DataType.NULL),
        )

    @classmethod
    def avg(cls, cells: Iterable[DataCell]) -> DataCell:
        """A (sum, count) tuple cell from which the average follows."""
        cells = list(cells)
        return cls(DataType.TUPLE, (cls.sum(cells), cls.count(cells)))

    def _arith(self, other: Any, op: Callable, name: str) -> DataCell:
        if not isinstance(other, DataCell):
            return NotImplemented
        if self.dtype not in _NUMERIC or other.dtype not in _NUMERIC:
            raise TypeError(f"{name} not implemented")
        if (
            self.dtype is DataType.INTEGER
            and other.dtype is DataType.INTEGER
            and op is not _float_div
        ):
            return DataCell(DataType.INTEGER, _check_i32(op(self.value, other.value), name))
        return DataCell(DataType.FLOAT, op(float(self.value), float(other.value)))

    def __add__(self, other: Any) -> DataCell:
        return self._arith(other, operator.add, "ADD")

    def __sub__(self, other: Any) -> DataCell:
        return self._arith(other, operator.sub, "SUB")

    def __mul__(self, other: Any) -> DataCell:
        return self._arith(other, operator.mul, "MUL")

    def __truediv__(self, other: Any) -> DataCell:
        return self._arith(other, _float_div, "DIV")

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, DataCell):
            return self.dtype is other.dtype and self.value == other.value
        if isinstance(other, bool):
            return False
        if isinstance(other, (int, float)):
            if self.dtype is DataType.INTEGER:
                return float(self.value) == float(other)
            if self.dtype is DataType.FLOAT:
                return self.value == float(other)
            return False
        if isinstance(other, str):
            return self.dtype is DataType.TEXT and self.value == other
        return NotImplemented

    def _compare(self, other: Any, op: Callable) -> bool:
        if not isinstance(other, DataCell):
            return NotImplemented
        if self.dtype is not other.dtype:
            return op(_RANK[self.dtype], _RANK[other.dtype])
        if self.dtype is DataType.NULL:
            return op(0, 0)
        return op(self.value, other.value)

    def __lt__(self, other: Any) -> bool:
        return self._compare(other, operator.lt)

    def __le__(self, other: Any) -> bool:
        return self._compare(other, operator.le)

    def __gt__(self, other: Any) -> bool:
        return self._compare(other, operator.gt)

    def __ge__(self, other: Any) -> bool:
        return self._compare(other, operator.ge)

    def __hash__(self) -> int:
        return hash(self.value)

    def __int__(self) -> int:
        if self.dtype is DataType.INTEGER:
            return self.value
        if self.dtype is DataType.FLOAT:
            if math.isnan(self.value):
                return 0
            if math.isinf(self.value):
                return _I32_MAX if self.value > 0 else _I32_MIN
            return max(_I32_MIN, min(_I32_MAX, math.trunc(self.value)))
        raise TypeError("Invalid Conversion")

    def __float__(self) -> float:
        if self.dtype in _NUMERIC:
            return float(self.value)
        raise TypeError("Invalid Conversion")

    def __str__(self) -> str:
        if self.dtype is DataType.BOOLEAN:
            return "true" if self.value else "false"
        if self.dtype is DataType.INTEGER:
            return str(self.value)
        if self.dtype is DataType.FLOAT:
            return _format_float(self.value)
        if self.dtype is DataType.TEXT:
            return self.value
        if self.dtype is DataType.TUPLE:
            first, second = self.value
            return f"({first},{second})"
        raise ValueError("Invalid DataCell")