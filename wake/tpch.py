"""TPC-H table inputs, record counts and schemas."""

from __future__ import annotations

import glob
import logging
import os
import re
from dataclasses import dataclass, field

from wake.data_type import DataType
from wake.schema import Column, Schema, SchemaError

logger = logging.getLogger(__name__)

TPCH_TABLES = (
    "lineitem",
    "orders",
    "customer",
    "part",
    "partsupp",
    "region",
    "nation",
    "supplier",
)

_SCALED_RECORDS = {
    "lineitem": 6_000_000,
    "orders": 1_500_000,
    "part": 200_000,
    "partsupp": 800_000,
    "customer": 150_000,
    "supplier": 10_000,
}
_FIXED_RECORDS = {"nation": 25, "region": 5}


@dataclass
class TableInput:
    """The files holding a table and the dataset scale."""

    input_files: list[str] = field(default_factory=list)
    scale: int = 1


def total_number_of_records(table: str, scale: int) -> int:
    """Expected number of rows of a TPC-H table at the given scale; 0 if unknown."""
    if table in _SCALED_RECORDS:
        return _SCALED_RECORDS[table] * scale
    return _FIXED_RECORDS.get(table, 0)


def _natural_key(text: str) -> list:
    return [int(part) if part.isdigit() else part for part in re.split(r"(\d+)", text)]


def load_tables(directory: str | os.PathLike, scale: int) -> dict[str, TableInput]:
    """Find each table's partition files in the directory, in natural order."""
    directory = os.fspath(directory)
    logger.info("Specified Input Directory: %s", directory)
    tables = {}
    for table in TPCH_TABLES:
        pattern = os.path.join(glob.escape(directory), f"{table}.tbl*")
        files = sorted(glob.glob(pattern), key=_natural_key)
        tables[table] = TableInput(files, scale)
    logger.info("Evaluating On Files")
    logger.info("%r", tables)
    return tables


_I, _F, _T = DataType.INTEGER, DataType.FLOAT, DataType.TEXT

# (name, type, is_key)
_TPCH_COLUMNS: dict[str, list[tuple[str, DataType, bool]]] = {
    "lineitem": [
        ("l_orderkey", _I, True),
        ("l_partkey", _I, False),
        ("l_suppkey", _I, False),
        ("l_linenumber", _I, True),
        ("l_quantity", _I, False),
        ("l_extendedprice", _F, False),
        ("l_discount", _F, False),
        ("l_tax", _F, False),
        ("l_returnflag", _T, False),
        ("l_linestatus", _T, False),
        ("l_shipdate", _T, False),
        ("l_commitdate", _T, False),
        ("l_receiptdate", _T, False),
        ("l_shipinstruct", _T, False),
        ("l_shipmode", _T, False),
        ("l_comment", _T, False),
    ],
    "orders": [
        ("o_orderkey", _I, True),
        ("o_custkey", _I, False),
        ("o_orderstatus", _T, False),
        ("o_totalprice", _F, False),
        ("o_orderdate", _T, False),
        ("o_orderpriority", _T, False),
        ("o_clerk", _T, False),
        ("o_shippriority", _I, False),
        ("o_comment", _T, False),
    ],
    "customer": [
        ("c_custkey", _I, True),
        ("c_name", _T, False),
        ("c_address", _T, False),
        ("c_nationkey", _I, False),
        ("c_phone", _T, False),
        ("c_acctbal", _F, False),
        ("c_mktsegment", _T, False),
        ("c_comment", _T, False),
    ],
    "supplier": [
        ("s_suppkey", _I, True),
        ("s_name", _T, False),
        ("s_address", _T, False),
        ("s_nationkey", _I, False),
        ("s_phone", _T, False),
        ("s_acctbal", _F, False),
        ("s_comment", _T, False),
    ],
    "nation": [
        ("n_nationkey", _I, True),
        ("n_name", _T, False),
        ("n_regionkey", _I, False),
        ("n_comment", _T, False),
    ],
    "region": [
        ("r_regionkey", _I, True),
        ("r_name", _T, False),
        ("r_comment", _T, False),
    ],
    "part": [
        ("p_partkey", _I, True),
        ("p_name", _T, False),
        ("p_mfgr", _T, False),
        ("p_brand", _T, False),
        ("p_type", _T, False),
        ("p_size", _I, False),
        ("p_container", _T, False),
        ("p_retailprice", _F, False),
        ("p_comment", _T, False),
    ],
    "partsupp": [
        ("ps_partkey", _I, True),
        ("ps_suppkey", _I, True),
        ("ps_availqty", _I, False),
        ("ps_supplycost", _F, False),
        ("ps_comment", _T, False),
    ],
}


def tpch_schema(table: str) -> Schema:
    """The schema of a TPC-H table, with its key columns marked."""
    columns = _TPCH_COLUMNS.get(table)
    if not columns:
        raise SchemaError("Schema Not Defined")
    return Schema(table, tuple(Column(name, dtype, key) for name, dtype, key in columns))