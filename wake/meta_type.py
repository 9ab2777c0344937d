"""Reserved metadata keys and helpers for data-block metadata maps."""

from __future__ import annotations

from typing import Any, Iterable, Union

from wake.schema import Column, Schema

SCHEMA_META_NAME = "reserved.schema"
DATABLOCK_TYPE = "reserved.type"
DATABLOCK_CARDINALITY = "reserved.cardinality"
DATABLOCK_TOTAL_RECORDS = "reserved.total_blocks"

DATABLOCK_TYPE_DM = "dm"
DATABLOCK_TYPE_DA = "da"

MetaValue = Union[Schema, str, float]


def _as_schema(schema: Schema | Iterable[Column]) -> Schema:
    if isinstance(schema, Schema):
        return schema
    return Schema.from_columns(schema)


def _build(schema: Schema | Iterable[Column], block_type: str) -> dict[str, MetaValue]:
    return {
        SCHEMA_META_NAME: _as_schema(schema),
        DATABLOCK_TYPE: block_type,
        DATABLOCK_CARDINALITY: 1.0,
    }


def meta_map(schema: Schema | Iterable[Column]) -> dict[str, MetaValue]:
    """Metadata for a data-array block carrying the given schema."""
    return _build(schema, DATABLOCK_TYPE_DA)


def dm_meta_map(schema: Schema | Iterable[Column]) -> dict[str, MetaValue]:
    """Metadata for a data-map block carrying the given schema."""
    return _build(schema, DATABLOCK_TYPE_DM)


def to_schema(cell: Any) -> Schema:
    """Return the metadata value as a schema, or raise if it is not one."""
    if isinstance(cell, Schema):
        return cell
    raise TypeError("Not a Valid Schema DataCell")