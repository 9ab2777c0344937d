"""Data cells, schemas, messages and channels for a streaming query engine."""

__version__ = "0.1.0"

__all__ = [
    "array_row",
    "channel",
    "data_type",
    "kv",
    "message",
    "meta_type",
    "payload",
    "schema",
    "tpch",
]