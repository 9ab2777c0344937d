"""Message payloads: data blocks with metadata, end-of-stream and signals."""

from __future__ import annotations

import copy
import enum
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar, Union

from wake.meta_type import SCHEMA_META_NAME, to_schema
from wake.schema import Schema

T = TypeVar("T")


class Signal(enum.Enum):
    """Control signals carried between execution nodes."""

    STOP = "stop"


@dataclass(frozen=True)
class EndOfStream:
    """Marks the end of a stream; all instances are equal."""

    def __repr__(self) -> str:
        return "EOF"


EOF = EndOfStream()


@dataclass(eq=True)
class DataBlock(Generic[T]):
    """Data plus a metadata map; copies share the data object."""

    data: T
    metadata: dict[str, Any] = field(default_factory=dict)

    def schema(self) -> Schema:
        """The schema stored in the metadata."""
        try:
            cell = self.metadata[SCHEMA_META_NAME]
        except KeyError:
            raise KeyError("data block has no schema") from None
        return to_schema(cell)

    def __copy__(self) -> DataBlock[T]:
        return DataBlock(self.data, dict(self.metadata))

    def __deepcopy__(self, memo: dict) -> DataBlock[T]:
        return DataBlock(self.data, copy.deepcopy(self.metadata, memo))

    def __repr__(self) -> str:
        return f"DataBlock(metadata_keys={sorted(self.metadata)!r})"


Payload = Union[EndOfStream, DataBlock, Signal]