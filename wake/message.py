"""The unit of exchange between execution nodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from wake.payload import EOF, DataBlock, EndOfStream, Payload, Signal


@dataclass(frozen=True)
class DataMessage:
    """A message carrying a data block, end-of-stream or a signal."""

    payload: Payload

    @classmethod
    def from_data(cls, data: Any) -> DataMessage:
        """Wrap a data block, or bare data in a block with empty metadata."""
        if not isinstance(data, DataBlock):
            data = DataBlock(data)
        return cls(data)

    @classmethod
    def eof(cls) -> DataMessage:
        """An end-of-stream message."""
        return cls(EOF)

    @classmethod
    def stop(cls) -> DataMessage:
        """A stop-signal message."""
        return cls(Signal.STOP)

    def is_eof(self) -> bool:
        """Whether this message marks the end of the stream."""
        return isinstance(self.payload, EndOfStream)

    def is_present(self) -> bool:
        """Whether this message is anything but end-of-stream."""
        return not self.is_eof()

    def datablock(self) -> DataBlock:
        """The carried data block; raises if the message holds no data."""
        if isinstance(self.payload, DataBlock):
            return self.payload
        raise ValueError("datablock called on non-data")