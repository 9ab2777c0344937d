"""Bounded in-process channels and groups of channel readers and writers."""

from __future__ import annotations

import logging
import secrets
import threading
from collections import deque
from typing import Iterator

from wake.message import DataMessage

logger = logging.getLogger(__name__)

CHANNEL_SIZE = 1_000_000
CHANNEL_ID_ALPHABET = "1234567890abcdef"
CHANNEL_ID_LEN = 5


class ChannelClosed(RuntimeError):
    """Raised when writing to a closed channel or reading a closed, drained one."""


def _new_channel_id() -> str:
    return "".join(secrets.choice(CHANNEL_ID_ALPHABET) for _ in range(CHANNEL_ID_LEN))


class _Channel:
    """Shared state behind a writer/reader pair."""

    def __init__(self, capacity: int) -> None:
        self.channel_id = _new_channel_id()
        self.capacity = capacity
        self.items: deque[DataMessage] = deque()
        self.cond = threading.Condition()
        self.closed = False

    def put(self, message: DataMessage) -> None:
        with self.cond:
            while True:
                if self.closed:
                    raise ChannelClosed(
                        f"sending on a closed channel (channel: {self.channel_id})"
                    )
                if len(self.items) < self.capacity:
                    break
                self.cond.wait()
            self.items.append(message)
            self.cond.notify_all()

    def get(self) -> DataMessage:
        with self.cond:
            while not self.items:
                if self.closed:
                    raise ChannelClosed(
                        f"receiving on a closed channel (channel: {self.channel_id})"
                    )
                self.cond.wait()
            message = self.items.popleft()
            self.cond.notify_all()
            return message

    def try_get(self) -> DataMessage | None:
        with self.cond:
            if self.items:
                message = self.items.popleft()
                self.cond.notify_all()
                return message
            if self.closed:
                raise ChannelClosed(
                    f"receiving on a closed channel (channel: {self.channel_id})"
                )
            return None

    def close(self) -> None:
        with self.cond:
            self.closed = True
            self.cond.notify_all()


class ChannelWriter:
    """The sending end of a channel; may be shared by several producers."""

    def __init__(self, channel: _Channel) -> None:
        self._channel = channel

    @property
    def channel_id(self) -> str:
        return self._channel.channel_id

    def write(self, message: DataMessage) -> None:
        """Send a message, blocking while the channel is full."""
        self._channel.put(message)

    def close(self) -> None:
        """Close the channel; readers drain what is left, then get ChannelClosed."""
        self._channel.close()

    def __repr__(self) -> str:
        return f"ChannelWriter(channel_id={self.channel_id!r})"


class ChannelReader:
    """The receiving end of a channel."""

    def __init__(self, channel: _Channel) -> None:
        self._channel = channel

    @property
    def channel_id(self) -> str:
        return self._channel.channel_id

    def read(self) -> DataMessage:
        """Receive the next message, blocking until one arrives."""
        return self._channel.get()

    def try_read(self) -> DataMessage | None:
        """Receive the next message if one is waiting, else None."""
        return self._channel.try_get()

    def __repr__(self) -> str:
        return f"ChannelReader(channel_id={self.channel_id!r})"


def create_channel() -> tuple[ChannelWriter, ChannelReader]:
    """Create a bounded channel and return its writer and reader."""
    channel = _Channel(CHANNEL_SIZE)
    return ChannelWriter(channel), ChannelReader(channel)


class MultiChannelReader:
    """A group of input channel readers addressed by sequence number."""

    def __init__(self, readers: list[ChannelReader] | None = None) -> None:
        self.readers: list[ChannelReader] = list(readers or [])

    def push(self, reader: ChannelReader) -> None:
        """Add a reader."""
        self.readers.append(reader)

    def reader(self, seq_no: int) -> ChannelReader:
        """The reader at the given position."""
        return self.readers[seq_no]

    def read(self, seq_no: int) -> DataMessage:
        """Read a message from the reader at the given position."""
        reader = self.reader(seq_no)
        message = reader.read()
        logger.debug("Read from (channel: %s). %r.", reader.channel_id, message)
        return message

    def __len__(self) -> int:
        return len(self.readers)


class MultiChannelBroadcaster:
    """A list of channel writers that every message is sent to."""

    def __init__(self, writers: list[ChannelWriter] | None = None) -> None:
        self._writers: list[ChannelWriter] = list(writers or [])

    def push(self, writer: ChannelWriter) -> None:
        """Add a writer."""
        self._writers.append(writer)

    def writer(self, seq_no: int) -> ChannelWriter:
        """The writer at the given position."""
        return self._writers[seq_no]

    def write(self, message: DataMessage) -> None:
        """Send the message to every writer."""
        for writer in self._writers:
            logger.debug("Writes to (channel: %s). %r.", writer.channel_id, message)
            writer.write(message)

    def __iter__(self) -> Iterator[ChannelWriter]:
        return iter(self._writers)

    def __len__(self) -> int:
        return len(self._writers)