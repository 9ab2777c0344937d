"""Plain key/value records."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class KeyValue:
    """A single key/value string pair."""

    key: str
    value: str


@dataclass
class KeyValueList:
    """An ordered list of key/value pairs."""

    data: list[KeyValue] = field(default_factory=list)

    @classmethod
    def from_key_value(cls, kv: KeyValue) -> KeyValueList:
        """A list holding a single pair."""
        return cls([kv])