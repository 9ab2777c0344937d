"""A row of typed cells."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from wake.data_type import DataCell


@dataclass
class ArrayRow:
    """An ordered, mutable row of cells."""

    values: list[DataCell] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.values = list(self.values)

    @classmethod
    def from_example(cls) -> list[ArrayRow]:
        """Two small sample rows."""
        return [
            cls([DataCell.of(0), DataCell.of(0.1), DataCell.of("value1")]),
            cls([DataCell.of(1), DataCell.of(0.9), DataCell.of("value2")]),
        ]

    def slice_indices(self, indices: Iterable[int]) -> list[DataCell]:
        """The cells at the given positions, in the order given."""
        return [self.values[i] for i in indices]

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> DataCell:
        return self.values[index]

    def __setitem__(self, index: int, value: DataCell) -> None:
        self.values[index] = value

    def __iter__(self) -> Iterator[DataCell]:
        return iter(self.values)

    def __str__(self) -> str:
        return "".join(f"{cell} | " for cell in self.values) + "\n"