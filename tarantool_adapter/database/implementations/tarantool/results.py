"""Result containers for Tarantool SQL responses."""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any

from tarantool_adapter.types import RecordType


@dataclass
class SqlQueryResult:
    """Rows returned by a SELECT together with their column metadata.

    ``metadata`` holds one ``{"name": ..., "type": ...}`` map per column in
    result order. Iterating yields one record per row, keyed by column name.
    """

    data: Sequence[Sequence[Any]]
    metadata: list[dict[str, Any]] = field(default_factory=list)

    @property
    def column_names(self) -> list[str]:
        return [column["name"] for column in self.metadata]

    def __iter__(self) -> Iterator[RecordType]:
        names = self.column_names
        for row in self.data:
            yield dict(zip(names, row, strict=False))

    def __len__(self) -> int:
        return len(self.data)

    @property
    def count(self) -> int:
        return len(self.data)


@dataclass
class SqlUpdateResult:
    """Outcome of a data- or schema-changing statement."""

    count: int
    autoincrement_ids: list[Any] = field(default_factory=list)
