"""Index-addressed storage for maps that are still open during a parse."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, TypeAlias

from bulbapy.document import DocMap, DocValue

ROOT_INDEX: Final[int] = 0


@dataclass(frozen=True, slots=True)
class ContainerRef:
    """Placeholder stored in a parent map for a child map living in the arena."""

    index: int


ArenaValue: TypeAlias = DocValue | ContainerRef


class MapArena:
    """Mutable maps addressed by stable indices.

    The parser's stack of open sections holds indices into the arena and a
    parent map holds a `ContainerRef` with the same index, so an open map is
    written through exactly one owner. `materialize` turns the arena into an
    immutable `DocMap` tree; arena handles do not outlive the parse.
    """

    def __init__(self) -> None:
        self._nodes: list[dict[str, ArenaValue]] = [{}]

    def __len__(self) -> int:
        return len(self._nodes)

    def allocate(self) -> int:
        self._nodes.append({})
        return len(self._nodes) - 1

    def insert(self, index: int, key: str, value: ArenaValue) -> None:
        self._nodes[index][key] = value

    def open_child(self, parent: int, key: str) -> int:
        child = self.allocate()
        self.insert(parent, key, ContainerRef(child))
        return child

    def materialize(self, index: int = ROOT_INDEX) -> DocMap:
        entries: dict[str, DocValue] = {}
        for key, value in self._nodes[index].items():
            if isinstance(value, ContainerRef):
                entries[key] = self.materialize(value.index)
            else:
                entries[key] = value
        return DocMap(entries)
