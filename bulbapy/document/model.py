"""Document value model produced by the parser."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, TypeAlias

PlainValue: TypeAlias = "str | float | bool | None | list[PlainValue] | dict[str, PlainValue]"
LeafPath: TypeAlias = tuple[str | int, ...]


@dataclass(frozen=True, slots=True)
class DocString:
    """String scalar, stored without its surrounding quotes."""

    value: str

    def to_python(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class DocNumber:
    value: float

    def to_python(self) -> float:
        return self.value


@dataclass(frozen=True, slots=True)
class DocBool:
    value: bool

    def to_python(self) -> bool:
        return self.value


@dataclass(frozen=True, slots=True)
class DocNull:
    def to_python(self) -> None:
        return None


@dataclass(frozen=True, slots=True)
class DocList:
    """Ordered list of document values."""

    items: tuple[DocValue, ...] = ()

    def __getitem__(self, index: int) -> DocValue:
        return self.items[index]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[DocValue]:
        return iter(self.items)

    def to_python(self) -> list[PlainValue]:
        return [item.to_python() for item in self.items]


@dataclass(frozen=True, slots=True, eq=False)
class DocMap:
    """Map from string keys to document values.

    Iteration follows insertion order; serializers sort keys themselves.
    The entries are exposed through a read-only proxy.
    """

    entries: Mapping[str, DocValue] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.entries, MappingProxyType):
            object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DocMap):
            return NotImplemented
        return dict(self.entries) == dict(other.entries)

    __hash__ = None  # type: ignore[assignment]

    def __getitem__(self, key: str) -> DocValue:
        return self.entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def get(self, key: str, default: DocValue | None = None) -> DocValue | None:
        return self.entries.get(key, default)

    def keys(self):
        return self.entries.keys()

    def items(self):
        return self.entries.items()

    def to_python(self) -> dict[str, PlainValue]:
        return {key: value.to_python() for key, value in self.entries.items()}


DocScalar: TypeAlias = DocString | DocNumber | DocBool | DocNull
DocValue: TypeAlias = DocString | DocNumber | DocBool | DocNull | DocList | DocMap

SCALAR_TYPES = (DocString, DocNumber, DocBool, DocNull)
VALUE_TYPES = (*SCALAR_TYPES, DocList, DocMap)


def is_scalar(value: DocValue) -> bool:
    return isinstance(value, SCALAR_TYPES)


def from_python(data: Any) -> DocValue:
    """Build a document value from plain Python data.

    Accepts `dict` (string keys), `list`/`tuple`, `str`, `bool`, `int`,
    `float` and `None`; existing document values are returned unchanged.
    """
    if isinstance(data, VALUE_TYPES):
        return data
    if data is None:
        return DocNull()
    # bool before int: bool is an int subclass.
    if isinstance(data, bool):
        return DocBool(data)
    if isinstance(data, (int, float)):
        return DocNumber(float(data))
    if isinstance(data, str):
        return DocString(data)
    if isinstance(data, Mapping):
        entries: dict[str, DocValue] = {}
        for key, value in data.items():
            if not isinstance(key, str):
                raise TypeError(f"Document keys must be strings, got {type(key).__name__}")
            entries[key] = from_python(value)
        return DocMap(entries)
    if isinstance(data, (list, tuple)):
        return DocList(tuple(from_python(item) for item in data))
    raise TypeError(f"Unsupported document value type: {type(data).__name__}")


def iter_leaves(value: DocValue, path: LeafPath = ()) -> Iterator[tuple[LeafPath, DocScalar]]:
    """Yield `(path, scalar)` for every scalar leaf under `value`."""
    if isinstance(value, DocMap):
        for key, child in value.items():
            yield from iter_leaves(child, (*path, key))
    elif isinstance(value, DocList):
        for index, child in enumerate(value.items):
            yield from iter_leaves(child, (*path, index))
    else:
        yield path, value
