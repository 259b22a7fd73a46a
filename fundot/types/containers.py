"""Compound values: List, Vector and Map.

All three are immutable once built. Equality is structural and exact about
the variant, so a List never equals a Vector with the same elements.
"""

from __future__ import annotations

from io import StringIO
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from fundot.types.value import Value, WEAK_HASH


class _Sequence(Value):
    __slots__ = ("items",)

    def __init__(self, items: Iterable[Value] = ()):
        self.items: tuple[Value, ...] = tuple(items)

    def __eq__(self, other):
        if type(other) is type(self):
            # element-wise, so a shared nan element still compares unequal
            return len(self.items) == len(other.items) and all(
                a == b for a, b in zip(self.items, other.items)
            )
        if isinstance(other, Value):
            return False
        return NotImplemented

    def __hash__(self) -> int:
        return WEAK_HASH

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)

    def __getitem__(self, index):
        return self.items[index]

    def __repr__(self):
        return f"{type(self).__name__}({list(self.items)!r})"


class List(_Sequence):
    """Ordered sequence read from ``( ... )``; also the shape of a call form."""

    __slots__ = ()

    def __str__(self) -> str:
        return "(" + " ".join(str(item) for item in self.items) + ")"


class Vector(_Sequence):
    """Ordered, indexable sequence read from ``[ ... ]``."""

    __slots__ = ()

    def __str__(self) -> str:
        return "[" + ", ".join(str(item) for item in self.items) + "]"


class Map(Value):
    """Key/value table read from ``{ k: v, ... }``.

    Keys are compared with Value equality and hashed with the weak Value
    hash. Later pairs win over earlier pairs with an equal key.
    """

    __slots__ = ("_entries",)

    def __init__(
        self, entries: Mapping[Value, Value] | Iterable[tuple[Value, Value]] = ()
    ):
        table: dict[Value, Value] = {}
        pairs = entries.items() if isinstance(entries, Mapping) else entries
        for key, value in pairs:
            table[key] = value
        self._entries = table

    @property
    def entries(self) -> Mapping[Value, Value]:
        return MappingProxyType(self._entries)

    def get(self, key: Value, default: Value | None = None) -> Value | None:
        return self._entries.get(key, default)

    def items(self):
        return self._entries.items()

    def __eq__(self, other):
        if isinstance(other, Map):
            if len(self._entries) != len(other._entries):
                return False
            return all(
                key in other._entries and other._entries[key] == value
                for key, value in self._entries.items()
            )
        if isinstance(other, Value):
            return False
        return NotImplemented

    def __hash__(self) -> int:
        return WEAK_HASH

    def __contains__(self, key) -> bool:
        return key in self._entries

    def __getitem__(self, key: Value) -> Value:
        return self._entries[key]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Value]:
        return iter(self._entries)

    def __repr__(self):
        return f"Map({self._entries!r})"

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            buffer.write(", ".join(f"{k}: {v}" for k, v in self._entries.items()))
            buffer.write("}")
            return buffer.getvalue()
