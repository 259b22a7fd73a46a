from __future__ import annotations
import sys

from fundot.types.value import Value


class Symbol(Value):
    __slots__ = ("name",)

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash and reduce memory
        self.name = sys.intern(name)

    def __eq__(self, other):
        if isinstance(other, Symbol):
            return self.name is other.name or self.name == other.name
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name
