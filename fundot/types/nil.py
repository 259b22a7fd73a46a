from __future__ import annotations

from fundot.types.value import Value, WEAK_HASH
from fundot.types.scalars import Boolean


class NullType(Value):
    __slots__ = ()

    _instance: NullType | None = None

    def __new__(cls) -> NullType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "Null"
    def __str__(self): return "null"
    def __bool__(self): return False

    # Null is equal to Null and to false, nothing else
    def __eq__(self, other):
        if isinstance(other, NullType):
            return True
        if isinstance(other, Boolean):
            return not other.value
        return NotImplemented

    def __hash__(self) -> int:
        return WEAK_HASH


Null = NullType()
