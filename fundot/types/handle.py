from __future__ import annotations
from typing import Callable

from fundot.types.value import Value, WEAK_HASH


PrimitiveFunction = Callable[[Value], Value]


class CapabilityHandle(Value):
    """An opaque, invocable value wrapping a host function ``Value -> Value``.

    Handles are only created when an evaluator seeds its global table; the
    reader never produces one. A handle is equal only to itself.
    """

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: PrimitiveFunction):
        self.name = name
        self.fn = fn

    def __call__(self, form: Value) -> Value:
        return self.fn(form)

    def __eq__(self, other):
        return self is other

    def __hash__(self) -> int:
        return WEAK_HASH

    def __repr__(self):
        return f"CapabilityHandle({self.name!r})"

    def __str__(self):
        return f"<primitive {self.name}>"
