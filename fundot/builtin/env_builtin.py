"""Primitive capability handles seeded into every evaluator's global table.

A primitive receives one Value: the call form, a List holding the
evaluated handle followed by the caller's raw, unevaluated operands.
"""
from __future__ import annotations

import logging
import sys
from typing import MutableMapping, NoReturn

from fundot.errors import FundotArityError, FundotTypeError
from fundot.types import (
    CapabilityHandle,
    Integer,
    List,
    Map,
    Null,
    PrimitiveFunction,
    Symbol,
    Value,
    Vector,
)

logger = logging.getLogger(__name__)


def quit_primitive(form: Value) -> NoReturn:
    """Terminate the hosting process; the call form is ignored."""
    logger.debug("quit requested")
    sys.exit(0)


def lookup(container: Value, key: Value) -> Value:
    """Return the element of a Vector or Map addressed by `key`, or Null."""
    if isinstance(container, Vector):
        if isinstance(key, Integer) and 0 <= key.value < len(container):
            return container[key.value]
        return Null
    if isinstance(container, Map):
        return container.get(key, Null)
    return Null


def get_primitive(form: Value) -> Value:
    """(get container key) -> element, or Null for any miss or bad shape."""
    if not isinstance(form, List) or len(form) < 3:
        return Null
    return lookup(form[1], form[2])


def strict_get_primitive(form: Value) -> Value:
    """`get` that rejects malformed calls instead of answering Null."""
    if not isinstance(form, List) or len(form) < 3:
        raise FundotArityError("get requires a container and a key")
    container, key = form[1], form[2]
    if isinstance(container, Vector):
        if not isinstance(key, Integer):
            raise FundotTypeError(f"Vector index must be an integer, got {key}")
    elif not isinstance(container, Map):
        raise FundotTypeError(f"Cannot index into {container}")
    return lookup(container, key)


def primitives(strict: bool = False) -> dict[str, PrimitiveFunction]:
    return {
        "quit": quit_primitive,
        "get": strict_get_primitive if strict else get_primitive,
    }


# -------------------------------
# Registration
# -------------------------------
def register(table: MutableMapping[Symbol, Value], strict: bool = False) -> None:
    table.update({
        Symbol(name): CapabilityHandle(name, fn)
        for name, fn in primitives(strict).items()
    })
