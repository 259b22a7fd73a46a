from fundot.types.value import Value, WEAK_HASH
from fundot.types.scalars import (
    Boolean,
    Float,
    Integer,
    String,
    TRUE,
    FALSE,
    INT64_MAX,
    INT64_MIN,
)
from fundot.types.nil import Null, NullType
from fundot.types.symbol import Symbol
from fundot.types.containers import List, Map, Vector
from fundot.types.handle import CapabilityHandle, PrimitiveFunction

__all__ = [
    "Value",
    "WEAK_HASH",
    "Null",
    "NullType",
    "Boolean",
    "TRUE",
    "FALSE",
    "Integer",
    "INT64_MIN",
    "INT64_MAX",
    "Float",
    "String",
    "Symbol",
    "List",
    "Vector",
    "Map",
    "CapabilityHandle",
    "PrimitiveFunction",
]
