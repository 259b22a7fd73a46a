"""Scalar atoms: Boolean, Integer, Float and String.

Cross-variant equality is expressed by returning NotImplemented for any
variant a class does not know, so Python falls back to the reflected
operand (``Null`` knows how to compare itself with ``false``) and finally
to identity.
"""

from __future__ import annotations

import math
from decimal import Decimal

from fundot.types.value import Value, WEAK_HASH


INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

ESCAPES: dict[str, str] = {
    '"': '\\"',
    "\\": "\\\\",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}

# escape character (after the backslash) -> character it stands for
UNESCAPES: dict[str, str] = {
    '"': '"',
    "\\": "\\",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}


def quote(text: str) -> str:
    """Render text as a double-quoted literal using the five known escapes."""
    return '"' + "".join(ESCAPES.get(c, c) for c in text) + '"'


class Boolean(Value):
    __slots__ = ("value",)

    def __init__(self, value: bool):
        self.value = bool(value)

    def __eq__(self, other):
        if isinstance(other, Boolean):
            return self.value == other.value
        return NotImplemented

    def __hash__(self) -> int:
        return WEAK_HASH

    def __bool__(self) -> bool:
        return self.value

    def __repr__(self):
        return f"Boolean({self.value!r})"

    def __str__(self):
        return "true" if self.value else "false"


TRUE = Boolean(True)
FALSE = Boolean(False)


class Integer(Value):
    __slots__ = ("value",)

    def __init__(self, value: int):
        if not INT64_MIN <= value <= INT64_MAX:
            raise OverflowError(f"{value} does not fit in a 64-bit integer")
        self.value = int(value)

    def __eq__(self, other):
        if isinstance(other, Integer):
            return self.value == other.value
        if isinstance(other, Float):
            return float(self.value) == other.value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self):
        return f"Integer({self.value!r})"

    def __str__(self):
        return str(self.value)


class Float(Value):
    __slots__ = ("value",)

    def __init__(self, value: float):
        self.value = float(value)

    def __eq__(self, other):
        if isinstance(other, Float):
            return self.value == other.value
        if isinstance(other, Integer):
            return self.value == float(other.value)
        return NotImplemented

    def __hash__(self) -> int:
        return WEAK_HASH

    def __repr__(self):
        return f"Float({self.value!r})"

    def __str__(self):
        if not math.isfinite(self.value):
            return repr(self.value)
        # positional digits so the text reads back; no exponent form
        text = f"{Decimal(repr(self.value)):f}"
        if "." not in text:
            text += ".0"
        return text


class String(Value):
    __slots__ = ("value",)

    def __init__(self, value: str):
        self.value = value

    def __eq__(self, other):
        if isinstance(other, String):
            return self.value == other.value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self):
        return f"String({self.value!r})"

    def __str__(self):
        return quote(self.value)
