from __future__ import annotations


# Every variant without a value-derived hash lands in one bucket, so any
# Value can key a Map without a canonical float or collection hash.
WEAK_HASH = 0


class Value:
    """Common base of every fundot runtime value."""

    __slots__ = ()

    def __hash__(self) -> int:
        return WEAK_HASH
