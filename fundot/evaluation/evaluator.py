"""Core evaluator for fundot.

Resolves symbols against a read-only global table and dispatches
list-headed forms to capability handles. There are no special forms: a
handle receives its call form with the operands still unevaluated and
decides for itself what to do with them.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping

from fundot.config import get_strict
from fundot.errors import FundotTypeError, FundotUnboundSymbol
from fundot.builtin.env_builtin import register
from fundot.types import CapabilityHandle, List, Null, Symbol, Value

logger = logging.getLogger(__name__)


class Evaluator:
    """
    Evaluates Value trees against a global table built once per instance.

    In permissive mode (the default) an unbound symbol evaluates to itself
    and a call whose head is not a capability handle evaluates to Null. In
    strict mode both raise.
    """

    __slots__ = ("strict", "globals")

    def __init__(self, strict: bool | None = None):
        self.strict: bool = get_strict() if strict is None else strict
        table: dict[Symbol, Value] = {}
        register(table, self.strict)
        self.globals: Mapping[Symbol, Value] = MappingProxyType(table)

    def lookup(self, symbol: Symbol) -> Value:
        value = self.globals.get(symbol)
        if value is not None:
            return value
        if self.strict:
            logger.debug("unbound symbol %s", symbol)
            raise FundotUnboundSymbol(f"Unbound symbol: {symbol}")
        return symbol

    def evaluate(self, expr: Value) -> Value:
        match expr:
            case Symbol():
                return self.lookup(expr)
            case List() if len(expr) == 0:
                return Null
            case List():
                return self.call(expr)
        # --- Everything else evaluates to itself ---
        return expr

    def call(self, form: List) -> Value:
        head = self.evaluate(form[0])
        if isinstance(head, CapabilityHandle):
            return head(List((head, *form.items[1:])))
        if self.strict:
            logger.debug("non-callable head %s in %s", head, form)
            raise FundotTypeError(f"Cannot call non-primitive {head}")
        return Null


def evaluate(expr: Value, evaluator: Evaluator | None = None) -> Value:
    """Evaluate `expr` with `evaluator`, or with a fresh permissive one."""
    if evaluator is None:
        evaluator = Evaluator(strict=False)
    return evaluator.evaluate(expr)
