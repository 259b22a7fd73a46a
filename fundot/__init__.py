# Public API for fundot: a reader and minimal evaluator for a small
# dynamically typed value notation.
#
# Data flow: text -> lex -> Tokens -> TokenStream -> Value tree -> Evaluator -> Value.
# `str()` of any Value gives its display form.

from fundot.types import (
    Boolean,
    CapabilityHandle,
    FALSE,
    Float,
    Integer,
    List,
    Map,
    Null,
    String,
    Symbol,
    TRUE,
    Value,
    Vector,
)
from fundot.reader.parser import Token, TokenStream, lex, parse, parse_all
from fundot.evaluation.evaluator import Evaluator, evaluate
from fundot.interpreter import Interpreter
from fundot.errors import FundotError, FundotSyntaxError

__all__ = [
    "Value",
    "Null",
    "Boolean",
    "TRUE",
    "FALSE",
    "Integer",
    "Float",
    "String",
    "Symbol",
    "List",
    "Vector",
    "Map",
    "CapabilityHandle",
    "Token",
    "TokenStream",
    "lex",
    "parse",
    "parse_all",
    "Evaluator",
    "evaluate",
    "Interpreter",
    "FundotError",
    "FundotSyntaxError",
]
