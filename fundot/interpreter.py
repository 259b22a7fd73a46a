from __future__ import annotations

from fundot.evaluation.evaluator import Evaluator
from fundot.reader.parser import TokenStream, lex
from fundot.types import Null, Value


class Interpreter:
    """
    Reads fundot text and evaluates it with one long-lived Evaluator.
    """

    def __init__(self, strict: bool | None = None, max_depth: int | None = None):
        self.evaluator = Evaluator(strict)
        self.max_depth = max_depth

    def _stream(self, code: str) -> TokenStream:
        return TokenStream(lex(code), self.max_depth)

    def read(self, code: str) -> Value:
        """Parse the first form in `code`."""
        return self._stream(code).parse_expr()

    def eval(self, code: str) -> Value:
        """Parse the first form in `code` and evaluate it; blank input is Null."""
        stream = self._stream(code)
        if stream.at_end():
            return Null
        return self.evaluator.evaluate(stream.parse_expr())

    def eval_all(self, code: str) -> list[Value]:
        """Evaluate every form in `code` in order."""
        return [self.evaluator.evaluate(expr) for expr in self._stream(code).parse_all()]
