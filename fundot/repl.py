"""
Line-oriented REPL for fundot.

Each input line is read as one form, evaluated, and its display form is
printed. Read and evaluation errors are reported and the loop carries on;
`(quit)` raises SystemExit, which ends the process.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence, TextIO

from fundot.config import get_prompt
from fundot.errors import FundotError
from fundot.interpreter import Interpreter

logger = logging.getLogger(__name__)


def run(
    interp: Interpreter,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
    prompt: str | None = None,
) -> None:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    prompt = get_prompt() if prompt is None else prompt
    while True:
        stdout.write(prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            break
        if not line.strip():
            continue
        try:
            result = interp.eval(line)
        except FundotError as ex:
            logger.debug("error evaluating %r", line, exc_info=True)
            print(f"error: {ex}", file=stderr)
            continue
        print(result, file=stdout)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fundot", description="Read and evaluate fundot expressions."
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="raise on unbound symbols and non-callable heads",
    )
    parser.add_argument("--prompt", default=None, help="prompt printed before each line")
    parser.add_argument("--max-depth", type=int, default=None, help="bracket nesting limit")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)
    interp = Interpreter(strict=args.strict, max_depth=args.max_depth)
    run(interp, prompt=args.prompt)
    return 0


if __name__ == "__main__":
    sys.exit(main())
