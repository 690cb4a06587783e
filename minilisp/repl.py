"""Interactive front end and command line entry point for minilisp."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO

from minilisp import __version__
from minilisp.config import get_prompt, get_recursion_limit
from minilisp.errors import EndOfFile, LispError
from minilisp.interpreter import Interpreter
from minilisp.printer import to_lisp_string
from minilisp.reader.parser import read_all

logger = logging.getLogger(__name__)

CONTINUATION_PROMPT = "... "


def _report(exc: BaseException, stdout: TextIO) -> None:
    logger.debug("Evaluation failed", exc_info=exc)
    if isinstance(exc, RecursionError):
        stdout.write("error: maximum recursion depth exceeded\n")
    else:
        stdout.write(f"error: {exc}\n")


def repl(
    interp: Optional[Interpreter] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    prompt: Optional[str] = None,
) -> None:
    """Run a read-eval-print loop until end of input or Ctrl-C.

    Lines are accumulated until they hold complete data; each datum is then
    evaluated and its value printed. Errors are printed and the session goes on.
    """
    interp = interp if interp is not None else Interpreter()
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    prompt = prompt if prompt is not None else get_prompt()

    pending = ""
    while True:
        stdout.write(CONTINUATION_PROMPT if pending else prompt)
        stdout.flush()
        try:
            line = stdin.readline()
        except KeyboardInterrupt:
            stdout.write("\n")
            return
        if not line:
            stdout.write("\n")
            return

        pending += line
        try:
            forms = list(read_all(pending))
        except EndOfFile:
            # incomplete datum: keep reading
            continue
        except LispError as e:
            _report(e, stdout)
            pending = ""
            continue
        pending = ""

        for expr in forms:
            try:
                result = interp.eval_fn(expr, interp.env)
            except (LispError, RecursionError) as e:
                _report(e, stdout)
                break
            stdout.write(to_lisp_string(result) + "\n")


def run_file(interp: Interpreter, path: Path, stdout: TextIO) -> None:
    """Evaluate every form in `path`, printing each result."""
    for result in interp.eval_forms(path.read_text(encoding="utf-8")):
        stdout.write(to_lisp_string(result) + "\n")


def create_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minilisp",
        description="A small S-expression interpreter",
    )
    parser.add_argument(
        "files",
        nargs="*",
        type=Path,
        help="source files to evaluate in one session (starts a REPL when omitted)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="enable debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = create_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    sys.setrecursionlimit(get_recursion_limit())

    interp = Interpreter()
    if not args.files:
        repl(interp)
        return 0

    for path in args.files:
        try:
            run_file(interp, path, sys.stdout)
        except OSError as e:
            sys.stderr.write(f"error: cannot read {path}: {e.strerror}\n")
            return 1
        except (LispError, RecursionError) as e:
            _report(e, sys.stderr)
            return 1
    return 0
