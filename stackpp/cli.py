"""
Stack++ - an improved stack machine programming language.

    stackpp program.spp

runs program.spp once and exits.

    stackpp

starts an interactive session. Type code over one or more lines and enter a
blank line to run it; the stack and variables carry over to the next chunk.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Optional

from stackpp import __version__
from stackpp.config import get_log_level, get_trace
from stackpp.debug_utils.pprint import DEFAULT_OPTIONS, format_machine, format_program
from stackpp.errors import StackppConfigError, StackppError, StackppLoadError
from stackpp.interpreter import Interpreter

try:
    import readline  # noqa: F401  (line editing and history for input())
except ImportError:
    readline = None

logger = logging.getLogger(__name__)

BANNER = "Stack++"
PROMPT = "> "

parser = argparse.ArgumentParser(
    prog="stackpp",
    description="A improved Stack machine programming language",
)
parser.add_argument("file", nargs="?", help="Run the script file")
parser.add_argument("-V", "--version", action="version", version=f"Stack++ {__version__}")
parser.add_argument(
    "--log-level",
    default=None,
    help="logging verbosity (DEBUG, INFO, WARNING, ...); defaults to $STACKPP_LOG_LEVEL",
)
parser.add_argument(
    "--color",
    choices=("auto", "always", "never"),
    default="auto",
    help="colorize the interactive AST/Result lines (auto: only on a terminal)",
)


def read_chunk(read_line: Callable[[str], str]) -> str:
    """Accumulate lines until a blank one; every line keeps its newline."""
    code = ""
    while True:
        line = read_line(PROMPT)
        code += f"{line}\n"
        if not line:
            return code


def run_repl(
    interpreter: Optional[Interpreter] = None,
    read_line: Callable[[str], str] = input,
    trace: Optional[bool] = None,
    color: bool = False,
) -> int:
    interpreter = interpreter or Interpreter()
    trace = get_trace() if trace is None else trace
    options = {**DEFAULT_OPTIONS, "color": color}
    print(BANNER)
    while True:
        try:
            code = read_chunk(read_line)
        except (EOFError, KeyboardInterrupt):
            print()
            return 0

        program = interpreter.parse(code)
        if trace:
            print(f"AST    : {format_program(program, options)}")
        try:
            interpreter.run(program)
        except StackppError as ex:
            print(f"Error! {ex}", file=sys.stderr)
            continue
        if trace:
            print(f"Result : {format_machine(interpreter.machine, options)}")


def run_file(path: str, interpreter: Optional[Interpreter] = None) -> int:
    interpreter = interpreter or Interpreter()
    try:
        interpreter.run_file(path)
    except StackppLoadError as ex:
        logger.debug("load failed: %s", ex)
        print("Error! it fault to open the file", file=sys.stderr)
        return 1
    except StackppError as ex:
        print(f"Error! {ex}", file=sys.stderr)
        return 1
    return 0


def use_color(mode: str) -> bool:
    if mode == "auto":
        return sys.stdout.isatty()
    return mode == "always"


def main(argv: Optional[list[str]] = None) -> int:
    args = parser.parse_args(argv)
    try:
        level = get_log_level() if args.log_level is None else logging.getLevelName(args.log_level.upper())
        if not isinstance(level, int):
            parser.error(f"unknown log level: {args.log_level}")
    except StackppError as ex:
        parser.error(str(ex))
    logging.basicConfig(level=level, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.file is not None:
            return run_file(args.file)
        return run_repl(color=use_color(args.color))
    except StackppConfigError as ex:
        print(f"Error! {ex}", file=sys.stderr)
        return 2
