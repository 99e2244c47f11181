"""Runtime state for Stack++: the operand stack and the global memory.

A Machine lives for a whole program run (or a whole REPL session). The
evaluator only ever mutates the Machine, never the program it walks.
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, Optional

from stackpp.types.value import STACK_EMPTY, Value

logger = logging.getLogger(__name__)


def _write_stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _read_stdin() -> str:
    return input("")


class Machine:
    """LIFO operand stack plus a flat, unscoped name -> value memory."""

    __slots__ = ("stack", "memory", "output_sink", "input_provider")

    def __init__(
        self,
        output_sink: Optional[Callable[[str], None]] = None,
        input_provider: Optional[Callable[[], str]] = None,
    ):
        self.stack: list[Value] = []
        self.memory: dict[str, Value] = {}
        self.output_sink: Callable[[str], None] = output_sink or _write_stdout
        self.input_provider: Callable[[], str] = input_provider or _read_stdin

    def push(self, value: Value) -> None:
        self.stack.append(value)

    def pop(self) -> Value:
        """Pop the top of the stack, or the StackEmpty error value if there is none."""
        if self.stack:
            return self.stack.pop()
        return STACK_EMPTY

    def discard(self) -> None:
        if self.stack:
            self.stack.pop()

    def bind(self, name: str, value: Value) -> None:
        # Last write wins; no history of earlier bindings is kept.
        logger.debug("let %r = %r", name, value)
        self.memory[name] = value

    def lookup(self, name: str) -> Optional[Value]:
        return self.memory.get(name)

    def write(self, text: str) -> None:
        self.output_sink(text)

    def read_line(self) -> str:
        return self.input_provider()

    def __repr__(self):
        return f"Machine(stack={self.stack!r}, memory={self.memory!r})"
