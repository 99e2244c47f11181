from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from stackpp import Program
from stackpp.config import get_recursion_limit
from stackpp.errors import StackppLoadError
from stackpp.reader.parser import parse
from stackpp.evaluation.evaluator import evaluate
from stackpp.types.machine import Machine

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates parsing and evaluating Stack++ code against one Machine.
    The stack and memory persist across calls, so successive `eval` calls
    behave like successive chunks of one program.
    """

    def __init__(self, machine: Optional[Machine] = None, prelude: Optional[str] = None):
        self.machine: Machine = machine if machine is not None else Machine()

        limit = get_recursion_limit()
        if limit is not None and limit > sys.getrecursionlimit():
            logger.debug("raising host recursion limit to %d", limit)
            sys.setrecursionlimit(limit)

        if prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        """Evaluate a string of Stack++ code as prelude."""
        evaluate(parse(code), self.machine)

    def parse(self, code: str) -> Program:
        program = parse(code)
        logger.debug("parsed %d top-level value(s)", len(program))
        return program

    def run(self, program: Program) -> Machine:
        evaluate(program, self.machine)
        return self.machine

    def eval(self, code: str) -> Machine:
        """Parse `code` and evaluate it; returns the (mutated) machine."""
        return self.run(self.parse(code))

    def run_file(self, path: str | Path) -> Machine:
        try:
            code = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as ex:
            raise StackppLoadError(f"cannot read {path}: {ex}") from ex
        return self.eval(code)

    @property
    def memory(self):
        return self.machine.memory


#  Example use-age:
if __name__ == "__main__":
    interp = Interpreter()
    interp.eval("""
        0 "i" let
        {$i 5 less-than}
        {$i print " " print $i 1 add "i" let}
        while
    """)
    print()
    print(interp.memory)
