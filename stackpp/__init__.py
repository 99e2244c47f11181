# Core type aliases for the Stack++ data model.
# A program is the parsed form of source text: a flat list of Values, where
# nested code appears as Block values carrying their own (immutable) sequence.
#
# Naming guidance:
# - Program: use in reader/evaluator code for a sequence about to be run.
# - EvaluatorFn: the evaluator as seen by instruction handlers, which re-enter
#   it to run blocks against the same Machine.

from typing import Callable, Sequence

from stackpp.types.value import Value
from stackpp.types.machine import Machine

__version__ = "0.2.0"

Program = Sequence[Value]

EvaluatorFn = Callable[[Program, Machine], None]

from stackpp.reader.parser import parse  # noqa: E402
from stackpp.evaluation.evaluator import evaluate  # noqa: E402
from stackpp.interpreter import Interpreter  # noqa: E402
