from __future__ import annotations

from stackpp import EvaluatorFn
from stackpp.errors import StackppInputError
from stackpp.types.machine import Machine
from stackpp.types.value import String


def print_op(machine: Machine, evaluate_fn: EvaluatorFn) -> None:
    # No trailing newline; nothing is pushed back.
    machine.write(machine.pop().as_string())


def input_op(machine: Machine, evaluate_fn: EvaluatorFn) -> None:
    try:
        line = machine.read_line()
    except EOFError as ex:
        raise StackppInputError("standard input closed while reading a line") from ex
    machine.push(String(line))
