from __future__ import annotations

from stackpp import EvaluatorFn
from stackpp.types.machine import Machine


def let_op(machine: Machine, evaluate_fn: EvaluatorFn) -> None:
    # The name is on top: `value "name" let`.
    name = machine.pop().as_string()
    value = machine.pop()
    machine.bind(name, value)


def pop_op(machine: Machine, evaluate_fn: EvaluatorFn) -> None:
    machine.discard()
