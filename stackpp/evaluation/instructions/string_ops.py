from __future__ import annotations

from stackpp import EvaluatorFn
from stackpp.types.machine import Machine
from stackpp.types.value import String


def concat_op(machine: Machine, evaluate_fn: EvaluatorFn) -> None:
    b = machine.pop().as_string()
    a = machine.pop().as_string()
    machine.push(String(a + b))
