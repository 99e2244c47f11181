"""Comparison instructions. `equal` compares string forms; the ordering
instructions compare numeric forms."""

from __future__ import annotations

from stackpp import EvaluatorFn
from stackpp.types.machine import Machine
from stackpp.types.value import Bool


def equal_op(machine: Machine, evaluate_fn: EvaluatorFn) -> None:
    b = machine.pop().as_string()
    a = machine.pop().as_string()
    machine.push(Bool(a == b))


def less_than_op(machine: Machine, evaluate_fn: EvaluatorFn) -> None:
    b = machine.pop().as_number()
    a = machine.pop().as_number()
    machine.push(Bool(a < b))


def greater_than_op(machine: Machine, evaluate_fn: EvaluatorFn) -> None:
    b = machine.pop().as_number()
    a = machine.pop().as_number()
    machine.push(Bool(a > b))
