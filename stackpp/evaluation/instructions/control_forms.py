"""Control-flow instructions for Stack++: eval, when, if-else, while, until.

None of these jump. Each pops its block operands (coercing any non-block to a
one-element block) and re-enters the evaluator on them against the same
Machine, so everything a block does to the stack or memory is visible to the
caller afterwards.

Pop order, top of stack first:

    cond {body} when
    cond {then} {else} if-else
    {cond} {body} while
    {cond} {body} until
"""

from __future__ import annotations

import logging

from stackpp import EvaluatorFn
from stackpp.types.machine import Machine

logger = logging.getLogger(__name__)


def eval_op(machine: Machine, evaluate_fn: EvaluatorFn) -> None:
    code = machine.pop().as_block()
    evaluate_fn(code, machine)


def when_op(machine: Machine, evaluate_fn: EvaluatorFn) -> None:
    code = machine.pop().as_block()
    condition = machine.pop().as_bool()
    if condition:
        evaluate_fn(code, machine)


def if_else_op(machine: Machine, evaluate_fn: EvaluatorFn) -> None:
    code_false = machine.pop().as_block()
    code_true = machine.pop().as_block()
    condition = machine.pop().as_bool()
    evaluate_fn(code_true if condition else code_false, machine)


class LoopEval:
    """Runs `body` for as long as `condition` leaves `expect` on the stack.

    The condition block is live code: it is re-run before every iteration
    and its result is popped off the stack each time. There is no iteration
    bound.
    """

    def __init__(self, condition, body, expect: bool, evaluate_fn: EvaluatorFn):
        self.condition = condition
        self.body = body
        self.expect = expect
        self.evaluate_fn = evaluate_fn

    def test(self, machine: Machine) -> bool:
        self.evaluate_fn(self.condition, machine)
        return machine.pop().as_bool() == self.expect

    def eval(self, machine: Machine) -> None:
        iterations = 0
        while self.test(machine):
            self.evaluate_fn(self.body, machine)
            iterations += 1
        logger.debug("loop finished after %d iteration(s)", iterations)


def while_op(machine: Machine, evaluate_fn: EvaluatorFn) -> None:
    code = machine.pop().as_block()
    condition = machine.pop().as_block()
    LoopEval(condition, code, True, evaluate_fn).eval(machine)


def until_op(machine: Machine, evaluate_fn: EvaluatorFn) -> None:
    code = machine.pop().as_block()
    condition = machine.pop().as_block()
    LoopEval(condition, code, False, evaluate_fn).eval(machine)
