"""Numeric instructions: add, sub, mul, div, mod, pow.

Both operands are coerced to numbers; the right operand is on top of the
stack. Division and modulo by zero follow IEEE-754 (inf / NaN) instead of
raising, matching native floating point behaviour.
"""

from __future__ import annotations

import math
import operator
from typing import Callable

from stackpp import EvaluatorFn
from stackpp.types.machine import Machine
from stackpp.types.value import Number


def _div(a: float, b: float) -> float:
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _mod(a: float, b: float) -> float:
    # Truncated remainder: the result takes the sign of the dividend.
    if b == 0.0 or math.isinf(a) or math.isnan(a) or math.isnan(b):
        return math.nan
    return math.fmod(a, b)


def _pow(a: float, b: float) -> float:
    try:
        return math.pow(a, b)
    except OverflowError:
        return math.inf if a > 0 or b % 2 == 0 else -math.inf
    except ValueError:
        if a == 0.0:
            # Zero to a negative power.
            odd = b.is_integer() and b % 2 == 1
            return math.copysign(math.inf, a) if odd else math.inf
        # Negative base with a fractional exponent.
        return math.nan


def _binary(name: str, fn: Callable[[float, float], float]):
    def handler(machine: Machine, evaluate_fn: EvaluatorFn) -> None:
        b = machine.pop().as_number()
        a = machine.pop().as_number()
        machine.push(Number(fn(a, b)))

    handler.__name__ = handler.__qualname__ = f"{name}_op"
    return handler


add_op = _binary("add", operator.add)
sub_op = _binary("sub", operator.sub)
mul_op = _binary("mul", operator.mul)
div_op = _binary("div", _div)
mod_op = _binary("mod", _mod)
pow_op = _binary("pow", _pow)
