"""Core evaluator for the Stack++ machine.

Walks a program strictly left to right. Literals are pushed, variables are
resolved against memory, and instructions dispatch through the INSTRUCTIONS
registry. Control-flow instructions re-enter `evaluate` on nested blocks
against the same Machine; there is no instruction pointer and no call scope.
"""

from __future__ import annotations

import logging

from stackpp import Program
from stackpp.types.machine import Machine
from stackpp.types.value import Instruction, Variable
from stackpp.evaluation.instructions import INSTRUCTIONS
from stackpp.errors import StackppRecursionError

logger = logging.getLogger(__name__)


def evaluate(program: Program, machine: Machine) -> None:
    """
    Run `program` against `machine`, mutating its stack and memory in place.
    """
    try:
        evaluate0(program, machine)
    except RecursionError as ex:
        raise StackppRecursionError(
            "block nesting exceeded the host recursion limit"
        ) from ex


def evaluate0(program: Program, machine: Machine) -> None:
    """
    Single pass over one sequence. Re-entered by handlers for nested blocks.
    """
    for value in program:
        match value:
            case Instruction(opcode):
                INSTRUCTIONS[opcode](machine, evaluate0)
            case Variable(name):
                bound = machine.lookup(name)
                # An unbound reference is pushed as-is and behaves like a literal.
                machine.push(value if bound is None else bound)
            case _:
                machine.push(value)
