"""Registry of instruction handlers for the Stack++ evaluator.

Maps every Opcode to the function implementing it. Handlers receive the
Machine and the evaluator (so control-flow instructions can run nested
blocks). The table must cover the whole Opcode enum; a missing entry is
reported when this module is imported rather than when the opcode first runs.
"""

from stackpp.types.instruction import Opcode
from stackpp.evaluation.instructions.arithmetic_ops import add_op, sub_op, mul_op, div_op, mod_op, pow_op
from stackpp.evaluation.instructions.string_ops import concat_op
from stackpp.evaluation.instructions.io_ops import print_op, input_op
from stackpp.evaluation.instructions.compare_ops import equal_op, less_than_op, greater_than_op
from stackpp.evaluation.instructions.control_forms import eval_op, when_op, if_else_op, while_op, until_op
from stackpp.evaluation.instructions.memory_ops import let_op, pop_op

INSTRUCTIONS = {
    Opcode.ADD: add_op,
    Opcode.SUB: sub_op,
    Opcode.MUL: mul_op,
    Opcode.DIV: div_op,
    Opcode.MOD: mod_op,
    Opcode.POW: pow_op,
    Opcode.CONCAT: concat_op,
    Opcode.PRINT: print_op,
    Opcode.INPUT: input_op,
    Opcode.EQUAL: equal_op,
    Opcode.LESS_THAN: less_than_op,
    Opcode.GREATER_THAN: greater_than_op,
    Opcode.EVAL: eval_op,
    Opcode.WHEN: when_op,
    Opcode.IF_ELSE: if_else_op,
    Opcode.WHILE: while_op,
    Opcode.UNTIL: until_op,
    Opcode.LET: let_op,
    Opcode.POP: pop_op,
}

_missing = [op.name for op in Opcode if op not in INSTRUCTIONS]
if _missing:
    raise ImportError(f"No handler registered for opcode(s): {', '.join(_missing)}")
