from __future__ import annotations

from enum import Enum


class Opcode(Enum):
    # Arithmetic
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"
    MOD = "mod"
    POW = "pow"

    # Strings / IO
    CONCAT = "concat"
    PRINT = "print"
    INPUT = "input"

    # Comparison
    EQUAL = "equal"
    LESS_THAN = "less-than"
    GREATER_THAN = "greater-than"

    # Control flow
    EVAL = "eval"
    WHEN = "when"
    IF_ELSE = "if-else"
    WHILE = "while"
    UNTIL = "until"

    # Memory / stack
    LET = "let"
    POP = "pop"

    @property
    def keyword(self) -> str:
        return self.value


# Source spelling -> opcode
KEYWORDS: dict[str, Opcode] = {op.keyword: op for op in Opcode}
