"""Runtime values for Stack++.

Every datum the machine handles is one of a closed set of variants:
Number, String, Bool, Variable, Instruction, Block and Error. All of them
share the `Value` base, which implements the total coercions used by the
instructions. A coercion never fails: a variant that does not own an accessor
falls back to the neutral result (0.0, "", False, or a one-element block).

Values are immutable. Pushing a value that is also bound in memory therefore
behaves like pushing a copy: nothing can mutate it in place afterwards.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from stackpp.types.instruction import Opcode


class ErrorKind(Enum):
    STACK_EMPTY = "StackEmpty"


class Value:
    __slots__ = ()

    def as_number(self) -> float:
        return 0.0

    def as_string(self) -> str:
        return ""

    def as_bool(self) -> bool:
        return False

    def as_block(self) -> tuple[Value, ...]:
        return (self,)


@dataclass(frozen=True, slots=True)
class Number(Value):
    value: float

    def as_number(self) -> float:
        return self.value

    def as_string(self) -> str:
        return format_number(self.value)


@dataclass(frozen=True, slots=True)
class String(Value):
    value: str

    def as_string(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Bool(Value):
    value: bool

    def as_bool(self) -> bool:
        return self.value


@dataclass(frozen=True, slots=True)
class Variable(Value):
    """An unresolved `$name` reference. Coerces to its name as a string."""

    name: str

    def as_string(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Instruction(Value):
    opcode: Opcode


@dataclass(frozen=True, slots=True)
class Block(Value):
    """Deferred code: a parsed sequence evaluated only on demand."""

    body: tuple[Value, ...] = ()

    def as_block(self) -> tuple[Value, ...]:
        return self.body


@dataclass(frozen=True, slots=True)
class Error(Value):
    kind: ErrorKind = ErrorKind.STACK_EMPTY


STACK_EMPTY = Error(ErrorKind.STACK_EMPTY)


def format_number(n: float) -> str:
    """Shortest round-trip decimal text for `n`, never in exponent form.

    >>> format_number(7.0), format_number(0.5), format_number(1e21)
    ('7', '0.5', '1000000000000000000000')
    """
    if math.isnan(n):
        return "NaN"
    if math.isinf(n):
        return "inf" if n > 0 else "-inf"
    text = format(Decimal(repr(n)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
