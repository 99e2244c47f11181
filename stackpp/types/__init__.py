from stackpp.types.instruction import Opcode, KEYWORDS
from stackpp.types.value import (
    Value,
    Number,
    String,
    Bool,
    Variable,
    Instruction,
    Block,
    Error,
    ErrorKind,
    STACK_EMPTY,
)
from stackpp.types.machine import Machine
