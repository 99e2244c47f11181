"""Source-like rendering of Stack++ values, programs and machines.

Used by the REPL to echo what was parsed and what the machine holds. The
output reads like Stack++ source where a value has a source spelling
(`3`, `"hi"`, `$x`, `add`, `{1 2 add}`) and uses `true`/`false` and
`<StackEmpty>` where it does not.
"""

from __future__ import annotations

from typing import Iterable

from stackpp.types.machine import Machine
from stackpp.types.value import Block, Bool, Error, Instruction, Number, String, Value, Variable

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_NUMBER = "\033[96m"
COLOR_STRING = "\033[92m"
COLOR_BOOL = "\033[93m"
COLOR_VARIABLE = "\033[94m"
COLOR_INSTRUCTION = "\033[90m"
COLOR_ERROR = "\033[91m"

# ----------------- Defaults -----------------
DEFAULT_OPTIONS = {
    "color": False,
    "max_depth": 8,
}


def _paint(text: str, color: str, options: dict) -> str:
    if options.get("color", False):
        return f"{color}{text}{RESET}"
    return text


def format_value(value: Value, options: dict = DEFAULT_OPTIONS, _depth: int = 0) -> str:
    match value:
        case Number():
            return _paint(value.as_string(), COLOR_NUMBER, options)
        case String(text):
            return _paint(f'"{text}"', COLOR_STRING, options)
        case Bool(flag):
            return _paint("true" if flag else "false", COLOR_BOOL, options)
        case Variable(name):
            return _paint(f"${name}", COLOR_VARIABLE, options)
        case Instruction(opcode):
            return _paint(opcode.keyword, COLOR_INSTRUCTION, options)
        case Block(body):
            if _depth >= options.get("max_depth", 8):
                return "{...}"
            return "{" + format_program(body, options, _depth + 1) + "}"
        case Error(kind):
            return _paint(f"<{kind.value}>", COLOR_ERROR, options)
    raise TypeError(f"not a Stack++ value: {value!r}")


def format_program(program: Iterable[Value], options: dict = DEFAULT_OPTIONS, _depth: int = 0) -> str:
    return " ".join(format_value(v, options, _depth) for v in program)


def format_machine(machine: Machine, options: dict = DEFAULT_OPTIONS) -> str:
    stack = ", ".join(format_value(v, options) for v in machine.stack)
    memory = ", ".join(
        f"{name}: {format_value(v, options)}" for name, v in machine.memory.items()
    )
    return f"stack: [{stack}] memory: {{{memory}}}"
