"""
  Stack++ Parser

Classifies raw tokens into runtime values, in priority order:

    - numeric literal           -> Number
    - "text"                    -> String (no escapes)
    - { code }                  -> Block (inner text parsed the same way)
    - $name                     -> Variable
    - keyword                   -> Instruction
    - anything else             -> dropped

Parsing is lenient and never raises.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, Iterator

from stackpp import Program
from stackpp.reader.lexer import lex
from stackpp.types.instruction import KEYWORDS
from stackpp.types.value import Block, Instruction, Number, String, Value, Variable

logger = logging.getLogger(__name__)

NUMBER_RE = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?)",
    re.IGNORECASE | re.ASCII,
)

# Unicode White_Space. Narrower than str.isspace(), which also counts the
# information separators U+001C..U+001F.
WHITE_SPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def _is_block(token: str) -> bool:
    return token.startswith("{") and token.endswith("}")


def _classify(token: str) -> Value | None:
    if NUMBER_RE.fullmatch(token):
        return Number(float(token))
    if token.startswith('"') and token.endswith('"'):
        return String(token[1:-1])
    if token.startswith("$"):
        return Variable(token[1:])
    opcode = KEYWORDS.get(token)
    if opcode is not None:
        return Instruction(opcode)
    logger.debug("dropping unrecognised token %r", token)
    return None


def parse_token(token: str) -> Value | None:
    """Classify a single raw token. Returns None for tokens that mean nothing."""
    token = token.strip(WHITE_SPACE)
    if _is_block(token):
        return Block(tuple(parse(token[1:-1])))
    return _classify(token)


def parse(source: str | Iterable[str]) -> Program:
    """Parse source text (or an already tokenized sequence) into a program.

    Nested blocks are parsed with an explicit work-list rather than by
    recursion, so nesting depth is not bounded by the host call stack.
    """
    tokens = lex(source) if isinstance(source, str) else iter(source)
    program: list[Value] = []
    # (remaining tokens, values collected so far) per open block, innermost last
    pending: list[tuple[Iterator[str], list[Value]]] = [(tokens, program)]
    while pending:
        tokens, values = pending[-1]
        token = next(tokens, None)
        if token is None:
            pending.pop()
            if pending:
                pending[-1][1].append(Block(tuple(values)))
            continue
        token = token.strip(WHITE_SPACE)
        if _is_block(token):
            pending.append((lex(token[1:-1]), []))
            continue
        value = _classify(token)
        if value is not None:
            values.append(value)
    return program
