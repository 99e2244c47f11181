"""
  Stack++ Tokenizer

Splits source text into raw token strings. There are only three kinds of
token boundary to track:

    - whitespace at top level separates tokens
    - a `{ ... }` span, nested to any depth, is one token
    - a `" ... "` span at top level is one token, whitespace included

Quotes do not toggle inside a block, and braces do not count inside a quote.
A span still open when the input ends (unbalanced braces, unclosed quote) is
dropped without complaint.
"""

from __future__ import annotations

from typing import Iterator

# space, tab, newline, carriage return, ideographic (full-width) space
SEPARATORS = frozenset(" \t\n\r　")


def lex(source: str) -> Iterator[str]:
    """Token generator: yields raw token strings in source order."""
    current: list[str] = []
    depth = 0
    in_quote = False

    for c in source:
        if c == "{" and not in_quote:
            depth += 1
            current.append(c)
        elif c == "}" and not in_quote:
            # A stray closing brace at top level is discarded.
            if depth:
                current.append(c)
                depth -= 1
                if depth == 0:
                    yield "".join(current)
                    current.clear()
        elif c == '"':
            current.append(c)
            if depth == 0:
                if in_quote:
                    in_quote = False
                    yield "".join(current)
                    current.clear()
                else:
                    in_quote = True
        elif c in SEPARATORS:
            if depth or in_quote:
                current.append(c)
            elif current:
                yield "".join(current)
                current.clear()
        else:
            current.append(c)

    if current and not depth and not in_quote:
        yield "".join(current)


def tokenize(source: str) -> list[str]:
    return list(lex(source))
