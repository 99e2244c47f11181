"""Source reader: tokenizer and parser."""

from stackpp.reader.lexer import lex, tokenize
from stackpp.reader.parser import parse, parse_token
