"""
Expression tokenizer.

Splits expression text into Number, Operator, Function, Constant, grouping
and Factorial tokens. Whitespace is skipped; anything else fails with
LexError at the offending character.
"""

import math

from ..errors import LexError, NumericOverflowError
from .tokens import CONSTANTS, FUNCTIONS, OPERATORS, Token, TokenType

DIGITS = frozenset("0123456789")

# Longest names first so "sqrt" wins over any shorter prefix
_IDENTIFIERS = sorted(FUNCTIONS | {name for name in CONSTANTS if name.isascii()},
                      key=len, reverse=True)


def _read_number(text: str, start: int) -> tuple[Token, int]:
    pos = start
    seen_point = False
    while pos < len(text) and (text[pos] in DIGITS or text[pos] == "."):
        if text[pos] == ".":
            if seen_point:
                raise LexError(pos, ".")
            seen_point = True
        pos += 1

    raw = text[start:pos]
    if raw == ".":
        raise LexError(start, ".")
    value = float(raw)
    if not math.isfinite(value):
        raise NumericOverflowError(
            f"Number at position {start} is out of range",
            context={"position": start, "digits": len(raw)}
        )
    return Token(TokenType.NUMBER, value, start), pos


def _read_identifier(text: str, start: int) -> tuple[Token, int]:
    for name in _IDENTIFIERS:
        if text.startswith(name, start):
            token_type = TokenType.FUNCTION if name in FUNCTIONS else TokenType.CONSTANT
            return Token(token_type, name, start), start + len(name)
    raise LexError(start, text[start])


def tokenize(text: str) -> list[Token]:
    """
    Tokenize an expression.

    Args:
        text: Expression text, e.g. ``"sin(30)+2^3!"``

    Returns:
        Tokens in source order, terminated by an EOF token

    Raises:
        LexError: On any character outside the expression alphabet
        NumericOverflowError: On a number literal beyond the float range
    """
    tokens: list[Token] = []
    pos = 0

    while pos < len(text):
        ch = text[pos]

        if ch.isspace():
            pos += 1
        elif ch in DIGITS or ch == ".":
            token, pos = _read_number(text, pos)
            tokens.append(token)
        elif ch == "π":
            tokens.append(Token(TokenType.CONSTANT, "pi", pos))
            pos += 1
        elif ch.isascii() and ch.isalpha():
            token, pos = _read_identifier(text, pos)
            tokens.append(token)
        elif ch in OPERATORS:
            tokens.append(Token(TokenType.OPERATOR, ch, pos))
            pos += 1
        elif ch == "(":
            tokens.append(Token(TokenType.LPAREN, ch, pos))
            pos += 1
        elif ch == ")":
            tokens.append(Token(TokenType.RPAREN, ch, pos))
            pos += 1
        elif ch == "!":
            tokens.append(Token(TokenType.FACTORIAL, ch, pos))
            pos += 1
        else:
            raise LexError(pos, ch)

    tokens.append(Token(TokenType.EOF, None, len(text)))
    return tokens
