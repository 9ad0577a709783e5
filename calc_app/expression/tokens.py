"""Token types produced by the expression tokenizer."""

import math
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Union


class TokenType(str, Enum):
    """Lexical categories of the expression grammar."""
    NUMBER = "number"
    OPERATOR = "operator"
    FUNCTION = "function"
    CONSTANT = "constant"
    LPAREN = "lparen"
    RPAREN = "rparen"
    FACTORIAL = "factorial"
    EOF = "eof"


FUNCTIONS = frozenset({"sin", "cos", "tan", "log", "ln", "sqrt"})

CONSTANTS: Mapping[str, float] = MappingProxyType({
    "pi": math.pi,
    "π": math.pi,
    "e": math.e,
})

OPERATORS = frozenset("+-*/^")


@dataclass(frozen=True)
class Token:
    """A token with its type, value and character position."""
    type: TokenType
    value: Optional[Union[float, str]]
    position: int

    def is_operator(self, *symbols: str) -> bool:
        return self.type == TokenType.OPERATOR and self.value in symbols
