"""
Recursive-descent expression parser.

Grammar, loosest binding first::

    expression := term (("+" | "-") term)*
    term       := unary (("*" | "/") unary)*
    unary      := "-" unary | power
    power      := primary ("^" unary)?
    primary    := NUMBER ["!"] | CONSTANT | FUNCTION "(" expression ")"
                | "(" expression ")"

``^`` is right-associative because its exponent is parsed as a unary (which
itself contains power). A minus sign written directly in front of a literal
that carries ``!`` belongs to that literal, so ``-3!`` is the factorial of -3.
"""

from typing import Union

from ..errors import ParseError
from .nodes import BinaryOp, Call, Factorial, Literal, Node, UnaryOp
from .tokenizer import tokenize
from .tokens import CONSTANTS, Token, TokenType

MAX_NESTING_DEPTH = 100


class Parser:
    """Parses a token list into an AST."""

    def __init__(self, tokens: list[Token]):
        self.tokens = tokens
        self.pos = 0
        self.depth = 0

    def _current(self) -> Token:
        return self.tokens[self.pos]

    def _peek(self, offset: int) -> Token:
        index = min(self.pos + offset, len(self.tokens) - 1)
        return self.tokens[index]

    def _advance(self) -> Token:
        token = self.tokens[self.pos]
        if token.type != TokenType.EOF:
            self.pos += 1
        return token

    def parse(self) -> Node:
        if self._current().type == TokenType.EOF:
            raise ParseError(0, "Empty expression")

        node = self._expression()

        token = self._current()
        if token.type == TokenType.RPAREN:
            raise ParseError(token.position, "Unmatched ')'")
        if token.type != TokenType.EOF:
            raise ParseError(token.position, f"Unexpected token {token.value!r}")
        return node

    def _expression(self) -> Node:
        left = self._term()
        while self._current().is_operator("+", "-"):
            op = self._advance().value
            left = BinaryOp(op, left, self._term())
        return left

    def _term(self) -> Node:
        left = self._unary()
        while self._current().is_operator("*", "/"):
            op = self._advance().value
            left = BinaryOp(op, left, self._unary())
        return left

    def _unary(self) -> Node:
        self.depth += 1
        try:
            if self.depth > MAX_NESTING_DEPTH:
                raise ParseError(self._current().position, "Expression nested too deeply")

            if not self._current().is_operator("-"):
                return self._power()

            if (self._peek(1).type == TokenType.NUMBER
                    and self._peek(2).type == TokenType.FACTORIAL):
                self._advance()
                number = self._advance()
                self._advance()
                node: Node = Factorial(Literal(-number.value))
                return self._power_tail(node)

            self._advance()
            return UnaryOp("-", self._unary())
        finally:
            self.depth -= 1

    def _power(self) -> Node:
        return self._power_tail(self._primary())

    def _power_tail(self, base: Node) -> Node:
        if self._current().is_operator("^"):
            self._advance()
            return BinaryOp("^", base, self._unary())
        return base

    def _primary(self) -> Node:
        token = self._advance()

        if token.type == TokenType.NUMBER:
            node: Node = Literal(token.value)
            if self._current().type == TokenType.FACTORIAL:
                self._advance()
                node = Factorial(node)
        elif token.type == TokenType.CONSTANT:
            node = Literal(CONSTANTS[token.value])
        elif token.type == TokenType.FUNCTION:
            if self._current().type != TokenType.LPAREN:
                raise ParseError(self._current().position,
                                 f"Expected '(' after function {token.value!r}")
            node = Call(token.value, self._group(self._advance()))
        elif token.type == TokenType.LPAREN:
            node = self._group(token)
        elif token.type == TokenType.EOF:
            raise ParseError(token.position, "Unexpected end of expression")
        elif token.type == TokenType.RPAREN:
            raise ParseError(token.position, "Unmatched ')'")
        else:
            raise ParseError(token.position, f"Expected operand, got {token.value!r}")

        if self._current().type == TokenType.FACTORIAL:
            raise ParseError(self._current().position,
                             "Factorial applies only to a numeric literal")
        return node

    def _group(self, lparen: Token) -> Node:
        """Parse the inside of a parenthesized group; lparen is already consumed."""
        if self._current().type == TokenType.RPAREN:
            raise ParseError(self._current().position, "Empty parentheses")
        node = self._expression()
        if self._current().type != TokenType.RPAREN:
            raise ParseError(lparen.position, "Unmatched '('")
        self._advance()
        return node


def parse(source: Union[str, list[Token]]) -> Node:
    """
    Parse expression text (or pre-tokenized input) into an AST.

    Raises:
        LexError: If tokenizing text fails
        ParseError: On dangling operators, unmatched parentheses or missing operands
    """
    tokens = tokenize(source) if isinstance(source, str) else source
    return Parser(tokens).parse()
