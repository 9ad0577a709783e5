"""Expression AST node types. Built once per evaluation and discarded."""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Literal:
    value: float


@dataclass(frozen=True)
class UnaryOp:
    op: str
    operand: "Node"


@dataclass(frozen=True)
class BinaryOp:
    op: str
    left: "Node"
    right: "Node"


@dataclass(frozen=True)
class Call:
    function: str
    argument: "Node"


@dataclass(frozen=True)
class Factorial:
    operand: "Node"


Node = Union[Literal, UnaryOp, BinaryOp, Call, Factorial]
