"""
Expression evaluator module.

Tokenizes, parses and evaluates free-form calculator expressions such as
``sin(30)+2^3!`` over a fixed grammar.
"""

from .evaluator import EvaluationResult, evaluate, evaluate_expression, evaluate_node
from .parser import parse
from .tokenizer import tokenize

__all__ = [
    "EvaluationResult",
    "evaluate",
    "evaluate_expression",
    "evaluate_node",
    "parse",
    "tokenize",
]
