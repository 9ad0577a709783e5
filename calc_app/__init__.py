"""
Calc App - Numeric Evaluation Engine

The core of an interactive calculator: a basic-mode arithmetic state machine,
a closed-grammar expression evaluator with degree-based trigonometry and
factorials, and a unit converter for length, weight, temperature, area and
volume.
"""

__version__ = "0.1.0"
__author__ = "Calc Team"
