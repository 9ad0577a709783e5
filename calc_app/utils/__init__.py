"""
Utility functions module.

Numeric helpers shared by the state machine, the expression evaluator and the
unit converter.

Number Semantics:
- All arithmetic is done in 64-bit floats
- Rounding is half-up (half away from -inf), matching classic calculator displays
- Display strings are always positional, never exponent notation
"""
