"""Tests for the error classification system."""

from calc_app.errors import (
    CalculatorError,
    ConversionError,
    DivisionByZeroError,
    DomainError,
    ErrorKind,
    ExpressionError,
    LexError,
    NumericOverflowError,
    ParseError,
    UnknownCategoryError,
    UnknownUnitError,
)


class TestErrorClassification:
    """Test error hierarchy and kinds."""

    def test_expression_error_hierarchy(self):
        lex_error = LexError(3, "$")
        assert isinstance(lex_error, ExpressionError)
        assert isinstance(lex_error, CalculatorError)
        assert lex_error.position == 3
        assert lex_error.char == "$"
        assert lex_error.kind == ErrorKind.LEX_ERROR
        assert lex_error.context == {}

        parse_error = ParseError(0, "Empty expression")
        assert parse_error.reason == "Empty expression"
        assert parse_error.kind == ErrorKind.PARSE_ERROR
        assert "position 0" in str(parse_error)

    def test_domain_error_carries_argument(self):
        error = DomainError("sqrt of negative", function="sqrt", argument=-4.0)
        assert error.function == "sqrt"
        assert error.argument == -4.0
        assert error.kind == ErrorKind.DOMAIN_ERROR

    def test_division_and_overflow(self):
        division = DivisionByZeroError(context={"dividend": 1.0})
        assert division.message == "Cannot divide by zero"
        assert division.context == {"dividend": 1.0}
        assert division.kind == ErrorKind.DIVISION_BY_ZERO

        assert NumericOverflowError("too big").kind == ErrorKind.OVERFLOW_ERROR

    def test_conversion_error_hierarchy(self):
        unit_error = UnknownUnitError("length", "parsec")
        assert isinstance(unit_error, ConversionError)
        assert not isinstance(unit_error, ExpressionError)
        assert unit_error.category == "length"
        assert unit_error.unit == "parsec"
        assert unit_error.kind == ErrorKind.UNKNOWN_UNIT

        category_error = UnknownCategoryError("time")
        assert category_error.category == "time"
        assert category_error.kind == ErrorKind.UNKNOWN_CATEGORY
