"""Pytest configuration and shared fixtures."""

import pytest

from calc_app.engine import CalculatorEngine
from calc_app.state.runtime import CalculatorSession


@pytest.fixture
def session() -> CalculatorSession:
    """Fresh calculator session with default precision."""
    return CalculatorSession()


@pytest.fixture
def engine(tmp_path) -> CalculatorEngine:
    """Engine reading config from an empty directory (defaults only)."""
    return CalculatorEngine(config_dir=tmp_path)


@pytest.fixture
def type_operand():
    """Type an operand string into a session key by key."""
    def _type(session: CalculatorSession, text: str) -> None:
        for ch in text:
            if ch == ".":
                session.append_decimal_point()
            else:
                session.append_digit(ch)
    return _type
