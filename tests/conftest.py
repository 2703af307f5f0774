# tests/conftest.py
import pytest

from packrat.Parser import Parser
from packrat.Result import Err, Ok


def assert_parser_eq(p1: Parser, p2: Parser):
    """
    Deep comparison of two Parsers: cursor, result kind, value or error.
    """
    assert p1.state == p2.state, f"State mismatch: {p1.state} != {p2.state}"

    if isinstance(p1.result, Ok):
        assert isinstance(p2.result, Ok), "Result mismatch: Ok vs Err"
        assert p1.result.value == p2.result.value
    else:
        assert isinstance(p2.result, Err), "Result mismatch: Err vs Ok"
        assert p1.error.message == p2.error.message
        assert p1.error.position == p2.error.position


@pytest.fixture
def seed():
    def _make(input_data, config=None):
        return Parser.for_input(input_data, config)

    return _make
