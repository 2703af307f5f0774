import logging
from typing import Any, Callable, Optional, Sequence, Tuple

from .Config import ParserConfig
from .Parser import Parser
from .Position import ParseError

logger = logging.getLogger(__name__)

Step = Callable[[Parser], Parser]


def run_parser(text: Sequence[Any],
               step: Step,
               config: Optional[ParserConfig] = None) -> Tuple[Optional[Any], Optional[ParseError]]:
    """Seed a parser over `text`, apply `step`, return (value, error)."""
    parser = step(Parser.for_input(text, config))
    if parser.is_error:
        return None, parser.error
    return parser.value, None


def parse_test(text: Sequence[Any], step: Step, config: Optional[ParserConfig] = None) -> None:
    """Run `step` over `text` and print the value or the rendered diagnostic."""
    value, err = run_parser(text, step, config)
    if err:
        print(err)
    else:
        print(value)


def trace(parser: Parser, label_str: str) -> Parser:
    """Log the remaining input and the current outcome; returns `parser` unchanged."""
    state = parser.state
    rest = state.slice(0, 30)
    more = '...' if state.length > 30 else ''
    pos = state.position()
    logger.debug("%s: %r%s at line %d, column %d (%s)",
                 label_str, rest, more, pos.line(), pos.column(),
                 "error" if parser.is_error else "ok")
    return parser
