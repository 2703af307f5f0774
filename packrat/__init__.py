# Core
from .Parser import Parser
from .State import State
from .Result import Result, Ok, Err
from .Position import Position, ParseError

# Characters
from .Char import (
    Predicate, char, one_of, none_of, string,
    equal_to, member_of, not_member_of
)

# Configuration and packrat table
from .Config import ParserConfig, DEFAULT_CONFIG
from .Memo import MemoTable

# Drivers
from .Prim import run_parser, parse_test, trace
