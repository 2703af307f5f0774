from dataclasses import dataclass
from typing import Any, Callable, Generic, Hashable, Optional, Sequence, TypeVar

from . import Char
from .Config import ParserConfig
from .Memo import MemoTable
from .Position import ParseError
from .Result import Err, Ok, Result
from .State import State

T = TypeVar('T')  # Generic type for parser results
R = TypeVar('R')


@dataclass(frozen=True)
class Parser(Generic[T]):
    """A cursor paired with the outcome of the last step taken from it.

    Parsers are values: every combinator returns a new Parser and leaves the
    receiver untouched. An Err parser still holds a state, the cursor where
    the failing step started.
    """
    state: State
    result: Optional[Result[T]] = None

    @classmethod
    def for_input(cls, text: Sequence[Any],
                  config: Optional[ParserConfig] = None) -> 'Parser[Any]':
        """Seed a parser at offset 0. No result until the first step runs."""
        state = State.of(text, 0, config)
        if state.config.memoize:
            state = State.of(text, 0, state.config, MemoTable())
        return cls(state)

    @property
    def is_error(self) -> bool:
        return self.result is not None and self.result.is_error

    @property
    def value(self) -> Any:
        return None if self.result is None else self.result.value

    @property
    def error(self) -> Optional[ParseError]:
        return self.result.value if self.is_error else None

    def fail(self, message: str) -> 'Parser[Any]':
        return Parser(self.state, Err(ParseError.of(message, self.state.position())))

    def match(self, value: R, new_state: State) -> 'Parser[R]':
        return Parser(new_state, Ok(value))

    def either(self, on_ok: Callable[['Parser[T]'], R],
               on_error: Callable[['Parser[T]'], R]) -> R:
        """Dispatch on the held result; the only branching primitive."""
        if self.is_error:
            return on_error(self)
        return on_ok(self)

    def map(self, f: Callable[[Optional[Result[T]]], Optional[Result[R]]]) -> 'Parser[R]':
        """Apply `f` to the held Result (not the value), keeping the state."""
        return Parser(self.state, f(self.result))

    def satisfy(self, predicate: Callable[[Any], bool]) -> 'Parser[Any]':
        """Consume one element if `predicate` accepts it.

        On failure, including end of input, the cursor does not move. The
        message uses str(predicate), so pass a Char.Predicate or relabel
        the result with `label`.
        """
        def step(value: Any, advanced: State) -> 'Parser[Any]':
            if advanced is not self.state and predicate(value):
                return self.match(value, advanced)
            return self.fail(f"Failed to satisfy {_describe(predicate)}")
        return self.state.chain(step)

    # Label (<?>)
    def label(self, message: str) -> 'Parser[T]':
        """Replace a failure's message, reporting it at this parser's own state."""
        return self.either(
            lambda ok: ok,
            lambda err: err.map(lambda _: Err(ParseError.of(message, err.state.position()))),
        )

    def memoized(self, key: Hashable, compute: Callable[[], 'Parser[R]']) -> 'Parser[R]':
        """Run `compute`, reusing the packrat table entry for (key, offset) if any."""
        memo = self.state.memo
        if memo is None:
            return compute()
        cached = memo.lookup(key, self.state.index)
        if cached is not None:
            return cached
        parsed = compute()
        memo.store(key, self.state.index, parsed)
        return parsed

    def char(self, c: Any) -> 'Parser[Any]':
        return Char.char(self, c)

    def one_of(self, cs: Sequence[Any]) -> 'Parser[Any]':
        return Char.one_of(self, cs)

    def none_of(self, cs: Sequence[Any]) -> 'Parser[Any]':
        return Char.none_of(self, cs)

    def string(self, text: Sequence[Any]) -> 'Parser[Any]':
        return Char.string(self, text)


def _describe(predicate: Callable[[Any], bool]) -> str:
    if isinstance(predicate, Char.Predicate):
        return str(predicate)
    return getattr(predicate, "__name__", repr(predicate))
